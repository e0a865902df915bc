"""
Reflex state management for the RWA Finance UI.

AuthState is the root state. It owns the wallet session: the token, wallet
address and wallet type persist in the browser's local storage, and the
login exchange runs across ``rx.call_script`` callbacks because the wallet
lives in the browser. The page states (markets, invoices, batches,
portfolio) are substates of AuthState so they can read the token and route
API errors through ``_handle_api_error``.
"""

from datetime import datetime, timezone
from decimal import Decimal

import reflex as rx

from rwa_ui import services, settings
from rwa_ui.errors import ApiError, AuthError, RwaError
from rwa_ui.lib import logs, wallet
from rwa_ui.models.common import parse_enum
from rwa_ui.models.invoice import CreateInvoiceParams, InvoiceBatch
from rwa_ui.models.reflex_models import (
    BatchRow,
    EnterpriseOption,
    HoldingRow,
    InterestDetailRow,
    InterestRow,
    InvoiceRow,
    MarketRow,
    TransactionRow,
    batch_row,
    enterprise_option,
    holding_row,
    interest_detail_row,
    interest_row,
    invoice_row,
    market_row,
    transaction_row,
)
from rwa_ui.models.session import AuthSession, SessionStatus
from rwa_ui.models.token import TokenizeBatchParams, TokenMarket
from rwa_ui.models.user import (
    Challenge,
    EnterpriseInfo,
    UserInfo,
    UserRole,
    WalletInfo,
    WalletType,
)
from rwa_ui.utils import (
    format_amount,
    format_currency,
    format_date,
    parse_date,
    to_decimal,
)

LOG = logs.logger(__file__)

STABLECOINS = ["USDT", "USDC", "DAI"]
INVOICE_CURRENCIES = ["USDT", "USDC", "CNY", "USD"]
DEFAULT_APY = "5.00"
DEFAULT_TOKEN_VALUE = "100"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return str(exc) or exc.__class__.__name__


class AuthState(rx.State):
    """
    Root application state holding the wallet session.

    The AuthSession state machine is rebuilt from these vars for every event
    and written back afterwards.
    """

    auth_token: str = rx.LocalStorage("", name="rwa_auth_token")
    wallet_address: str = rx.LocalStorage("", name="rwa_wallet_address")
    wallet_type: str = rx.LocalStorage("", name="rwa_wallet_type")

    status: str = SessionStatus.DISCONNECTED.value
    is_connecting: bool = False
    error: str = ""
    demo_mode: bool = services.service_kind() == "demo"

    enterprise_bound: bool = False
    enterprise_id: str = ""
    enterprise_name: str = ""
    enterprise_address: str = ""
    enterprises: list[EnterpriseOption] = []

    _challenge_nonce: str = ""
    _challenge_request_id: str = ""

    @rx.var
    def is_authenticated(self) -> bool:
        return self.status == SessionStatus.AUTHENTICATED.value and self.auth_token != ""

    @rx.var
    def is_connected(self) -> bool:
        return self.status != SessionStatus.DISCONNECTED.value

    @rx.var
    def short_address(self) -> str:
        address = self.wallet_address or ""
        if len(address) <= 10:
            return address
        return f"{address[:6]}...{address[-4:]}"

    @rx.var
    def user_role(self) -> str:
        info = UserInfo(
            wallet_address=self.wallet_address,
            enterprise=EnterpriseInfo(is_enterprise_bound=self.enterprise_bound),
        )
        return info.role.value

    @rx.var
    def is_enterprise_admin(self) -> bool:
        return self.user_role == UserRole.ENTERPRISE_ADMIN.value

    # Session plumbing

    def _session(self) -> AuthSession:
        wallet_info = None
        if self.wallet_address:
            wallet_info = WalletInfo(
                address=self.wallet_address,
                wallet_type=WalletType.parse(self.wallet_type or WalletType.METAMASK),
            )
        status = parse_enum(SessionStatus, self.status, SessionStatus.DISCONNECTED)
        challenge = None
        if self._challenge_request_id:
            challenge = Challenge(
                nonce=self._challenge_nonce, request_id=self._challenge_request_id
            )
        return AuthSession(
            status=status,
            wallet=wallet_info if status is not SessionStatus.DISCONNECTED else None,
            token=self.auth_token or None,
            challenge=challenge,
        )

    def _store(self, session: AuthSession) -> None:
        stored = session.to_storage()
        self.status = stored["status"]
        self.auth_token = stored["auth_token"]
        self.wallet_address = stored["wallet_address"]
        self.wallet_type = stored["wallet_type"]
        self._challenge_nonce = stored["challenge_nonce"]
        self._challenge_request_id = stored["challenge_request_id"]
        if not session.is_authenticated:
            self._apply_enterprise(EnterpriseInfo())

    def _authenticated(self) -> bool:
        return self.status == SessionStatus.AUTHENTICATED.value and bool(self.auth_token)

    def _token(self) -> str:
        """
        Return the session token.

        Raises:
            AuthError: If no wallet is logged in.
        """
        if not self._authenticated():
            raise AuthError("Connect your wallet first")
        return self.auth_token

    def _apply_enterprise(self, info: EnterpriseInfo) -> None:
        self.enterprise_bound = info.is_enterprise_bound
        self.enterprise_id = info.enterprise_id
        self.enterprise_name = info.enterprise_name
        self.enterprise_address = info.enterprise_address

    def _refresh_enterprise(self) -> None:
        info = services.get_account_service(self._token()).enterprise_info()
        self._apply_enterprise(info)

    def _handle_api_error(self, exc: Exception):
        """
        Turn an exception caught by an event handler into UI feedback.

        A rejected token invalidates the session and sends the user back to
        the market page; anything else is shown as a toast.
        """
        session = self._session()
        if session.expire_if_unauthorized(exc):
            self._store(session)
            self.error = ""
            return [
                rx.toast.error("Your session has expired. Please connect your wallet again."),
                rx.redirect("/"),
            ]
        self.error = _error_message(exc)
        return rx.toast.error(self.error)

    # Events

    @rx.event
    def on_load(self):
        """Restore the session from local storage and refresh the enterprise binding."""
        if self.status == SessionStatus.CHALLENGED.value:
            return
        try:
            wallet_info = WalletInfo.from_dict(
                {"address": self.wallet_address, "type": self.wallet_type or "metamask"}
            )
        except RwaError:
            LOG.warning("Discarding stored wallet type %r", self.wallet_type)
            wallet_info = None
        session = AuthSession.restore(self.auth_token, wallet_info)
        self._store(session)
        if not session.is_authenticated:
            return
        try:
            self._refresh_enterprise()
        except Exception as e:
            LOG.error("Failed to load enterprise info: %s", e, exc_info=True)
            return self._handle_api_error(e)

    @rx.event
    def connect(self, wallet_type: str):
        """Start the login exchange with the chosen wallet."""
        self.error = ""
        try:
            selected = WalletType.parse(wallet_type)
            if selected is WalletType.DEMO:
                return self._connect_demo()
            script = wallet.request_accounts_script(selected)
        except Exception as e:
            LOG.error("Cannot connect %s: %s", wallet_type, e)
            return self._handle_api_error(e)
        self.wallet_type = selected.value
        self.is_connecting = True
        return rx.call_script(script, callback=AuthState.on_accounts)

    def _connect_demo(self):
        demo_wallet = wallet.DemoWallet()
        session = self._session()
        if session.status is not SessionStatus.CONNECTED:
            session.disconnect()
        session.connect(WalletInfo(demo_wallet.address, WalletType.DEMO))
        self.is_connecting = True
        try:
            services.get_auth_service().authenticate(
                session, lambda message, _address: demo_wallet.sign(message)
            )
            self._store(session)
            self._refresh_enterprise()
        except Exception as e:
            LOG.error("Demo login failed: %s", e, exc_info=True)
            self._store(session)
            return self._handle_api_error(e)
        finally:
            self.is_connecting = False
        return rx.toast.success("Demo wallet connected")

    @rx.event
    def on_accounts(self, result: dict):
        """Receive the wallet's accounts and ask the backend for a challenge."""
        session = self._session()
        try:
            address = wallet.first_account(result)
            if session.status is not SessionStatus.CONNECTED:
                session.disconnect()
            session.connect(WalletInfo(address, WalletType.parse(self.wallet_type)))
            self._store(session)
            challenge = services.get_auth_service().request_challenge(address)
            session.begin_challenge(challenge)
            self._store(session)
            script = wallet.personal_sign_script(
                session.wallet.wallet_type, challenge.nonce, address
            )
        except Exception as e:
            LOG.error("Wallet connection failed: %s", e, exc_info=True)
            self.is_connecting = False
            return self._handle_api_error(e)
        return rx.call_script(script, callback=AuthState.on_signature)

    @rx.event
    def on_signature(self, result: dict):
        """Exchange the signed nonce for a token."""
        session = self._session()
        try:
            signature = wallet.parse_script_result(result)
            if session.challenge is None:
                raise AuthError("No login challenge is pending")
            login = services.get_auth_service().login(
                session.challenge.request_id, str(signature)
            )
            session.complete_login(login.token)
            self._store(session)
            self._refresh_enterprise()
        except Exception as e:
            LOG.error("Login failed: %s", e, exc_info=True)
            if session.status is SessionStatus.CHALLENGED:
                session.abort_challenge()
                self._store(session)
            return self._handle_api_error(e)
        finally:
            self.is_connecting = False
        return rx.toast.success("Wallet connected")

    def _disconnect(self) -> None:
        session = self._session()
        session.disconnect()
        self._store(session)
        self.is_connecting = False
        self.error = ""

    @rx.event
    def disconnect(self):
        self._disconnect()

    @rx.event
    def logout(self):
        self._disconnect()
        return [rx.toast.info("Logged out"), rx.redirect("/")]

    @rx.event
    def load_enterprises(self):
        try:
            enterprises = services.get_account_service(self.auth_token or None).list_enterprises()
            self.enterprises = [enterprise_option(e) for e in enterprises]
        except Exception as e:
            LOG.error("Failed to load enterprises: %s", e, exc_info=True)
            return self._handle_api_error(e)

    @rx.event
    def bind_enterprise(self, form_data: dict):
        try:
            services.get_account_service(self._token()).bind_enterprise(
                form_data.get("enterprise_address", "")
            )
            self._refresh_enterprise()
        except Exception as e:
            LOG.error("Failed to bind enterprise: %s", e, exc_info=True)
            return self._handle_api_error(e)
        return rx.toast.success(f"Bound to {self.enterprise_name}")

    @rx.event
    def register_enterprise(self, form_data: dict):
        try:
            enterprise = services.get_account_service(
                self._token()
            ).register_enterprise(
                form_data.get("name", ""),
                form_data.get("wallet_address", ""),
                form_data.get("kyc_hash") or None,
            )
        except Exception as e:
            LOG.error("Failed to register enterprise: %s", e, exc_info=True)
            return self._handle_api_error(e)
        return [
            rx.toast.success(f"Enterprise {enterprise.name} registered"),
            AuthState.load_enterprises,
        ]


class MarketState(AuthState):
    """Token market listing with a stablecoin filter and the purchase dialog."""

    markets: list[MarketRow] = []
    market_page: int = 0
    page_size: int = settings.PAGE_SIZE
    has_more: bool = True
    is_loading: bool = False
    symbol_filter: str = "All"

    purchase_open: bool = False
    purchase_batch_id: str = ""
    purchase_reference: str = ""
    purchase_symbol: str = ""
    purchase_available: int = 0
    purchase_unit_value: str = "0"
    purchase_amount: int = 1
    is_purchasing: bool = False

    _markets: dict = {}

    @rx.var
    def purchase_cost(self) -> str:
        cost = to_decimal(self.purchase_unit_value) * self.purchase_amount
        return format_currency(cost, self.purchase_symbol)

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.markets) == 0

    @rx.event
    def load_markets(self):
        """Reset the listing and fetch the first page."""
        self.markets = []
        self._markets = {}
        self.market_page = 0
        self.has_more = True
        return MarketState.load_more

    @rx.event
    def load_more(self):
        if not self.has_more:
            return
        self.is_loading = True
        try:
            result = services.get_token_service(self.auth_token or None).list_markets(
                stablecoin_symbol=None if self.symbol_filter == "All" else self.symbol_filter,
                page=self.market_page + 1,
                page_size=self.page_size,
            )
            for market in result.items:
                self._markets[market.batch_id] = market
            self.markets = self.markets + [market_row(m) for m in result.items]
            self.market_page = result.page
            self.has_more = result.has_more
        except Exception as e:
            LOG.error("Failed to load markets: %s", e, exc_info=True)
            self.has_more = False
            return self._handle_api_error(e)
        finally:
            self.is_loading = False

    @rx.event
    def set_symbol_filter(self, value: str):
        self.symbol_filter = value
        return MarketState.load_markets

    @rx.event
    def open_purchase(self, batch_id: str):
        if not self._authenticated():
            return rx.toast.warning("Connect your wallet to purchase tokens")
        market: TokenMarket | None = self._markets.get(batch_id)
        if market is None or market.sold_out:
            return rx.toast.warning("This batch is no longer available")
        self.purchase_batch_id = market.batch_id
        self.purchase_reference = market.batch_reference
        self.purchase_symbol = market.stablecoin_symbol
        self.purchase_available = int(market.available_token_amount)
        self.purchase_unit_value = str(market.token_value_per_unit)
        self.purchase_amount = market.clamp_purchase(1)
        self.purchase_open = True

    @rx.event
    def set_purchase_open(self, value: bool):
        self.purchase_open = value

    @rx.event
    def set_purchase_amount(self, value: str):
        market: TokenMarket | None = self._markets.get(self.purchase_batch_id)
        try:
            shares = int(value)
        except (TypeError, ValueError):
            shares = 1
        self.purchase_amount = market.clamp_purchase(shares) if market else 0

    @rx.event
    def purchase(self):
        self.is_purchasing = True
        yield
        try:
            services.get_token_service(self._token()).purchase(
                self.purchase_batch_id, self.purchase_amount
            )
        except Exception as e:
            LOG.error("Purchase failed: %s", e, exc_info=True)
            yield self._handle_api_error(e)
            return
        finally:
            self.is_purchasing = False
        self.purchase_open = False
        yield rx.toast.success(
            f"Purchased {self.purchase_amount} tokens of {self.purchase_reference}"
        )
        yield MarketState.load_markets


class InvoiceState(AuthState):
    """The enterprise's invoices: create, verify, delete and issue into a batch."""

    invoices: list[InvoiceRow] = []
    selected_ids: list[str] = []
    debtors: list[EnterpriseOption] = []
    is_loading: bool = False
    is_saving: bool = False
    create_open: bool = False

    @rx.var
    def selected_count(self) -> int:
        return len(self.selected_ids)

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.invoices) == 0

    @rx.event
    def load_invoices(self):
        if not self._authenticated():
            self.invoices = []
            return
        self.is_loading = True
        try:
            invoices = services.get_invoice_service(self._token()).list_invoices()
            self.invoices = [invoice_row(inv) for inv in invoices]
            issuable = {inv.id for inv in invoices if inv.can_issue}
            self.selected_ids = [i for i in self.selected_ids if i in issuable]
        except Exception as e:
            LOG.error("Failed to load invoices: %s", e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_loading = False

    @rx.event
    def toggle_selected(self, invoice_id: str, checked: bool):
        if checked and invoice_id not in self.selected_ids:
            self.selected_ids = self.selected_ids + [invoice_id]
        elif not checked:
            self.selected_ids = [i for i in self.selected_ids if i != invoice_id]

    @rx.event
    def open_create(self):
        try:
            enterprises = services.get_account_service(self._token()).list_enterprises()
        except Exception as e:
            LOG.error("Failed to load debtors: %s", e, exc_info=True)
            return self._handle_api_error(e)
        self.debtors = [
            enterprise_option(e) for e in enterprises if e.id != self.enterprise_id
        ]
        self.create_open = True

    @rx.event
    def set_create_open(self, value: bool):
        self.create_open = value

    @rx.event
    def create_invoice(self, form_data: dict):
        self.is_saving = True
        try:
            params = CreateInvoiceParams(
                payee=self.wallet_address,
                payer=(form_data.get("payer") or "").strip(),
                amount=to_decimal(form_data.get("amount")),
                currency=form_data.get("currency") or "",
                due_date=parse_date(form_data.get("due_date")),
                invoice_ipfs_hash=(form_data.get("invoice_ipfs_hash") or "").strip(),
                contract_ipfs_hash=(form_data.get("contract_ipfs_hash") or "").strip(),
            )
            invoice = services.get_invoice_service(self._token()).create_invoice(params)
        except Exception as e:
            LOG.error("Failed to create invoice: %s", e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_saving = False
        self.create_open = False
        return [
            rx.toast.success(f"Invoice {invoice.invoice_number} created"),
            InvoiceState.load_invoices,
        ]

    @rx.event
    def verify_invoice(self, invoice_id: str):
        try:
            services.get_invoice_service(self._token()).verify_invoice(invoice_id)
        except Exception as e:
            LOG.error("Failed to verify invoice %s: %s", invoice_id, e, exc_info=True)
            return self._handle_api_error(e)
        return [rx.toast.success("Invoice verified"), InvoiceState.load_invoices]

    @rx.event
    def delete_invoice(self, invoice_id: str, invoice_number: str):
        try:
            services.get_invoice_service(self._token()).delete_invoice(invoice_id)
        except Exception as e:
            LOG.error("Failed to delete invoice %s: %s", invoice_number, e, exc_info=True)
            return self._handle_api_error(e)
        return [rx.toast.success(f"Invoice {invoice_number} deleted"), InvoiceState.load_invoices]

    @rx.event
    def issue_selected(self):
        self.is_saving = True
        try:
            services.get_invoice_service(self._token()).issue_invoices(self.selected_ids)
        except Exception as e:
            LOG.error("Failed to issue invoices: %s", e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_saving = False
        count = len(self.selected_ids)
        self.selected_ids = []
        return [
            rx.toast.success(f"Issued {count} invoices into a new batch"),
            rx.redirect("/batches"),
        ]


class BatchState(AuthState):
    """Invoice batches, the batch detail page and the tokenize dialog."""

    batches: list[BatchRow] = []
    is_loading: bool = False

    batch: BatchRow = BatchRow()
    batch_invoices: list[InvoiceRow] = []
    summary_count: int = 0
    summary_total: str = ""
    summary_earliest: str = "-"
    summary_latest: str = "-"

    tokenize_open: bool = False
    tokenize_batch_id: str = ""
    tokenize_reference: str = ""
    tokenize_symbol: str = ""
    is_tokenizing: bool = False

    _batches: dict = {}

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.batches) == 0

    @rx.event
    def load_batches(self):
        if not self._authenticated():
            self.batches = []
            return
        self.is_loading = True
        try:
            batches = services.get_invoice_service(self._token()).list_batches()
            self._batches = {b.id: b for b in batches}
            self.batches = [batch_row(b) for b in batches]
        except Exception as e:
            LOG.error("Failed to load batches: %s", e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_loading = False

    @rx.event
    def load_batch_detail(self):
        batch_id = self.router.page.params.get("batch_id", "")
        if not batch_id or not self._authenticated():
            return
        self.is_loading = True
        try:
            service = services.get_invoice_service(self._token())
            batch = service.get_batch(batch_id)
            invoices = service.get_batch_invoices(batch_id)
            summary = service.batch_summary(invoices)
        except Exception as e:
            LOG.error("Failed to load batch %s: %s", batch_id, e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_loading = False
        self._batches[batch.id] = batch
        self.batch = batch_row(batch)
        self.batch_invoices = [invoice_row(inv) for inv in invoices]
        self.summary_count = summary.invoice_count
        self.summary_total = format_currency(
            summary.total_amount, ", ".join(summary.currencies)
        )
        self.summary_earliest = format_date(summary.earliest_due_date)
        self.summary_latest = format_date(summary.latest_due_date)

    @rx.event
    def open_tokenize(self, batch_id: str):
        batch: InvoiceBatch | None = self._batches.get(batch_id)
        if batch is None or not batch.can_tokenize:
            return rx.toast.warning("Only issued batches can be tokenized")
        self.tokenize_batch_id = batch.id
        self.tokenize_reference = batch.default_reference()
        self.tokenize_symbol = (
            batch.accepted_currency
            if batch.accepted_currency in STABLECOINS
            else STABLECOINS[0]
        )
        self.tokenize_open = True

    @rx.event
    def set_tokenize_open(self, value: bool):
        self.tokenize_open = value

    @rx.event
    def tokenize(self, form_data: dict):
        self.is_tokenizing = True
        try:
            maturity = parse_date(form_data.get("maturity_date"))
            params = TokenizeBatchParams(
                batch_reference=(form_data.get("batch_reference") or "").strip(),
                stablecoin_symbol=form_data.get("stablecoin_symbol") or self.tokenize_symbol,
                token_value=to_decimal(form_data.get("token_value") or DEFAULT_TOKEN_VALUE),
                interest_rate_apy=to_decimal(
                    form_data.get("interest_rate_apy") or DEFAULT_APY, Decimal(-1)
                ),
                maturity_date=maturity.date() if maturity else None,
            )
            services.get_token_service(self._token()).tokenize_invoice_batch(
                self.tokenize_batch_id, params
            )
        except Exception as e:
            LOG.error("Failed to tokenize batch %s: %s", self.tokenize_batch_id, e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_tokenizing = False
        self.tokenize_open = False
        events = [rx.toast.success(f"Batch {params.batch_reference} is now on the market")]
        if self.batch.id == self.tokenize_batch_id:
            events.append(BatchState.load_batch_detail)
        events.append(BatchState.load_batches)
        return events


class PortfolioState(AuthState):
    """Token holdings, transactions and interest accruals of the logged-in wallet."""

    holdings: list[HoldingRow] = []
    transactions: list[TransactionRow] = []
    accruals: list[InterestRow] = []
    total_invested: str = "0.00"
    total_value: str = "0.00"
    is_loading: bool = False

    details_open: bool = False
    details_reference: str = ""
    interest_details: list[InterestDetailRow] = []

    @rx.event
    def load_portfolio(self):
        if not self._authenticated():
            self.holdings, self.transactions, self.accruals = [], [], []
            return
        self.is_loading = True
        try:
            token = self._token()
            holdings = services.get_token_service(token).holdings()
            account = services.get_account_service(token)
            transactions = account.list_transactions()
            accruals = account.list_interest_accruals()
        except Exception as e:
            LOG.error("Failed to load portfolio: %s", e, exc_info=True)
            return self._handle_api_error(e)
        finally:
            self.is_loading = False
        self.holdings = [holding_row(h) for h in holdings]
        self.transactions = [
            transaction_row(tx)
            for tx in sorted(
                transactions,
                key=lambda tx: tx.transaction_date or _EPOCH,
                reverse=True,
            )
        ]
        self.accruals = [interest_row(a) for a in accruals]
        self.total_invested = format_amount(
            sum((h.purchase_value for h in holdings), Decimal(0))
        )
        self.total_value = format_amount(
            sum((h.current_value for h in holdings), Decimal(0))
        )

    @rx.event
    def show_interest_details(self, holding_id: str, reference: str):
        try:
            details = services.get_invoice_service(self._token()).holding_interest_details(
                holding_id
            )
        except Exception as e:
            LOG.error("Failed to load interest for %s: %s", holding_id, e, exc_info=True)
            return self._handle_api_error(e)
        self.details_reference = reference
        self.interest_details = [interest_detail_row(d) for d in details]
        self.details_open = True

    @rx.event
    def set_details_open(self, value: bool):
        self.details_open = value

