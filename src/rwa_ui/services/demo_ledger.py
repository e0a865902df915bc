"""
In-memory backend shared by the demo services.

The DemoLedger plays the part of the RWA backend for local development: it
issues login nonces and tokens, keeps enterprises, invoices, batches,
token markets and holdings, and applies the same state transitions the
backend does (issue, tokenize, purchase, daily interest). Records are seeded
from ``rwa_ui.data.demo_fixtures`` through the regular ``from_dict``
parsers.

Errors are raised as the ApiClient would raise them for the equivalent
backend response, so the UI cannot tell the two apart. Unknown tokens raise
UnauthorizedError; since the ledger lives in memory, every token issued
before a server restart takes the 401 path.

All public methods take the ledger lock; Reflex runs event handlers
concurrently.
"""

import dataclasses
import functools
import threading
import uuid
from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_DOWN, Decimal
from typing import Iterable, Sequence

from rwa_ui.data import demo_fixtures
from rwa_ui.errors import ApiError, UnauthorizedError
from rwa_ui.lib import logs
from rwa_ui.lib.wallet import demo_signature
from rwa_ui.models.common import PageResult
from rwa_ui.models.invoice import (
    CreateInvoiceParams,
    InterestDetail,
    Invoice,
    InvoiceBatch,
    InvoiceBatchStatus,
    InvoiceStatus,
)
from rwa_ui.models.token import (
    CreateTokenBatchParams,
    InterestAccrual,
    TokenBatch,
    TokenBatchStatus,
    TokenHolding,
    TokenHoldingStatus,
    TokenizeBatchParams,
    TokenMarket,
    Transaction,
)
from rwa_ui.models.user import (
    Challenge,
    Enterprise,
    EnterpriseInfo,
    EnterpriseStatus,
    LoginResult,
)

LOG = logs.logger(__file__)

NONCE_TEMPLATE = (
    "Welcome to RWA Invoice Finance!\n\n"
    "Sign this message to log in. It does not send a transaction "
    "or cost any gas.\n\nNonce: {nonce}"
)
_DAYS_PER_YEAR = Decimal(365)
_INTEREST_QUANTUM = Decimal("0.0001")


def _new_id() -> str:
    """Return a 24-hex-digit id shaped like a MongoDB ObjectId."""
    return uuid.uuid4().hex[:24]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _copy(items: Iterable):
    """Return detached copies so callers cannot mutate ledger records."""
    return [dataclasses.replace(item) for item in items]


def _invoice_sequence(invoice_number: str) -> int:
    """Numeric suffix of an invoice number such as INV-1003, or 0."""
    digits = invoice_number.rpartition("-")[2]
    return int(digits) if digits.isdigit() else 0


def _page(items: Sequence, page: int, page_size: int) -> PageResult:
    page, page_size = max(page, 1), max(page_size, 1)
    start = (page - 1) * page_size
    return PageResult(
        items=_copy(items[start : start + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
    )


class DemoLedger:
    """
    Process-wide in-memory state for demo mode.

    Attributes:
        enterprises: Enterprise records by id.
        invoices: Invoice records by id.
        invoice_batches: InvoiceBatch records by id.
        token_batches: TokenBatch records by id.
        markets: TokenMarket records by token batch id.
        holdings: TokenHolding records by id.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._challenges: dict[str, tuple[str, str]] = {}
        self._tokens: dict[str, str] = {}
        self._bindings: dict[str, str] = {}
        self.enterprises: dict[str, Enterprise] = {}
        self.invoices: dict[str, Invoice] = {}
        self.invoice_batches: dict[str, InvoiceBatch] = {}
        self.token_batches: dict[str, TokenBatch] = {}
        self.markets: dict[str, TokenMarket] = {}
        self.holdings: dict[str, TokenHolding] = {}
        self.transactions: list[tuple[str, Transaction]] = []
        self.accruals: list[tuple[str, InterestAccrual]] = []
        self._token_batch_links: dict[str, dict[str, str]] = {}
        self._holding_owner: dict[str, str] = {}
        self._holding_batch: dict[str, str] = {}
        self._last_accrual: dict[str, date] = {}
        self._next_invoice_number = 1001
        self._seed()

    def _seed(self) -> None:
        for e in map(Enterprise.from_dict, demo_fixtures.ENTERPRISES):
            self.enterprises[e.id] = e
        for inv in map(Invoice.from_dict, demo_fixtures.INVOICES):
            self.invoices[inv.id] = inv
            self._next_invoice_number = max(
                self._next_invoice_number, _invoice_sequence(inv.invoice_number) + 1
            )
        for batch in map(InvoiceBatch.from_dict, demo_fixtures.INVOICE_BATCHES):
            self.invoice_batches[batch.id] = batch
        for tb in map(TokenBatch.from_dict, demo_fixtures.TOKEN_BATCHES):
            self.token_batches[tb.id] = tb
        for market in map(TokenMarket.from_dict, demo_fixtures.TOKEN_MARKETS):
            self.markets[market.batch_id] = market
        self._token_batch_links = {
            k: dict(v) for k, v in demo_fixtures.TOKEN_BATCH_LINKS.items()
        }
        LOG.info(
            "Demo ledger seeded - enterprises:%s invoices:%s markets:%s",
            len(self.enterprises),
            len(self.invoices),
            len(self.markets),
        )

    # Authentication

    def challenge(self, address: str) -> Challenge:
        if not address:
            raise ApiError("Wallet address is required", code=400, path="/user/challenge")
        challenge = Challenge(
            nonce=NONCE_TEMPLATE.format(nonce=uuid.uuid4().hex),
            request_id=str(uuid.uuid4()),
        )
        with self._lock:
            self._challenges[challenge.request_id] = (address, challenge.nonce)
        return challenge

    def login(self, request_id: str, signature: str) -> LoginResult:
        with self._lock:
            pending = self._challenges.pop(request_id, None)
        if pending is None:
            raise ApiError("Challenge not found or expired", code=400, path="/user/login")
        address, nonce = pending
        if signature != demo_signature(address, nonce):
            raise ApiError("Signature verification failed", code=400, path="/user/login")
        token = f"demo.{uuid.uuid4().hex}"
        with self._lock:
            self._tokens[token] = address.lower()
        return LoginResult(token=token, message="Login successful")

    def address_for(self, token: str | None) -> str:
        """
        Return the wallet address a token was issued to.

        Raises:
            UnauthorizedError: If the token is unknown.
        """
        with self._lock:
            address = self._tokens.get(token or "")
        if address is None:
            raise UnauthorizedError("Invalid or expired token", status=401)
        return address

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    # Enterprises

    def enterprise_info(self, address: str) -> EnterpriseInfo:
        with self._lock:
            enterprise = self._enterprise_of(address)
        if enterprise is None:
            return EnterpriseInfo()
        return EnterpriseInfo(
            is_enterprise_bound=True,
            enterprise_id=enterprise.id,
            enterprise_name=enterprise.name,
            enterprise_address=enterprise.wallet_address,
        )

    def bind_enterprise(self, address: str, enterprise_address: str) -> None:
        with self._lock:
            enterprise = self._enterprise_by_wallet(enterprise_address)
            if enterprise is None:
                raise ApiError(
                    f"Enterprise not found: {enterprise_address}",
                    code=404,
                    path="/user/bind-enterprise",
                )
            self._bindings[address.lower()] = enterprise.id
        LOG.info("Bound %s to enterprise %s", address, enterprise.name)

    def register_enterprise(
        self, name: str, wallet_address: str, kyc_hash: str | None
    ) -> Enterprise:
        with self._lock:
            if self._enterprise_by_wallet(wallet_address) is not None:
                raise ApiError(
                    "An enterprise is already registered for this wallet",
                    code=400,
                    path="/enterprise/create",
                )
            enterprise = Enterprise(
                id=_new_id(),
                name=name,
                wallet_address=wallet_address,
                status=EnterpriseStatus.VERIFIED,
                kyc_details_ipfs_hash=kyc_hash,
            )
            self.enterprises[enterprise.id] = enterprise
        return dataclasses.replace(enterprise)

    def list_enterprises(self) -> list[Enterprise]:
        with self._lock:
            return _copy(self.enterprises.values())

    # Invoices

    def list_invoices(self, address: str) -> list[Invoice]:
        with self._lock:
            enterprise = self._enterprise_of(address)
            if enterprise is None:
                return []
            invoices = [
                inv for inv in self.invoices.values() if inv.creditor_id == enterprise.id
            ]
            return _copy(sorted(invoices, key=lambda inv: inv.invoice_number))

    def get_invoice(self, address: str, invoice_number: str) -> Invoice:
        with self._lock:
            return dataclasses.replace(self._own_invoice(address, invoice_number))

    def create_invoice(self, address: str, params: CreateInvoiceParams) -> Invoice:
        with self._lock:
            creditor = self._require_enterprise(address, "/invoice/create")
            debtor = self._enterprise_by_wallet(params.payer)
            if debtor is None:
                raise ApiError(
                    f"Payer is not a registered enterprise: {params.payer}",
                    code=400,
                    path="/invoice/create",
                )
            now = _now()
            number = f"INV-{self._next_invoice_number:04d}"
            self._next_invoice_number += 1
            invoice = Invoice.from_dict(
                {
                    **params.to_payload(),
                    "id": _new_id(),
                    "invoice_number": number,
                    "creditor_id": creditor.id,
                    "debtor_id": debtor.id,
                    "payee": params.payee or creditor.wallet_address,
                    "status": InvoiceStatus.PENDING.value,
                    "ipfs_hash": params.invoice_ipfs_hash,
                    "contract_hash": params.contract_ipfs_hash,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            self.invoices[invoice.id] = invoice
        LOG.info("Demo invoice %s created by %s", invoice.invoice_number, address)
        return dataclasses.replace(invoice)

    def delete_invoice(self, address: str, invoice_id: str) -> None:
        with self._lock:
            invoice = self._own_invoice_by_id(address, invoice_id, "/invoice/del")
            if invoice.batch_id:
                raise ApiError(
                    "Invoices in a batch cannot be deleted", code=400, path="/invoice/del"
                )
            del self.invoices[invoice.id]

    def verify_invoice(self, address: str, invoice_id: str) -> None:
        with self._lock:
            invoice = self._own_invoice_by_id(address, invoice_id, "/invoice/verify")
            if not invoice.can_verify:
                raise ApiError(
                    f"Invoice {invoice.invoice_number} is {invoice.status.value}",
                    code=400,
                    path="/invoice/verify",
                )
            invoice.status = InvoiceStatus.VERIFIED
            invoice.is_valid = True
            invoice.updated_at = _now()

    def issue_invoices(self, address: str, invoice_ids: Sequence[str]) -> InvoiceBatch:
        path = "/invoice/issue"
        with self._lock:
            creditor = self._require_enterprise(address, path)
            invoices = [self._own_invoice_by_id(address, i, path) for i in invoice_ids]
            if not invoices:
                raise ApiError("No invoices selected", code=400, path=path)
            for invoice in invoices:
                if not invoice.can_issue:
                    raise ApiError(
                        f"Invoice {invoice.invoice_number} cannot be issued",
                        code=400,
                        path=path,
                    )
            if len({(inv.debtor_id, inv.currency) for inv in invoices}) > 1:
                raise ApiError(
                    "Invoices in a batch must share debtor and currency",
                    code=400,
                    path=path,
                )
            debtor = self.enterprises.get(invoices[0].debtor_id)
            batch = InvoiceBatch(
                id=_new_id(),
                creditor_name=creditor.name,
                debtor_name=debtor.name if debtor else invoices[0].debtor_id,
                accepted_currency=invoices[0].currency,
                status=InvoiceBatchStatus.ISSUED,
                created_at=_now(),
                invoice_count=len(invoices),
                total_amount=sum((inv.amount for inv in invoices), Decimal(0)),
            )
            self.invoice_batches[batch.id] = batch
            for invoice in invoices:
                invoice.status = InvoiceStatus.PACKAGED
                invoice.batch_id = batch.id
        LOG.info("Demo batch %s issued with %s invoices", batch.id, batch.invoice_count)
        return dataclasses.replace(batch)

    def list_batches(self, address: str) -> list[InvoiceBatch]:
        with self._lock:
            enterprise = self._enterprise_of(address)
            if enterprise is None:
                return []
            batches = [
                b for b in self.invoice_batches.values() if b.creditor_name == enterprise.name
            ]
            return _copy(sorted(batches, key=lambda b: b.created_at or _now(), reverse=True))

    def get_batch(self, batch_id: str) -> InvoiceBatch:
        with self._lock:
            return dataclasses.replace(self._batch(batch_id))

    def get_batch_invoices(self, batch_id: str) -> list[Invoice]:
        with self._lock:
            self._batch(batch_id)
            return _copy(inv for inv in self.invoices.values() if inv.batch_id == batch_id)

    def holding_interest_details(self, address: str, holding_id: str) -> list[InterestDetail]:
        with self._lock:
            if self._holding_owner.get(holding_id) != address.lower():
                raise ApiError(
                    f"Holding not found: {holding_id}",
                    code=404,
                    path="/invoice/holding/interest-details",
                )
            link = self._token_batch_links.get(self._holding_batch[holding_id], {})
            invoices = [
                inv
                for inv in self.invoices.values()
                if inv.batch_id and inv.batch_id == link.get("invoice_batch_id")
            ]
            first = invoices[0] if invoices else None
            return [
                InterestDetail(
                    accrual_date=accrual.accrual_date,
                    daily_interest_amount=accrual.daily_interest_amount,
                    invoice_title=self.holdings[holding_id].batch_reference,
                    invoice_number=first.invoice_number if first else "",
                )
                for _, accrual in self.accruals
                if accrual.holding_id == holding_id
            ]

    # Tokens

    def create_token_batch(self, address: str, params: CreateTokenBatchParams) -> TokenBatch:
        path = "/token/create"
        with self._lock:
            creditor = self._require_enterprise(address, path)
            invoice = self._own_invoice_by_id(address, params.invoice_id, path)
            if invoice.status is not InvoiceStatus.VERIFIED:
                raise ApiError(
                    f"Invoice {invoice.invoice_number} is not verified", code=400, path=path
                )
            debtor = self.enterprises.get(invoice.debtor_id)
            token_batch = self._list_token_batch(
                reference=params.batch_reference,
                creditor=creditor,
                debtor=debtor,
                symbol=params.stablecoin_symbol,
                supply=Decimal(int(params.total_token_supply)),
                token_value=params.token_value,
                apy=params.interest_rate_apy,
                maturity=params.maturity_date,
                invoice_batch_id=None,
            )
            invoice.status = InvoiceStatus.ON_SALE
        return token_batch

    def tokenize_invoice_batch(
        self, address: str, invoice_batch_id: str, params: TokenizeBatchParams
    ) -> TokenBatch:
        path = "/token/from_invoice_batch"
        with self._lock:
            creditor = self._require_enterprise(address, path)
            batch = self._batch(invoice_batch_id)
            if batch.creditor_name != creditor.name:
                raise ApiError("Only the creditor can tokenize a batch", code=403, path=path)
            if not batch.can_tokenize:
                raise ApiError(
                    f"Batch is {batch.status.value} and cannot be tokenized",
                    code=400,
                    path=path,
                )
            invoices = [inv for inv in self.invoices.values() if inv.batch_id == batch.id]
            supply = (batch.total_amount / params.token_value).to_integral_value(
                rounding=ROUND_DOWN
            )
            if supply <= 0:
                raise ApiError(
                    "Token value exceeds the batch total", code=400, path=path
                )
            due_dates = [inv.due_date for inv in invoices if inv.due_date]
            debtor = self.enterprises.get(invoices[0].debtor_id) if invoices else None
            token_batch = self._list_token_batch(
                reference=params.batch_reference,
                creditor=creditor,
                debtor=debtor,
                symbol=params.stablecoin_symbol,
                supply=supply,
                token_value=params.token_value,
                apy=params.interest_rate_apy,
                maturity=params.maturity_date or (min(due_dates) if due_dates else None),
                invoice_batch_id=batch.id,
            )
            batch.status = InvoiceBatchStatus.TRADING
            batch.token_batch_id = token_batch.id
            for invoice in invoices:
                invoice.status = InvoiceStatus.ON_SALE
        return token_batch

    def list_token_batches(
        self,
        status: TokenBatchStatus | None,
        creditor_id: str | None,
        stablecoin_symbol: str | None,
        page: int,
        page_size: int,
    ) -> PageResult[TokenBatch]:
        with self._lock:
            batches = [
                tb
                for tb in self.token_batches.values()
                if (status is None or tb.status is status)
                and (
                    not creditor_id
                    or self._token_batch_links.get(tb.id, {}).get("creditor_id")
                    == creditor_id
                )
                and (not stablecoin_symbol or tb.stablecoin_symbol == stablecoin_symbol)
            ]
            return _page(batches, page, page_size)

    def list_markets(
        self, stablecoin_symbol: str | None, page: int, page_size: int
    ) -> PageResult[TokenMarket]:
        with self._lock:
            markets = [
                m
                for m in self.markets.values()
                if not stablecoin_symbol or m.stablecoin_symbol == stablecoin_symbol
            ]
            return _page(markets, page, page_size)

    def purchase(self, address: str, batch_id: str, token_amount: int) -> str:
        path = "/token/purchase"
        with self._lock:
            market = self.markets.get(batch_id)
            token_batch = self.token_batches.get(batch_id)
            if market is None or token_batch is None:
                raise ApiError(f"Token batch not found: {batch_id}", code=404, path=path)
            amount = Decimal(int(token_amount))
            if amount > market.available_token_amount:
                raise ApiError(
                    f"Only {market.available_token_amount} tokens available",
                    code=400,
                    path=path,
                )
            cost = market.purchase_cost(int(amount))
            market.sold_token_amount += amount
            market.available_token_amount -= amount
            market.remaining_transaction_amount -= cost
            token_batch.sold_token_amount = market.sold_token_amount
            token_batch.available_token_amount = market.available_token_amount
            if market.sold_out:
                token_batch.status = TokenBatchStatus.FUNDED
                link = self._token_batch_links.get(batch_id, {})
                for invoice in self.invoices.values():
                    if invoice.batch_id and invoice.batch_id == link.get("invoice_batch_id"):
                        invoice.status = InvoiceStatus.SOLD_OUT

            now = _now()
            holding = TokenHolding(
                id=_new_id(),
                batch_reference=market.batch_reference,
                token_amount=amount,
                purchase_value=cost,
                current_value=cost,
                purchase_date=now,
                status=TokenHoldingStatus.ACTIVE,
            )
            owner = address.lower()
            self.holdings[holding.id] = holding
            self._holding_owner[holding.id] = owner
            self._holding_batch[holding.id] = batch_id
            self._last_accrual[holding.id] = now.date()
            self.transactions.append(
                (
                    owner,
                    Transaction(
                        id=_new_id(),
                        holding_id=holding.id,
                        invoice_id="",
                        transaction_type="Purchase",
                        amount=cost,
                        transaction_date=now,
                        status="Completed",
                    ),
                )
            )
        LOG.info("Demo purchase of %s tokens in %s by %s", amount, batch_id, address)
        return holding.id

    def holdings_of(self, address: str) -> list[TokenHolding]:
        with self._lock:
            self.accrue_interest(_now().date())
            return _copy(
                h for hid, h in self.holdings.items() if self._holding_owner[hid] == address.lower()
            )

    def transactions_of(self, address: str) -> list[Transaction]:
        with self._lock:
            self.accrue_interest(_now().date())
            return _copy(tx for owner, tx in self.transactions if owner == address.lower())

    def accruals_of(self, address: str) -> list[InterestAccrual]:
        with self._lock:
            self.accrue_interest(_now().date())
            return _copy(a for owner, a in self.accruals if owner == address.lower())

    def accrue_interest(self, as_of: date) -> int:
        """
        Book daily interest on every active holding up to ``as_of``.

        Each elapsed day adds ``purchase_value * apy / 365`` to the holding's
        current value and records an accrual and an Interest transaction.

        Returns:
            Number of accruals booked.
        """
        booked = 0
        with self._lock:
            for holding_id, holding in self.holdings.items():
                if holding.status is not TokenHoldingStatus.ACTIVE:
                    continue
                token_batch = self.token_batches.get(self._holding_batch[holding_id])
                if token_batch is None:
                    continue
                daily = (
                    holding.purchase_value
                    * token_batch.interest_rate_apy
                    / Decimal(100)
                    / _DAYS_PER_YEAR
                ).quantize(_INTEREST_QUANTUM)
                owner = self._holding_owner[holding_id]
                day = self._last_accrual[holding_id]
                while day < as_of:
                    day += timedelta(days=1)
                    accrued_at = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
                    self.accruals.append(
                        (
                            owner,
                            InterestAccrual(
                                id=_new_id(),
                                holding_id=holding_id,
                                invoice_id="",
                                accrual_date=accrued_at,
                                daily_interest_amount=daily,
                            ),
                        )
                    )
                    self.transactions.append(
                        (
                            owner,
                            Transaction(
                                id=_new_id(),
                                holding_id=holding_id,
                                invoice_id="",
                                transaction_type="Interest",
                                amount=daily,
                                transaction_date=accrued_at,
                                status="Completed",
                            ),
                        )
                    )
                    holding.current_value += daily
                    booked += 1
                self._last_accrual[holding_id] = day
        return booked

    # Lookups; callers hold the lock

    def _enterprise_of(self, address: str) -> Enterprise | None:
        enterprise_id = self._bindings.get(address.lower())
        return self.enterprises.get(enterprise_id) if enterprise_id else None

    def _enterprise_by_wallet(self, wallet_address: str) -> Enterprise | None:
        wallet_address = (wallet_address or "").strip().lower()
        for enterprise in self.enterprises.values():
            if enterprise.wallet_address.lower() == wallet_address:
                return enterprise
        return None

    def _require_enterprise(self, address: str, path: str) -> Enterprise:
        enterprise = self._enterprise_of(address)
        if enterprise is None:
            raise ApiError("User is not bound to an enterprise", code=403, path=path)
        return enterprise

    def _own_invoice(self, address: str, invoice_number: str) -> Invoice:
        enterprise = self._enterprise_of(address)
        for invoice in self.invoices.values():
            if invoice.invoice_number == invoice_number and (
                enterprise is not None and invoice.creditor_id == enterprise.id
            ):
                return invoice
        raise ApiError(f"Invoice not found: {invoice_number}", code=404, path="/invoice/detail")

    def _own_invoice_by_id(self, address: str, invoice_id: str, path: str) -> Invoice:
        enterprise = self._enterprise_of(address)
        invoice = self.invoices.get(invoice_id)
        if invoice is None or enterprise is None or invoice.creditor_id != enterprise.id:
            raise ApiError(f"Invoice not found: {invoice_id}", code=404, path=path)
        return invoice

    def _batch(self, batch_id: str) -> InvoiceBatch:
        batch = self.invoice_batches.get(batch_id)
        if batch is None:
            raise ApiError(f"Batch not found: {batch_id}", code=404, path="/invoice/batch")
        return batch

    def _list_token_batch(
        self,
        reference: str,
        creditor: Enterprise,
        debtor: Enterprise | None,
        symbol: str,
        supply: Decimal,
        token_value: Decimal,
        apy: Decimal,
        maturity: date | datetime | None,
        invoice_batch_id: str | None,
    ) -> TokenBatch:
        if isinstance(maturity, date) and not isinstance(maturity, datetime):
            maturity = datetime(maturity.year, maturity.month, maturity.day, tzinfo=timezone.utc)
        total_value = supply * token_value
        token_batch = TokenBatch(
            id=_new_id(),
            batch_reference=reference,
            creditor_name=creditor.name,
            debtor_name=debtor.name if debtor else "",
            stablecoin_symbol=symbol,
            total_token_supply=supply,
            token_value=token_value,
            total_value=total_value,
            sold_token_amount=Decimal(0),
            available_token_amount=supply,
            status=TokenBatchStatus.AVAILABLE,
            interest_rate_apy=apy,
            maturity_date=maturity,
        )
        self.token_batches[token_batch.id] = token_batch
        self.markets[token_batch.id] = TokenMarket(
            id=_new_id(),
            batch_id=token_batch.id,
            batch_reference=reference,
            creditor_address=creditor.wallet_address,
            debtor_address=debtor.wallet_address if debtor else "",
            stablecoin_symbol=symbol,
            total_token_amount=supply,
            sold_token_amount=Decimal(0),
            available_token_amount=supply,
            token_value_per_unit=token_value,
            remaining_transaction_amount=total_value,
        )
        self._token_batch_links[token_batch.id] = {
            "creditor_id": creditor.id,
            "invoice_batch_id": invoice_batch_id or "",
        }
        LOG.info("Demo token batch %s listed with %s tokens", reference, supply)
        return dataclasses.replace(token_batch)


@functools.cache
def demo_ledger() -> DemoLedger:
    """Return the process-wide demo ledger."""
    return DemoLedger()
