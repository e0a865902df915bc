"""End-to-end tests of the demo services over a fresh DemoLedger."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from rwa_ui.data import demo_fixtures
from rwa_ui.errors import ApiError, UnauthorizedError, ValidationError
from rwa_ui.lib.wallet import DemoWallet
from rwa_ui.models import (
    CreateInvoiceParams,
    InvoiceBatchStatus,
    InvoiceStatus,
    SessionStatus,
    TokenBatchStatus,
    TokenizeBatchParams,
)
from rwa_ui.services.account_service_demo import DemoAccountService
from rwa_ui.services.auth_service_demo import DemoAuthService
from rwa_ui.services.invoice_service_demo import DemoInvoiceService
from rwa_ui.services.token_service_demo import DemoTokenService

SEEDED_TOKEN_BATCH = "6650d4c0c1e4a2b3d4e5f901"


def _tokenize_params(reference="BATCH-NEW", token_value="100"):
    return TokenizeBatchParams(
        batch_reference=reference,
        stablecoin_symbol="USDT",
        token_value=Decimal(token_value),
        interest_rate_apy=Decimal("5.00"),
    )


class TestAuthentication:
    def test_authenticate(self, investor_token, connected_session):
        assert investor_token.startswith("demo.")
        assert connected_session.status is SessionStatus.AUTHENTICATED
        assert connected_session.token == investor_token

    def test_bad_signature_aborts_challenge(self, ledger, connected_session):
        auth = DemoAuthService(ledger)
        with pytest.raises(ApiError, match="Signature verification failed"):
            auth.authenticate(connected_session, lambda message, address: "0xbad")
        assert connected_session.status is SessionStatus.CONNECTED
        assert connected_session.token is None

    def test_challenge_is_single_use(self, ledger, demo_wallet):
        auth = DemoAuthService(ledger)
        challenge = auth.request_challenge(demo_wallet.address)
        signature = demo_wallet.sign(challenge.nonce)
        auth.login(challenge.request_id, signature)
        with pytest.raises(ApiError, match="not found"):
            auth.login(challenge.request_id, signature)

    def test_unknown_token_is_unauthorized(self, ledger):
        with pytest.raises(UnauthorizedError):
            DemoTokenService(ledger, "demo.stale").holdings()
        with pytest.raises(UnauthorizedError):
            DemoInvoiceService(ledger, None).list_invoices()

    def test_revoked_token(self, ledger, investor_token):
        ledger.revoke(investor_token)
        with pytest.raises(UnauthorizedError):
            DemoAccountService(ledger, investor_token).enterprise_info()


class TestEnterprise:
    def test_bind(self, ledger, investor_token):
        account = DemoAccountService(ledger, investor_token)
        assert not account.enterprise_info().is_enterprise_bound

        account.bind_enterprise(demo_fixtures.GLOBEX_ADDRESS)

        info = account.enterprise_info()
        assert info.is_enterprise_bound
        assert info.enterprise_name == "Globex Manufacturing"

    def test_bind_requires_address(self, ledger, investor_token):
        with pytest.raises(ValidationError):
            DemoAccountService(ledger, investor_token).bind_enterprise("  ")

    def test_bind_unknown_enterprise(self, ledger, investor_token):
        with pytest.raises(ApiError, match="not found"):
            DemoAccountService(ledger, investor_token).bind_enterprise("0xnobody")

    def test_register(self, ledger, investor_token):
        account = DemoAccountService(ledger, investor_token)
        enterprise = account.register_enterprise("Hooli", "0xH001", "QmKyc")
        assert enterprise.id
        assert "Hooli" in [e.name for e in account.list_enterprises()]
        with pytest.raises(ApiError, match="already registered"):
            account.register_enterprise("Hooli Again", "0xh001")


class TestInvoices:
    def test_list_requires_binding(self, ledger, investor_token):
        assert DemoInvoiceService(ledger, investor_token).list_invoices() == []

    def test_list_own_invoices(self, ledger, admin_token):
        numbers = [i.invoice_number for i in DemoInvoiceService(ledger, admin_token).list_invoices()]
        assert numbers == ["INV-1001", "INV-1002", "INV-1003"]

    def test_create_verify_delete(self, ledger, admin_token):
        invoices = DemoInvoiceService(ledger, admin_token)
        created = invoices.create_invoice(
            CreateInvoiceParams(
                payee="",
                payer=demo_fixtures.INITECH_ADDRESS,
                amount=Decimal("999.99"),
                currency="USDC",
                due_date=date(2027, 6, 30),
                invoice_ipfs_hash="QmDoc",
                contract_ipfs_hash="QmContract",
            )
        )
        assert created.status is InvoiceStatus.PENDING
        assert created.payee == demo_fixtures.ACME_ADDRESS

        invoices.verify_invoice(created.id)
        assert invoices.get_invoice(created.invoice_number).status is InvoiceStatus.VERIFIED
        with pytest.raises(ApiError, match="Verified"):
            invoices.verify_invoice(created.id)

        invoices.delete_invoice(created.id)
        with pytest.raises(ApiError, match="not found"):
            invoices.get_invoice(created.invoice_number)

    def test_numbers_are_not_reused_after_delete(self, ledger, admin_token):
        invoices = DemoInvoiceService(ledger, admin_token)

        def create():
            return invoices.create_invoice(
                CreateInvoiceParams(
                    "",
                    demo_fixtures.INITECH_ADDRESS,
                    Decimal(10),
                    "USDT",
                    date(2027, 6, 30),
                    "a",
                    "b",
                )
            )

        first, second = create(), create()
        invoices.delete_invoice(first.id)
        third = create()

        assert first.invoice_number == "INV-1004"
        assert third.invoice_number not in {first.invoice_number, second.invoice_number}
        assert invoices.get_invoice(second.invoice_number).id == second.id

    def test_delete_other_enterprise_invoice(self, ledger, admin_token):
        foreign = next(
            inv["id"] for inv in demo_fixtures.INVOICES if inv["invoice_number"] == "INV-0907"
        )
        with pytest.raises(ApiError, match="not found"):
            DemoInvoiceService(ledger, admin_token).delete_invoice(foreign)

    def test_create_requires_binding(self, ledger, investor_token):
        params = CreateInvoiceParams(
            "", demo_fixtures.GLOBEX_ADDRESS, Decimal(1), "USDT", date(2027, 1, 1), "a", "b"
        )
        with pytest.raises(ApiError) as exc_info:
            DemoInvoiceService(ledger, investor_token).create_invoice(params)
        assert exc_info.value.code == 403

    def test_create_validates_before_sending(self, ledger, admin_token):
        params = CreateInvoiceParams("", "", Decimal(1), "USDT", None, "", "")
        with pytest.raises(ValidationError):
            DemoInvoiceService(ledger, admin_token).create_invoice(params)

    def test_issue_needs_selection(self, ledger, admin_token):
        with pytest.raises(ValidationError):
            DemoInvoiceService(ledger, admin_token).issue_invoices([])

    def test_issue_rejects_mixed_debtors(self, ledger, admin_token):
        invoices = DemoInvoiceService(ledger, admin_token)
        invoices.verify_invoice("6650b2a0c1e4a2b3d4e5f703")
        with pytest.raises(ApiError, match="share debtor"):
            invoices.issue_invoices(["6650b2a0c1e4a2b3d4e5f701", "6650b2a0c1e4a2b3d4e5f703"])

    def test_issue_rejects_pending(self, ledger, admin_token):
        with pytest.raises(ApiError, match="cannot be issued"):
            DemoInvoiceService(ledger, admin_token).issue_invoices(["6650b2a0c1e4a2b3d4e5f703"])


class TestIssueTokenizePurchase:
    @pytest.fixture
    def batch(self, ledger, admin_token):
        invoices = DemoInvoiceService(ledger, admin_token)
        invoices.issue_invoices(["6650b2a0c1e4a2b3d4e5f701", "6650b2a0c1e4a2b3d4e5f702"])
        (batch,) = invoices.list_batches()
        return batch

    def test_issue_creates_batch(self, ledger, admin_token, batch):
        invoices = DemoInvoiceService(ledger, admin_token)
        assert batch.status is InvoiceBatchStatus.ISSUED
        assert batch.invoice_count == 2
        assert batch.total_amount == Decimal("20900")
        assert batch.debtor_name == "Globex Manufacturing"
        assert batch.can_tokenize

        members = invoices.get_batch_invoices(batch.id)
        assert {i.status for i in members} == {InvoiceStatus.PACKAGED}
        summary = invoices.batch_summary(members)
        assert summary.total_amount == Decimal("20900")

    def test_batched_invoice_cannot_be_deleted(self, ledger, admin_token, batch):
        with pytest.raises(ApiError, match="cannot be deleted"):
            DemoInvoiceService(ledger, admin_token).delete_invoice("6650b2a0c1e4a2b3d4e5f701")

    def test_tokenize_lists_market(self, ledger, admin_token, batch):
        tokens = DemoTokenService(ledger, admin_token)
        tokens.tokenize_invoice_batch(batch.id, _tokenize_params(token_value="100"))

        tokenized = DemoInvoiceService(ledger, admin_token).get_batch(batch.id)
        assert tokenized.status is InvoiceBatchStatus.TRADING
        assert tokenized.token_batch_id
        assert not tokenized.can_tokenize

        markets = tokens.list_markets(page_size=50).items
        listed = next(m for m in markets if m.batch_id == tokenized.token_batch_id)
        assert listed.total_token_amount == Decimal(209)
        assert listed.available_token_amount == Decimal(209)

        with pytest.raises(ApiError, match="cannot be tokenized"):
            tokens.tokenize_invoice_batch(batch.id, _tokenize_params())

    def test_tokenize_token_value_too_large(self, ledger, admin_token, batch):
        with pytest.raises(ApiError, match="exceeds"):
            DemoTokenService(ledger, admin_token).tokenize_invoice_batch(
                batch.id, _tokenize_params(token_value="50000")
            )

    def test_purchase_creates_holding(self, ledger, investor_token):
        tokens = DemoTokenService(ledger, investor_token)
        holding_id = tokens.purchase(SEEDED_TOKEN_BATCH, 10)

        (holding,) = tokens.holdings()
        assert holding.id == holding_id
        assert holding.token_amount == Decimal(10)
        assert holding.purchase_value == Decimal(1000)

        (market,) = tokens.list_markets().items
        assert market.available_token_amount == Decimal(370)
        assert market.sold_token_amount == Decimal(130)

        transactions = DemoAccountService(ledger, investor_token).list_transactions()
        assert [t.transaction_type for t in transactions] == ["Purchase"]

    def test_purchase_more_than_available(self, ledger, investor_token):
        with pytest.raises(ApiError, match="Only 380"):
            DemoTokenService(ledger, investor_token).purchase(SEEDED_TOKEN_BATCH, 381)

    def test_purchase_validates_amount(self, ledger, investor_token):
        with pytest.raises(ValidationError):
            DemoTokenService(ledger, investor_token).purchase(SEEDED_TOKEN_BATCH, 0)

    def test_sell_out_funds_batch(self, ledger, investor_token):
        tokens = DemoTokenService(ledger, investor_token)
        tokens.purchase(SEEDED_TOKEN_BATCH, 380)

        (token_batch,) = tokens.list_batches().items
        assert token_batch.status is TokenBatchStatus.FUNDED
        assert ledger.invoices["6650b2a0c1e4a2b3d4e5f704"].status is InvoiceStatus.SOLD_OUT

    def test_markets_are_public_and_filtered(self, ledger):
        tokens = DemoTokenService(ledger, None)
        assert len(tokens.list_markets().items) == 1
        assert tokens.list_markets(stablecoin_symbol="DAI").items == []


class TestInterest:
    def test_daily_accrual(self, ledger, investor_token):
        tokens = DemoTokenService(ledger, investor_token)
        holding_id = tokens.purchase(SEEDED_TOKEN_BATCH, 10)
        purchased_on = ledger._last_accrual[holding_id]

        booked = ledger.accrue_interest(purchased_on + timedelta(days=3))

        # 1000 * 6.50% / 365
        daily = Decimal("0.1781")
        assert booked == 3
        holding = ledger.holdings[holding_id]
        assert holding.current_value == Decimal(1000) + 3 * daily
        assert ledger.accrue_interest(purchased_on + timedelta(days=3)) == 0

        details = DemoInvoiceService(ledger, investor_token).holding_interest_details(holding_id)
        assert len(details) == 3
        assert {d.daily_interest_amount for d in details} == {daily}
        assert details[0].invoice_number == "INV-0907"

    def test_interest_details_of_foreign_holding(self, ledger, investor_token):
        holding_id = DemoTokenService(ledger, investor_token).purchase(SEEDED_TOKEN_BATCH, 1)
        other = DemoAuthService(ledger)
        challenge = other.request_challenge("0xOther")
        token = other.login(
            challenge.request_id, DemoWallet("0xOther").sign(challenge.nonce)
        ).token
        with pytest.raises(ApiError, match="Holding not found"):
            DemoInvoiceService(ledger, token).holding_interest_details(holding_id)
