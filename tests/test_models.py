"""Tests for payload parsing, validation and request bodies of the data models."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from rwa_ui.errors import ValidationError, WalletError
from rwa_ui.models import (
    BatchSummary,
    Challenge,
    CreateInvoiceParams,
    EnterpriseInfo,
    Invoice,
    InvoiceBatch,
    InvoiceBatchStatus,
    InvoiceStatus,
    PageResult,
    PurchaseRequest,
    TokenizeBatchParams,
    TokenMarket,
    UserInfo,
    UserRole,
    WalletInfo,
    WalletType,
)
from rwa_ui.models.common import as_list


class TestInvoice:
    def test_from_dict(self):
        invoice = Invoice.from_dict(
            {
                "id": "i1",
                "invoice_number": "INV-1",
                "amount": "1250.50",
                "currency": "USDT",
                "due_date": 1767225600,
                "status": "Verified",
            }
        )
        assert invoice.amount == Decimal("1250.50")
        assert invoice.due_date == datetime(2026, 1, 1, tzinfo=timezone.utc)
        assert invoice.status is InvoiceStatus.VERIFIED
        assert invoice.can_issue
        assert not invoice.can_verify

    def test_unknown_status_falls_back_to_pending(self):
        invoice = Invoice.from_dict({"id": "i1", "status": "Mystery"})
        assert invoice.status is InvoiceStatus.PENDING
        assert invoice.can_verify

    def test_batched_invoice_cannot_be_issued(self):
        invoice = Invoice.from_dict({"id": "i1", "status": "Verified", "batch_id": "b1"})
        assert not invoice.can_issue


class TestCreateInvoiceParams:
    @pytest.fixture
    def params(self):
        return CreateInvoiceParams(
            payee="0xpayee",
            payer="0xpayer",
            amount=Decimal("100.5"),
            currency="USDT",
            due_date=date(2027, 1, 15),
            invoice_ipfs_hash="QmDoc",
            contract_ipfs_hash="QmContract",
        )

    def test_payload(self, params):
        params.validate()
        body = params.to_payload()
        assert body["amount"] == "100.5"
        assert body["due_date"] == 1799971200
        assert body["payer"] == "0xpayer"

    def test_missing_fields(self, params):
        params.payer = ""
        params.contract_ipfs_hash = ""
        with pytest.raises(ValidationError, match="payer, contract_ipfs_hash"):
            params.validate()

    def test_non_positive_amount(self, params):
        params.amount = Decimal(0)
        with pytest.raises(ValidationError, match="greater than 0"):
            params.validate()


class TestBatches:
    def test_can_tokenize_only_once(self):
        batch = InvoiceBatch.from_dict({"id": "abcdef123", "status": "Issued"})
        assert batch.can_tokenize
        assert batch.default_reference() == "BATCH-abcdef"
        batch.token_batch_id = "t1"
        assert not batch.can_tokenize

    def test_trading_batch_cannot_be_tokenized(self):
        batch = InvoiceBatch.from_dict({"id": "b", "status": "Trading"})
        assert batch.status is InvoiceBatchStatus.TRADING
        assert not batch.can_tokenize

    def test_summary(self):
        invoices = [
            Invoice.from_dict(
                {"id": "1", "amount": "100", "currency": "USDT", "due_date": "2027-02-01"}
            ),
            Invoice.from_dict(
                {"id": "2", "amount": "50.25", "currency": "USDT", "due_date": "2027-01-01"}
            ),
        ]
        summary = BatchSummary.of(invoices)
        assert summary.invoice_count == 2
        assert summary.total_amount == Decimal("150.25")
        assert summary.earliest_due_date.month == 1
        assert summary.latest_due_date.month == 2
        assert summary.currencies == ["USDT"]

    def test_empty_summary(self):
        summary = BatchSummary.of([])
        assert summary.total_amount == 0
        assert summary.earliest_due_date is None


class TestTokenMarket:
    @pytest.fixture
    def market(self):
        return TokenMarket.from_dict(
            {
                "id": "m1",
                "batch_reference": "BATCH-1",
                "total_token_amount": "500",
                "sold_token_amount": "120",
                "available_token_amount": "380",
                "token_value_per_unit": "100",
            }
        )

    def test_batch_id_falls_back_to_id(self, market):
        assert market.batch_id == "m1"

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-5, 1), (10, 10), (1000, 380)])
    def test_clamp_purchase(self, market, requested, expected):
        assert market.clamp_purchase(requested) == expected

    def test_sold_out(self, market):
        market.available_token_amount = Decimal(0)
        assert market.sold_out
        assert market.clamp_purchase(5) == 0

    def test_purchase_cost(self, market):
        assert market.purchase_cost(3) == Decimal(300)


class TestTokenRequests:
    def test_purchase_payload_sends_string_amount(self):
        request = PurchaseRequest(batch_id="tb1", token_amount=5)
        request.validate()
        assert request.to_payload() == {"batch_id": "tb1", "token_amount": "5"}

    @pytest.mark.parametrize(
        "batch_id,amount,message",
        [("", 1, "batch is required"), ("tb1", 0, "greater than 0")],
    )
    def test_purchase_validation(self, batch_id, amount, message):
        with pytest.raises(ValidationError, match=message):
            PurchaseRequest(batch_id=batch_id, token_amount=amount).validate()

    def test_tokenize_payload_omits_missing_maturity(self):
        params = TokenizeBatchParams(
            batch_reference="BATCH-1",
            stablecoin_symbol="USDC",
            token_value=Decimal("100"),
            interest_rate_apy=Decimal("5.00"),
        )
        params.validate()
        assert params.to_payload() == {
            "batch_reference": "BATCH-1",
            "stablecoin_symbol": "USDC",
            "token_value": "100",
            "interest_rate_apy": "5.00",
        }

    def test_tokenize_rejects_negative_apy(self):
        params = TokenizeBatchParams("BATCH-1", "USDC", Decimal(100), Decimal(-1))
        with pytest.raises(ValidationError, match="negative"):
            params.validate()


class TestUser:
    def test_challenge_accepts_camel_case(self):
        challenge = Challenge.from_dict({"nonce": "n", "requestId": "r"})
        assert challenge.request_id == "r"

    def test_enterprise_info_round_trips_camel_case(self):
        info = EnterpriseInfo.from_dict(
            {"isEnterpriseBound": True, "enterpriseId": "e1", "enterpriseName": "Acme"}
        )
        assert info.is_enterprise_bound
        assert info.to_dict()["enterpriseName"] == "Acme"

    def test_role(self):
        bound = UserInfo("0x1", EnterpriseInfo(is_enterprise_bound=True))
        unbound = UserInfo("0x1", EnterpriseInfo())
        assert bound.role is UserRole.ENTERPRISE_ADMIN
        assert unbound.role is UserRole.INVESTOR

    def test_wallet_info(self):
        assert WalletInfo.from_dict({"address": ""}) is None
        info = WalletInfo.from_dict({"address": "0x1", "type": "OKX"})
        assert info.wallet_type is WalletType.OKX
        with pytest.raises(WalletError):
            WalletInfo.from_dict({"address": "0x1", "type": "ledger"})


class TestPaging:
    def test_as_list_shapes(self):
        assert as_list(None) == []
        assert as_list([1]) == [1]
        assert as_list({"rows": [2], "total": 1}) == [2]
        assert as_list({"data": [3]}) == [3]
        assert as_list("nope") == []

    def test_has_more_without_total(self):
        assert PageResult(items=[1, 2], page=1, page_size=2).has_more
        assert not PageResult(items=[1], page=1, page_size=2).has_more

    def test_has_more_with_total(self):
        assert not PageResult(items=[1, 2], page=2, page_size=2, total=4).has_more
        assert PageResult(items=[1, 2], page=1, page_size=2, total=4).has_more
