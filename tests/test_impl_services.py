"""Request wiring of the REST services, checked against a scripted HTTP session."""

from datetime import date
from decimal import Decimal

import pytest

from rwa_ui.errors import ApiError, AuthError, ValidationError
from rwa_ui.models import CreateInvoiceParams, TokenizeBatchParams
from rwa_ui.models.session import AuthSession, SessionStatus
from rwa_ui.models.user import WalletInfo, WalletType
from rwa_ui.services.account_service_impl import AccountServiceImpl
from rwa_ui.services.auth_service_impl import AuthServiceImpl
from rwa_ui.services.invoice_service_impl import InvoiceServiceImpl
from rwa_ui.services.token_service_impl import TokenServiceImpl

from conftest import BASE_URL


class TestAuthServiceImpl:
    def test_challenge_and_login(self, client, http):
        http.queue({"nonce": "Sign: 42", "requestId": "req-9"})
        http.queue({"token": "jwt-token", "message": "ok"})
        session = AuthSession()
        session.connect(WalletInfo("0xabc", WalletType.METAMASK))

        token = AuthServiceImpl(client).authenticate(
            session, lambda message, address: f"sig:{message}:{address}"
        )

        assert token == "jwt-token"
        assert session.status is SessionStatus.AUTHENTICATED
        challenge_call, login_call = http.calls
        assert challenge_call["url"] == f"{BASE_URL}/user/challenge"
        assert challenge_call["json"] == {"walletAddress": "0xabc"}
        assert login_call["json"] == {"requestId": "req-9", "signature": "sig:Sign: 42:0xabc"}

    def test_challenge_missing_nonce(self, client, http):
        http.queue({"requestId": "req-9"})
        with pytest.raises(AuthError):
            AuthServiceImpl(client).request_challenge("0xabc")

    def test_login_without_token(self, client, http):
        http.queue({"message": "ok"})
        with pytest.raises(AuthError, match="token"):
            AuthServiceImpl(client).login("req-9", "0xsig")

    def test_failed_login_returns_to_connected(self, client, http):
        http.queue({"nonce": "n", "requestId": "r"})
        http.queue(None, code=400, msg="Signature verification failed")
        session = AuthSession()
        session.connect(WalletInfo("0xabc", WalletType.OKX))
        with pytest.raises(Exception, match="Signature verification failed"):
            AuthServiceImpl(client).authenticate(session, lambda message, address: "0x0")
        assert session.status is SessionStatus.CONNECTED


class TestAccountServiceImpl:
    def test_enterprise_info(self, client, http):
        http.queue({"isEnterpriseBound": True, "enterpriseId": "e1", "enterpriseName": "Acme"})
        info = AccountServiceImpl(client).enterprise_info()
        assert info.enterprise_name == "Acme"
        assert http.last["method"] == "GET"

    def test_bind(self, client, http):
        http.queue(None)
        AccountServiceImpl(client).bind_enterprise(" 0xent ")
        assert http.last["url"].endswith("/user/bind-enterprise")
        assert http.last["json"] == {"enterpriseAddress": "0xent"}

    def test_register_returns_id_only(self, client, http):
        http.queue("6650a1f0c1e4a2b3d4e5f699")
        enterprise = AccountServiceImpl(client).register_enterprise("Hooli", "0xh", "QmKyc")
        assert enterprise.id == "6650a1f0c1e4a2b3d4e5f699"
        assert enterprise.name == "Hooli"
        assert http.last["json"] == {
            "name": "Hooli",
            "wallet_address": "0xh",
            "kyc_details_ipfs_hash": "QmKyc",
        }

    def test_register_requires_name(self, client, http):
        with pytest.raises(ValidationError):
            AccountServiceImpl(client).register_enterprise("", "0xh")
        assert http.calls == []

    def test_lists(self, client, http):
        http.queue([{"id": "t1", "transaction_type": "Purchase", "amount": "10"}])
        http.queue({"rows": [{"id": "a1", "daily_interest_amount": "0.1781"}], "total": 1})
        account = AccountServiceImpl(client)
        (tx,) = account.list_transactions()
        (accrual,) = account.list_interest_accruals()
        assert tx.amount == Decimal(10)
        assert accrual.daily_interest_amount == Decimal("0.1781")


class TestInvoiceServiceImpl:
    def test_create_sends_single_object(self, client, http):
        http.queue({"id": "i1", "invoice_number": "INV-7", "status": "Pending"})
        params = CreateInvoiceParams(
            "0xme", "0xpayer", Decimal("10"), "USDT", date(2027, 1, 15), "QmA", "QmB"
        )
        invoice = InvoiceServiceImpl(client).create_invoice(params)
        assert invoice.invoice_number == "INV-7"
        assert isinstance(http.last["json"], dict)
        assert http.last["json"]["due_date"] == 1799971200

    def test_detail_takes_first_matching_row(self, client, http):
        http.queue([{"id": "i1", "invoice_number": "INV-7", "status": "Verified"}])
        invoice = InvoiceServiceImpl(client).get_invoice("INV-7")
        assert invoice.id == "i1"
        assert invoice.invoice_number == "INV-7"
        assert http.last["params"] == {"invoice_number": "INV-7"}

    def test_detail_without_rows(self, client, http):
        http.queue([])
        with pytest.raises(ApiError, match="not found") as exc_info:
            InvoiceServiceImpl(client).get_invoice("INV-404")
        assert exc_info.value.code == 404

    def test_delete_sends_database_id(self, client, http):
        http.queue(None)
        InvoiceServiceImpl(client).delete_invoice("6650b2a0c1e4a2b3d4e5f701")
        assert http.last["method"] == "DELETE"
        assert http.last["url"].endswith("/invoice/del")
        assert http.last["params"] == {"invoice_number": "6650b2a0c1e4a2b3d4e5f701"}

    def test_verify_and_issue_by_id(self, client, http):
        http.queue(None)
        http.queue(None)
        invoices = InvoiceServiceImpl(client)
        invoices.verify_invoice("i1")
        assert http.last["json"] == {"id": "i1"}
        invoices.issue_invoices(["i1", "", "i2"])
        assert http.last["json"] == {"invoice_ids": ["i1", "i2"]}

    def test_batch_endpoints(self, client, http):
        http.queue({"id": "b1", "status": "Issued"})
        http.queue([{"id": "i1"}, {"id": "i2"}])
        invoices = InvoiceServiceImpl(client)
        assert invoices.get_batch("b1").can_tokenize
        assert http.last["url"].endswith("/invoice/batch/b1")
        assert len(invoices.get_batch_invoices("b1")) == 2
        assert http.last["url"].endswith("/invoice/batch/b1/invoices")

    def test_interest_details(self, client, http):
        http.queue([{"daily_interest_amount": "0.5", "invoice_number": "INV-1"}])
        (detail,) = InvoiceServiceImpl(client).holding_interest_details("h1")
        assert detail.invoice_number == "INV-1"
        assert http.last["params"] == {"holding_id": "h1"}


class TestTokenServiceImpl:
    @pytest.fixture
    def tokens(self, client, tmp_path, monkeypatch):
        from rwa_ui.lib.caches import DiskCache

        monkeypatch.setattr(TokenServiceImpl, "_DISK_CACHE", DiskCache(tmp_path))
        return TokenServiceImpl(client, cache_ttl=60)

    def test_markets_are_cached(self, tokens, http):
        http.queue([{"id": "m1", "available_token_amount": "5"}])
        first = tokens.list_markets(stablecoin_symbol="USDT")
        second = tokens.list_markets(stablecoin_symbol="USDT")
        assert len(http.calls) == 1
        assert first.items[0].id == second.items[0].id == "m1"
        assert http.last["params"] == {"stablecoin_symbol": "USDT", "page": 1, "page_size": 10}

    def test_purchase_evicts_cache(self, tokens, http):
        http.queue([{"id": "m1"}])
        http.queue({"holding_id": "h1"})
        http.queue([{"id": "m1"}])
        tokens.list_markets()
        assert tokens.purchase("tb1", 3) == "h1"
        assert http.calls[1]["json"] == {"batch_id": "tb1", "token_amount": "3"}
        tokens.list_markets()
        assert len(http.calls) == 3

    def test_purchase_validates_before_sending(self, tokens, http):
        with pytest.raises(ValidationError):
            tokens.purchase("tb1", 0)
        assert http.calls == []

    def test_tokenize(self, tokens, http):
        http.queue(None)
        params = TokenizeBatchParams("BATCH-1", "USDC", Decimal(100), Decimal("5.00"))
        tokens.tokenize_invoice_batch("b1", params)
        assert http.last["url"].endswith("/token/from_invoice_batch")
        assert http.last["params"] == {"invoice_batch_id": "b1"}
        assert http.last["json"]["token_value"] == "100"

    def test_batches_paging(self, tokens, http):
        http.queue({"rows": [{"id": "tb1"}], "total": 11})
        page = tokens.list_batches(page=1, page_size=1)
        assert page.total == 11
        assert page.has_more
        assert http.last["params"] == {"page": 1, "page_size": 1}
