"""Tests for the service factories."""

import pytest

from rwa_ui import services
from rwa_ui.services.account_service_impl import AccountServiceImpl
from rwa_ui.services.auth_service_demo import DemoAuthService
from rwa_ui.services.invoice_service_demo import DemoInvoiceService
from rwa_ui.services.token_service_impl import TokenServiceImpl


class TestFactories:
    def test_demo_kind(self):
        assert isinstance(services.get_auth_service("demo"), DemoAuthService)
        assert isinstance(services.get_invoice_service("tok", kind="demo"), DemoInvoiceService)

    def test_impl_kind_binds_token(self):
        account = services.get_account_service("tok", kind="IMPL")
        assert isinstance(account, AccountServiceImpl)
        assert account.client.token == "tok"
        assert isinstance(services.get_token_service(kind="impl"), TokenServiceImpl)

    def test_demo_services_share_one_ledger(self):
        first = services.get_invoice_service(kind="demo")
        second = services.get_invoice_service(kind="demo")
        assert first._ledger is second._ledger

    @pytest.mark.parametrize(
        "factory",
        [
            services.get_account_service,
            services.get_invoice_service,
            services.get_token_service,
        ],
    )
    def test_unknown_kind(self, factory):
        with pytest.raises(ValueError, match="Unknown .* service kind: bogus"):
            factory(None, kind="bogus")

    def test_unknown_auth_kind(self):
        with pytest.raises(ValueError, match="Unknown auth service kind"):
            services.get_auth_service("bogus")
