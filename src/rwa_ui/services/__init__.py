"""
Service factories for the RWA Finance UI.

Each factory returns the implementation selected by the RWA_UI_SERVICE
environment variable, or by an explicit ``kind``:

- demo: In-memory services sharing one DemoLedger (no backend required)
- impl: REST services against RWA_UI_API_BASE_URL

Factories take the session token because every browser session carries its
own, so services are built per call instead of being cached like the
ledger and the HTTP session underneath them.
"""

from typing import Callable, Dict

from rwa_ui import settings
from rwa_ui.lib import clients, logs
from rwa_ui.services.account_service import AccountService
from rwa_ui.services.account_service_demo import DemoAccountService
from rwa_ui.services.account_service_impl import AccountServiceImpl
from rwa_ui.services.auth_service import AuthService
from rwa_ui.services.auth_service_demo import DemoAuthService
from rwa_ui.services.auth_service_impl import AuthServiceImpl
from rwa_ui.services.demo_ledger import demo_ledger
from rwa_ui.services.invoice_service import InvoiceService
from rwa_ui.services.invoice_service_demo import DemoInvoiceService
from rwa_ui.services.invoice_service_impl import InvoiceServiceImpl
from rwa_ui.services.token_service import TokenService
from rwa_ui.services.token_service_demo import DemoTokenService
from rwa_ui.services.token_service_impl import TokenServiceImpl

LOG = logs.logger(__file__)

_AUTH_REGISTRY: Dict[str, Callable[[], AuthService]] = {
    "demo": lambda: DemoAuthService(demo_ledger()),
    "impl": lambda: AuthServiceImpl(clients.api_client()),
}

_ACCOUNT_REGISTRY: Dict[str, Callable[[str | None], AccountService]] = {
    "demo": lambda token: DemoAccountService(demo_ledger(), token),
    "impl": lambda token: AccountServiceImpl(clients.api_client(token)),
}

_INVOICE_REGISTRY: Dict[str, Callable[[str | None], InvoiceService]] = {
    "demo": lambda token: DemoInvoiceService(demo_ledger(), token),
    "impl": lambda token: InvoiceServiceImpl(clients.api_client(token)),
}

_TOKEN_REGISTRY: Dict[str, Callable[[str | None], TokenService]] = {
    "demo": lambda token: DemoTokenService(demo_ledger(), token),
    "impl": lambda token: TokenServiceImpl(clients.api_client(token)),
}


def _resolve(registry: dict, kind: str | None, what: str) -> Callable:
    resolved_kind = service_kind(kind)
    LOG.debug("get_%s_service - kind:%s resolved_kind:%s", what, kind, resolved_kind)
    try:
        return registry[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown {what} service kind: {resolved_kind}"
        raise ValueError(msg) from exc


def service_kind(kind: str | None = None) -> str:
    """Return the service kind in effect."""
    return (kind or settings.SERVICE_KIND).lower()


def get_auth_service(kind: str | None = None) -> AuthService:
    """Return the configured auth service implementation."""
    return _resolve(_AUTH_REGISTRY, kind, "auth")()


def get_account_service(token: str | None = None, kind: str | None = None) -> AccountService:
    """Return the configured account service, bound to ``token``."""
    return _resolve(_ACCOUNT_REGISTRY, kind, "account")(token)


def get_invoice_service(token: str | None = None, kind: str | None = None) -> InvoiceService:
    """Return the configured invoice service, bound to ``token``."""
    return _resolve(_INVOICE_REGISTRY, kind, "invoice")(token)


def get_token_service(token: str | None = None, kind: str | None = None) -> TokenService:
    """Return the configured token service, bound to ``token``."""
    return _resolve(_TOKEN_REGISTRY, kind, "token")(token)
