"""
Demo implementation of AuthService.

Nonces come from the DemoLedger, and only signatures produced by
``DemoWallet.sign`` for the issued nonce are accepted.
"""

from rwa_ui.lib import logs
from rwa_ui.models.user import Challenge, LoginResult
from rwa_ui.services.auth_service import AuthService
from rwa_ui.services.demo_ledger import DemoLedger

LOG = logs.logger(__file__)


class DemoAuthService(AuthService):
    def __init__(self, ledger: DemoLedger) -> None:
        self._ledger = ledger

    def request_challenge(self, address: str) -> Challenge:
        challenge = self._ledger.challenge(address)
        LOG.info("Demo challenge issued for %s", address)
        return challenge

    def login(self, request_id: str, signature: str) -> LoginResult:
        result = self._ledger.login(request_id, signature)
        LOG.info("Demo login successful. Token: %s", logs.redact(result.token))
        return result
