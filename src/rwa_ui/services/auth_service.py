"""
Abstract base class for the wallet challenge/response login.

The exchange is:

1. ``request_challenge(address)`` gets a nonce and a request id.
2. The wallet signs the nonce (``personal_sign``).
3. ``login(request_id, signature)`` exchanges the signature for a token.

There are no retries. Any failure after the challenge puts the session back
to CONNECTED so the user can simply try again.

Implementations:
- AuthServiceImpl: REST calls against ``/user/challenge`` and ``/user/login``
- DemoAuthService: in-memory nonces, verifies DemoWallet signatures
"""

from abc import ABC, abstractmethod
from typing import Callable

from rwa_ui.lib import logs
from rwa_ui.models.session import AuthSession
from rwa_ui.models.user import Challenge, LoginResult

LOG = logs.logger(__file__)

# (message, address) -> signature
Signer = Callable[[str, str], str]


class AuthService(ABC):
    """Contract for the login exchange."""

    @abstractmethod
    def request_challenge(self, address: str) -> Challenge:
        """Ask the backend for a nonce to be signed by ``address``."""

    @abstractmethod
    def login(self, request_id: str, signature: str) -> LoginResult:
        """Exchange a signed nonce for a session token."""

    def authenticate(self, session: AuthSession, signer: Signer) -> str:
        """
        Run the whole exchange for a connected session with a synchronous signer.

        Browser wallets sign asynchronously, so AuthState drives the steps
        itself across call_script callbacks; this path serves the demo wallet.

        Args:
            session: A CONNECTED session; left AUTHENTICATED on success.
            signer: Callable producing a signature for (message, address).

        Returns:
            The session token.

        Raises:
            AuthError, ApiError, WalletError: The session is returned to
                CONNECTED before the error propagates.
        """
        challenge = self.request_challenge(session.address)
        session.begin_challenge(challenge)
        try:
            signature = signer(challenge.nonce, session.address)
            result = self.login(challenge.request_id, signature)
            session.complete_login(result.token)
        except Exception:
            LOG.warning("Authentication failed for %s", session.address, exc_info=True)
            session.abort_challenge()
            raise
        return result.token
