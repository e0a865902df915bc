"""
Wallet authentication session state machine.

The login exchange is three sequential steps:

    DISCONNECTED --connect--> CONNECTED --begin_challenge--> CHALLENGED
        CHALLENGED --complete_login--> AUTHENTICATED
        CHALLENGED --abort_challenge--> CONNECTED

``invalidate`` (the backend answered 401) and ``disconnect`` (the user logged
out or unplugged the wallet) return to DISCONNECTED from any state, clearing
token, challenge and wallet together.

The session is a plain object; AuthState rebuilds it from its vars for each
event and writes the result back.
"""

from dataclasses import dataclass, field
from enum import Enum

from rwa_ui.errors import AuthError, InvalidTransitionError, UnauthorizedError
from rwa_ui.lib import logs
from rwa_ui.models.user import Challenge, WalletInfo

LOG = logs.logger(__file__)


class SessionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"
    CHALLENGED = "challenged"
    AUTHENTICATED = "authenticated"


@dataclass
class AuthSession:
    """
    Client-side authentication state for one browser session.

    Attributes:
        status: Current state.
        wallet: Connected wallet; None only when DISCONNECTED.
        token: Session token; set only when AUTHENTICATED.
        challenge: Outstanding challenge; set only when CHALLENGED.
    """

    status: SessionStatus = SessionStatus.DISCONNECTED
    wallet: WalletInfo | None = None
    token: str | None = None
    challenge: Challenge | None = field(default=None, repr=False)

    @classmethod
    def restore(cls, token: str | None, wallet: WalletInfo | None) -> "AuthSession":
        """
        Rebuild a session from persisted browser storage.

        A token without a wallet is dropped. A token is never sent unless it
        can be attributed to a wallet.
        """
        if wallet is None:
            return cls()
        if token:
            return cls(status=SessionStatus.AUTHENTICATED, wallet=wallet, token=token)
        return cls(status=SessionStatus.CONNECTED, wallet=wallet)

    @property
    def is_authenticated(self) -> bool:
        return self.status is SessionStatus.AUTHENTICATED and bool(self.token)

    @property
    def address(self) -> str:
        return self.wallet.address if self.wallet else ""

    def auth_header(self) -> dict[str, str]:
        """Return the Authorization header for the current token, or {}."""
        if self.is_authenticated:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def connect(self, wallet: WalletInfo) -> None:
        """Attach a wallet, discarding any previous token or challenge."""
        self._require(
            "connect", SessionStatus.DISCONNECTED, SessionStatus.CONNECTED
        )
        self._move(SessionStatus.CONNECTED, wallet=wallet, token=None, challenge=None)

    def begin_challenge(self, challenge: Challenge) -> None:
        self._require("begin_challenge", SessionStatus.CONNECTED)
        if not challenge.nonce or not challenge.request_id:
            raise AuthError("Challenge response is missing nonce or requestId")
        self._move(SessionStatus.CHALLENGED, challenge=challenge)

    def complete_login(self, token: str) -> None:
        self._require("complete_login", SessionStatus.CHALLENGED)
        if not token:
            raise AuthError("Login response did not include a token")
        self._move(SessionStatus.AUTHENTICATED, token=token, challenge=None)

    def abort_challenge(self) -> None:
        """Return to CONNECTED after the signature or login step failed."""
        self._require("abort_challenge", SessionStatus.CHALLENGED)
        self._move(SessionStatus.CONNECTED, challenge=None)

    def invalidate(self) -> None:
        """Drop everything after the backend rejected the token."""
        self._move(SessionStatus.DISCONNECTED, wallet=None, token=None, challenge=None)

    def expire_if_unauthorized(self, exc: Exception) -> bool:
        """
        Invalidate the session when ``exc`` is a rejected token.

        Returns:
            True if the session was invalidated.
        """
        if not isinstance(exc, UnauthorizedError):
            return False
        LOG.warning("Session rejected for %s: %s", self.address or "no wallet", exc)
        self.invalidate()
        return True

    def to_storage(self) -> dict[str, str]:
        """Flatten the session into the string fields AuthState persists."""
        return {
            "status": self.status.value,
            "auth_token": self.token or "",
            "wallet_address": self.address,
            "wallet_type": self.wallet.wallet_type.value if self.wallet else "",
            "challenge_nonce": self.challenge.nonce if self.challenge else "",
            "challenge_request_id": self.challenge.request_id if self.challenge else "",
        }

    def disconnect(self) -> None:
        self._move(SessionStatus.DISCONNECTED, wallet=None, token=None, challenge=None)

    def _require(self, operation: str, *allowed: SessionStatus) -> None:
        if self.status not in allowed:
            raise InvalidTransitionError(
                f"Cannot {operation} while {self.status.value}"
            )

    def _move(self, status: SessionStatus, **changes) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        if status is not self.status:
            LOG.info(
                "Session %s -> %s (%s)",
                self.status.value,
                status.value,
                self.address or "no wallet",
            )
        self.status = status
