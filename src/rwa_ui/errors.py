"""
Exception hierarchy for the RWA Finance UI.

Services raise these and let them propagate. Reflex event handlers catch
them at the UI boundary (see ``AuthState._handle_api_error``).
"""


class RwaError(Exception):
    """Base class for all application errors."""


class ApiError(RwaError):
    """
    A backend request failed.

    Attributes:
        status: HTTP status code, if a response was received.
        code: The ``code`` member of the response envelope, if present.
        path: Request path relative to the API base URL.
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        code: int | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.path = path

    def __str__(self) -> str:
        status = self.status if self.status is not None else "unknown"
        if self.path:
            return f"HTTP {status} for {self.path}: {self.message}"
        return self.message


class UnauthorizedError(ApiError):
    """The session token was rejected (HTTP 401); the session must be invalidated."""


class AuthError(RwaError):
    """The wallet authentication exchange failed."""


class InvalidTransitionError(AuthError):
    """An authentication session operation was attempted from the wrong state."""


class WalletError(RwaError):
    """The injected wallet provider is missing or refused a request."""


class ValidationError(RwaError):
    """User input failed a presence or range check before any request was sent."""
