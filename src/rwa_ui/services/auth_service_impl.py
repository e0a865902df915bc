"""REST implementation of AuthService."""

from rwa_ui.errors import AuthError
from rwa_ui.lib import logs
from rwa_ui.lib.api import ApiClient
from rwa_ui.models.user import Challenge, LoginResult
from rwa_ui.services.auth_service import AuthService

LOG = logs.logger(__file__)


class AuthServiceImpl(AuthService):
    """
    Login exchange against the live backend.

    Attributes:
        client: Unauthenticated ApiClient; the login endpoints take no token.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    def request_challenge(self, address: str) -> Challenge:
        if not address:
            raise AuthError("No wallet connected")
        LOG.info("Requesting challenge for address: %s", address)
        data = self.client.post("/user/challenge", {"walletAddress": address})
        challenge = Challenge.from_dict(data)
        if not challenge.nonce or not challenge.request_id:
            raise AuthError("Challenge response is missing nonce or requestId")
        LOG.info("Challenge received. RequestId: %s", challenge.request_id)
        return challenge

    def login(self, request_id: str, signature: str) -> LoginResult:
        LOG.info(
            "Submitting login for requestId: %s signature: %s",
            request_id,
            logs.redact(signature),
        )
        data = self.client.post(
            "/user/login", {"requestId": request_id, "signature": signature}
        )
        result = LoginResult.from_dict(data)
        if not result.token:
            raise AuthError("Login response did not include a token")
        LOG.info("Login successful. Token: %s", logs.redact(result.token))
        return result
