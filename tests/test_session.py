"""Tests for the wallet authentication session state machine."""

import pytest

from rwa_ui.errors import ApiError, AuthError, InvalidTransitionError, UnauthorizedError
from rwa_ui.models.session import AuthSession, SessionStatus
from rwa_ui.models.user import Challenge, WalletInfo, WalletType

ADDRESS = "0x1111111111111111111111111111111111111111"


@pytest.fixture
def wallet():
    return WalletInfo(address=ADDRESS, wallet_type=WalletType.METAMASK)


@pytest.fixture
def challenged(wallet):
    session = AuthSession()
    session.connect(wallet)
    session.begin_challenge(Challenge(nonce="sign me", request_id="req-1"))
    return session


class TestLoginFlow:
    def test_starts_disconnected(self):
        session = AuthSession()
        assert session.status is SessionStatus.DISCONNECTED
        assert session.address == ""
        assert session.auth_header() == {}

    def test_connect_then_login(self, challenged):
        assert challenged.status is SessionStatus.CHALLENGED
        assert challenged.challenge.request_id == "req-1"

        challenged.complete_login("tok")

        assert challenged.status is SessionStatus.AUTHENTICATED
        assert challenged.is_authenticated
        assert challenged.challenge is None
        assert challenged.auth_header() == {"Authorization": "Bearer tok"}

    def test_abort_returns_to_connected(self, challenged):
        challenged.abort_challenge()
        assert challenged.status is SessionStatus.CONNECTED
        assert challenged.challenge is None
        assert challenged.address == ADDRESS

    def test_reconnect_discards_previous_wallet(self, wallet):
        session = AuthSession()
        session.connect(wallet)
        other = WalletInfo(address="0x2222", wallet_type=WalletType.OKX)
        session.connect(other)
        assert session.address == "0x2222"
        assert session.token is None

    def test_empty_token_is_rejected(self, challenged):
        with pytest.raises(AuthError):
            challenged.complete_login("")
        assert challenged.status is SessionStatus.CHALLENGED

    def test_challenge_without_request_id_is_rejected(self, wallet):
        session = AuthSession()
        session.connect(wallet)
        with pytest.raises(AuthError):
            session.begin_challenge(Challenge(nonce="n", request_id=""))
        assert session.status is SessionStatus.CONNECTED


class TestInvalidTransitions:
    def test_challenge_requires_connected(self):
        with pytest.raises(InvalidTransitionError):
            AuthSession().begin_challenge(Challenge(nonce="n", request_id="r"))

    def test_login_requires_challenge(self, wallet):
        session = AuthSession()
        session.connect(wallet)
        with pytest.raises(InvalidTransitionError):
            session.complete_login("tok")

    def test_connect_while_challenged(self, challenged, wallet):
        with pytest.raises(InvalidTransitionError):
            challenged.connect(wallet)


class TestTeardown:
    @pytest.mark.parametrize("operation", ["invalidate", "disconnect"])
    def test_clears_everything(self, challenged, operation):
        challenged.complete_login("tok")
        getattr(challenged, operation)()
        assert challenged.status is SessionStatus.DISCONNECTED
        assert challenged.wallet is None
        assert challenged.token is None
        assert not challenged.is_authenticated


class TestRejectedToken:
    @pytest.fixture
    def logged_in(self, wallet):
        return AuthSession.restore("tok-123", wallet)

    def test_unauthorized_expires_session(self, logged_in):
        assert logged_in.expire_if_unauthorized(
            UnauthorizedError("Token expired", status=401, path="/token/holdings")
        )
        assert logged_in.to_storage() == {
            "status": "disconnected",
            "auth_token": "",
            "wallet_address": "",
            "wallet_type": "",
            "challenge_nonce": "",
            "challenge_request_id": "",
        }

    def test_envelope_401_counts_as_unauthorized(self, logged_in):
        assert logged_in.expire_if_unauthorized(UnauthorizedError("Invalid token", code=401))
        assert not logged_in.is_authenticated

    @pytest.mark.parametrize(
        "exc",
        [ApiError("Insufficient tokens", status=200, code=400), AuthError("x"), ValueError("y")],
    )
    def test_other_errors_keep_session(self, logged_in, exc):
        assert not logged_in.expire_if_unauthorized(exc)
        stored = logged_in.to_storage()
        assert stored["status"] == "authenticated"
        assert stored["auth_token"] == "tok-123"
        assert stored["wallet_address"] == ADDRESS
        assert stored["wallet_type"] == "metamask"

    def test_storage_keeps_pending_challenge(self, challenged):
        stored = challenged.to_storage()
        assert stored["status"] == "challenged"
        assert stored["challenge_nonce"] == "sign me"
        assert stored["challenge_request_id"] == "req-1"

class TestRestore:
    def test_token_and_wallet(self, wallet):
        session = AuthSession.restore("tok", wallet)
        assert session.status is SessionStatus.AUTHENTICATED
        assert session.token == "tok"

    def test_wallet_only(self, wallet):
        assert AuthSession.restore("", wallet).status is SessionStatus.CONNECTED

    def test_token_without_wallet_is_dropped(self):
        session = AuthSession.restore("tok", None)
        assert session.status is SessionStatus.DISCONNECTED
        assert session.token is None
