"""Shared fixtures: a fresh demo ledger per test and a scripted HTTP session."""

import json

import pytest

from rwa_ui.data import demo_fixtures
from rwa_ui.lib.api import ApiClient
from rwa_ui.lib.wallet import DemoWallet
from rwa_ui.models.session import AuthSession
from rwa_ui.models.user import WalletInfo, WalletType
from rwa_ui.services.auth_service_demo import DemoAuthService
from rwa_ui.services.demo_ledger import DemoLedger


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    """Records every request and answers from a queue of FakeResponses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, data=None, status_code=200, code=200, msg="success"):
        self.responses.append(
            FakeResponse(status_code, {"code": code, "msg": msg, "data": data})
        )

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "json": json,
                "headers": headers,
                "timeout": timeout,
            }
        )
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self):
        return self.calls[-1]


BASE_URL = "http://backend.test/rwa"


@pytest.fixture
def http():
    return FakeSession()


@pytest.fixture
def client(http):
    return ApiClient(BASE_URL, token="tok-123", session=http, timeout=5)


@pytest.fixture
def ledger():
    return DemoLedger()


@pytest.fixture
def demo_wallet():
    return DemoWallet()


@pytest.fixture
def connected_session(demo_wallet):
    session = AuthSession()
    session.connect(WalletInfo(address=demo_wallet.address, wallet_type=WalletType.DEMO))
    return session


@pytest.fixture
def investor_token(ledger, demo_wallet, connected_session):
    """Token of a logged-in wallet without an enterprise binding."""
    return DemoAuthService(ledger).authenticate(
        connected_session, lambda message, address: demo_wallet.sign(message)
    )


@pytest.fixture
def admin_token(ledger, investor_token):
    """Token of a wallet bound to the seeded Acme enterprise."""
    ledger.bind_enterprise(DemoWallet.ADDRESS, demo_fixtures.ACME_ADDRESS)
    return investor_token
