"""
Shared fixtures for the Questrade client tests.

No network access: every client is built on an httpx.MockTransport and the
clock used for token expiry is pinned via `frozen_time`.
"""

import os

os.environ.setdefault("QT_REFRESH_TOKEN", "test-refresh-token")

import httpx
import pytest

from questrade_api.config.settings import ClientSettings
from questrade_api.infra.client import questrade_client
from questrade_api.infra.client.questrade_client import QuestradeClient

AUTH_URL = "https://login.questrade.com/oauth2/token"

NOW = 1_700_000_000

ACCOUNTS_BODY = {
    "accounts": [
        {
            "type": "Margin",
            "number": "26598145",
            "status": "Active",
            "isPrimary": True,
            "isBilling": True,
            "clientAccountType": "Individual",
        },
        {
            "type": "TFSA",
            "number": "26598146",
            "status": "Active",
            "isPrimary": False,
            "isBilling": False,
            "clientAccountType": "Individual",
        },
    ],
    "userId": 3000124,
}

BALANCES_BODY = {
    "perCurrencyBalances": [
        {
            "currency": "CAD",
            "cash": 243971.7,
            "marketValue": 6017,
            "totalEquity": 249988.7,
            "buyingPower": 496367.2,
            "maintenanceExcess": 248183.6,
            "isRealTime": False,
        },
    ],
    "combinedBalances": [
        {
            "currency": "USD",
            "cash": 198259.05,
            "marketValue": 53745,
            "totalEquity": 252004.05,
            "buyingPower": 461013.3,
            "maintenanceExcess": 230506.65,
            "isRealTime": False,
        },
    ],
    "sodPerCurrencyBalances": [],
    "sodCombinedBalances": [],
}


def token_body(access="A1", refresh="R1", server="https://srv1/", expires_in=1800):
    return {
        "access_token": access,
        "refresh_token": refresh,
        "api_server": server,
        "expires_in": expires_in,
        "token_type": "Bearer",
    }


class FakeQuestrade:
    """
    Programmable stand-in for the token endpoint and the data API.

    Each refresh hands out the next token pair (A1/R1, A2/R2, ...) unless a
    failure status has been queued. Every request is recorded.
    """

    def __init__(self, server="https://srv1/"):
        self.server = server
        self.requests: list[httpx.Request] = []
        self.refresh_status: int | None = None
        self.refresh_text = ""
        self.refresh_json: dict | None = None
        self.data_status: int | None = None
        self.data_text = ""
        self.issued = 0
        self.expires_in = 1800

    @property
    def refresh_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(AUTH_URL)]

    @property
    def data_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if not str(r.url).startswith(AUTH_URL)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if str(request.url).startswith(AUTH_URL):
            if self.refresh_status is not None:
                return httpx.Response(self.refresh_status, text=self.refresh_text)

            if self.refresh_json is not None:
                return httpx.Response(200, json=self.refresh_json)

            self.issued += 1

            return httpx.Response(200, json=token_body(
                access=f"A{self.issued}",
                refresh=f"R{self.issued}",
                server=self.server,
                expires_in=self.expires_in,
            ))

        if self.data_status is not None:
            return httpx.Response(self.data_status, text=self.data_text)

        if request.url.path.endswith("/balances"):
            return httpx.Response(200, json=BALANCES_BODY)

        return httpx.Response(200, json=ACCOUNTS_BODY)


@pytest.fixture
def frozen_time(monkeypatch):
    """Pin the client's clock; tests move it by assigning `clock.now`."""

    class Clock:
        now = NOW

    clock = Clock()
    monkeypatch.setattr(questrade_client, "current_time_seconds", lambda: clock.now)

    return clock


@pytest.fixture
def fake_questrade():
    return FakeQuestrade()


@pytest.fixture
def client_settings():
    return ClientSettings(_env_file=None)


@pytest.fixture
def make_client(fake_questrade, client_settings):
    def _make(refresh_token="R0", handler=None):
        transport = httpx.MockTransport(handler or fake_questrade.handler)

        return QuestradeClient(refresh_token, client_settings, transport=transport)

    return _make
