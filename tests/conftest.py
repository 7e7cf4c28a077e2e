"""Pytest configuration and shared fixtures for whatsup tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from whatsup.core.transport import TransportError, TransportResponse

SLACK_ACTIVE_PAYLOAD = (
    b'{"status":"active","date_created":"2023-09-26T11:55:36-07:00",'
    b'"date_updated":"2023-09-26T11:55:36-07:00","active_incidents":[{"id":1269,'
    b'"date_created":"2023-09-26T11:34:10-07:00","date_updated":"2023-09-26T11:55:36-07:00",'
    b'"title":"Can\'t dismiss Now you\'ve got Later","type":"incident","status":"active",'
    b'"url":"https:\\/\\/status.slack.com\\/2023-09\\/badc5543a21e1fa7",'
    b'"services":["Connections"],"notes":[{"date_created":"2023-09-26T11:55:36-07:00",'
    b'"body":"sample note 2"},{"date_created":"2023-09-26T11:34:10-07:00","body":"sample note"}]}]}'
)

STATUSPAGE_OK_PAYLOAD = (
    b'{"page":{"id":"kctbh9vrtdwd","name":"GitHub","url":"https://www.githubstatus.com",'
    b'"time_zone":"Etc/UTC","updated_at":"2023-09-26T07:51:43.965Z"},'
    b'"status":{"indicator":"none","description":"All Systems Operational"}}'
)

BAD_JSON = b"{bad: ^JSON"

PACIFIC = timezone(timedelta(hours=-7))


class FakeClient:
    """In-memory transport that records every request it receives."""

    def __init__(
        self,
        content: bytes | None = None,
        status_code: int = 200,
        error: Exception | None = None,
    ) -> None:
        self.content = content
        self.status_code = status_code
        self.error = error
        self.calls: list[tuple] = []

    async def make_request(
        self, method, path, headers=None, body=None, options=None
    ) -> TransportResponse:
        self.calls.append((method, path, headers, body, options))
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, content=self.content)


class FakeTransportFactory:
    """Transport factory that hands out FakeClients and records arguments."""

    def __init__(self, **client_kwargs) -> None:
        self.client_kwargs = client_kwargs
        self.created: list[dict] = []
        self.clients: list[FakeClient] = []

    def __call__(self, host, service_name, **kwargs) -> FakeClient:
        self.created.append({"host": host, "service_name": service_name, **kwargs})
        client = FakeClient(**self.client_kwargs)
        self.clients.append(client)
        return client


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at an empty temp dir and reset the config singleton."""
    import whatsup.config.settings

    monkeypatch.setenv("WHATSUP_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("WHATSUP_TIMEOUT", raising=False)
    monkeypatch.delenv("WHATSUP_PAGES", raising=False)
    whatsup.config.settings._config = None
    yield tmp_path / "config"
    whatsup.config.settings._config = None


@pytest.fixture
def slack_payload() -> bytes:
    """Slack payload with one active incident and two notes."""
    return SLACK_ACTIVE_PAYLOAD


@pytest.fixture
def statuspage_payload() -> bytes:
    """GitHub Statuspage.io payload reporting no issues."""
    return STATUSPAGE_OK_PAYLOAD


@pytest.fixture
def slack_updated_at() -> datetime:
    return datetime(2023, 9, 26, 11, 55, 36, tzinfo=PACIFIC)


@pytest.fixture
def slack_created_at() -> datetime:
    return datetime(2023, 9, 26, 11, 34, 10, tzinfo=PACIFIC)


@pytest.fixture
def transport_error() -> TransportError:
    """Error a transport raises for an HTTP 500 response."""
    return TransportError(
        "HTTP 500 from status.example.com",
        status_code=500,
        content=STATUSPAGE_OK_PAYLOAD,
    )


@pytest.fixture
def fake_client() -> type[FakeClient]:
    """The FakeClient class, for building transports inline."""
    return FakeClient


@pytest.fixture
def fake_factory() -> type[FakeTransportFactory]:
    """The FakeTransportFactory class, for injecting into StatusPageClient."""
    return FakeTransportFactory
