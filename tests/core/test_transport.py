"""Tests for core/transport.py (httpx transport)."""

from __future__ import annotations

import httpx
import pytest

from whatsup.core.transport import BaseClient
from whatsup.core.transport import DEFAULT_TIMEOUT
from whatsup.core.transport import HTTPTransport
from whatsup.core.transport import TransportError


def mock_transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


class TestHTTPTransport:
    """Tests for HTTPTransport."""

    def test_default_timeout_is_ten_seconds(self):
        """Default timeout is 10 seconds."""
        assert DEFAULT_TIMEOUT == 10.0
        assert HTTPTransport("status.slack.com", "slack").timeout == 10.0

    def test_base_url_uses_tls(self):
        """https is used when TLS is enabled."""
        assert HTTPTransport("status.slack.com", "slack").base_url == (
            "https://status.slack.com"
        )

    def test_base_url_without_tls(self):
        """http is used when TLS is disabled."""
        transport = HTTPTransport("localhost:8080", "local", use_tls=False)
        assert transport.base_url == "http://localhost:8080"

    def test_satisfies_base_client(self):
        """HTTPTransport implements the BaseClient protocol."""
        assert isinstance(HTTPTransport("status.slack.com", "slack"), BaseClient)

    @pytest.mark.asyncio
    async def test_successful_get(self):
        """Returns status code and body for a 2xx response."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b'{"ok": true}')

        transport = HTTPTransport(
            "status.example.com",
            "example",
            user_agent="whatsup/test",
            transport=mock_transport(handler),
        )

        response = await transport.make_request("GET", "/api/v2/status.json")

        assert response.status_code == 200
        assert response.content == b'{"ok": true}'
        assert str(seen[0].url) == "https://status.example.com/api/v2/status.json"
        assert seen[0].method == "GET"
        assert seen[0].headers["User-Agent"] == "whatsup/test"
        assert seen[0].headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_passes_query_params(self):
        """options["params"] become query parameters."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"{}")

        transport = HTTPTransport(
            "status.example.com", "example", transport=mock_transport(handler)
        )

        await transport.make_request("GET", "/x", options={"params": {"a": "1"}})

        assert seen[0].url.params["a"] == "1"

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        """Non-2xx responses raise TransportError with status and body."""
        transport = HTTPTransport(
            "status.example.com",
            "example",
            transport=mock_transport(lambda request: httpx.Response(503, content=b"down")),
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.make_request("GET", "/x")

        assert exc_info.value.status_code == 503
        assert exc_info.value.content == b"down"

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        """httpx network errors are wrapped in TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = HTTPTransport(
            "status.example.com", "example", transport=mock_transport(handler)
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.make_request("GET", "/x")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        """Timeouts are wrapped in TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        transport = HTTPTransport(
            "status.example.com", "example", transport=mock_transport(handler)
        )

        with pytest.raises(TransportError):
            await transport.make_request("GET", "/x")
