"""HTTP transport used to reach status pages."""

from __future__ import annotations

import logging
from typing import Protocol
from typing import runtime_checkable

import httpx
import msgspec

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class TransportResponse(msgspec.Struct, frozen=True):
    """Raw response returned by a transport."""

    status_code: int
    content: bytes


class TransportError(Exception):
    """Raised when a transport could not produce a successful response.

    ``status_code`` and ``content`` are set when the server answered with a
    non-success status.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        content: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.content = content


@runtime_checkable
class BaseClient(Protocol):
    """Capability that performs a single request against one host."""

    async def make_request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        options: dict | None = None,
    ) -> TransportResponse:
        """Perform a request and return the raw response.

        Raises:
            TransportError: On network failure or non-success status
        """
        ...


class HTTPTransport:
    """httpx-backed transport bound to a single host.

    A fresh ``httpx.AsyncClient`` is opened for every request, so instances
    carry no connection state between calls.
    """

    def __init__(
        self,
        host: str,
        service_name: str,
        use_tls: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            host: Host name, optionally with a port (``status.slack.com``)
            service_name: Label used in logs and errors
            use_tls: Use https when True, http otherwise
            timeout: Overall request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (used by tests)
        """
        self.host = host
        self.service_name = service_name
        self.use_tls = use_tls
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    @property
    def base_url(self) -> str:
        scheme = "https" if self.use_tls else "http"
        return f"{scheme}://{self.host}"

    def _client(self) -> httpx.AsyncClient:
        headers = {"Accept": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers=headers,
            follow_redirects=True,
            transport=self._transport,
        )

    async def make_request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        options: dict | None = None,
    ) -> TransportResponse:
        """Perform a request against the bound host.

        ``options`` accepts ``params`` (query parameters).

        Raises:
            TransportError: On network failure or non-success status
        """
        params = (options or {}).get("params")
        logger.debug(
            "%s: %s %s%s", self.service_name, method, self.base_url, path
        )

        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    path,
                    headers=headers,
                    content=body,
                    params=params,
                )
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.host} failed: {e}") from e

        logger.debug("%s: HTTP %d", self.service_name, response.status_code)

        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {self.host}",
                status_code=response.status_code,
                content=response.content,
            )

        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
        )
