"""Client for fetching status pages."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from collections.abc import Mapping

import httpx

from whatsup.config.settings import Config
from whatsup.core.transport import BaseClient
from whatsup.core.transport import HTTPTransport
from whatsup.errors.classify import invalid_page_url
from whatsup.providers import slack
from whatsup.providers import statuspageio
from whatsup.providers.slack.status import read_status as read_slack_status
from whatsup.providers.statuspageio.status import (
    read_status as read_statuspageio_status,
)
from whatsup.status import StatusResult

logger = logging.getLogger(__name__)

TransportFactory = Callable[..., BaseClient]


class StatusPageClient:
    """Fetches status pages and returns them as uniform results.

    Every call builds its own transport, so one client can be shared by
    concurrent callers.
    """

    def __init__(
        self,
        config: Config | None = None,
        transport_factory: TransportFactory = HTTPTransport,
    ) -> None:
        """Initialize the client.

        Args:
            config: Settings to use, defaults to Config() (10 s timeout).
                The user config file and WHATSUP_* env vars are never read
                here; pass get_config() to apply them.
            transport_factory: Called as ``factory(host, service_name,
                use_tls=..., timeout=..., user_agent=...)`` for each request
        """
        self.config = config if config is not None else Config()
        self._transport_factory = transport_factory

    def _transport(self, host: str, service_name: str) -> BaseClient:
        return self._transport_factory(
            host,
            service_name,
            use_tls=True,
            timeout=self.config.fetch.timeout,
            user_agent=self.config.fetch.user_agent,
        )

    async def slack(self) -> StatusResult:
        """Fetch the current Slack status."""
        url = httpx.URL(slack.API_URL)
        client = self._transport(url.host, slack.SERVICE_NAME)
        result = await read_slack_status(client, slack.SERVICE_NAME, url.path)
        _log_result(slack.SERVICE_NAME, result)
        return result

    async def statuspage_io_service(
        self, service_name: str, page_url: str
    ) -> StatusResult:
        """Fetch a Statuspage.io-hosted status page.

        Args:
            service_name: Label for the page (e.g. "github")
            page_url: Status API URL such as
                ``https://www.githubstatus.com/api/v2/status.json``. A bare
                page URL is resolved to its status document. Requests are
                always made over TLS, so an ``http://`` URL is fetched with
                https on the same host and path.

        Returns:
            StatusResult; a malformed URL yields an INVALID_PAGE_URL error
            without making a request
        """
        try:
            url = httpx.URL(page_url)
        except (httpx.InvalidURL, TypeError) as e:
            result = StatusResult.fail(invalid_page_url(page_url, service_name, e))
            _log_result(service_name, result)
            return result

        if url.scheme not in ("http", "https") or not url.host:
            result = StatusResult.fail(invalid_page_url(page_url, service_name))
            _log_result(service_name, result)
            return result

        if url.scheme == "http":
            logger.debug("%s: requesting %s over https", service_name, page_url)

        path = url.path
        if path in ("", "/"):
            path = statuspageio.STATUS_PATH

        client = self._transport(url.netloc.decode("ascii"), service_name)
        result = await read_statuspageio_status(client, service_name, path)
        _log_result(service_name, result)
        return result

    async def statuspage_io_services(
        self, pages: Mapping[str, str]
    ) -> dict[str, StatusResult]:
        """Fetch several Statuspage.io pages concurrently.

        Args:
            pages: Mapping of service name to page URL

        Returns:
            Mapping of service name to its own independent result
        """
        names = list(pages)
        results = await asyncio.gather(
            *(self.statuspage_io_service(name, pages[name]) for name in names)
        )
        return dict(zip(names, results))


def _log_result(service_name: str, result: StatusResult) -> None:
    if result.error is not None:
        logger.info("%s: %s", service_name, result.error)
    else:
        logger.debug("%s: indicator=%s", service_name, result.details.indicator)
