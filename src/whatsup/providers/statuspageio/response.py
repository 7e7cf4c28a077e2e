"""Statuspage.io status API records.

Decodes the ``/api/v2/status.json`` document served by any
Statuspage.io-hosted page.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import msgspec

STATUS_PATH = "/api/v2/status.json"

# Millisecond precision, e.g. 2023-09-26T07:51:43.965Z. Parsed by the same
# strict RFC 3339 rule as Slack timestamps: fractional seconds are optional
# and an offset or Z is required.
PageTimestamp = Annotated[datetime, msgspec.Meta(tz=True)]


class Page(msgspec.Struct, frozen=True, kw_only=True):
    """Page metadata.

    ``id`` and ``time_zone`` are informational and default to empty.
    """

    id: str = ""
    name: str
    url: str
    time_zone: str = ""
    updated_at: PageTimestamp


class Status(msgspec.Struct, frozen=True):
    """Rollup status of the page."""

    indicator: str  # none, minor, major, critical
    description: str


class StatuspageIoResponse(msgspec.Struct, frozen=True):
    """Statuspage.io status document."""

    page: Page
    status: Status

    @property
    def indicator(self) -> str:
        return self.status.indicator

    @property
    def name(self) -> str:
        return self.page.name

    @property
    def updated_at(self) -> datetime:
        return self.page.updated_at

    @property
    def url(self) -> str:
        return self.page.url


_decoder = msgspec.json.Decoder(StatuspageIoResponse)


def decode_statuspageio(data: bytes) -> StatuspageIoResponse:
    """Decode a Statuspage.io status payload.

    Raises:
        msgspec.DecodeError: If the payload is not valid JSON or does not
            match the Statuspage.io schema
    """
    return _decoder.decode(data)
