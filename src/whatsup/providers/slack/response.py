"""Slack status API records.

Decodes ``GET https://status.slack.com/api/v2.0.0/current``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import msgspec

SERVICE_NAME = "slack"
DISPLAY_NAME = "Slack"
PAGE_URL = "https://status.slack.com/"
API_URL = "https://status.slack.com/api/v2.0.0/current"

# RFC 3339 with a UTC offset, e.g. 2023-09-26T11:55:36-07:00. msgspec's
# RFC 3339 parser also accepts fractional seconds; an offset is required.
SlackTimestamp = Annotated[datetime, msgspec.Meta(tz=True)]


def _empty_if_null(struct: msgspec.Struct, *fields: str) -> None:
    # A JSON null array decodes the same as an absent one
    for field in fields:
        if getattr(struct, field) is None:
            msgspec.structs.force_setattr(struct, field, ())


class Note(msgspec.Struct, frozen=True):
    """An update posted to an incident."""

    date_created: SlackTimestamp
    body: str


class Incident(msgspec.Struct, frozen=True):
    """An active Slack incident or maintenance window."""

    id: int
    date_created: SlackTimestamp
    date_updated: SlackTimestamp
    title: str
    type: str  # "incident", "notice" or "outage"
    status: str
    url: str
    services: tuple[str, ...] | None = ()
    notes: tuple[Note, ...] | None = ()  # Newest first, as published

    def __post_init__(self) -> None:
        _empty_if_null(self, "services", "notes")


class SlackResponse(msgspec.Struct, frozen=True, kw_only=True):
    """Current Slack status.

    Only ``status`` and ``date_updated`` feed the uniform accessors and are
    required; ``date_created`` is None when Slack leaves it out.
    """

    status: str  # "ok" or "active"
    date_created: SlackTimestamp | None = None
    date_updated: SlackTimestamp
    active_incidents: tuple[Incident, ...] | None = ()

    def __post_init__(self) -> None:
        _empty_if_null(self, "active_incidents")

    @property
    def indicator(self) -> str:
        return self.status

    @property
    def name(self) -> str:
        return DISPLAY_NAME

    @property
    def updated_at(self) -> datetime:
        return self.date_updated

    @property
    def url(self) -> str:
        return PAGE_URL


_decoder = msgspec.json.Decoder(SlackResponse)


def decode_slack(data: bytes) -> SlackResponse:
    """Decode a Slack status payload.

    Raises:
        msgspec.DecodeError: If the payload is not valid JSON or does not
            match the Slack schema
    """
    return _decoder.decode(data)
