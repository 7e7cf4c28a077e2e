"""Uniform status contract shared by every provider.

Providers decode their own response schema into immutable records. Each
record exposes the same four read-only properties so callers never need to
know which status page vendor backs the data.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from typing import Protocol
from typing import runtime_checkable

import msgspec

from whatsup.errors.types import StatusError
from whatsup.providers.slack.response import SlackResponse
from whatsup.providers.statuspageio.response import StatuspageIoResponse


@runtime_checkable
class Details(Protocol):
    """Read-only view over a decoded status response."""

    @property
    def indicator(self) -> str:
        """Provider-defined health token, untranslated."""
        ...

    @property
    def name(self) -> str:
        """Human-readable service or page name."""
        ...

    @property
    def updated_at(self) -> datetime:
        """Timezone-aware time the status was last updated."""
        ...

    @property
    def url(self) -> str:
        """Human-facing status page URL."""
        ...


# Closed set of records that satisfy Details
StatusDetails = SlackResponse | StatuspageIoResponse


class StatusResult(msgspec.Struct, frozen=True):
    """Outcome of a status lookup.

    Exactly one of ``details`` and ``error`` is set. Unpacks as a pair::

        details, error = await client.slack()
    """

    details: StatusDetails | None = None
    error: StatusError | None = None

    @classmethod
    def ok(cls, details: StatusDetails) -> StatusResult:
        return cls(details=details)

    @classmethod
    def fail(cls, error: StatusError) -> StatusResult:
        return cls(error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[StatusDetails | StatusError | None]:
        return iter((self.details, self.error))
