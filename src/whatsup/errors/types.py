"""Error types and classifications."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

import msgspec


class ErrorCode(StrEnum):
    """Stable error codes returned by status lookups."""

    UNABLE_TO_MAKE_CLIENT_REQUEST = "UNABLE_TO_MAKE_CLIENT_REQUEST"
    UNABLE_TO_PARSE_CLIENT_RESPONSE = "UNABLE_TO_PARSE_CLIENT_RESPONSE"
    INVALID_PAGE_URL = "INVALID_PAGE_URL"


class StatusError(msgspec.Struct, frozen=True):
    """Structured error for a failed status lookup.

    The underlying exception is kept in ``cause`` for diagnostics. It is never
    re-raised by the library.
    """

    code: ErrorCode
    message: str
    service: str | None = None
    cause: BaseException | None = None
    details: dict | None = None
    timestamp: datetime = msgspec.field(
        default_factory=lambda: datetime.now().astimezone()
    )

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.code}: {self.message} ({self.cause})"
        return f"{self.code}: {self.message}"

    @property
    def is_request_error(self) -> bool:
        """True when no usable response was obtained from the provider."""
        return self.code in (
            ErrorCode.UNABLE_TO_MAKE_CLIENT_REQUEST,
            ErrorCode.INVALID_PAGE_URL,
        )
