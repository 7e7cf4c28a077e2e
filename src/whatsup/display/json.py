"""JSON output utilities for whatsup."""

from __future__ import annotations

import sys

import msgspec

from whatsup.errors.types import StatusError
from whatsup.status import StatusResult

__all__ = [
    "DetailsData",
    "ErrorData",
    "ResultData",
    "from_result",
    "from_status_error",
    "output_json_pretty",
]


class DetailsData(msgspec.Struct, frozen=True):
    """The uniform status fields of a successful lookup."""

    indicator: str
    name: str
    updated_at: str
    url: str


class ErrorData(msgspec.Struct, frozen=True):
    """Error data for JSON output."""

    code: str
    message: str
    service: str | None = None
    cause: str | None = None
    details: dict | None = None
    timestamp: str | None = None


class ResultData(msgspec.Struct, frozen=True, omit_defaults=True):
    """A lookup result: either ``status`` or ``error`` is set."""

    service: str
    status: DetailsData | None = None
    error: ErrorData | None = None


def from_status_error(error: StatusError) -> ErrorData:
    """Create ErrorData from a StatusError."""
    return ErrorData(
        code=error.code.value,
        message=error.message,
        service=error.service,
        cause=str(error.cause) if error.cause is not None else None,
        details=error.details,
        timestamp=error.timestamp.isoformat(),
    )


def from_result(service: str, result: StatusResult) -> ResultData:
    """Create ResultData from a StatusResult."""
    if result.error is not None:
        return ResultData(service=service, error=from_status_error(result.error))

    details = result.details
    return ResultData(
        service=service,
        status=DetailsData(
            indicator=details.indicator,
            name=details.name,
            updated_at=details.updated_at.isoformat(),
            url=details.url,
        ),
    )


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout.

    Args:
        data: Any msgspec-serializable object
        indent: Number of spaces for indentation
    """
    json_bytes = msgspec.json.format(msgspec.json.encode(data), indent=indent)
    sys.stdout.write(json_bytes.decode())
    sys.stdout.write("\n")
