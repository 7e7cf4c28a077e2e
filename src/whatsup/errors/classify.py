"""Exception classification for status lookups."""

from __future__ import annotations

import msgspec

from whatsup.core.transport import TransportError
from whatsup.errors.types import ErrorCode
from whatsup.errors.types import StatusError


def unable_to_make_client_request(
    e: BaseException,
    service: str | None = None,
) -> StatusError:
    """Error for a transport call that did not produce a usable response."""
    details = None
    if isinstance(e, TransportError) and e.status_code is not None:
        details = {"status_code": e.status_code}

    return StatusError(
        code=ErrorCode.UNABLE_TO_MAKE_CLIENT_REQUEST,
        message="Unable to make client request",
        service=service,
        cause=e,
        details=details,
    )


def unable_to_parse_client_response(
    e: BaseException,
    service: str | None = None,
) -> StatusError:
    """Error for a response body that does not match the provider schema."""
    return StatusError(
        code=ErrorCode.UNABLE_TO_PARSE_CLIENT_RESPONSE,
        message="Unable to parse client response",
        service=service,
        cause=e,
        details={"error": str(e)},
    )


def invalid_page_url(
    page_url: str,
    service: str | None = None,
    cause: BaseException | None = None,
) -> StatusError:
    """Error for a status page URL that cannot be turned into a request."""
    return StatusError(
        code=ErrorCode.INVALID_PAGE_URL,
        message=f"Invalid status page URL: {page_url!r}",
        service=service,
        cause=cause,
        details={"page_url": page_url},
    )


def classify_exception(
    e: BaseException,
    service: str | None = None,
) -> StatusError:
    """Classify a pipeline exception into a structured error.

    Decode failures map to UNABLE_TO_PARSE_CLIENT_RESPONSE. Everything else
    happened before a body could be used and maps to
    UNABLE_TO_MAKE_CLIENT_REQUEST.
    """
    if isinstance(e, msgspec.DecodeError):
        return unable_to_parse_client_response(e, service)

    return unable_to_make_client_request(e, service)
