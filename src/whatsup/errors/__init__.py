"""Error handling for whatsup."""

from whatsup.errors.classify import classify_exception
from whatsup.errors.classify import invalid_page_url
from whatsup.errors.classify import unable_to_make_client_request
from whatsup.errors.classify import unable_to_parse_client_response
from whatsup.errors.types import ErrorCode
from whatsup.errors.types import StatusError

__all__ = [
    # Core types
    "ErrorCode",
    "StatusError",
    # Classification functions
    "classify_exception",
    "invalid_page_url",
    "unable_to_make_client_request",
    "unable_to_parse_client_response",
]
