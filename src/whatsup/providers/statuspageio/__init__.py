"""Statuspage.io status provider."""

from whatsup.providers.statuspageio.response import STATUS_PATH
from whatsup.providers.statuspageio.response import Page
from whatsup.providers.statuspageio.response import Status
from whatsup.providers.statuspageio.response import StatuspageIoResponse
from whatsup.providers.statuspageio.response import decode_statuspageio

__all__ = [
    "STATUS_PATH",
    "Page",
    "Status",
    "StatuspageIoResponse",
    "decode_statuspageio",
]
