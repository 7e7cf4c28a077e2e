"""whatsup: Normalized status from third-party status pages."""

from __future__ import annotations

__version__ = "0.1.0"

from whatsup.client import StatusPageClient
from whatsup.errors.types import ErrorCode
from whatsup.errors.types import StatusError
from whatsup.status import Details
from whatsup.status import StatusDetails
from whatsup.status import StatusResult

__all__ = [
    "__version__",
    "Details",
    "ErrorCode",
    "StatusDetails",
    "StatusError",
    "StatusPageClient",
    "StatusResult",
]


def main() -> None:
    """Entry point for the whatsup CLI."""
    from whatsup.cli.app import run_app

    run_app()
