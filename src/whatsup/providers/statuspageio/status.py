"""Status fetching for Statuspage.io pages."""

from whatsup.core.fetch import read_status as _read_status
from whatsup.core.transport import BaseClient
from whatsup.providers.statuspageio.response import decode_statuspageio
from whatsup.status import StatusResult


async def read_status(
    client: BaseClient, service_name: str, path: str
) -> StatusResult:
    """Fetch and decode the Statuspage.io status document at ``path``."""
    return await _read_status(client, service_name, path, decode_statuspageio)
