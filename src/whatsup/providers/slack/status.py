"""Status fetching for Slack."""

from whatsup.core.fetch import read_status as _read_status
from whatsup.core.transport import BaseClient
from whatsup.providers.slack.response import decode_slack
from whatsup.status import StatusResult


async def read_status(
    client: BaseClient, service_name: str, path: str
) -> StatusResult:
    """Fetch and decode the Slack status document at ``path``."""
    return await _read_status(client, service_name, path, decode_slack)
