"""Fetch pipeline shared by every status provider."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import msgspec

from whatsup.core.transport import BaseClient
from whatsup.core.transport import TransportError
from whatsup.errors.classify import classify_exception
from whatsup.status import StatusDetails
from whatsup.status import StatusResult

Decoder = Callable[[bytes], StatusDetails]


async def read_status(
    client: BaseClient,
    service_name: str,
    path: str,
    decoder: Decoder,
) -> StatusResult:
    """Fetch a status document and decode it into a uniform result.

    The transport is called exactly once. A transport failure stops the
    pipeline before the body is looked at; a body that does not decode into
    the provider schema is reported as a parse failure.

    Args:
        client: Transport bound to the provider host
        service_name: Label for errors, not used to build the request
        path: Request path on the provider host
        decoder: Provider decoder turning raw bytes into a record

    Returns:
        StatusResult with either details or an error
    """
    try:
        response = await client.make_request("GET", path)
    except (TransportError, httpx.HTTPError) as e:
        return StatusResult.fail(classify_exception(e, service_name))

    try:
        details = decoder(response.content)
    except msgspec.DecodeError as e:
        return StatusResult.fail(classify_exception(e, service_name))

    return StatusResult.ok(details)
