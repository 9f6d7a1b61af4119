"""HTTP Upstream Helpers — one outbound request, errors mapped to the gateway hierarchy.

Invariants:
    - Exactly one request per call, no retry
    - Non-2xx status → UpstreamFailureError("Request failed with status code N")
    - Transport errors (connect, timeout, protocol) → UpstreamFailureError(str(exc))
    - Non-JSON body where JSON is expected → UpstreamMalformedResponseError
"""

import logging
from typing import Any

import httpx

from gateway.core.errors import UpstreamFailureError, UpstreamMalformedResponseError

logger = logging.getLogger(__name__)


async def send(
    client: httpx.AsyncClient, method: str, url: str, *, source: str, **kwargs: Any,
) -> httpx.Response:
    """Send one request and raise on transport failure or non-2xx status."""
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        logger.warning(f"Transport error calling {source}: {e!r}")
        raise UpstreamFailureError(str(e) or e.__class__.__name__, source) from e
    if not response.is_success:
        raise UpstreamFailureError(
            f"Request failed with status code {response.status_code}", source,
        )
    return response


async def get_json(
    client: httpx.AsyncClient, url: str, *, source: str, **kwargs: Any,
) -> Any:
    response = await send(client, "GET", url, source=source, **kwargs)
    try:
        return response.json()
    except ValueError as e:
        raise UpstreamMalformedResponseError(
            f"Unexpected response from {source}: body is not JSON", source,
        ) from e


async def get_bytes(
    client: httpx.AsyncClient, url: str, *, source: str, **kwargs: Any,
) -> bytes:
    response = await send(client, "GET", url, source=source, **kwargs)
    return response.content


async def get_text(
    client: httpx.AsyncClient, url: str, *, source: str, **kwargs: Any,
) -> str:
    response = await send(client, "GET", url, source=source, **kwargs)
    return response.text
