"""Translate Caller — one translation per request, target language from `to`."""

from typing import Mapping

from gateway.core.domain_types import Success
from gateway.infrastructure.upstream_clients import UpstreamClients


async def translate(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    translated = await upstreams.translator.translate(
        params["text"], params.get("to", "en"),
    )
    return Success.json({"translated": translated})
