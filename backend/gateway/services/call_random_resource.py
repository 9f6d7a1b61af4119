"""Random Resource Callers — quote and anime image endpoints, no parameters."""

from typing import Mapping

from gateway.core.domain_types import Success
from gateway.core.reshape import parse_upstream
from gateway.infrastructure import http_upstream
from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.schemas.upstream import Quote, WaifuImage

QUOTES_SOURCE = "quotable"
WAIFU_SOURCE = "waifu.pics"


async def random_quote(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    data = await http_upstream.get_json(
        upstreams.http, upstreams.settings.quotes_url, source=QUOTES_SOURCE,
    )
    quote = parse_upstream(Quote, data, QUOTES_SOURCE)
    return Success.json({"quote": quote.model_dump(exclude_none=True)})


async def random_waifu(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    data = await http_upstream.get_json(
        upstreams.http, upstreams.settings.waifu_url, source=WAIFU_SOURCE,
    )
    return Success.json({"url": parse_upstream(WaifuImage, data, WAIFU_SOURCE).url})
