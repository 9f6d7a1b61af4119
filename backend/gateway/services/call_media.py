"""Media Callers — ResolveMediaFormat and YouTube search via yt-dlp.

Invariants:
    - Resolution never downloads; it returns the direct media URL only
    - Search returns at most settings.search_result_limit videos
    - Missing URL in the selected format → UpstreamMalformedResponseError
"""

from typing import Mapping

from gateway.core.domain_types import Success
from gateway.core.errors import UpstreamMalformedResponseError
from gateway.core.reshape import parse_upstream
from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.schemas.upstream import MediaInfo, YoutubeSearchResult

SOURCE = "yt-dlp"


async def resolve_media_format(
    params: Mapping[str, str], upstreams: UpstreamClients,
    *, quality: str | None = None,
) -> Success:
    """Resolve a direct download URL. quality overrides the `format` param."""
    selected = quality or params.get("format", "highest")
    info = await upstreams.media.extract_info(params["url"], selected)
    download_url = parse_upstream(MediaInfo, info, SOURCE).download_url()
    if not download_url:
        raise UpstreamMalformedResponseError(
            f"No downloadable format '{selected}' returned by {SOURCE}", SOURCE,
        )
    return Success.json({"downloadUrl": download_url})


async def search_videos(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    limit = upstreams.settings.search_result_limit
    raw = await upstreams.media.search(params["q"], limit)
    result = parse_upstream(YoutubeSearchResult, raw, SOURCE)
    return Success.json({
        "videos": [video.to_payload() for video in result.entries[:limit]],
    })
