"""Catalog Search Callers — npm registry, Unsplash photos, Genius lyrics.

Invariants:
    - npm: {"packages": [objects[].package]} in registry order
    - Unsplash: UNSPLASH_ACCESS_KEY required; {"images": [results[].urls.small]}
    - Genius: GENIUS_TOKEN required; first search hit's page scraped for lyrics
    - No search hit / no lyrics containers → UpstreamMalformedResponseError

Design Decisions:
    - Lyrics scraped from the song page with BeautifulSoup: the Genius API
      exposes metadata only, never lyric text
    - Genius performs two requests (search + page) but both belong to one
      logical upstream lookup and share one concurrency slot
"""

from typing import Mapping

from bs4 import BeautifulSoup

from gateway.core.domain_types import Success
from gateway.core.errors import UpstreamMalformedResponseError
from gateway.core.reshape import first_or_malformed, parse_upstream
from gateway.infrastructure import http_upstream
from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.schemas.upstream import (
    GeniusSearchResponse, NpmSearchResponse, UnsplashSearchResponse,
)

NPM_SOURCE = "npm-registry"
UNSPLASH_SOURCE = "unsplash"
GENIUS_SOURCE = "genius"

_LYRICS_SELECTOR = 'div[data-lyrics-container="true"]'


async def search_npm(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    data = await http_upstream.get_json(
        upstreams.http,
        f"{upstreams.settings.npm_registry_url}/-/v1/search",
        source=NPM_SOURCE,
        params={"text": params["q"]},
    )
    result = parse_upstream(NpmSearchResponse, data, NPM_SOURCE)
    return Success.json({
        "packages": [o.package.model_dump(exclude_none=True) for o in result.objects],
    })


async def search_images(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    key = upstreams.credentials.require("unsplash_access_key", UNSPLASH_SOURCE)
    data = await http_upstream.get_json(
        upstreams.http,
        f"{upstreams.settings.unsplash_api_url}/search/photos",
        source=UNSPLASH_SOURCE,
        params={"query": params["q"], "client_id": key},
    )
    result = parse_upstream(UnsplashSearchResponse, data, UNSPLASH_SOURCE)
    return Success.json({"images": [photo.urls.small for photo in result.results]})


def extract_lyrics(html: str) -> str:
    """Pull lyric text out of a Genius song page."""
    soup = BeautifulSoup(html, "html.parser")
    blocks = soup.select(_LYRICS_SELECTOR)
    if not blocks:
        raise UpstreamMalformedResponseError(
            f"No lyrics found on {GENIUS_SOURCE} song page", GENIUS_SOURCE,
        )
    for br in soup.find_all("br"):
        br.replace_with("\n")
    return "\n".join(block.get_text() for block in blocks).strip()


async def search_lyrics(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    token = upstreams.credentials.require("genius_token", GENIUS_SOURCE)
    data = await http_upstream.get_json(
        upstreams.http,
        f"{upstreams.settings.genius_api_url}/search",
        source=GENIUS_SOURCE,
        params={"q": params["q"]},
        headers={"Authorization": f"Bearer {token}"},
    )
    result = parse_upstream(GeniusSearchResponse, data, GENIUS_SOURCE)
    hit = first_or_malformed(result.response.hits, GENIUS_SOURCE, "songs")
    page = await http_upstream.get_text(
        upstreams.http, hit.result.url, source=GENIUS_SOURCE,
    )
    return Success.json({"lyrics": extract_lyrics(page)})
