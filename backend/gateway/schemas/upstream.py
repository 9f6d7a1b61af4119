"""Upstream Schemas — the subset of each upstream response the callers rely on.

Invariants:
    - Only fields the gateway reads are declared; everything else is tolerated
    - Pass-through payloads (npm package, quote, video) keep unknown fields (extra="allow")
    - Validated via core.reshape.parse_upstream — mismatches become
      UpstreamMalformedResponseError

Design Decisions:
    - One model per upstream endpoint, grouped by capability (ADR: explicit reshaping)
"""

from pydantic import BaseModel, ConfigDict, Field


# --- SearchCatalog: npm registry ----------------------------------------------

class NpmPackage(BaseModel):
    model_config = ConfigDict(extra="allow")
    name: str
    version: str | None = None


class NpmSearchObject(BaseModel):
    package: NpmPackage


class NpmSearchResponse(BaseModel):
    objects: list[NpmSearchObject]


# --- SearchCatalog: Unsplash --------------------------------------------------

class UnsplashUrls(BaseModel):
    small: str


class UnsplashPhoto(BaseModel):
    urls: UnsplashUrls


class UnsplashSearchResponse(BaseModel):
    results: list[UnsplashPhoto]


# --- SearchCatalog: Genius ----------------------------------------------------

class GeniusSong(BaseModel):
    url: str
    title: str | None = None


class GeniusHit(BaseModel):
    result: GeniusSong


class GeniusSearchBody(BaseModel):
    hits: list[GeniusHit]


class GeniusSearchResponse(BaseModel):
    response: GeniusSearchBody


# --- SearchCatalog / ResolveMediaFormat: yt-dlp -------------------------------

class YoutubeVideo(BaseModel):
    """One flat search entry as yt-dlp reports it."""
    model_config = ConfigDict(extra="ignore")
    id: str
    title: str | None = None
    url: str | None = None
    duration: float | None = None
    view_count: int | None = None
    channel: str | None = None

    def to_payload(self) -> dict:
        return {
            "videoId": self.id,
            "title": self.title,
            "url": self.url or f"https://www.youtube.com/watch?v={self.id}",
            "seconds": self.duration,
            "views": self.view_count,
            "author": self.channel,
        }


class YoutubeSearchResult(BaseModel):
    entries: list[YoutubeVideo]


class MediaFormat(BaseModel):
    url: str


class MediaInfo(BaseModel):
    """yt-dlp info dict after format selection.

    A single selected format exposes `url`; merged selections (video+audio)
    expose `requested_formats` instead.
    """
    url: str | None = None
    requested_formats: list[MediaFormat] = Field(default_factory=list)

    def download_url(self) -> str | None:
        if self.url:
            return self.url
        if self.requested_formats:
            return self.requested_formats[0].url
        return None


# --- FetchRandomResource ------------------------------------------------------

class Quote(BaseModel):
    model_config = ConfigDict(extra="allow")
    content: str
    author: str | None = None


class WaifuImage(BaseModel):
    url: str
