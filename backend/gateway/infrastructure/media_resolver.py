"""Media Resolver — yt-dlp metadata extraction without downloading.

Invariants:
    - Never downloads media (download=False on every extract_info call)
    - Blocking extraction runs in a worker thread
    - yt-dlp errors propagate unchanged (DownloadError text surfaced verbatim)
    - Quality names follow ytdl conventions and map to yt-dlp format selectors

Design Decisions:
    - One YoutubeDL instance per call: the object is not safe to share across threads
    - Flat extraction for search: entries carry id/title/duration only, no per-video fetch
"""

import asyncio
from typing import Any

from yt_dlp import YoutubeDL

_QUALITY_TO_FORMAT: dict[str, str] = {
    "highest": "best",
    "lowest": "worst",
    "highestaudio": "bestaudio",
    "lowestaudio": "worstaudio",
    "highestvideo": "bestvideo",
    "lowestvideo": "worstvideo",
}

_BASE_OPTIONS: dict[str, Any] = {
    "quiet": True,
    "no_warnings": True,
    "noplaylist": True,
    "skip_download": True,
}


def format_selector(quality: str) -> str:
    """Map a ytdl quality name to a yt-dlp format selector (passthrough otherwise)."""
    return _QUALITY_TO_FORMAT.get(quality, quality)


class MediaResolver:
    """Resolves media URLs and searches via yt-dlp."""

    async def extract_info(self, url: str, quality: str) -> dict:
        """Return the info dict for url with the requested format selected."""
        options = {**_BASE_OPTIONS, "format": format_selector(quality)}
        return await asyncio.to_thread(self._extract, url, options)

    async def search(self, query: str, limit: int) -> dict:
        """Return a flat playlist-like dict of the first `limit` YouTube results."""
        options = {**_BASE_OPTIONS, "extract_flat": "in_playlist"}
        return await asyncio.to_thread(
            self._extract, f"ytsearch{limit}:{query}", options,
        )

    def _extract(self, target: str, options: dict) -> dict:
        with YoutubeDL(options) as ydl:
            info = ydl.extract_info(target, download=False)
            return ydl.sanitize_info(info)
