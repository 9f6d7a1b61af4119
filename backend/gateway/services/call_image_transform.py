"""Image Transform Callers — enhance (resize + WebP) and background removal.

Invariants:
    - enhance: source fetched once, resized to settings.enhance_width with Lanczos,
      aspect ratio preserved, always encoded as WebP; sources taller than the
      WebP limit are fitted to 16383 px high instead
    - removebg: REMOVE_BG_KEY required, remove.bg PNG bytes relayed untouched
    - Undecodable source bytes → UpstreamMalformedResponseError
    - Pillow work runs in a worker thread
"""

import asyncio
import io
from typing import Mapping

from PIL import Image, UnidentifiedImageError

from gateway.core.domain_types import Success
from gateway.core.errors import UpstreamMalformedResponseError
from gateway.infrastructure import http_upstream
from gateway.infrastructure.upstream_clients import UpstreamClients

REMOVE_BG_SOURCE = "remove.bg"

# libwebp hard limit per side
WEBP_MAX_DIMENSION = 16383


def _target_size(src_width: int, src_height: int, width: int) -> tuple[int, int]:
    """Scale to `width`; very tall sources are capped at the WebP height limit."""
    height = max(1, round(src_height * width / src_width))
    if height > WEBP_MAX_DIMENSION:
        width = max(1, round(src_width * WEBP_MAX_DIMENSION / src_height))
        height = WEBP_MAX_DIMENSION
    return min(width, WEBP_MAX_DIMENSION), height


def resize_to_webp(data: bytes, width: int) -> bytes:
    """Resize image bytes to `width` (keeping aspect ratio) and encode as WebP."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise UpstreamMalformedResponseError(
            "Source URL did not return a decodable image", "image-source",
        ) from e
    width, height = _target_size(image.width, image.height, width)
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    resized = image.resize((width, height), Image.Resampling.LANCZOS)
    buffer = io.BytesIO()
    resized.save(buffer, format="WEBP")
    return buffer.getvalue()


async def enhance(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    data = await http_upstream.get_bytes(
        upstreams.http, params["url"], source="image-source",
    )
    out = await asyncio.to_thread(
        resize_to_webp, data, upstreams.settings.enhance_width,
    )
    return Success.binary(out, "image/webp")


async def remove_background(
    params: Mapping[str, str], upstreams: UpstreamClients,
) -> Success:
    key = upstreams.credentials.require("remove_bg_key", REMOVE_BG_SOURCE)
    response = await http_upstream.send(
        upstreams.http, "POST", upstreams.settings.remove_bg_url,
        source=REMOVE_BG_SOURCE,
        json={"image_url": params["url"]},
        headers={"X-Api-Key": key},
    )
    if not response.content:
        raise UpstreamMalformedResponseError(
            f"Empty image returned by {REMOVE_BG_SOURCE}", REMOVE_BG_SOURCE,
        )
    return Success.binary(response.content, "image/png")
