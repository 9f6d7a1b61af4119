"""Hugging Face Callers — TextGenerate and GenerateImage capabilities.

Invariants:
    - HF_TOKEN required at call time (MissingCredentialError otherwise)
    - Exactly one inference call per request, no retry
    - Text routes return {"response": <generated text>}
    - Image routes return PNG bytes regardless of what the model emitted

Design Decisions:
    - Model id bound per route via functools.partial in the route table
    - PNG encoding runs in a worker thread (Pillow is CPU-bound)
"""

import asyncio
import io
from typing import Mapping

from PIL import Image

from gateway.core.domain_types import Success
from gateway.core.errors import UpstreamMalformedResponseError
from gateway.infrastructure.upstream_clients import UpstreamClients

SOURCE = "huggingface"


def build_prompt(params: Mapping[str, str]) -> str:
    """Join the optional instruction prefix with the user query."""
    prefix = params.get("prompt", "")
    query = params["q"]
    return f"{prefix} {query}" if prefix else query


async def generate_text(
    params: Mapping[str, str], upstreams: UpstreamClients, *, model: str,
) -> Success:
    upstreams.credentials.require("hf_token", SOURCE)
    settings = upstreams.settings
    output = await upstreams.inference.text_generation(
        build_prompt(params),
        model=model,
        max_new_tokens=settings.text_max_new_tokens,
        temperature=settings.text_temperature,
    )
    if not isinstance(output, str):
        raise UpstreamMalformedResponseError(
            f"Unexpected response from {SOURCE}: generated text is not a string",
            SOURCE,
        )
    return Success.json({"response": output})


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


async def generate_image(
    params: Mapping[str, str], upstreams: UpstreamClients, *, model: str,
) -> Success:
    upstreams.credentials.require("hf_token", SOURCE)
    image = await upstreams.inference.text_to_image(params["q"], model=model)
    if not isinstance(image, Image.Image):
        raise UpstreamMalformedResponseError(
            f"Unexpected response from {SOURCE}: no image returned", SOURCE,
        )
    data = await asyncio.to_thread(encode_png, image)
    return Success.binary(data, "image/png")
