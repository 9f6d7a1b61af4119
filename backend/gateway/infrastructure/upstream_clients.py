"""Upstream Clients — process-wide, read-only-after-init handles for every upstream.

Invariants:
    - Built once in the FastAPI lifespan, stored on app.state, closed on shutdown
    - Injected into callers explicitly (FastAPI dependency) — never looked up globally
    - Credentials are read once from Settings and never mutated
    - A missing credential fails only the calls that need it (require())

Design Decisions:
    - Single shared httpx.AsyncClient: connection pooling across all HTTP upstreams
    - Translator/MediaResolver behind small classes: tests substitute stubs
      without patching library internals
"""

import logging
from dataclasses import dataclass

import httpx
from huggingface_hub import AsyncInferenceClient

from gateway.config import Settings
from gateway.core.errors import MissingCredentialError
from gateway.infrastructure.concurrency import CapabilityGates
from gateway.infrastructure.media_resolver import MediaResolver
from gateway.infrastructure.translator import Translator

logger = logging.getLogger(__name__)

USER_AGENT = "rebix-gateway/1.0"


@dataclass(frozen=True)
class Credentials:
    """Upstream tokens keyed by the environment variable that supplies them."""
    hf_token: str | None = None
    genius_token: str | None = None
    remove_bg_key: str | None = None
    unsplash_access_key: str | None = None

    def require(self, field_name: str, source: str | None = None) -> str:
        value = getattr(self, field_name)
        if not value:
            raise MissingCredentialError(field_name.upper(), source)
        return value


@dataclass
class UpstreamClients:
    http: httpx.AsyncClient
    inference: AsyncInferenceClient
    translator: Translator
    media: MediaResolver
    credentials: Credentials
    gates: CapabilityGates
    settings: Settings

    async def aclose(self) -> None:
        await self.http.aclose()
        await self.inference.close()


def build_upstream_clients(settings: Settings) -> UpstreamClients:
    """Construct every upstream handle from settings."""
    credentials = Credentials(
        hf_token=settings.hf_token,
        genius_token=settings.genius_token,
        remove_bg_key=settings.remove_bg_key,
        unsplash_access_key=settings.unsplash_access_key,
    )
    missing = [
        name for name in ("hf_token", "genius_token", "remove_bg_key", "unsplash_access_key")
        if not getattr(credentials, name)
    ]
    if missing:
        logger.info(
            f"Credentials not configured, dependent routes will fail: {', '.join(missing)}",
        )
    return UpstreamClients(
        http=httpx.AsyncClient(
            timeout=settings.upstream_timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        ),
        inference=AsyncInferenceClient(
            token=settings.hf_token, timeout=settings.upstream_timeout_seconds,
        ),
        translator=Translator(),
        media=MediaResolver(),
        credentials=credentials,
        gates=CapabilityGates(settings.upstream_concurrency_limit),
        settings=settings,
    )
