"""Route Table — explicit mapping from exact path to (schema, capability, kind, caller).

Invariants:
    - Every path→caller mapping is visible here — no decorators, no auto-discovery
    - Paths are exact strings; nested literal paths are plain keys
    - Lookup is a dict get: unknown path → RouteNotFoundError
    - Model ids / fixed qualities are bound with functools.partial, never looked up at call time

Design Decisions:
    - Explicit dict over per-route handlers: the per-route try/catch boilerplate
      collapses into one pipeline (services/proxy_pipeline.py)
    - RouteTable is a plain Mapping so tests can substitute their own
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Awaitable, Callable, Mapping

from gateway.core.domain_types import Capability, ContentKind, ParamSpec, Success
from gateway.core.errors import RouteNotFoundError
from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.services import (
    call_catalog_search,
    call_image_transform,
    call_media,
    call_random_resource,
    call_text_generation,
    call_translate,
)

UpstreamCaller = Callable[[Mapping[str, str], UpstreamClients], Awaitable[Success]]


@dataclass(frozen=True)
class RouteSpec:
    path: str
    capability: Capability
    content_kind: ContentKind
    caller: UpstreamCaller
    params: Mapping[str, ParamSpec] = field(default_factory=dict)


RouteTable = Mapping[str, RouteSpec]

_Q = {"q": ParamSpec(required=True)}
_URL = {"url": ParamSpec(required=True)}


def _route(
    path: str,
    capability: Capability,
    caller: UpstreamCaller,
    params: Mapping[str, ParamSpec] | None = None,
    content_kind: ContentKind = ContentKind.JSON,
) -> RouteSpec:
    return RouteSpec(path, capability, content_kind, caller, params or {})


_ROUTES = [
    # AI
    _route(
        "/api/gptlogic", Capability.TEXT_GENERATE,
        partial(call_text_generation.generate_text, model="google/gemma-2b-it"),
        {"q": ParamSpec(required=True), "prompt": ParamSpec(default="")},
    ),
    _route(
        "/api/gpt-5", Capability.TEXT_GENERATE,
        partial(call_text_generation.generate_text, model="Qwen/Qwen2.5-72B-Instruct"),
        _Q,
    ),
    _route(
        "/api/qwen", Capability.TEXT_GENERATE,
        partial(call_text_generation.generate_text, model="Qwen/Qwen2.5-7B-Instruct"),
        _Q,
    ),
    _route(
        "/api/txt2img", Capability.GENERATE_IMAGE,
        partial(call_text_generation.generate_image, model="runwayml/stable-diffusion-v1-5"),
        _Q, ContentKind.BINARY,
    ),

    # Downloader
    _route(
        "/api/ytdl", Capability.RESOLVE_MEDIA_FORMAT,
        call_media.resolve_media_format,
        {"url": ParamSpec(required=True), "format": ParamSpec(default="highest")},
    ),
    _route(
        "/api/yta", Capability.RESOLVE_MEDIA_FORMAT,
        partial(call_media.resolve_media_format, quality="highestaudio"),
        _URL,
    ),

    # Search
    _route("/api/pinterest", Capability.SEARCH_CATALOG, call_catalog_search.search_images, _Q),
    _route("/api/npmsearch", Capability.SEARCH_CATALOG, call_catalog_search.search_npm, _Q),
    _route("/api/lyrics", Capability.SEARCH_CATALOG, call_catalog_search.search_lyrics, _Q),
    _route("/api/ytplay", Capability.SEARCH_CATALOG, call_media.search_videos, _Q),

    # Tools
    _route(
        "/api/translate", Capability.TRANSLATE, call_translate.translate,
        {"text": ParamSpec(required=True), "to": ParamSpec(default="en")},
    ),
    _route(
        "/api/enhance", Capability.TRANSFORM_IMAGE, call_image_transform.enhance,
        _URL, ContentKind.BINARY,
    ),
    _route(
        "/api/removebg", Capability.TRANSFORM_IMAGE,
        call_image_transform.remove_background, _URL, ContentKind.BINARY,
    ),

    # Random
    _route(
        "/api/randomquotes", Capability.FETCH_RANDOM_RESOURCE,
        call_random_resource.random_quote,
    ),
    _route("/api/waifu", Capability.FETCH_RANDOM_RESOURCE, call_random_resource.random_waifu),
]

ROUTES: RouteTable = {route.path: route for route in _ROUTES}


def resolve_route(table: RouteTable, path: str) -> RouteSpec:
    """Exact-path lookup. Raises RouteNotFoundError for unknown paths."""
    route = table.get(path)
    if route is None:
        raise RouteNotFoundError(path)
    return route
