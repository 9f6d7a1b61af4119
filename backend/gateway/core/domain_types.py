"""Domain Types — request, result and route types shared by every layer.

Invariants:
    - ProxyRequest is immutable (frozen dataclass, read-only params mapping)
    - ProxyResult is exactly one of Success | Failure
    - Success.payload is a dict for JSON content and bytes for BINARY content
    - All valid capability/content states encoded as Enums — no raw string matching

Design Decisions:
    - Frozen dataclasses over pydantic models: constructed per request on the
      hot path, no validation needed beyond the adapter
    - str Enums: serialize to JSON log fields without custom encoders
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from gateway.core.errors import ErrorKind


class Capability(str, Enum):
    """Upstream capability families. Each owns one concurrency gate."""
    TEXT_GENERATE = "text_generate"
    GENERATE_IMAGE = "generate_image"
    RESOLVE_MEDIA_FORMAT = "resolve_media_format"
    TRANSLATE = "translate"
    TRANSFORM_IMAGE = "transform_image"
    SEARCH_CATALOG = "search_catalog"
    FETCH_RANDOM_RESOURCE = "fetch_random_resource"


class ContentKind(str, Enum):
    """What a successful route writes to the client."""
    JSON = "json"
    BINARY = "binary"


@dataclass(frozen=True)
class ParamSpec:
    """Schema entry for one query parameter."""
    required: bool = False
    default: str | None = None


@dataclass(frozen=True)
class ProxyRequest:
    """Validated inbound call. params holds only schema-declared keys."""
    path: str
    params: Mapping[str, str]
    received_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True)
class Success:
    content_kind: ContentKind
    payload: Any
    media_type: str = "application/json"

    @classmethod
    def json(cls, payload: dict) -> "Success":
        return cls(ContentKind.JSON, payload)

    @classmethod
    def binary(cls, data: bytes, media_type: str) -> "Success":
        return cls(ContentKind.BINARY, data, media_type)


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    code: str = "UPSTREAM_FAILURE"


ProxyResult = Success | Failure
