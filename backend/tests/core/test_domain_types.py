"""Domain Types — verifies request immutability and result constructors.

Tests:
    - ProxyRequest params are read-only and detached from the caller's dict
    - Success.json / Success.binary set content kind and media type
    - Enums serialize to plain strings
"""

from datetime import timezone
from types import MappingProxyType

import pytest

from gateway.core.domain_types import (
    Capability, ContentKind, Failure, ProxyRequest, Success,
)
from gateway.core.errors import ErrorKind


def test_proxy_request_params_are_read_only():
    raw = {"q": "cats"}
    request = ProxyRequest("/api/pinterest", raw)
    raw["q"] = "dogs"

    assert isinstance(request.params, MappingProxyType)
    assert request.params["q"] == "cats"
    with pytest.raises(TypeError):
        request.params["q"] = "birds"


def test_proxy_request_timestamp_is_utc():
    request = ProxyRequest("/api/waifu", {})
    assert request.received_at.tzinfo is timezone.utc


def test_success_json_defaults():
    result = Success.json({"url": "x"})
    assert result.content_kind is ContentKind.JSON
    assert result.media_type == "application/json"


def test_success_binary_keeps_media_type():
    result = Success.binary(b"\x89PNG", "image/png")
    assert result.content_kind is ContentKind.BINARY
    assert result.payload == b"\x89PNG"
    assert result.media_type == "image/png"


def test_failure_default_code():
    assert Failure(ErrorKind.UPSTREAM_FAILURE, "boom").code == "UPSTREAM_FAILURE"


def test_enums_serialize_to_string():
    assert Capability.TRANSLATE.value == "translate"
    assert ContentKind.BINARY.value == "binary"
    assert len(Capability) == 7
