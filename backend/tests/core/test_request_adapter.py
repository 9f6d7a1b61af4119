"""Request Adapter tests — schema validation of raw query parameters.

Tests cover:
    - Required parameter present → passed through as string
    - First missing required key (declaration order) reported
    - Empty / whitespace-only required value counts as missing
    - Optional default applied only when absent
    - Optional without default omitted
    - Unknown extra keys dropped
    - ProxyRequest params are read-only

Design Decisions:
    - Pure core function: no mocks, no fixtures, just data in → data out
"""

import pytest

from gateway.core.domain_types import ParamSpec
from gateway.core.errors import ErrorKind, MissingParameterError
from gateway.core.request_adapter import build_proxy_request

_SCHEMA = {
    "text": ParamSpec(required=True),
    "to": ParamSpec(default="en"),
}


def test_required_parameter_passed_through():
    req = build_proxy_request("/api/translate", _SCHEMA, {"text": "hola", "to": "fr"})
    assert req.path == "/api/translate"
    assert dict(req.params) == {"text": "hola", "to": "fr"}


def test_missing_required_raises_with_name():
    with pytest.raises(MissingParameterError) as exc:
        build_proxy_request("/api/translate", _SCHEMA, {"to": "fr"})
    assert exc.value.name == "text"
    assert exc.value.kind == ErrorKind.MISSING_PARAMETER
    assert "text" in exc.value.message


def test_first_missing_required_in_declaration_order():
    schema = {"a": ParamSpec(required=True), "b": ParamSpec(required=True)}
    with pytest.raises(MissingParameterError) as exc:
        build_proxy_request("/x", schema, {})
    assert exc.value.name == "a"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_required_counts_as_missing(value):
    with pytest.raises(MissingParameterError):
        build_proxy_request("/api/translate", _SCHEMA, {"text": value})


def test_default_applied_when_absent():
    req = build_proxy_request("/api/translate", _SCHEMA, {"text": "hola"})
    assert req.params["to"] == "en"


def test_explicit_empty_optional_kept_over_default():
    req = build_proxy_request("/api/translate", _SCHEMA, {"text": "hola", "to": ""})
    assert req.params["to"] == ""


def test_optional_without_default_omitted():
    schema = {"q": ParamSpec(required=True), "page": ParamSpec()}
    req = build_proxy_request("/x", schema, {"q": "cats"})
    assert "page" not in req.params


def test_unknown_extra_keys_dropped():
    req = build_proxy_request(
        "/api/translate", _SCHEMA, {"text": "hola", "debug": "1"},
    )
    assert "debug" not in req.params


def test_params_are_read_only():
    req = build_proxy_request("/api/translate", _SCHEMA, {"text": "hola"})
    with pytest.raises(TypeError):
        req.params["text"] = "changed"


def test_empty_schema_accepts_anything():
    req = build_proxy_request("/api/waifu", {}, {"anything": "goes"})
    assert dict(req.params) == {}
    assert req.received_at.tzinfo is not None
