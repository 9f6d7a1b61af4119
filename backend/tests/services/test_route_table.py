"""Route Table tests — verify the registered paths, schemas and content kinds.

Tests cover:
    - Every published endpoint is registered
    - Binary routes declared BINARY, everything else JSON
    - Required parameters per route
    - Defaults for optional parameters
    - Unknown path raises RouteNotFoundError; lookup is exact (no prefix/trailing-slash match)
"""

import pytest

from gateway.core.domain_types import Capability, ContentKind
from gateway.core.errors import RouteNotFoundError
from gateway.services.route_table import ROUTES, resolve_route

_EXPECTED_PATHS = {
    "/api/gptlogic", "/api/gpt-5", "/api/qwen", "/api/txt2img",
    "/api/ytdl", "/api/yta",
    "/api/pinterest", "/api/npmsearch", "/api/lyrics", "/api/ytplay",
    "/api/translate", "/api/enhance", "/api/removebg",
    "/api/randomquotes", "/api/waifu",
}


def test_all_endpoints_registered():
    assert set(ROUTES) == _EXPECTED_PATHS


def test_keys_match_route_paths():
    for path, route in ROUTES.items():
        assert route.path == path


def test_binary_routes():
    binary = {p for p, r in ROUTES.items() if r.content_kind is ContentKind.BINARY}
    assert binary == {"/api/txt2img", "/api/enhance", "/api/removebg"}


def test_stats_not_in_route_table():
    assert "/api/stats" not in ROUTES


@pytest.mark.parametrize("path,required", [
    ("/api/gptlogic", {"q"}),
    ("/api/translate", {"text"}),
    ("/api/ytdl", {"url"}),
    ("/api/enhance", {"url"}),
    ("/api/npmsearch", {"q"}),
    ("/api/waifu", set()),
])
def test_required_parameters(path, required):
    params = ROUTES[path].params
    assert {name for name, spec in params.items() if spec.required} == required


def test_defaults():
    assert ROUTES["/api/translate"].params["to"].default == "en"
    assert ROUTES["/api/ytdl"].params["format"].default == "highest"
    assert ROUTES["/api/gptlogic"].params["prompt"].default == ""


def test_capabilities():
    assert ROUTES["/api/translate"].capability is Capability.TRANSLATE
    assert ROUTES["/api/ytplay"].capability is Capability.SEARCH_CATALOG
    assert ROUTES["/api/yta"].capability is Capability.RESOLVE_MEDIA_FORMAT
    assert ROUTES["/api/txt2img"].capability is Capability.GENERATE_IMAGE


def test_resolve_known_route():
    assert resolve_route(ROUTES, "/api/qwen").path == "/api/qwen"


@pytest.mark.parametrize("path", [
    "/api/doesnotexist", "/api/translate/", "/api/translate/extra", "/api",
])
def test_resolve_unknown_route(path):
    with pytest.raises(RouteNotFoundError):
        resolve_route(ROUTES, path)
