"""API test fixtures — FastAPI test client with stub upstreams injected.

Invariants:
    - get_settings and get_upstreams overridden for every test (lifespan never runs)
    - Outbound HTTP goes through httpx.MockTransport; unexpected URLs fail loudly
    - http_calls records every outbound HTTP request (zero-call assertions)

Design Decisions:
    - upstream_json maps "scheme://host/path" → (status, json) and builds a fresh
      httpx.Response per request, so repeated calls stay independent
"""

from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from gateway.api.dependencies import get_upstreams
from gateway.config import get_settings
from gateway.main import app
from tests.stubs import (
    FakeInference, FakeMedia, FakeTranslator, make_settings, make_upstreams,
)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def translator():
    return FakeTranslator(result="Hello")


@pytest.fixture
def media():
    return FakeMedia(info={"url": "https://cdn.test/v.mp4"})


@pytest.fixture
def inference():
    return FakeInference(text="generated")


@pytest.fixture
def upstream_json() -> dict[str, tuple[int, Any]]:
    return {}


@pytest.fixture
def http_calls() -> list[httpx.Request]:
    return []


@pytest.fixture
async def upstreams(settings, translator, media, inference, upstream_json, http_calls):
    def handle(request: httpx.Request) -> httpx.Response:
        http_calls.append(request)
        key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        if key not in upstream_json:
            raise httpx.ConnectError(f"No stub for {key}", request=request)
        status, body = upstream_json[key]
        return httpx.Response(status, json=body)

    clients = make_upstreams(
        settings, handler=handle,
        translator=translator, media=media, inference=inference,
    )
    yield clients
    await clients.http.aclose()


@pytest.fixture
async def client(settings, upstreams):
    """FastAPI test client with settings and upstream clients overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_upstreams] = lambda: upstreams

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
