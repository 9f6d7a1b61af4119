"""API Dependencies — FastAPI providers for settings, upstream clients and route table.

Invariants:
    - Upstream clients come from app.state (set by the lifespan), never built per request
    - Every provider is overridable via app.dependency_overrides (tests inject stubs)
"""

from fastapi import Request

from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.services.route_table import ROUTES, RouteTable


def get_upstreams(request: Request) -> UpstreamClients:
    upstreams = getattr(request.app.state, "upstreams", None)
    if upstreams is None:
        raise RuntimeError("Upstream clients not initialized (lifespan not run)")
    return upstreams


def get_route_table() -> RouteTable:
    return ROUTES
