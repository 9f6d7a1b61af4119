"""Proxy Route — single GET catch-all under /api dispatching through the route table.

Invariants:
    - Registered AFTER explicit routes (health) so they take precedence
    - GET only; other methods on a served /api/* path answer 405, on an
      unknown path 404 (the not-found answer wins over the method check)
    - Unknown path → RouteNotFoundError → 404 {"error": "Not found"}
    - Duplicate query keys: last value wins
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from gateway.api.dependencies import get_route_table, get_upstreams
from gateway.config import Settings, get_settings
from gateway.core.domain_types import ContentKind, Failure, ProxyResult
from gateway.core.envelope import (
    build_failure_body, build_success_body, client_message, failure_status,
)
from gateway.core.errors import RouteNotFoundError
from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.services.proxy_pipeline import execute_route
from gateway.services.route_table import RouteTable, resolve_route

router = APIRouter(prefix="/api", tags=["proxy"])


def render_result(result: ProxyResult, settings: Settings) -> Response:
    """Turn a pipeline result into the client-facing HTTP response."""
    if isinstance(result, Failure):
        message = client_message(
            result.kind, result.message, settings.expose_upstream_errors,
        )
        return JSONResponse(
            status_code=failure_status(
                result.kind, settings.missing_parameter_status,
            ),
            content=build_failure_body(message),
        )
    if result.content_kind is ContentKind.BINARY:
        return Response(content=result.payload, media_type=result.media_type)
    return JSONResponse(content=build_success_body(result.payload, settings.creator))


@router.get("/{route_path:path}")
async def proxy(
    request: Request,
    route_path: str,
    settings: Settings = Depends(get_settings),
    table: RouteTable = Depends(get_route_table),
    upstreams: UpstreamClients = Depends(get_upstreams),
):
    """Dispatch /api/<route_path> to its upstream capability."""
    route = resolve_route(table, f"/api/{route_path}")
    result = await execute_route(route, dict(request.query_params), upstreams)
    return render_result(result, settings)


def _serves_get(request: Request, path: str, table: RouteTable) -> bool:
    """True when GET on path is answered by the table or an explicit route."""
    if path in table:
        return True
    return any(
        isinstance(route, APIRoute) and route.path == path and "GET" in route.methods
        for route in request.app.routes
    )


@router.api_route(
    "/{route_path:path}",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def reject_method(
    request: Request,
    route_path: str,
    table: RouteTable = Depends(get_route_table),
):
    """Non-GET under /api: 404 for unknown paths, 405 for served ones."""
    path = f"/api/{route_path}"
    if not _serves_get(request, path, table):
        raise RouteNotFoundError(path)
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED, headers={"Allow": "GET"},
    )
