"""Proxy Pipeline — Adapter → gate → Caller for one route, failures caught at one boundary.

Invariants:
    - Returns exactly one of Success | Failure; never raises for route-local errors
    - Missing parameters fail BEFORE the gate is taken or any upstream is touched
    - Exactly one caller invocation per request, no retry
    - Any exception from the caller becomes Failure with its message verbatim
    - A Success whose content kind differs from the route's declared kind is malformed
    - CancelledError (BaseException) passes through uncaught

Design Decisions:
    - Single catch-all here replaces the per-route try/except of the old handlers
    - One log line per run: INFO on success, WARNING on failure (with error_code)
"""

import logging
import time
from typing import Mapping

from gateway.core.domain_types import Failure, ProxyResult, Success
from gateway.core.errors import ErrorKind, GatewayError
from gateway.core.request_adapter import build_proxy_request
from gateway.infrastructure.upstream_clients import UpstreamClients
from gateway.services.route_table import RouteSpec

logger = logging.getLogger(__name__)


def _failure_from(exc: Exception) -> Failure:
    if isinstance(exc, GatewayError):
        return Failure(exc.kind, exc.message, exc.code)
    return Failure(
        ErrorKind.UPSTREAM_FAILURE,
        str(exc) or exc.__class__.__name__,
        "UPSTREAM_FAILURE",
    )


async def execute_route(
    route: RouteSpec,
    raw_query: Mapping[str, str],
    upstreams: UpstreamClients,
) -> ProxyResult:
    """Run one route end to end and return its result."""
    try:
        request = build_proxy_request(route.path, route.params, raw_query)
    except GatewayError as e:
        logger.warning(
            f"Rejected request: {e.message}",
            extra={"path": route.path, "error_code": e.code},
        )
        return _failure_from(e)

    started = time.perf_counter()
    try:
        async with upstreams.gates.acquire(route.capability):
            result = await route.caller(request.params, upstreams)
    except Exception as e:
        failure = _failure_from(e)
        _log_failure(route, failure, started)
        return failure

    if not isinstance(result, Success) or result.content_kind != route.content_kind:
        failure = Failure(
            ErrorKind.UPSTREAM_MALFORMED_RESPONSE,
            f"{route.path} produced an unexpected result kind, "
            f"expected {route.content_kind.value}",
            "UPSTREAM_MALFORMED_RESPONSE",
        )
        _log_failure(route, failure, started)
        return failure

    logger.info(
        f"Upstream call succeeded: {route.path}",
        extra={
            "path": route.path,
            "capability": route.capability.value,
            "duration_ms": _elapsed_ms(started),
        },
    )
    return result


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _log_failure(route: RouteSpec, failure: Failure, started: float) -> None:
    logger.warning(
        f"Upstream call failed: {route.path}: {failure.message}",
        extra={
            "path": route.path,
            "capability": route.capability.value,
            "error_code": failure.code,
            "duration_ms": _elapsed_ms(started),
        },
    )
