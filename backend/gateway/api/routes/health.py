"""Stats Route — liveness endpoint in the gateway envelope.

Invariants:
    - GET /api/stats always returns 200 if the process is up
    - uptime is seconds since the app started serving (reset by mark_started()
      in the lifespan; module load time until then), monotonic, never negative
    - No upstream call is made
"""

import time

from fastapi import APIRouter, Depends

from gateway.config import Settings, get_settings
from gateway.core.envelope import build_success_body

router = APIRouter(prefix="/api", tags=["health"])

_started_at = time.monotonic()


def mark_started() -> None:
    """Record the moment the app started serving."""
    global _started_at
    _started_at = time.monotonic()


def uptime_seconds() -> float:
    return max(0.0, time.monotonic() - _started_at)


@router.get("/stats")
async def stats(settings: Settings = Depends(get_settings)):
    """Liveness probe with uptime."""
    return build_success_body(
        {"msg": "Server is running", "uptime": uptime_seconds()},
        settings.creator,
    )
