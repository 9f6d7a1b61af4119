"""Rebix Gateway — FastAPI application entry point.

Invariants:
    - Routes registered explicitly: health before the /api catch-all
    - Global error handlers answer every framework error in the {"error"} shape
    - CORS configured from settings (not hardcoded)
    - Upstream clients built on startup via lifespan, closed on shutdown

Design Decisions:
    - Static directory mounted AFTER API routes so /api/* takes precedence;
      html=True serves the dashboard index.html
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gateway.api.error_handlers import register_error_handlers
from gateway.api.routes import health, proxy
from gateway.config import get_settings
from gateway.infrastructure.observability import setup_logging
from gateway.infrastructure.upstream_clients import build_upstream_clients

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    health.mark_started()
    app.state.upstreams = build_upstream_clients(settings)
    logger.info(f"API listening on {settings.port}")
    try:
        yield
    finally:
        await app.state.upstreams.aclose()
        logger.info("Rebix Gateway shutting down")


app = FastAPI(title="Rebix Gateway", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(proxy.router)

register_error_handlers(app)

if os.path.isdir(settings.static_dir):
    app.mount(
        "/", StaticFiles(directory=settings.static_dir, html=True), name="static",
    )
