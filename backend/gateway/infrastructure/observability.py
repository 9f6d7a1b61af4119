"""Structured Logging — one JSON object per line, gateway request fields included.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger,
      service and message
    - Pipeline extras (path, capability, error_code, status_code, duration_ms)
      appear only when the log call supplied them
    - The root logger holds exactly one gateway handler, however often setup runs
    - httpx/httpcore request chatter is kept at WARNING: the pipeline already
      logs one line per upstream call

Design Decisions:
    - setup_logging called from the lifespan; "text" format for local runs
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "rebix-gateway"

REQUEST_FIELDS = (
    "path", "capability", "error_code", "status_code", "duration_ms",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_QUIET_LOGGERS = ("httpx", "httpcore", "huggingface_hub")

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        entry.update({
            name: getattr(record, name)
            for name in REQUEST_FIELDS
            if getattr(record, name, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the gateway handler on the root logger, replacing a previous one."""
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = _build_handler(fmt)
    root.addHandler(_handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
