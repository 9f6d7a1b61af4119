"""Observability tests — JSON formatter fields and idempotent setup."""

import json
import logging

from gateway.infrastructure import observability
from gateway.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "gateway.test", logging.WARNING, __file__, 1, "Upstream call failed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "gateway.test"
    assert log["message"] == "Upstream call failed"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(_record(
        path="/api/translate", capability="translate",
        error_code="UPSTREAM_FAILURE", duration_ms=12,
    )))
    assert log["path"] == "/api/translate"
    assert log["capability"] == "translate"
    assert log["error_code"] == "UPSTREAM_FAILURE"
    assert log["duration_ms"] == 12


def test_json_formatter_skips_absent_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "path" not in log
    assert "status_code" not in log


def test_setup_logging_does_not_stack_handlers():
    if observability._handler is not None:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None


def test_json_formatter_uses_record_time_and_service():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter(service="edge").format(record))
    assert log["timestamp"] == "1970-01-01T00:00:00+00:00"
    assert log["service"] == "edge"


def test_setup_logging_quiets_http_client_loggers():
    try:
        setup_logging("DEBUG", "text")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None


def test_setup_logging_unknown_level_falls_back_to_info():
    try:
        setup_logging("chatty", "json")
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
