"""Tests for logging configuration."""

import json
import logging

import pytest
import structlog

from api.config import Settings
from api.logging import SERVICE_NAME, UVICORN_LOGGERS, add_service_name, setup_logging


def _structlog_handlers() -> list[logging.Handler]:
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]


@pytest.fixture
def restore_logging():
    yield
    setup_logging(Settings(env="test"))


def test_add_service_name_keeps_existing_value() -> None:
    assert add_service_name(None, "info", {"event": "x"})["service"] == SERVICE_NAME
    assert add_service_name(None, "info", {"service": "other"})["service"] == "other"


def test_repeated_setup_installs_one_handler(restore_logging) -> None:
    setup_logging(Settings(env="test"))
    setup_logging(Settings(env="test"))

    assert len(_structlog_handlers()) == 1


def test_uvicorn_records_rendered_as_json_in_production(restore_logging) -> None:
    setup_logging(Settings(env="production"))

    for name in UVICORN_LOGGERS:
        assert logging.getLogger(name).propagate
        assert logging.getLogger(name).handlers == []

    record = logging.LogRecord(
        name="uvicorn.error",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="worker %s stopped",
        args=("3",),
        exc_info=None,
    )
    payload = json.loads(_structlog_handlers()[0].format(record))

    assert payload["event"] == "worker 3 stopped"
    assert payload["level"] == "warning"
    assert payload["service"] == SERVICE_NAME
    assert "timestamp" in payload


def test_access_log_is_quiet(restore_logging) -> None:
    setup_logging(Settings(env="test"))

    assert logging.getLogger("uvicorn.access").level == logging.WARNING
