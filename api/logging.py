"""Structured logging configuration.

Application code logs through structlog. Records from the standard library
(uvicorn's server and error loggers) are rendered by the same processor
chain, so a deployment emits one consistent stream.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from api.config import Settings, get_settings

SERVICE_NAME = "seo-content-processor"

# Uvicorn installs its own handlers; these are reset to propagate to root
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")


def add_service_name(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _build_renderer(settings: Settings) -> Processor:
    if settings.is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=not settings.is_test,
        exception_formatter=structlog.dev.plain_traceback,
    )


def _configure_stdlib(log_level: int, shared: list[Processor], renderer: Processor) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [
        h for h in root.handlers
        if not isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    # Request lines come from LoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog and route standard library logging through it."""
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        add_service_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer = _build_renderer(settings)

    processors: list[Processor] = [
        *shared,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]
    if settings.is_production:
        processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_stdlib(log_level, shared, renderer)
