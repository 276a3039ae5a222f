"""Prometheus metrics for monitoring and observability."""

from __future__ import annotations

import re
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware

# Request metrics
REQUEST_COUNT = Counter(
    "seo_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

REQUEST_LATENCY = Histogram(
    "seo_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

# Error metrics
ERROR_COUNT = Counter(
    "seo_errors_total",
    "Total application errors",
    ["error_type", "endpoint"],
)

# Processing metrics
PROCESSING_TOTAL = Counter(
    "seo_processing_total",
    "Total content processing attempts",
    ["outcome"],
)

PROCESSING_TIME = Histogram(
    "seo_processing_seconds",
    "Time spent in the SEO processor",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)

RATE_LIMITED_TOTAL = Counter(
    "seo_rate_limited_total",
    "Requests rejected by the rate limiter",
)

_KNOWN_PREFIXES = ("/api/", "/health", "/metrics")


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    metrics: bytes = generate_latest()
    return metrics


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    content_type: str = CONTENT_TYPE_LATEST
    return content_type


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect request metrics."""

    # Paths to exclude from metrics
    EXCLUDE_PATHS = {"/metrics", "/health", "/favicon.ico"}

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.url.path in self.EXCLUDE_PATHS:
            return await call_next(request)

        method = request.method
        endpoint = self._normalize_path(request.url.path)
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            ERROR_COUNT.labels(error_type=type(e).__name__, endpoint=endpoint).inc()
            raise

        REQUEST_COUNT.labels(
            method=method,
            endpoint=endpoint,
            status_code=str(response.status_code),
        ).inc()
        REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(
            time.perf_counter() - start_time
        )
        return response

    def _normalize_path(self, path: str) -> str:
        """Collapse unknown paths so arbitrary URLs cannot explode label cardinality."""
        if path == "/" or path.startswith(_KNOWN_PREFIXES):
            return re.sub(r"/\d+(/|$)", r"/{id}\1", path)
        return "{other}"


def record_processing(success: bool, duration: float | None = None) -> None:
    """Record a processing attempt and, when given, its duration."""
    PROCESSING_TOTAL.labels(outcome="success" if success else "failed").inc()
    if duration is not None:
        PROCESSING_TIME.observe(duration)


def record_rate_limited() -> None:
    """Record a request rejected by the rate limiter."""
    RATE_LIMITED_TOTAL.inc()
