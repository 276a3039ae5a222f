"""Custom middleware for the API."""

from __future__ import annotations

import math
import time
import uuid
from collections import OrderedDict
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import Request, Response
from fastapi.responses import ORJSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from api.exceptions import RateLimitError
from api.metrics import record_rate_limited

# Type alias for call_next function
CallNext = Callable[[Request], Awaitable[Response]]

logger = structlog.get_logger()


@dataclass
class RateLimitWindow:
    """Request count for one client within its current window."""

    count: int
    window_start: float


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    retry_after: int = 0


class RateLimitStore:
    """Bounded in-memory fixed-window counters keyed by client identity.

    Entries are kept ordered by window start, so expired windows are evicted
    from the front. When more than ``max_entries`` clients are tracked the
    oldest window is dropped.
    """

    def __init__(
        self,
        limit: int = 100,
        window_seconds: float = 3600,
        max_entries: int = 10000,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._windows: OrderedDict[str, RateLimitWindow] = OrderedDict()

    def __len__(self) -> int:
        return len(self._windows)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._windows

    def _evict_expired(self, now: float) -> None:
        while self._windows:
            oldest = next(iter(self._windows.values()))
            if now - oldest.window_start <= self.window_seconds:
                break
            self._windows.popitem(last=False)

    def hit(self, identifier: str) -> RateLimitDecision:
        """Count a request for ``identifier`` and decide whether it is allowed."""
        now = self._clock()
        self._evict_expired(now)

        window = self._windows.get(identifier)
        if window is None:
            self._windows[identifier] = RateLimitWindow(count=1, window_start=now)
            while len(self._windows) > self.max_entries:
                self._windows.popitem(last=False)
            return RateLimitDecision(
                allowed=True, limit=self.limit, remaining=max(0, self.limit - 1)
            )

        if window.count >= self.limit:
            retry_after = math.ceil(window.window_start + self.window_seconds - now)
            return RateLimitDecision(
                allowed=False,
                limit=self.limit,
                remaining=0,
                retry_after=max(1, retry_after),
            )

        window.count += 1
        return RateLimitDecision(
            allowed=True, limit=self.limit, remaining=max(0, self.limit - window.count)
        )

    def clear(self) -> None:
        self._windows.clear()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for tracing."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        # Bind request ID to structlog context
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        # Add to request state for access in handlers
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log request/response details."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        start_time = time.perf_counter()

        logger.debug(
            "Request started",
            method=request.method,
            path=request.url.path,
        )

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-IP fixed window rate limiting for API routes."""

    # Only paths under these prefixes are limited
    LIMITED_PREFIXES = ("/api/",)

    def __init__(
        self,
        app: Any,
        enabled: bool = True,
        store: RateLimitStore | None = None,
    ) -> None:
        super().__init__(app)
        self.enabled = enabled
        self.store = store if store is not None else RateLimitStore()

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        if not self.enabled or not request.url.path.startswith(self.LIMITED_PREFIXES):
            return await call_next(request)

        client_ip = self._get_client_ip(request)
        decision = self.store.hit(f"ip:{client_ip}")

        if not decision.allowed:
            logger.warning(
                "rate_limit_exceeded",
                client_ip=client_ip,
                path=request.url.path,
                retry_after=decision.retry_after,
            )
            record_rate_limited()
            return self._rate_limit_response(decision.retry_after)

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(decision.limit)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        return response

    def _get_client_ip(self, request: Request) -> str:
        """Use the direct connection address; forwarded headers are client-controlled."""
        return request.client.host if request.client else "unknown"

    def _rate_limit_response(self, retry_after: int) -> ORJSONResponse:
        error = RateLimitError(retry_after=retry_after)
        return ORJSONResponse(
            status_code=error.status_code,
            content=error.to_content(),
            headers={"Retry-After": str(retry_after)},
        )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to responses."""

    CONTENT_SECURITY_POLICY = (
        "default-src 'self'; "
        "style-src 'self' 'unsafe-inline'; "
        "script-src 'self'; "
        "img-src 'self' data: https:"
    )

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Prevent clickjacking
        response.headers["X-Frame-Options"] = "DENY"

        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Permissions-Policy"] = (
            "accelerometer=(), camera=(), geolocation=(), gyroscope=(), "
            "magnetometer=(), microphone=(), payment=(), usb=()"
        )
        response.headers["Content-Security-Policy"] = self.CONTENT_SECURITY_POLICY

        return response
