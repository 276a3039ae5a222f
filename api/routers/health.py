"""Health, status and metrics endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from api.deps import SettingsDep
from api.metrics import get_metrics, get_metrics_content_type
from api.schemas import StatusResponse

router = APIRouter(tags=["Health"])

# Mounted under /api alongside the processing endpoints
status_router = APIRouter(tags=["Health"])

# Track server start time for uptime calculation
_server_start_time = time.time()

API_ENDPOINTS = [
    "POST /api/process - Process article content",
    "GET /api/status - API status",
]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status")
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    uptime_seconds: int = Field(..., description="Server uptime in seconds")


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """
    Basic health check endpoint.

    The service has no external dependencies, so running means healthy.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=settings.app_version,
        environment=settings.env,
        uptime_seconds=int(time.time() - _server_start_time),
    )


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics exposition."""
    return Response(content=get_metrics(), media_type=get_metrics_content_type())


@status_router.get("/status", response_model=StatusResponse)
async def api_status(settings: SettingsDep) -> StatusResponse:
    """API status with the list of available endpoints."""
    return StatusResponse(
        status="online",
        version=settings.app_version,
        endpoints=API_ENDPOINTS,
        timestamp=datetime.now(UTC).isoformat(),
    )
