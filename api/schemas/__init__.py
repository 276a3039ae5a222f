"""Pydantic schemas for API request/response validation."""

from api.schemas.process import (
    ProcessRequest,
    ProcessResponse,
    RecommendationSchema,
    SeoResultSchema,
    SeoScoresSchema,
)
from api.schemas.responses import ErrorResponse, StatusResponse

__all__ = [
    "ErrorResponse",
    "ProcessRequest",
    "ProcessResponse",
    "RecommendationSchema",
    "SeoResultSchema",
    "SeoScoresSchema",
    "StatusResponse",
]
