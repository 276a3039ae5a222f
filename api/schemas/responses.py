"""Standard API response schemas."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response envelope."""

    error: bool = True
    message: str = Field(..., description="Human-readable error message")
    details: Any = Field(None, description="Validation errors or debug details")


class StatusResponse(BaseModel):
    """API status response."""

    status: str
    version: str
    endpoints: list[str]
    timestamp: str
