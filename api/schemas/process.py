"""Content processing schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from api.validation import required_message, sanitize_field
from seo.models import SeoResult

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 50
CONTENT_MAX_LENGTH = 10000


def _check_length(label: str, value: str, min_length: int, max_length: int) -> str:
    if len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters long")
    if len(value) > max_length:
        raise ValueError(f"{label} must be {max_length:,} characters or less")
    return value


class ProcessRequest(BaseModel):
    """Article submitted for processing.

    Both fields are sanitized before the length rules run, so stripped
    characters do not count towards the minimums.
    """

    title: str = Field(default="", validate_default=True)
    content: str = Field(default="", validate_default=True)

    @field_validator("title", "content", mode="before")
    @classmethod
    def sanitize(cls, v: Any, info: ValidationInfo) -> str:
        cleaned = sanitize_field(v) if isinstance(v, str) else None
        if not cleaned:
            label = info.field_name or ""
            raise ValueError(required_message(label))
        return cleaned

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _check_length("Title", v, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return _check_length("Content", v, CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH)


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SeoScoresSchema(CamelModel):
    """Heuristic quality scores."""

    title: int = Field(..., ge=0, le=100)
    content: int = Field(..., ge=0, le=100)
    overall: int = Field(..., ge=0, le=100)


class RecommendationSchema(CamelModel):
    """Advisory message."""

    type: Literal["title", "content", "meta"]
    level: Literal["info", "warning"]
    message: str


class SeoResultSchema(CamelModel):
    """Generated SEO artifacts."""

    slug: str
    seo_title: str
    meta_description: str
    original_title: str
    original_content_length: int
    seo_scores: SeoScoresSchema
    recommendations: list[RecommendationSchema]

    @classmethod
    def from_result(cls, result: SeoResult) -> "SeoResultSchema":
        return cls.model_validate(result.to_dict())


class ProcessResponse(CamelModel):
    """Success envelope for a processing request."""

    success: Literal[True] = True
    data: SeoResultSchema
    processing_time: str = Field(..., description="Processing time, e.g. '3ms'")
    processed_at: datetime
