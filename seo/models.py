"""Result types produced by the SEO processor."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RecommendationType(str, Enum):
    """Which artifact a recommendation refers to."""

    TITLE = "title"
    CONTENT = "content"
    META = "meta"


class RecommendationLevel(str, Enum):
    """Severity of a recommendation."""

    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Recommendation:
    """A single advisory message."""

    type: RecommendationType
    level: RecommendationLevel
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "level": self.level.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class SeoScores:
    """Heuristic quality scores, each in [0, 100]."""

    title: int
    content: int
    overall: int

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "content": self.content,
            "overall": self.overall,
        }


@dataclass(frozen=True)
class SeoResult:
    """Everything derived from one (title, content) pair."""

    slug: str
    seo_title: str
    meta_description: str
    original_title: str
    original_content_length: int
    seo_scores: SeoScores
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire representation."""
        return {
            "slug": self.slug,
            "seoTitle": self.seo_title,
            "metaDescription": self.meta_description,
            "originalTitle": self.original_title,
            "originalContentLength": self.original_content_length,
            "seoScores": self.seo_scores.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
        }
