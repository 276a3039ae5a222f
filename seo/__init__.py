"""SEO Content Processor - core text transformation and scoring package."""

# Lazy imports keep `import seo` cheap; use explicit imports when needed:
# from seo.processor import SEOProcessor, get_processor, process_seo_data
# from seo.models import SeoResult, SeoScores, Recommendation

__all__ = [
    "SEOProcessor",
    "get_processor",
    "process_seo_data",
    "SeoResult",
    "SeoScores",
    "Recommendation",
    "RecommendationLevel",
    "RecommendationType",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for seo submodules."""
    if name in ("SEOProcessor", "get_processor", "process_seo_data"):
        from seo.processor import SEOProcessor, get_processor, process_seo_data

        return locals()[name]
    elif name in (
        "SeoResult",
        "SeoScores",
        "Recommendation",
        "RecommendationLevel",
        "RecommendationType",
    ):
        from seo.models import (
            Recommendation,
            RecommendationLevel,
            RecommendationType,
            SeoResult,
            SeoScores,
        )

        return locals()[name]
    raise AttributeError(f"module 'seo' has no attribute '{name}'")
