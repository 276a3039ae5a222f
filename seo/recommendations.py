"""Advisory messages derived from length and keyword thresholds."""

from seo.models import Recommendation, RecommendationLevel, RecommendationType
from seo.scoring import has_digit
from seo.vocabulary import POWER_WORDS, find_power_words

TITLE_WARNING_LENGTH = 60
TITLE_INFO_LENGTH = 30
CONTENT_WARNING_LENGTH = 200
META_WARNING_LENGTH = 160

TITLE_TOO_LONG = "Title is longer than 60 characters and may be truncated in search results"
TITLE_TOO_SHORT = "Consider making your title more descriptive (30-60 characters is optimal)"
CONTENT_TOO_SHORT = "Content is quite short. Consider adding more valuable information"
META_TOO_LONG = "Meta description may be truncated in search results"
TITLE_NEEDS_HOOK = (
    'Consider adding numbers or power words like "best", "guide", "tips" '
    "to improve click-through rates"
)


def generate_recommendations(
    title: str,
    content: str,
    seo_title: str,
    meta_description: str,
    power_words: frozenset[str] = POWER_WORDS,
) -> list[Recommendation]:
    """Return recommendations in a fixed order; any number may apply."""
    recommendations: list[Recommendation] = []

    if len(title) > TITLE_WARNING_LENGTH:
        recommendations.append(
            Recommendation(RecommendationType.TITLE, RecommendationLevel.WARNING, TITLE_TOO_LONG)
        )

    if len(title) < TITLE_INFO_LENGTH:
        recommendations.append(
            Recommendation(RecommendationType.TITLE, RecommendationLevel.INFO, TITLE_TOO_SHORT)
        )

    if len(content) < CONTENT_WARNING_LENGTH:
        recommendations.append(
            Recommendation(
                RecommendationType.CONTENT, RecommendationLevel.WARNING, CONTENT_TOO_SHORT
            )
        )

    if len(meta_description) > META_WARNING_LENGTH:
        recommendations.append(
            Recommendation(RecommendationType.META, RecommendationLevel.WARNING, META_TOO_LONG)
        )

    if not has_digit(title) and not find_power_words(title, power_words):
        recommendations.append(
            Recommendation(RecommendationType.TITLE, RecommendationLevel.INFO, TITLE_NEEDS_HOOK)
        )

    return recommendations
