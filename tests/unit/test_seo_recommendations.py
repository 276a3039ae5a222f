"""Tests for recommendation generation."""

from seo.models import RecommendationLevel, RecommendationType
from seo.recommendations import (
    CONTENT_TOO_SHORT,
    META_TOO_LONG,
    TITLE_NEEDS_HOOK,
    TITLE_TOO_LONG,
    TITLE_TOO_SHORT,
    generate_recommendations,
)

LONG_CONTENT = "Plenty of useful words here. " * 10


def _summary(recommendations) -> list[tuple[str, str, str]]:
    return [(r.type.value, r.level.value, r.message) for r in recommendations]


class TestGenerateRecommendations:
    """Tests for generate_recommendations function."""

    def test_no_recommendations_for_good_input(self) -> None:
        title = "10 Best Tips for Beginner Gardeners in 2024"
        recs = generate_recommendations(title, LONG_CONTENT, title, "A short description.")
        assert recs == []

    def test_long_title_warning(self) -> None:
        """Test titles over 60 chars warn, and lacking hooks add an info."""
        title = "x" * 61
        recs = generate_recommendations(title, LONG_CONTENT, title[:60] + "...", "desc")

        assert _summary(recs) == [
            ("title", "warning", TITLE_TOO_LONG),
            ("title", "info", TITLE_NEEDS_HOOK),
        ]

    def test_fixed_order_when_everything_fires(self) -> None:
        """Test recommendations come out in the documented order."""
        recs = generate_recommendations("Cats", "short", "Cats", "m" * 161)

        assert _summary(recs) == [
            ("title", "info", TITLE_TOO_SHORT),
            ("content", "warning", CONTENT_TOO_SHORT),
            ("meta", "warning", META_TOO_LONG),
            ("title", "info", TITLE_NEEDS_HOOK),
        ]

    def test_digit_suppresses_hook_info(self) -> None:
        title = "Seven reasons cats rule in 2024"
        recs = generate_recommendations(title, LONG_CONTENT, title, "desc")
        assert recs == []

    def test_power_word_suppresses_hook_info(self) -> None:
        title = "The ultimate cat owner handbook"
        recs = generate_recommendations(title, LONG_CONTENT, title, "desc")
        assert recs == []

    def test_boundaries_do_not_fire(self) -> None:
        """Test exact threshold lengths are not flagged."""
        title = "best " + "y" * 25
        recs = generate_recommendations(title, "c" * 200, title, "m" * 160)
        assert recs == []

    def test_recommendation_types(self) -> None:
        recs = generate_recommendations("Cats", "short", "Cats", "desc")

        assert recs[0].type is RecommendationType.TITLE
        assert recs[0].level is RecommendationLevel.INFO
        assert recs[1].type is RecommendationType.CONTENT
        assert recs[1].level is RecommendationLevel.WARNING
        assert recs[0].to_dict() == {
            "type": "title",
            "level": "info",
            "message": TITLE_TOO_SHORT,
        }
