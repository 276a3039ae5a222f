"""Tests for the processing service wrapper."""

from datetime import UTC

import pytest

from api.exceptions import ProcessingError
from api.services.process_service import process_content
from seo.processor import SEOProcessor

CONTENT = "Compost feeds the soil and the soil feeds the plants in every season."


class ExplodingProcessor:
    def process_seo_data(self, title: str, content: str):
        raise ValueError("bad state")


def test_process_content_returns_outcome() -> None:
    outcome = process_content(SEOProcessor(), "Composting for beginners", CONTENT)

    assert outcome.result.slug == "composting-beginners"
    assert outcome.duration_ms >= 0
    assert outcome.processing_time.endswith("ms")
    assert outcome.processed_at.tzinfo is UTC


def test_process_content_wraps_failures() -> None:
    with pytest.raises(ProcessingError) as exc_info:
        process_content(ExplodingProcessor(), "Title", CONTENT)  # type: ignore[arg-type]

    assert exc_info.value.details is None
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_process_content_exposes_details_when_asked() -> None:
    with pytest.raises(ProcessingError) as exc_info:
        process_content(
            ExplodingProcessor(), "Title", CONTENT, expose_errors=True  # type: ignore[arg-type]
        )

    assert exc_info.value.details == "bad state"
