"""Content processing service.

Wraps the SEO processor with timing, logging and metrics so the JSON API
and the HTML form share one code path.
"""

import time
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from api.exceptions import ProcessingError
from api.metrics import record_processing
from seo.models import SeoResult
from seo.processor import SEOProcessor

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProcessingOutcome:
    """Processor result plus request-level timing."""

    result: SeoResult
    duration_ms: float
    processed_at: datetime

    @property
    def processing_time(self) -> str:
        return f"{round(self.duration_ms)}ms"


def process_content(
    processor: SEOProcessor,
    title: str,
    content: str,
    expose_errors: bool = False,
) -> ProcessingOutcome:
    """Run the processor over validated input.

    Raises:
        ProcessingError: If the processor fails unexpectedly. The original
            exception text is attached only when ``expose_errors`` is set.
    """
    logger.info(
        "Processing request",
        title_length=len(title),
        content_length=len(content),
    )

    start = time.perf_counter()
    try:
        result = processor.process_seo_data(title, content)
    except Exception as e:
        record_processing(success=False)
        logger.error("Processing failed", exc_info=e)
        raise ProcessingError(details=str(e) if expose_errors else None) from e
    duration = time.perf_counter() - start

    record_processing(success=True, duration=duration)
    logger.info(
        "Processing completed",
        slug=result.slug,
        title_length=len(result.seo_title),
        description_length=len(result.meta_description),
        duration_ms=round(duration * 1000, 2),
    )

    return ProcessingOutcome(
        result=result,
        duration_ms=duration * 1000,
        processed_at=datetime.now(UTC),
    )
