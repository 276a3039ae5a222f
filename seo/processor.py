"""SEO processing pipeline.

Runs the sanitizer, generators, scorers and recommendation rules over one
(title, content) pair and returns an immutable :class:`SeoResult`. The
processor holds only read-only word lists, so a single instance can be
shared freely across concurrent requests.
"""

from dataclasses import dataclass
from functools import lru_cache

from seo.meta import META_DESCRIPTION_MAX_LENGTH, generate_meta_description
from seo.models import SeoResult, SeoScores
from seo.recommendations import generate_recommendations
from seo.scoring import (
    calculate_content_score,
    calculate_overall_score,
    calculate_title_score,
)
from seo.slug import SLUG_MAX_LENGTH, generate_slug
from seo.text import sanitize_content
from seo.title import TITLE_MAX_LENGTH, optimize_title
from seo.vocabulary import POWER_WORDS, STOP_WORDS


@dataclass(frozen=True)
class SEOProcessor:
    """Stateless SEO processor configured with fixed word lists."""

    stop_words: frozenset[str] = STOP_WORDS
    power_words: frozenset[str] = POWER_WORDS
    title_max_length: int = TITLE_MAX_LENGTH
    meta_description_max_length: int = META_DESCRIPTION_MAX_LENGTH
    slug_max_length: int = SLUG_MAX_LENGTH

    def sanitize_content(self, content: object) -> str:
        return sanitize_content(content)

    def generate_slug(self, title: object) -> str:
        return generate_slug(title, self.stop_words, self.power_words, self.slug_max_length)

    def optimize_title(self, title: object) -> str:
        return optimize_title(title, self.title_max_length)

    def generate_meta_description(self, content: object, title: str = "") -> str:
        return generate_meta_description(content, title, self.meta_description_max_length)

    def calculate_title_score(self, title: str) -> int:
        return calculate_title_score(title, self.power_words)

    def calculate_content_score(self, content: str) -> int:
        return calculate_content_score(content)

    def process_seo_data(self, title: object, content: object) -> SeoResult:
        """Derive slug, title, meta description, scores and recommendations."""
        clean_title = self.sanitize_content(title)
        clean_content = self.sanitize_content(content)

        slug = self.generate_slug(clean_title)
        seo_title = self.optimize_title(clean_title)
        meta_description = self.generate_meta_description(clean_content, clean_title)

        title_score = self.calculate_title_score(clean_title)
        content_score = self.calculate_content_score(clean_content)

        recommendations = generate_recommendations(
            clean_title,
            clean_content,
            seo_title,
            meta_description,
            self.power_words,
        )

        return SeoResult(
            slug=slug,
            seo_title=seo_title,
            meta_description=meta_description,
            original_title=clean_title,
            original_content_length=len(clean_content),
            seo_scores=SeoScores(
                title=title_score,
                content=content_score,
                overall=calculate_overall_score(title_score, content_score),
            ),
            recommendations=tuple(recommendations),
        )


@lru_cache
def get_processor() -> SEOProcessor:
    """Get the shared processor instance."""
    return SEOProcessor()


def process_seo_data(title: object, content: object) -> SeoResult:
    """Process a title/content pair with the shared processor."""
    return get_processor().process_seo_data(title, content)
