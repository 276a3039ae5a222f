"""URL slug generation."""

import re
import time

from seo.vocabulary import POWER_WORDS, STOP_WORDS, is_slug_keyword

SLUG_MAX_LENGTH = 100

# Back off to the last hyphen only when it sits past this share of the max
SLUG_BACKOFF_RATIO = 0.8

SLUG_FALLBACK_PREFIX = "article-"

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")


def _fallback_slug() -> str:
    return f"{SLUG_FALLBACK_PREFIX}{int(time.time() * 1000)}"


def truncate_slug(slug: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Cap a slug at ``max_length``, avoiding a cut inside the last token."""
    if len(slug) <= max_length:
        return slug

    slug = slug[:max_length]
    last_hyphen = slug.rfind("-")
    if last_hyphen > max_length * SLUG_BACKOFF_RATIO:
        slug = slug[:last_hyphen]
    return slug


def generate_slug(
    title: object,
    stop_words: frozenset[str] = STOP_WORDS,
    power_words: frozenset[str] = POWER_WORDS,
    max_length: int = SLUG_MAX_LENGTH,
) -> str:
    """Generate a lowercase, hyphen-separated slug from a title.

    Stop words are dropped unless they are also power words. When nothing
    survives filtering the slug falls back to ``article-<epoch ms>``.
    Empty or non-string input yields an empty string.
    """
    if not title or not isinstance(title, str):
        return ""

    text = _NON_SLUG_CHARS.sub("", title.lower().strip())
    # Underscores pass the \w filter but are not valid slug separators
    text = text.replace("_", " ")
    text = _WHITESPACE.sub(" ", text)

    words = [
        word
        for word in (token.strip() for token in text.split(" "))
        if is_slug_keyword(word, stop_words, power_words)
    ]

    slug = _HYPHEN_RUNS.sub("-", "-".join(words)).strip("-")
    slug = truncate_slug(slug, max_length)

    if not slug:
        slug = _fallback_slug()

    return slug
