"""Meta description generation."""

import re

from seo.text import collapse_whitespace
from seo.title import ELLIPSIS

META_DESCRIPTION_MAX_LENGTH = 160

# Accumulated sentences shorter than this fall back to plain truncation
META_MIN_SENTENCE_LENGTH = 50

# Word boundary back-off threshold for the truncation fallback
META_BACKOFF_RATIO = 0.7

_META_DISALLOWED_CHARS = re.compile(r"[^\w\s.,!?-]", re.ASCII)
_SENTENCE_BREAK = re.compile(r"[.!?]+")


def clean_meta_text(content: str) -> str:
    """Normalize whitespace and keep only basic punctuation."""
    return _META_DISALLOWED_CHARS.sub("", collapse_whitespace(content)).strip()


def _accumulate_sentences(text: str, limit: int) -> str:
    description = ""
    for sentence in _SENTENCE_BREAK.split(text):
        sentence = sentence.strip()
        if not sentence:
            continue

        candidate = f"{description}. {sentence}" if description else sentence
        if len(candidate) > limit:
            break
        description = candidate
    return description


def _truncate_at_word(text: str, max_length: int) -> str:
    limit = max_length - len(ELLIPSIS)
    truncated = text[:limit]
    last_space = truncated.rfind(" ")
    if last_space > max_length * META_BACKOFF_RATIO:
        truncated = truncated[:last_space]
    return truncated.strip() + ELLIPSIS


def generate_meta_description(
    content: object,
    title: str = "",
    max_length: int = META_DESCRIPTION_MAX_LENGTH,
) -> str:
    """Build a search snippet from content, preferring whole sentences.

    ``title`` is accepted for context but does not affect the output.
    """
    if not content or not isinstance(content, str):
        return ""

    clean_content = clean_meta_text(content)
    if len(clean_content) <= max_length:
        return clean_content

    description = _accumulate_sentences(clean_content, max_length - len(ELLIPSIS))
    if len(description) > META_MIN_SENTENCE_LENGTH:
        return description if description.endswith(".") else description + "."

    return _truncate_at_word(clean_content, max_length)
