"""Input sanitization shared by every transform."""

import re

# Tag-like sequences such as <p> or </div>
TAG_PATTERN = re.compile(r"<[^>]*>")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Anything outside word characters, whitespace and basic punctuation
DISALLOWED_CHARS_PATTERN = re.compile(r"[^\w\s.,!?;:()\-'\"]", re.ASCII)


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space."""
    return WHITESPACE_PATTERN.sub(" ", text)


def sanitize_content(content: object) -> str:
    """Strip markup and unusual characters from raw text.

    Returns an empty string for empty or non-string input instead of raising.
    """
    if not content or not isinstance(content, str):
        return ""

    text = TAG_PATTERN.sub("", content)
    text = collapse_whitespace(text)
    text = DISALLOWED_CHARS_PATTERN.sub("", text)
    return text.strip()


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping blank segments.

    Segments keep their surrounding whitespace; callers strip as needed.
    """
    return [s for s in re.split(r"[.!?]+", text) if s.strip()]
