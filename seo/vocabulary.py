"""Fixed word lists used by slug generation and scoring."""

# Common low-information words dropped from slugs
STOP_WORDS = frozenset(
    [
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "has",
        "he",
        "in",
        "is",
        "it",
        "its",
        "of",
        "on",
        "that",
        "the",
        "to",
        "was",
        "will",
        "with",
    ]
)

# Click-through terms, always kept in slugs even when also a stop word
POWER_WORDS = frozenset(
    [
        "best",
        "guide",
        "how",
        "tips",
        "tutorial",
        "complete",
        "ultimate",
        "free",
        "new",
        "top",
        "advanced",
        "beginner",
        "expert",
        "review",
        "comparison",
        "vs",
        "latest",
        "updated",
    ]
)


def is_slug_keyword(
    word: str,
    stop_words: frozenset[str] = STOP_WORDS,
    power_words: frozenset[str] = POWER_WORDS,
) -> bool:
    """Return True if a lowercase token should survive slug filtering."""
    if not word:
        return False
    if word in power_words:
        return True
    return word not in stop_words


def find_power_words(text: str, power_words: frozenset[str] = POWER_WORDS) -> list[str]:
    """Return power words occurring anywhere in ``text`` (substring match).

    Matching is a plain substring test on the lowercased text, so "how"
    also matches inside "shows". Results are sorted for determinism.
    """
    lowered = text.lower()
    return sorted(word for word in power_words if word in lowered)
