"""Title length optimization."""

TITLE_MAX_LENGTH = 60

# A word boundary is used only when it sits past this share of the max
TITLE_BACKOFF_RATIO = 0.6

ELLIPSIS = "..."


def optimize_title(title: object, max_length: int = TITLE_MAX_LENGTH) -> str:
    """Cap a title at ``max_length`` characters without cutting mid-word.

    Truncated titles get a trailing ellipsis, which can push the result a
    few characters past ``max_length``.
    """
    if not title or not isinstance(title, str):
        return ""

    optimized = title.strip()
    if len(optimized) <= max_length:
        return optimized

    truncated = optimized[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > max_length * TITLE_BACKOFF_RATIO:
        truncated = truncated[:last_space]

    return truncated.strip() + ELLIPSIS
