"""Sanitization of submitted text and rendering of validation errors."""

import re
from collections.abc import Sequence
from typing import Any

_HTML_LIKE_CHARS = re.compile(r"[<>{}]")
_WHITESPACE = re.compile(r"\s+")

REQUIRED_FIELDS = ("title", "content")


def sanitize_field(value: Any) -> Any:
    """Strip HTML-like characters and normalize whitespace in string values."""
    if not value or not isinstance(value, str):
        return value
    return _WHITESPACE.sub(" ", _HTML_LIKE_CHARS.sub("", value)).strip()


def required_message(field: str) -> str:
    return f"{field.capitalize()} is required and must be a string"


def is_invalid_json(errors: Sequence[dict[str, Any]]) -> bool:
    """Check whether the body failed to parse as JSON."""
    return any(error.get("type") == "json_invalid" for error in errors)


def validation_messages(errors: Sequence[dict[str, Any]]) -> list[str]:
    """Turn pydantic errors into the flat list of messages shown to clients.

    A body that is missing or not an object fails every required field.
    """
    messages: list[str] = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc == ("body",):
            messages.extend(required_message(field) for field in REQUIRED_FIELDS)
            continue

        ctx_error = error.get("ctx", {}).get("error")
        if error.get("type") == "value_error" and ctx_error is not None:
            messages.append(str(ctx_error))
        else:
            messages.append(str(error.get("msg", "Invalid value")))

    # Keep first occurrence order
    return list(dict.fromkeys(messages))
