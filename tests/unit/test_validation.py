"""Tests for request sanitization and validation."""

import pytest
from pydantic import ValidationError

from api.schemas import ProcessRequest
from api.validation import is_invalid_json, sanitize_field, validation_messages

VALID_TITLE = "How to grow tomatoes"
VALID_CONTENT = "Tomatoes need sun, water and patience to grow well in any garden."


def _messages(payload: object) -> list[str]:
    with pytest.raises(ValidationError) as exc_info:
        ProcessRequest.model_validate(payload)
    return validation_messages(exc_info.value.errors())


class TestSanitizeField:
    """Tests for sanitize_field."""

    def test_strips_html_like_characters(self) -> None:
        assert sanitize_field("<b>Hi</b>  {x}") == "bHi/b x"

    def test_normalizes_whitespace(self) -> None:
        assert sanitize_field("  a\n\n b  ") == "a b"

    def test_leaves_non_strings_alone(self) -> None:
        assert sanitize_field(123) == 123
        assert sanitize_field(None) is None


class TestProcessRequest:
    """Tests for the ProcessRequest body model."""

    def test_valid_request_is_sanitized(self) -> None:
        request = ProcessRequest.model_validate(
            {"title": f"  <{VALID_TITLE}> ", "content": f"{VALID_CONTENT}  ", "extra": 1}
        )

        assert request.title == VALID_TITLE
        assert request.content == VALID_CONTENT

    def test_missing_fields(self) -> None:
        """Test both violations are reported together."""
        assert _messages({}) == [
            "Title is required and must be a string",
            "Content is required and must be a string",
        ]

    def test_non_string_title(self) -> None:
        assert _messages({"title": 123, "content": VALID_CONTENT}) == [
            "Title is required and must be a string"
        ]

    def test_title_emptied_by_sanitizing(self) -> None:
        assert _messages({"title": "<>{}", "content": VALID_CONTENT}) == [
            "Title is required and must be a string"
        ]

    def test_title_too_short(self) -> None:
        assert _messages({"title": "ab", "content": VALID_CONTENT}) == [
            "Title must be at least 3 characters long"
        ]

    def test_title_too_long(self) -> None:
        assert _messages({"title": "t" * 201, "content": VALID_CONTENT}) == [
            "Title must be 200 characters or less"
        ]

    def test_content_too_short(self) -> None:
        assert _messages({"title": VALID_TITLE, "content": "short"}) == [
            "Content must be at least 50 characters long"
        ]

    def test_content_boundary(self) -> None:
        """Test 10,000 characters pass and 10,001 are rejected."""
        request = ProcessRequest(title=VALID_TITLE, content="c" * 10000)
        assert len(request.content) == 10000

        assert _messages({"title": VALID_TITLE, "content": "c" * 10001}) == [
            "Content must be 10,000 characters or less"
        ]

    def test_mixed_violations(self) -> None:
        assert _messages({"title": "ab"}) == [
            "Title must be at least 3 characters long",
            "Content is required and must be a string",
        ]


class TestValidationMessages:
    """Tests for rendering framework error lists."""

    def test_body_level_error_fails_every_field(self) -> None:
        errors = [{"type": "model_attributes_type", "loc": ("body",), "msg": "bad"}]

        assert validation_messages(errors) == [
            "Title is required and must be a string",
            "Content is required and must be a string",
        ]

    def test_falls_back_to_error_message(self) -> None:
        errors = [{"type": "string_type", "loc": ("body", "title"), "msg": "not a string"}]

        assert validation_messages(errors) == ["not a string"]

    def test_detects_invalid_json(self) -> None:
        assert is_invalid_json([{"type": "json_invalid", "loc": ("body", 1), "msg": "x"}])
        assert not is_invalid_json([{"type": "value_error", "loc": ("body",), "msg": "x"}])
