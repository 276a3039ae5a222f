"""Custom exceptions and error handling."""

from typing import Any

from fastapi import status


class SEOServiceError(Exception):
    """Base exception for the SEO content processor service."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Any = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    def to_content(self) -> dict[str, Any]:
        """Render the JSON error envelope."""
        content: dict[str, Any] = {"error": True, "message": self.message}
        if self.details:
            content["details"] = self.details
        return content


class RequestValidationFailed(SEOServiceError):
    """Request body failed one or more validation rules."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message="Validation failed",
            code="validation_error",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=list(errors),
        )

    @property
    def errors(self) -> list[str]:
        return list(self.details)


class InvalidJSONError(SEOServiceError):
    """Request body is not valid JSON."""

    def __init__(self, message: str = "Invalid JSON in request body"):
        super().__init__(
            message=message,
            code="invalid_json",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class NotFoundError(SEOServiceError):
    """No route matched the request."""

    def __init__(self, path: str, method: str):
        super().__init__(
            message="Route not found",
            code="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.path = path
        self.method = method

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        content.update(path=self.path, method=self.method)
        return content


class RateLimitError(SEOServiceError):
    """Rate limit exceeded."""

    def __init__(
        self,
        retry_after: int,
        message: str = "Rate limit exceeded. Please try again later.",
    ):
        super().__init__(
            message=message,
            code="rate_limit_exceeded",
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        )
        self.retry_after = retry_after

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        content["retryAfter"] = self.retry_after
        return content


class ProcessingError(SEOServiceError):
    """Unexpected failure while processing content."""

    def __init__(self, details: str | None = None):
        super().__init__(
            message="An error occurred while processing your content",
            code="processing_error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )
