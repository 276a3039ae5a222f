"""Business logic services package."""

from api.services.process_service import ProcessingOutcome, process_content

__all__ = [
    "ProcessingOutcome",
    "process_content",
]
