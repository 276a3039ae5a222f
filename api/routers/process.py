"""Content processing API endpoints."""

from fastapi import APIRouter, status

from api.deps import ProcessorDep, SettingsDep
from api.schemas import ErrorResponse, ProcessRequest, ProcessResponse, SeoResultSchema
from api.services.process_service import process_content

router = APIRouter(tags=["Processing"])


@router.post(
    "/process",
    response_model=ProcessResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON or validation failure"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Processing failed"},
    },
)
async def process_article(
    payload: ProcessRequest,
    processor: ProcessorDep,
    settings: SettingsDep,
) -> ProcessResponse:
    """
    Generate a slug, SEO title, meta description, scores and recommendations.

    The body must be JSON with `title` (3-200 chars) and `content`
    (50-10,000 chars). Both are sanitized before validation.
    """
    outcome = process_content(
        processor,
        payload.title,
        payload.content,
        expose_errors=not settings.is_production,
    )

    return ProcessResponse(
        data=SeoResultSchema.from_result(outcome.result),
        processing_time=outcome.processing_time,
        processed_at=outcome.processed_at,
    )
