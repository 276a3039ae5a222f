"""Web routes for the HTML processing form using Jinja2 templates.

Provides a server-rendered page where an article title and body can be
submitted and the generated SEO artifacts are shown inline.
"""

from pathlib import Path
from typing import Any

import structlog
from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from api.deps import ProcessorDep, SettingsDep
from api.schemas import ProcessRequest
from api.services.process_service import process_content
from api.validation import validation_messages
from seo.meta import META_DESCRIPTION_MAX_LENGTH
from seo.title import TITLE_MAX_LENGTH

logger = structlog.get_logger()

# Template configuration
TEMPLATES_DIR = Path(__file__).parent.parent.parent / "web" / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["web"])


def get_score_class(score: int) -> str:
    """Get CSS class for a 0-100 score."""
    if score >= 80:
        return "score-good"
    elif score >= 60:
        return "score-fair"
    return "score-poor"


def _page_context(**overrides: Any) -> dict[str, Any]:
    context: dict[str, Any] = {
        "title": "",
        "content": "",
        "errors": [],
        "result": None,
        "processing_time": None,
        "title_limit": TITLE_MAX_LENGTH,
        "meta_limit": META_DESCRIPTION_MAX_LENGTH,
        "score_class": get_score_class,
    }
    context.update(overrides)
    return context


@router.get("/", response_class=HTMLResponse, name="index")
async def index(request: Request) -> HTMLResponse:
    """Render the empty processing form."""
    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context=_page_context(),
    )


@router.post("/", response_class=HTMLResponse, name="process_form")
async def process_form(
    request: Request,
    processor: ProcessorDep,
    settings: SettingsDep,
    title: str = Form(""),
    content: str = Form(""),
) -> HTMLResponse:
    """Process a submitted form and render results or validation errors."""
    try:
        payload = ProcessRequest.model_validate({"title": title, "content": content})
    except ValidationError as e:
        errors = validation_messages(e.errors())
        logger.info("Form validation failed", errors=errors)
        return templates.TemplateResponse(
            request=request,
            name="index.html",
            context=_page_context(title=title, content=content, errors=errors),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    outcome = process_content(
        processor,
        payload.title,
        payload.content,
        expose_errors=not settings.is_production,
    )

    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context=_page_context(
            title=title,
            content=content,
            result=outcome.result,
            processing_time=outcome.processing_time,
        ),
    )
