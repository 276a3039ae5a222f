"""FastAPI application factory and main entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import Settings, get_settings
from api.exceptions import (
    InvalidJSONError,
    NotFoundError,
    RequestValidationFailed,
    SEOServiceError,
)
from api.logging import setup_logging
from api.validation import is_invalid_json, validation_messages

# Initialize logging
setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting SEO Content Processor",
        env=settings.env,
        debug=settings.debug,
        version=settings.app_version,
        port=settings.api_port,
    )

    yield

    logger.info("Shutting down SEO Content Processor")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="SEO Content Processor",
        description="Generate slugs, SEO titles and meta descriptions for articles",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware (order matters - first added = last executed)
    from api.metrics import MetricsMiddleware
    from api.middleware import (
        LoggingMiddleware,
        RateLimitMiddleware,
        RateLimitStore,
        RequestIDMiddleware,
        SecurityHeadersMiddleware,
    )

    app.state.rate_limit_store = RateLimitStore(
        limit=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
        max_entries=settings.rate_limit_max_clients,
    )
    app.add_middleware(
        RateLimitMiddleware,
        enabled=settings.rate_limit_enabled,
        store=app.state.rate_limit_store,
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # CORS must be last (first to process)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Register exception handlers
    register_exception_handlers(app, settings)

    # Register routers
    from api.routers import health, process, web

    app.include_router(health.router)
    app.include_router(health.status_router, prefix="/api")
    app.include_router(process.router, prefix="/api")
    app.include_router(web.router)

    return app


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(SEOServiceError)
    async def service_error_handler(request: Request, exc: SEOServiceError) -> ORJSONResponse:
        """Handle application exceptions."""
        logger.warning(
            "Application error",
            error_code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return ORJSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> ORJSONResponse:
        """Render routing errors with the standard envelope."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error = NotFoundError(path=request.url.path, method=request.method)
            return ORJSONResponse(status_code=error.status_code, content=error.to_content())
        return ORJSONResponse(
            status_code=exc.status_code,
            content={"error": True, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        """Render body validation errors with the standard envelope."""
        errors = exc.errors()
        error: SEOServiceError
        if is_invalid_json(errors):
            error = InvalidJSONError()
        else:
            error = RequestValidationFailed(validation_messages(errors))

        logger.warning("Validation error", path=request.url.path, error_code=error.code)
        return ORJSONResponse(status_code=error.status_code, content=error.to_content())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        """Handle unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method,
        )
        content: dict[str, object] = {
            "error": True,
            "message": "Internal Server Error" if settings.is_production else str(exc),
        }
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content,
        )


app = create_app()
