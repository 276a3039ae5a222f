"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from api.config import Settings, get_settings
from seo.processor import SEOProcessor, get_processor

__all__ = ["SettingsDep", "ProcessorDep"]


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings or get_settings()


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

# Shared, stateless SEO processor
ProcessorDep = Annotated[SEOProcessor, Depends(get_processor)]
