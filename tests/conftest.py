"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment before any app code runs
os.environ["ENV"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "true"

GARDENING_TITLE = "10 Best Tips for Beginner Gardeners in 2024"

# 301 characters of plain sentences, inside the optimal content band
GARDENING_CONTENT = (
    "Gardening is a rewarding hobby for anyone willing to learn. "
    "Start with easy plants like herbs and lettuce. Water early in the morning "
    "so leaves dry before evening. Add compost to enrich the soil every spring. "
    "Watch for pests and remove them by hand when possible. Keep notes on what grows well. "
    "Enjoy."
)


@pytest.fixture
def settings():
    """Fresh test settings (bypasses the cached instance)."""
    from api.config import Settings

    return Settings(env="test")


@pytest.fixture
def app(settings):
    """Create a new application per test so rate limit state is isolated."""
    from api.main import create_app

    return create_app(settings)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def article() -> dict[str, str]:
    """A valid processing payload."""
    return {"title": GARDENING_TITLE, "content": GARDENING_CONTENT}
