"""Shared async test fixtures for the HTTP client and settings."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings


# ---------------------------------------------------------------------------
# Settings isolated from the developer's environment and .env file
# ---------------------------------------------------------------------------
@pytest.fixture
def settings(monkeypatch):
    """Default settings with PORT and friends cleared from the environment."""
    for var in ("PORT", "HOST", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# FastAPI test client (function-scoped)
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def client(settings):
    """Async HTTP client bound to a freshly built application."""
    from app.main import create_app

    transport = ASGITransport(app=create_app(settings))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
