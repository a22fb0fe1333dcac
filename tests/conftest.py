"""
Shared test fixtures.

The scheduler and simulator are pure in-memory code, so most tests build
their objects directly. Only the HTTP tests need a fixture:
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_settings
from config.settings import Settings


@pytest.fixture
def app_settings():
    """Settings with small limits so the guards are easy to hit."""
    return Settings(MAX_JOBS_PER_SIMULATION=5, ROUND_ROBIN_TIME_QUANTUM=2.0)


@pytest_asyncio.fixture
async def client(app_settings):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the real get_settings,
    use this test version."
    """
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: app_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
