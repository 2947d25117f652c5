"""Pytest configuration and fixtures for API tests."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pawmap_api.main import app


@pytest_asyncio.fixture
async def client():
    """Async test client for FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
