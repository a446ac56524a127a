"""
Test fixtures for integration tests.

Runs the FastAPI application in-process with the catalog resolver wired to
the fake catalog.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from server.src.api.fashion import get_catalog_resolver
from server.src.main import app


@pytest_asyncio.fixture
async def client(catalog_resolver) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an HTTP client for the app using the fake-catalog resolver.
    """
    app.dependency_overrides[get_catalog_resolver] = lambda: catalog_resolver

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    # Clean up
    app.dependency_overrides.clear()
