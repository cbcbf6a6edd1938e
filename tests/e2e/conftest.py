"""Fixtures for end-to-end API tests.

The app runs in-process on top of the test container, so requests and
seeding share the same in-memory repositories and event loop.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from showcase.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """APP-scoped test container with in-memory persistence."""
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    """Anonymous HTTP client."""
    app = create_app(container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
