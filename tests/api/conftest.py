"""
Fixtures for the HTTP surface.

The app runs without its lifespan; the database context dependency is
overridden with the in-memory identity context.
"""
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mongo_identity.dependencies.stores import get_database_context
from mongo_identity.main import app


@pytest_asyncio.fixture
async def client(identity_context):
    """Async HTTP client bound to the app with in-memory collections."""
    app.dependency_overrides[get_database_context] = lambda: identity_context
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
