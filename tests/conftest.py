"""
Global test fixtures for mongo-identity.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock, and mongomock-motor for the async stores)
- Identity database context with the production indexes
- Role and user stores
- Account factories
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.database.registry import create_indexes
from mongo_identity.models import Claim, IdentityRole, IdentityUser
from mongo_identity.stores import RoleStore, UserStore


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    try:
        import mongomock
        client = mongomock.MongoClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock not installed")


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest.fixture
def mock_identity_db(mock_async_mongo_client):
    """Provide mock identity_db database."""
    return mock_async_mongo_client["identity_db"]


@pytest_asyncio.fixture
async def identity_context(mock_identity_db) -> IdentityDatabaseContext:
    """Identity context over mock collections, indexed like the real app."""
    context = IdentityDatabaseContext(
        users=mock_identity_db["users"],
        roles=mock_identity_db["roles"],
    )
    await create_indexes(context)
    return context


@pytest.fixture
def unindexed_context(mock_identity_db) -> IdentityDatabaseContext:
    """Identity context without unique indexes (pre-check is the only guard)."""
    return IdentityDatabaseContext(
        users=mock_identity_db["users"],
        roles=mock_identity_db["roles"],
    )


@pytest.fixture
def role_store(identity_context) -> RoleStore:
    return RoleStore(identity_context)


@pytest.fixture
def user_store(identity_context) -> UserStore:
    return UserStore(identity_context)


# =============================================================================
# Spy collections (assert that no I/O happened)
# =============================================================================

@pytest.fixture
def mock_collection():
    """
    A fully mocked collection.

    All write methods are AsyncMock, so tests can assert on calls:

        mock_collection.update_one.assert_not_called()
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.replace_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def mock_context(mock_collection) -> IdentityDatabaseContext:
    """Context whose users and roles collections are the same mock."""
    return IdentityDatabaseContext(users=mock_collection, roles=mock_collection)


# =============================================================================
# Account Fixtures
# =============================================================================

@pytest.fixture
def make_role():
    """Factory for roles with a normalized name derived from the name."""
    def _make(name: str = "Admin", **kwargs) -> IdentityRole:
        kwargs.setdefault("normalized_name", name.upper())
        return IdentityRole(name=name, **kwargs)
    return _make


@pytest.fixture
def make_user():
    """Factory for users with a normalized user name derived from the user name."""
    def _make(user_name: str = "alice", **kwargs) -> IdentityUser:
        kwargs.setdefault("normalized_user_name", user_name.upper())
        return IdentityUser(user_name=user_name, **kwargs)
    return _make


@pytest.fixture
def dept_claim() -> Claim:
    return Claim(type="dept", value="eng")
