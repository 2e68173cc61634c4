"""
Tests for database connections, context construction and indexes.

These tests cover:
- MongoDB client initialization and shutdown
- IdentityDatabaseContext factories
- Unique name index creation
"""
from datetime import timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import OperationFailure

from mongo_identity.config import Settings
from mongo_identity.core.exceptions import InvalidArgumentError
from mongo_identity.database.context import DocumentCollection, IdentityDatabaseContext
from mongo_identity.database.registry import create_indexes


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    @pytest.mark.asyncio
    async def test_get_mongo_client_creates_connection(self):
        """get_mongo_client should create connection on first call."""
        with patch("mongo_identity.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("mongo_identity.database.connections._mongo_client", None), \
             patch("mongo_identity.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongo_uri = "mongodb://test:27017"
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            from mongo_identity.database.connections import get_mongo_client

            client = await get_mongo_client()
            again = await get_mongo_client()

            mock_client.assert_called_once_with(
                "mongodb://test:27017", tz_aware=True, tzinfo=timezone.utc
            )
            assert client is mock_instance
            assert again is client

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import mongo_identity.database.connections as conn_module
        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None

class TestIdentityDatabaseContext:
    """Tests for context construction."""

    def test_from_database_uses_configured_collections(self, mock_mongo_client):
        settings = Settings(users_collection="app_users", roles_collection="app_roles")
        db = mock_mongo_client["identity_db"]

        context = IdentityDatabaseContext.from_database(db, settings)

        assert context.users.name == "app_users"
        assert context.roles.name == "app_roles"

    def test_from_client_uses_configured_database(self, mock_mongo_client):
        settings = Settings(database_name="tenant_a")

        context = IdentityDatabaseContext.from_client(mock_mongo_client, settings)

        assert context.users.database.name == "tenant_a"

    @pytest.mark.parametrize("uri", ["", "   "])
    def test_from_uri_rejects_blank(self, uri):
        with pytest.raises(InvalidArgumentError) as exc_info:
            IdentityDatabaseContext.from_uri(uri)

        assert exc_info.value.argument == "mongo_uri"

    def test_from_uri_builds_client(self):
        with patch("mongo_identity.database.connections.AsyncIOMotorClient") as mock_client:
            IdentityDatabaseContext.from_uri("mongodb://db:27017", Settings())

            mock_client.assert_called_once_with(
                "mongodb://db:27017", tz_aware=True, tzinfo=timezone.utc
            )

    @pytest.mark.asyncio
    async def test_from_settings_uses_shared_client(self, mock_mongo_client):
        with patch(
            "mongo_identity.database.context.get_mongo_client",
            AsyncMock(return_value=mock_mongo_client),
        ):
            context = await IdentityDatabaseContext.from_settings(Settings())

        assert context.roles.name == "roles"

    def test_missing_collection_rejected(self, mock_collection):
        with pytest.raises(InvalidArgumentError) as exc_info:
            IdentityDatabaseContext(users=mock_collection, roles=None)

        assert exc_info.value.argument == "roles"

    def test_async_collection_satisfies_protocol(self, identity_context):
        assert isinstance(identity_context.users, DocumentCollection)


class TestIndexCreation:
    """Tests for index creation on the identity collections."""

    @pytest.mark.asyncio
    async def test_unique_name_index_on_roles(self, identity_context):
        indexes = await identity_context.roles.index_information()

        assert indexes["name_unique"]["unique"] is True
        assert indexes["name_unique"]["key"] == [("name", 1)]
        assert "normalized_name" in indexes

    @pytest.mark.asyncio
    async def test_unique_name_index_on_users(self, identity_context):
        indexes = await identity_context.users.index_information()

        assert indexes["user_name_unique"]["unique"] is True
        assert "normalized_user_name" in indexes

    @pytest.mark.asyncio
    async def test_create_indexes_is_repeatable(self, identity_context):
        await create_indexes(identity_context)

        indexes = await identity_context.roles.index_information()
        assert "name_unique" in indexes

    @pytest.mark.asyncio
    async def test_index_conflict_is_logged_not_raised(self, mock_context, mock_collection, caplog):
        mock_collection.create_index.side_effect = OperationFailure("index exists with different options")

        await create_indexes(mock_context)

        assert mock_collection.create_index.await_count == 4
        assert "Could not create index" in caplog.text
