"""
Identity database context.

The context is the stores' only I/O dependency: one document collection per
account kind. Anything that provides the collection capability set below can
be injected (a motor collection in production, an in-memory fake in tests).
"""
from typing import Any, Optional, Protocol, runtime_checkable

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from mongo_identity.config import Settings, get_settings
from mongo_identity.core.exceptions import InvalidArgumentError
from mongo_identity.database.connections import create_client, get_mongo_client


@runtime_checkable
class DocumentCollection(Protocol):
    """Capability set a store needs from a document collection."""

    def find(self, filter: dict, *args: Any, **kwargs: Any) -> Any:
        """Return a cursor exposing an awaitable to_list(length)."""
        ...

    async def insert_one(self, document: dict, *args: Any, **kwargs: Any) -> Any:
        ...

    async def replace_one(self, filter: dict, replacement: dict, *args: Any, **kwargs: Any) -> Any:
        ...

    async def delete_one(self, filter: dict, *args: Any, **kwargs: Any) -> Any:
        ...

    async def update_one(self, filter: dict, update: dict, *args: Any, **kwargs: Any) -> Any:
        ...

    async def create_index(self, keys: Any, **kwargs: Any) -> Any:
        ...


class IdentityDatabaseContext:
    """Holds the users and roles collections shared by the stores."""

    def __init__(self, users: DocumentCollection, roles: DocumentCollection):
        """Initialize with externally owned collections."""
        if users is None:
            raise InvalidArgumentError("users")
        if roles is None:
            raise InvalidArgumentError("roles")
        self.users = users
        self.roles = roles

    @classmethod
    def from_database(
        cls,
        db: AsyncIOMotorDatabase,
        settings: Optional[Settings] = None,
    ) -> "IdentityDatabaseContext":
        """Build a context from a database handle using the configured collection names."""
        settings = settings or get_settings()
        return cls(
            users=db[settings.users_collection],
            roles=db[settings.roles_collection],
        )

    @classmethod
    def from_client(
        cls,
        client: AsyncIOMotorClient,
        settings: Optional[Settings] = None,
    ) -> "IdentityDatabaseContext":
        settings = settings or get_settings()
        return cls.from_database(client[settings.database_name], settings)

    @classmethod
    def from_uri(
        cls,
        mongo_uri: str,
        settings: Optional[Settings] = None,
    ) -> "IdentityDatabaseContext":
        """
        Build a context on a new client for the given connection string.

        The caller owns the created client (reachable via the collections'
        database) and is responsible for closing it.
        """
        if not mongo_uri or not mongo_uri.strip():
            raise InvalidArgumentError("mongo_uri")
        return cls.from_client(create_client(mongo_uri), settings)

    @classmethod
    async def from_settings(cls, settings: Optional[Settings] = None) -> "IdentityDatabaseContext":
        """Build a context on the shared application client."""
        client = await get_mongo_client()
        return cls.from_client(client, settings)
