"""
Database module - MongoDB connection, identity context and index definitions.
"""
from mongo_identity.database.connections import (
    close_connections,
    create_client,
    get_mongo_client,
)
from mongo_identity.database.context import DocumentCollection, IdentityDatabaseContext
from mongo_identity.database.databases import identity_db
from mongo_identity.database.registry import create_indexes

__all__ = [
    "close_connections",
    "create_client",
    "get_mongo_client",
    "DocumentCollection",
    "IdentityDatabaseContext",
    "identity_db",
    "create_indexes",
]
