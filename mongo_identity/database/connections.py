"""
Shared MongoDB client for the identity stores.
"""
from datetime import timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from mongo_identity.config import get_settings

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


def create_client(mongo_uri: str) -> AsyncIOMotorClient:
    """
    Build a motor client that decodes BSON dates as UTC-aware datetimes.

    Account models normalise datetimes to UTC, so a naive value read back
    would not compare equal to the one that was written.
    """
    return AsyncIOMotorClient(mongo_uri, tz_aware=True, tzinfo=timezone.utc)


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create the application-wide MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_client(get_settings().mongo_uri)
    return _mongo_client


async def close_connections():
    """Close the shared MongoDB client."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
