"""
FastAPI dependencies providing the identity stores.
"""
from typing import AsyncIterator

from fastapi import Depends

from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.stores.role_store import RoleStore
from mongo_identity.stores.user_store import UserStore


async def get_database_context() -> IdentityDatabaseContext:
    """Dependency to get the identity database context on the shared client."""
    return await IdentityDatabaseContext.from_settings()


async def get_role_store(
    context: IdentityDatabaseContext = Depends(get_database_context),
) -> AsyncIterator[RoleStore]:
    """Dependency yielding a RoleStore that is disposed after the request."""
    async with RoleStore(context) as store:
        yield store


async def get_user_store(
    context: IdentityDatabaseContext = Depends(get_database_context),
) -> AsyncIterator[UserStore]:
    """Dependency yielding a UserStore that is disposed after the request."""
    async with UserStore(context) as store:
        yield store
