"""
Index management for the identity collections.
"""
import logging

from pymongo.errors import OperationFailure

from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.database.databases import identity_db

logger = logging.getLogger(__name__)


async def create_indexes(context: IdentityDatabaseContext) -> None:
    """
    Create the identity indexes on the context's collections.

    The unique name indexes are the authoritative guard against two accounts
    of the same kind sharing a name; the stores' pre-write lookup only gives
    a faster, friendlier error.
    """
    targets = {
        identity_db.Collections.USERS: context.users,
        identity_db.Collections.ROLES: context.roles,
    }
    for kind, collection in targets.items():
        for index_def in identity_db.Collections.INDEXES[kind]:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except OperationFailure as e:
                # Index might already exist with different options
                logger.warning(f"Could not create index {kwargs.get('name')} on {kind}: {e}")
