"""
Role model for the identity database.
"""
from typing import Optional

from pydantic import Field

from mongo_identity.models.account import IdentityAccount


class IdentityRole(IdentityAccount):
    """
    Role document model for the identity_db.roles collection.
    """
    name: Optional[str] = Field(None, description="Unique role name")
    normalized_name: Optional[str] = Field(
        None,
        description="Canonical (upper-case) name used for lookups"
    )
