"""
Account stores for users and roles.
"""
from mongo_identity.stores.base import AccountStore
from mongo_identity.stores.protocols import (
    BulkClaimCapable,
    ClaimCapable,
    Creatable,
    LoginCapable,
    Queryable,
)
from mongo_identity.stores.role_store import RoleStore
from mongo_identity.stores.user_store import UserStore

__all__ = [
    "AccountStore",
    "RoleStore",
    "UserStore",
    "Creatable",
    "Queryable",
    "ClaimCapable",
    "BulkClaimCapable",
    "LoginCapable",
]
