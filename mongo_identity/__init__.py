"""
mongo-identity: MongoDB-backed user and role account stores.
"""
from mongo_identity.core.exceptions import (
    DuplicateNameError,
    IdentityStoreError,
    InvalidArgumentError,
    NotSupportedError,
    OperationCancelledError,
    StoreDisposedError,
    StoreError,
)
from mongo_identity.core.keys import OBJECT_ID_KEYS, STRING_KEYS, KeyCodec
from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.models import Claim, IdentityRole, IdentityUser, UserLoginInfo
from mongo_identity.stores import RoleStore, UserStore

__all__ = [
    "Claim",
    "IdentityRole",
    "IdentityUser",
    "UserLoginInfo",
    "IdentityDatabaseContext",
    "RoleStore",
    "UserStore",
    "KeyCodec",
    "STRING_KEYS",
    "OBJECT_ID_KEYS",
    "IdentityStoreError",
    "InvalidArgumentError",
    "DuplicateNameError",
    "StoreError",
    "StoreDisposedError",
    "NotSupportedError",
    "OperationCancelledError",
]
