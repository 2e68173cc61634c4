"""
Core module - errors, key codecs and store lifecycle helpers.
"""
from mongo_identity.core.exceptions import (
    IdentityStoreError,
    InvalidArgumentError,
    DuplicateNameError,
    DuplicateRoleNameError,
    DuplicateUserNameError,
    StoreError,
    StoreDisposedError,
    NotSupportedError,
    OperationCancelledError,
)
from mongo_identity.core.keys import KeyCodec, STRING_KEYS, OBJECT_ID_KEYS
from mongo_identity.core.lifecycle import StoreState, throw_if_cancelled

__all__ = [
    "IdentityStoreError",
    "InvalidArgumentError",
    "DuplicateNameError",
    "DuplicateRoleNameError",
    "DuplicateUserNameError",
    "StoreError",
    "StoreDisposedError",
    "NotSupportedError",
    "OperationCancelledError",
    "KeyCodec",
    "STRING_KEYS",
    "OBJECT_ID_KEYS",
    "StoreState",
    "throw_if_cancelled",
]
