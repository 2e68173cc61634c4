"""
FastAPI dependencies.
"""
from mongo_identity.dependencies.stores import (
    get_database_context,
    get_role_store,
    get_user_store,
)

__all__ = [
    "get_database_context",
    "get_role_store",
    "get_user_store",
]
