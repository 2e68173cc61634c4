"""
API routers.
"""
from mongo_identity.routers import health, roles, users

__all__ = ["health", "roles", "users"]
