"""
Request/response schemas for the HTTP surface.
"""
from mongo_identity.schemas.claim import ClaimPayload
from mongo_identity.schemas.role import RoleCreate, RoleUpdate, RoleResponse
from mongo_identity.schemas.user import UserCreate, UserUpdate, UserResponse

__all__ = [
    "ClaimPayload",
    "RoleCreate",
    "RoleUpdate",
    "RoleResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]
