"""
Pydantic models for identity documents.
"""
from mongo_identity.models.claim import Claim
from mongo_identity.models.account import IdentityAccount
from mongo_identity.models.role import IdentityRole
from mongo_identity.models.user import IdentityUser, UserLoginInfo

__all__ = [
    "Claim",
    "IdentityAccount",
    "IdentityRole",
    "IdentityUser",
    "UserLoginInfo",
]
