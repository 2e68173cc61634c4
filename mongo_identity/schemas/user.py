"""
User request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from mongo_identity.schemas.claim import ClaimPayload


class UserCreate(BaseModel):
    """Create user request."""
    user_name: str = Field(..., min_length=1, max_length=256, description="Unique user name")
    normalized_user_name: Optional[str] = Field(
        None,
        description="Lookup name (defaults to the upper-cased user name)"
    )
    email: Optional[EmailStr] = Field(None, description="Contact email (stored, not managed)")

    def resolved_normalized_user_name(self) -> str:
        return self.normalized_user_name or self.user_name.upper()


class UserUpdate(UserCreate):
    """Replace user request. Claims and logins are kept as stored."""
    pass


class UserResponse(BaseModel):
    """User information response (excludes credentials)."""
    id: str = Field(..., description="User ID")
    user_name: str = Field(..., description="User name")
    normalized_user_name: Optional[str] = Field(None, description="Lookup name")
    email: Optional[str] = Field(None, description="Contact email")
    claims: list[ClaimPayload] = Field(default=[], description="User claims")
