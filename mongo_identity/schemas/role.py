"""
Role request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from mongo_identity.schemas.claim import ClaimPayload


class RoleCreate(BaseModel):
    """Create role request."""
    name: str = Field(..., min_length=1, max_length=256, description="Role name")
    normalized_name: Optional[str] = Field(
        None,
        description="Lookup name (defaults to the upper-cased name)"
    )

    def resolved_normalized_name(self) -> str:
        return self.normalized_name or self.name.upper()


class RoleUpdate(RoleCreate):
    """Replace role request. Claims are kept as stored."""
    pass


class RoleResponse(BaseModel):
    """Role response."""
    id: str = Field(..., description="Role ID")
    name: str = Field(..., description="Role name")
    normalized_name: Optional[str] = Field(None, description="Lookup name")
    claims: list[ClaimPayload] = Field(default=[], description="Role claims")
