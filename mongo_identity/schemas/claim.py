"""
Claim request/response schemas.
"""
from pydantic import BaseModel, Field

from mongo_identity.models.claim import Claim


class ClaimPayload(BaseModel):
    """Claim in request and response bodies."""
    type: str = Field(..., min_length=1, description="Claim type")
    value: str = Field(..., description="Claim value")

    def to_claim(self) -> Claim:
        return Claim(type=self.type, value=self.value)

    @classmethod
    def from_claim(cls, claim: Claim) -> "ClaimPayload":
        return cls(type=claim.type, value=claim.value)
