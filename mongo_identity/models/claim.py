"""
Claim model shared by users and roles.
"""
from pydantic import BaseModel, ConfigDict, Field


class Claim(BaseModel):
    """
    A (type, value) pair attached to an account.

    Stored as a sub-document of the account's `claims` array. Two claims are
    equal when both type and value match.
    """
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Claim type, e.g. 'dept'")
    value: str = Field(..., description="Claim value, e.g. 'eng'")

    def to_document(self) -> dict:
        return self.model_dump()
