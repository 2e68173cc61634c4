"""
Base document model for accounts (users and roles).
"""
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from mongo_identity.models.claim import Claim


class IdentityAccount(BaseModel):
    """
    Account document stored one per account in its kind's collection.

    Subclasses name the fields that hold the display name and its
    normalized form so a single store implementation serves every kind.
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    NAME_FIELD: ClassVar[str] = "name"
    NORMALIZED_NAME_FIELD: ClassVar[str] = "normalized_name"

    id: Optional[Any] = Field(None, alias="_id", description="Account key, assigned on create")
    claims: list[Claim] = Field(default_factory=list, description="Claims attached to the account")

    @property
    def account_name(self) -> Optional[str]:
        return getattr(self, self.NAME_FIELD)

    @property
    def account_normalized_name(self) -> Optional[str]:
        return getattr(self, self.NORMALIZED_NAME_FIELD)

    def has_claim(self, claim: Claim) -> bool:
        return claim in self.claims

    def to_document(self) -> dict:
        """Serialize to a MongoDB document; unset (None) fields are not written."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, document: dict):
        return cls.model_validate(document)

    def __str__(self) -> str:
        return self.account_name or ""
