"""
User model for the identity database.
"""
from datetime import datetime, timezone
from typing import Annotated, ClassVar, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from mongo_identity.models.account import IdentityAccount


def _to_bson_datetime(value: datetime) -> datetime:
    """UTC with millisecond precision, the form a BSON date reads back as."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


# Naive values are taken to be UTC
BsonDatetime = Annotated[datetime, AfterValidator(_to_bson_datetime)]


class UserLoginInfo(BaseModel):
    """External login linked to a user (e.g. an OAuth provider account)."""
    model_config = ConfigDict(frozen=True)

    login_provider: str = Field(..., description="Provider name, e.g. 'github'")
    provider_key: str = Field(..., description="User key at the provider")
    provider_display_name: Optional[str] = Field(None, description="Display name of the provider")


class IdentityUser(IdentityAccount):
    """
    User document model for the identity_db.users collection.

    Only the name and claim fields are managed by the store. The credential
    and profile fields are carried so documents written by other tools
    round-trip untouched.
    """
    model_config = ConfigDict(validate_assignment=True)

    NAME_FIELD: ClassVar[str] = "user_name"
    NORMALIZED_NAME_FIELD: ClassVar[str] = "normalized_user_name"

    user_name: Optional[str] = Field(None, description="Unique user name")
    normalized_user_name: Optional[str] = Field(
        None,
        description="Canonical (upper-case) user name used for lookups"
    )
    email: Optional[str] = None
    normalized_email: Optional[str] = None
    email_confirmed: bool = False
    password_hash: Optional[str] = None
    security_stamp: Optional[str] = None
    phone_number: Optional[str] = None
    phone_number_confirmed: bool = False
    two_factor_enabled: bool = False
    lockout_end: Optional[BsonDatetime] = None
    lockout_enabled: bool = False
    access_failed_count: int = 0
    logins: list[UserLoginInfo] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list, description="Role names (not managed)")
