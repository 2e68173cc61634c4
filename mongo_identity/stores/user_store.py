"""
User store: CRUD, lookups, claims and external logins for user documents.

The credential and profile operations (password, security stamp, email,
phone, lockout, two-factor, role membership) are part of the declared user
contract but are not backed by this store; they raise NotSupportedError so
callers can tell a missing feature from a failed one.
"""
import asyncio
from datetime import datetime
from typing import Iterable, NoReturn, Optional

from mongo_identity.core.exceptions import (
    DuplicateUserNameError,
    InvalidArgumentError,
    NotSupportedError,
)
from mongo_identity.core.keys import STRING_KEYS, KeyCodec
from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.models.claim import Claim
from mongo_identity.models.user import IdentityUser, UserLoginInfo
from mongo_identity.stores.base import AccountStore, TKey


class UserStore(AccountStore[IdentityUser, TKey]):
    """Store for users in the context's users collection."""

    duplicate_error = DuplicateUserNameError

    def __init__(
        self,
        context: IdentityDatabaseContext,
        key_codec: KeyCodec[TKey] = STRING_KEYS,
        user_model: type[IdentityUser] = IdentityUser,
    ):
        if context is None:
            raise InvalidArgumentError("context")
        super().__init__(context.users, user_model, key_codec)
        self.context = context

    # ==================== Bulk claims ====================

    async def add_claims(
        self,
        user: IdentityUser,
        claims: Iterable[Claim],
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """
        Append every claim not already present, in one write.

        Duplicates within `claims` are collapsed as well. No write is issued
        when nothing is new.
        """
        self._begin("add_claims", cancellation)
        self._require(user, "user")
        if claims is None:
            return

        new_claims: list[Claim] = []
        for claim in claims:
            if claim is None or user.has_claim(claim):
                continue
            user.claims.append(claim)
            new_claims.append(claim)

        if not new_claims:
            return

        update = {"$push": {"claims": {"$each": [c.to_document() for c in new_claims]}}}
        await self._update_document(user.id, update, "add_claims")

    async def remove_claims(
        self,
        user: IdentityUser,
        claims: Iterable[Claim],
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """Remove every copy of each listed claim that is present, in one write."""
        self._begin("remove_claims", cancellation)
        self._require(user, "user")
        if claims is None or not user.claims:
            return

        removed: list[Claim] = []
        for claim in claims:
            if claim is None or not user.has_claim(claim):
                continue
            user.claims = [c for c in user.claims if c != claim]
            removed.append(claim)

        if not removed:
            return

        update = {"$pullAll": {"claims": [c.to_document() for c in removed]}}
        await self._update_document(user.id, update, "remove_claims")

    async def replace_claim(
        self,
        user: IdentityUser,
        claim: Claim,
        new_claim: Claim,
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """Swap every matching claim for `new_claim`, then store the whole list."""
        self._begin("replace_claim", cancellation)
        self._require(user, "user")
        self._require(claim, "claim")
        self._require(new_claim, "new_claim")

        if not user.has_claim(claim):
            return

        user.claims = [new_claim if c == claim else c for c in user.claims]
        update = {"$set": {"claims": [c.to_document() for c in user.claims]}}
        await self._update_document(user.id, update, "replace_claim")

    # ==================== External logins ====================

    async def add_login(
        self,
        user: IdentityUser,
        login: UserLoginInfo,
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """Link an external login to the user."""
        self._begin("add_login", cancellation)
        self._require(user, "user")
        self._require(login, "login")

        user.logins.append(login)
        update = {"$push": {"logins": login.model_dump()}}
        await self._update_document(user.id, update, "add_login")

    async def remove_login(
        self,
        user: IdentityUser,
        login_provider: str,
        provider_key: str,
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        self._not_supported("remove_login", cancellation)

    async def get_logins(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> list[UserLoginInfo]:
        self._not_supported("get_logins", cancellation)

    async def find_by_login(
        self,
        login_provider: str,
        provider_key: str,
        cancellation: Optional[asyncio.Event] = None,
    ) -> Optional[IdentityUser]:
        self._not_supported("find_by_login", cancellation)

    # ==================== Unsupported: roles ====================

    async def add_to_role(
        self, user: IdentityUser, role_name: str, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("add_to_role", cancellation)

    async def remove_from_role(
        self, user: IdentityUser, role_name: str, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("remove_from_role", cancellation)

    async def get_roles(self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None) -> list[str]:
        self._not_supported("get_roles", cancellation)

    async def is_in_role(
        self, user: IdentityUser, role_name: str, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        self._not_supported("is_in_role", cancellation)

    async def get_users_in_role(
        self, role_name: str, cancellation: Optional[asyncio.Event] = None
    ) -> list[IdentityUser]:
        self._not_supported("get_users_in_role", cancellation)

    async def get_users_for_claim(
        self, claim: Claim, cancellation: Optional[asyncio.Event] = None
    ) -> list[IdentityUser]:
        self._not_supported("get_users_for_claim", cancellation)

    # ==================== Unsupported: password and security stamp ====================

    async def set_password_hash(
        self, user: IdentityUser, password_hash: Optional[str], cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_password_hash", cancellation)

    async def get_password_hash(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[str]:
        self._not_supported("get_password_hash", cancellation)

    async def has_password(self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None) -> bool:
        self._not_supported("has_password", cancellation)

    async def set_security_stamp(
        self, user: IdentityUser, stamp: str, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_security_stamp", cancellation)

    async def get_security_stamp(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[str]:
        self._not_supported("get_security_stamp", cancellation)

    # ==================== Unsupported: email ====================

    async def set_email(
        self, user: IdentityUser, email: Optional[str], cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_email", cancellation)

    async def get_email(self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None) -> Optional[str]:
        self._not_supported("get_email", cancellation)

    async def get_email_confirmed(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        self._not_supported("get_email_confirmed", cancellation)

    async def set_email_confirmed(
        self, user: IdentityUser, confirmed: bool, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_email_confirmed", cancellation)

    async def find_by_email(
        self, normalized_email: str, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[IdentityUser]:
        self._not_supported("find_by_email", cancellation)

    async def get_normalized_email(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[str]:
        self._not_supported("get_normalized_email", cancellation)

    async def set_normalized_email(
        self, user: IdentityUser, normalized_email: Optional[str], cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_normalized_email", cancellation)

    # ==================== Unsupported: lockout ====================

    async def get_lockout_end_date(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[datetime]:
        self._not_supported("get_lockout_end_date", cancellation)

    async def set_lockout_end_date(
        self, user: IdentityUser, lockout_end: Optional[datetime], cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_lockout_end_date", cancellation)

    async def increment_access_failed_count(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> int:
        self._not_supported("increment_access_failed_count", cancellation)

    async def reset_access_failed_count(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("reset_access_failed_count", cancellation)

    async def get_access_failed_count(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> int:
        self._not_supported("get_access_failed_count", cancellation)

    async def get_lockout_enabled(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        self._not_supported("get_lockout_enabled", cancellation)

    async def set_lockout_enabled(
        self, user: IdentityUser, enabled: bool, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_lockout_enabled", cancellation)

    # ==================== Unsupported: phone and two-factor ====================

    async def set_phone_number(
        self, user: IdentityUser, phone_number: Optional[str], cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_phone_number", cancellation)

    async def get_phone_number(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[str]:
        self._not_supported("get_phone_number", cancellation)

    async def get_phone_number_confirmed(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        self._not_supported("get_phone_number_confirmed", cancellation)

    async def set_phone_number_confirmed(
        self, user: IdentityUser, confirmed: bool, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_phone_number_confirmed", cancellation)

    async def set_two_factor_enabled(
        self, user: IdentityUser, enabled: bool, cancellation: Optional[asyncio.Event] = None
    ) -> None:
        self._not_supported("set_two_factor_enabled", cancellation)

    async def get_two_factor_enabled(
        self, user: IdentityUser, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        self._not_supported("get_two_factor_enabled", cancellation)

    def _not_supported(self, operation: str, cancellation: Optional[asyncio.Event]) -> NoReturn:
        self._begin(operation, cancellation)
        raise NotSupportedError(operation)
