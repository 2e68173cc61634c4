"""
Narrow capability interfaces implemented by the account stores.

Hosts depend on the capability they need (e.g. only ClaimCapable) rather
than on a concrete store class.
"""
import asyncio
from typing import Iterable, Optional, Protocol, TypeVar, runtime_checkable

from mongo_identity.models.claim import Claim
from mongo_identity.models.user import UserLoginInfo

TAccount = TypeVar("TAccount")


@runtime_checkable
class Creatable(Protocol[TAccount]):
    """Create, update, delete and look up accounts."""

    async def create(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> None: ...

    async def update(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> None: ...

    async def delete(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> None: ...

    async def find_by_id(
        self, account_id: Optional[str], cancellation: Optional[asyncio.Event] = None
    ) -> Optional[TAccount]: ...

    async def find_by_normalized_name(
        self, normalized_name: Optional[str], cancellation: Optional[asyncio.Event] = None
    ) -> Optional[TAccount]: ...

    def dispose(self) -> None: ...


@runtime_checkable
class Queryable(Protocol[TAccount]):
    """Unfiltered enumeration of every account."""

    async def list_all(self, cancellation: Optional[asyncio.Event] = None) -> list[TAccount]: ...


@runtime_checkable
class ClaimCapable(Protocol[TAccount]):
    """Single-claim management on an account."""

    async def get_claims(
        self, account: TAccount, cancellation: Optional[asyncio.Event] = None
    ) -> list[Claim]: ...

    async def add_claim(
        self, account: TAccount, claim: Claim, cancellation: Optional[asyncio.Event] = None
    ) -> None: ...

    async def remove_claim(
        self, account: TAccount, claim: Claim, cancellation: Optional[asyncio.Event] = None
    ) -> None: ...


@runtime_checkable
class BulkClaimCapable(Protocol[TAccount]):
    """Batch claim management (users only)."""

    async def add_claims(
        self, account: TAccount, claims: Iterable[Claim], cancellation: Optional[asyncio.Event] = None
    ) -> None: ...

    async def remove_claims(
        self, account: TAccount, claims: Iterable[Claim], cancellation: Optional[asyncio.Event] = None
    ) -> None: ...

    async def replace_claim(
        self,
        account: TAccount,
        claim: Claim,
        new_claim: Claim,
        cancellation: Optional[asyncio.Event] = None,
    ) -> None: ...


@runtime_checkable
class LoginCapable(Protocol[TAccount]):
    """External login linking (users only)."""

    async def add_login(
        self, account: TAccount, login: UserLoginInfo, cancellation: Optional[asyncio.Event] = None
    ) -> None: ...
