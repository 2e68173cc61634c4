"""
Generic MongoDB account store shared by users and roles.
"""
import asyncio
import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, TypeVar

from pymongo.errors import DuplicateKeyError, PyMongoError

from mongo_identity.core.exceptions import (
    DuplicateNameError,
    InvalidArgumentError,
    StoreDisposedError,
    StoreError,
)
from mongo_identity.core.keys import STRING_KEYS, KeyCodec
from mongo_identity.core.lifecycle import StoreState, throw_if_cancelled
from mongo_identity.database.context import DocumentCollection
from mongo_identity.models.account import IdentityAccount
from mongo_identity.models.claim import Claim

logger = logging.getLogger(__name__)

TAccount = TypeVar("TAccount", bound=IdentityAccount)
TKey = TypeVar("TKey")

# Never accept partial results from a sharded cluster
FIND_OPTIONS = {"allow_partial_results": False}


class AccountStore(Generic[TAccount, TKey]):
    """
    CRUD and claim management for one kind of account.

    Each account is a single document keyed by `_id`. Names are unique per
    kind: a lookup before every create/update gives a descriptive error, and
    the unique index created by `database.registry` is the authoritative
    guard (a violation from the engine is reported the same way).

    Claim operations mutate the caller's in-memory account first and then
    apply the same change to the stored document, so one account instance
    must not be shared between concurrent writers.

    The store keeps no cache and does not own the collection: dispose() only
    marks the store unusable.
    """

    duplicate_error: type[DuplicateNameError] = DuplicateNameError

    def __init__(
        self,
        collection: DocumentCollection,
        account_model: type[TAccount],
        key_codec: KeyCodec[TKey] = STRING_KEYS,
    ):
        if collection is None:
            raise InvalidArgumentError("collection")
        self._collection = collection
        self.account_model = account_model
        self.key_codec = key_codec
        self._state = StoreState.OPEN

    # ==================== Lifecycle ====================

    @property
    def state(self) -> StoreState:
        return self._state

    def dispose(self) -> None:
        """Mark the store disposed. The collection is left open."""
        self._state = StoreState.DISPOSED

    async def __aenter__(self):
        self._ensure_open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _ensure_open(self) -> None:
        if self._state is StoreState.DISPOSED:
            raise StoreDisposedError(type(self).__name__)

    def _begin(self, operation: str, cancellation: Optional[asyncio.Event]) -> None:
        self._ensure_open()
        throw_if_cancelled(cancellation, operation)

    @staticmethod
    def _require(value: Any, argument: str) -> None:
        if value is None:
            raise InvalidArgumentError(argument)

    def _require_name(self, account: TAccount) -> None:
        name = account.account_name
        if name is None or not name.strip():
            raise InvalidArgumentError(account.NAME_FIELD)

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        """Re-raise driver failures as StoreError."""
        try:
            yield
        except PyMongoError as e:
            logger.error(f"{type(self).__name__}.{operation} failed: {e}")
            raise StoreError(f"{operation} failed", cause=e) from e

    # ==================== Account CRUD ====================

    async def create(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> None:
        """
        Insert a new account, assigning its id if it has none.

        Raises:
            InvalidArgumentError: If the account or its name is missing
            DuplicateNameError: If another account already uses the name
            StoreError: On any other storage failure
        """
        self._begin("create", cancellation)
        self._require(account, "account")
        self._require_name(account)

        if account.id is None:
            account.id = self.key_codec.generate()

        with self._storage_errors("create"):
            await self._raise_if_name_taken(account)
            try:
                await self._collection.insert_one(account.to_document())
            except DuplicateKeyError as e:
                logger.warning(f"Unique index rejected {self.account_model.__name__} '{account}'")
                raise self.duplicate_error(account.account_name) from e

        logger.debug(f"Created {self.account_model.__name__} {account.id!r}")

    async def update(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> None:
        """
        Replace the stored account by id, inserting it if absent.

        Raises:
            InvalidArgumentError: If the account or its name is missing
            DuplicateNameError: If another account already uses the name
            StoreError: On any other storage failure
        """
        self._begin("update", cancellation)
        self._require(account, "account")
        self._require_name(account)

        if account.id is None:
            account.id = self.key_codec.generate()

        with self._storage_errors("update"):
            await self._raise_if_name_taken(account)
            try:
                await self._collection.replace_one(
                    {"_id": account.id},
                    account.to_document(),
                    upsert=True,
                )
            except DuplicateKeyError as e:
                logger.warning(f"Unique index rejected {self.account_model.__name__} '{account}'")
                raise self.duplicate_error(account.account_name) from e

        logger.debug(f"Updated {self.account_model.__name__} {account.id!r}")

    async def delete(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> None:
        """Delete the account by id. Deleting a missing account is a no-op."""
        self._begin("delete", cancellation)
        self._require(account, "account")

        with self._storage_errors("delete"):
            await self._collection.delete_one({"_id": account.id})

        logger.debug(f"Deleted {self.account_model.__name__} {account.id!r}")

    async def find_by_id(
        self,
        account_id: Optional[str],
        cancellation: Optional[asyncio.Event] = None,
    ) -> Optional[TAccount]:
        """
        Get an account by the string form of its id.

        Returns:
            The account, or None if the id is blank, unparseable or unknown
        """
        self._begin("find_by_id", cancellation)
        key = self.key_codec.try_parse(account_id)
        if key is None:
            return None
        return await self._find_single({"_id": key})

    async def find_by_normalized_name(
        self,
        normalized_name: Optional[str],
        cancellation: Optional[asyncio.Event] = None,
    ) -> Optional[TAccount]:
        """
        Get an account by exact normalized name. The caller normalizes.

        Returns:
            The account, or None if the name is blank or unknown
        """
        self._begin("find_by_normalized_name", cancellation)
        if normalized_name is None or not normalized_name.strip():
            return None
        return await self._find_single({self.account_model.NORMALIZED_NAME_FIELD: normalized_name})

    async def list_all(self, cancellation: Optional[asyncio.Event] = None) -> list[TAccount]:
        """
        Load every account with an id.

        The whole collection is materialized; intended for small deployments.
        """
        self._begin("list_all", cancellation)
        with self._storage_errors("list_all"):
            documents = await self._collection.find(
                {"_id": {"$ne": None}}, **FIND_OPTIONS
            ).to_list(length=None)
        return [self.account_model.from_document(doc) for doc in documents]

    # ==================== In-memory accessors ====================

    async def get_id(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> Optional[str]:
        self._begin("get_id", cancellation)
        self._require(account, "account")
        return self.key_codec.to_string(account.id)

    async def get_name(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> Optional[str]:
        self._begin("get_name", cancellation)
        self._require(account, "account")
        return account.account_name

    async def set_name(
        self,
        account: TAccount,
        name: Optional[str],
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """Set the name in memory only; persist with update()."""
        self._begin("set_name", cancellation)
        self._require(account, "account")
        setattr(account, account.NAME_FIELD, name)

    async def get_normalized_name(
        self, account: TAccount, cancellation: Optional[asyncio.Event] = None
    ) -> Optional[str]:
        self._begin("get_normalized_name", cancellation)
        self._require(account, "account")
        return account.account_normalized_name

    async def set_normalized_name(
        self,
        account: TAccount,
        normalized_name: Optional[str],
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        self._begin("set_normalized_name", cancellation)
        self._require(account, "account")
        setattr(account, account.NORMALIZED_NAME_FIELD, normalized_name)

    # ==================== Claims ====================

    async def get_claims(self, account: TAccount, cancellation: Optional[asyncio.Event] = None) -> list[Claim]:
        """Return a copy of the account's in-memory claims."""
        self._begin("get_claims", cancellation)
        self._require(account, "account")
        return list(account.claims)

    async def add_claim(
        self,
        account: TAccount,
        claim: Claim,
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """Append a claim unless an identical (type, value) pair is already present."""
        self._begin("add_claim", cancellation)
        self._require(account, "account")
        self._require(claim, "claim")

        if account.has_claim(claim):
            return

        account.claims.append(claim)
        await self._update_document(account.id, {"$push": {"claims": claim.to_document()}}, "add_claim")

    async def remove_claim(
        self,
        account: TAccount,
        claim: Claim,
        cancellation: Optional[asyncio.Event] = None,
    ) -> None:
        """
        Remove every identical (type, value) pair, as $pull does in storage.

        No-op without I/O if the claim is absent.
        """
        self._begin("remove_claim", cancellation)
        self._require(account, "account")
        self._require(claim, "claim")

        if not account.has_claim(claim):
            return

        account.claims = [c for c in account.claims if c != claim]
        await self._update_document(account.id, {"$pull": {"claims": claim.to_document()}}, "remove_claim")

    # ==================== Helpers ====================

    async def _raise_if_name_taken(self, account: TAccount) -> None:
        """Reject the account if another id already uses its name."""
        name_filter = {
            "_id": {"$ne": account.id},
            account.NAME_FIELD: account.account_name,
        }
        existing = await self._collection.find(name_filter, **FIND_OPTIONS).to_list(length=1)
        if existing:
            logger.warning(f"Duplicate {self.account_model.__name__} name '{account.account_name}'")
            raise self.duplicate_error(account.account_name)

    async def _find_single(self, query: dict) -> Optional[TAccount]:
        with self._storage_errors("find"):
            documents = await self._collection.find(query, **FIND_OPTIONS).to_list(length=2)
        if not documents:
            return None
        if len(documents) > 1:
            raise StoreError(f"More than one {self.account_model.__name__} matches {query}")
        return self.account_model.from_document(documents[0])

    async def _update_document(self, account_id: TKey, update: dict, operation: str) -> None:
        with self._storage_errors(operation):
            await self._collection.update_one({"_id": account_id}, update)
        logger.debug(f"{operation} applied to {self.account_model.__name__} {account_id!r}")
