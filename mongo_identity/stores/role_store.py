"""
Role store: CRUD, lookups and claims for role documents.
"""
from mongo_identity.core.exceptions import DuplicateRoleNameError, InvalidArgumentError
from mongo_identity.core.keys import STRING_KEYS, KeyCodec
from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.models.role import IdentityRole
from mongo_identity.stores.base import AccountStore, TKey


class RoleStore(AccountStore[IdentityRole, TKey]):
    """
    Store for roles in the context's roles collection.

    Usage:
        async with RoleStore(context) as roles:
            admin = IdentityRole(name="Admin", normalized_name="ADMIN")
            await roles.create(admin)
    """

    duplicate_error = DuplicateRoleNameError

    def __init__(
        self,
        context: IdentityDatabaseContext,
        key_codec: KeyCodec[TKey] = STRING_KEYS,
        role_model: type[IdentityRole] = IdentityRole,
    ):
        if context is None:
            raise InvalidArgumentError("context")
        super().__init__(context.roles, role_model, key_codec)
        self.context = context
