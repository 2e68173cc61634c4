"""
Index definitions for the identity collections.

Collection and database names come from Settings; the keys here name the
account kind each index set belongs to.
"""


class Collections:
    """Account kinds stored in the identity database."""
    USERS = "users"
    ROLES = "roles"

    # Unique name indexes are what actually prevents two concurrent creates
    # from sharing a name.
    INDEXES = {
        USERS: [
            {"keys": [("user_name", 1)], "unique": True, "name": "user_name_unique"},
            {"keys": [("normalized_user_name", 1)], "name": "normalized_user_name"},
        ],
        ROLES: [
            {"keys": [("name", 1)], "unique": True, "name": "name_unique"},
            {"keys": [("normalized_name", 1)], "name": "normalized_name"},
        ],
    }
