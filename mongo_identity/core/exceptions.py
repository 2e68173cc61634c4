"""
Identity store exceptions.

Every failure a store surfaces derives from IdentityStoreError, which carries
a machine-readable error code and a details dict so that callers (and the
HTTP layer) can report failures consistently.
"""
from typing import Any, Dict, Optional


class IdentityStoreError(Exception):
    """
    Base exception for all account store errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(IdentityStoreError, ValueError):
    """A required argument was missing or blank. Raised before any I/O."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(
            message or f"Argument '{argument}' is required",
            "InvalidArgument",
            {"argument": argument},
        )
        self.argument = argument


class DuplicateNameError(IdentityStoreError):
    """
    Another account of the same kind already uses this name.

    Raised both by the pre-write lookup and when the storage engine rejects
    the write with a unique index violation.
    """

    default_code = "DuplicateName"
    template = "Name '{name}' is already taken."

    def __init__(self, name: Optional[str]):
        super().__init__(
            self.template.format(name=name),
            self.default_code,
            {"name": name},
        )
        self.name = name


class DuplicateRoleNameError(DuplicateNameError):
    default_code = "DuplicateRoleName"
    template = "Role name '{name}' is already taken."


class DuplicateUserNameError(DuplicateNameError):
    default_code = "DuplicateUserName"
    template = "User name '{name}' is already taken."


class StoreError(IdentityStoreError):
    """Wraps an underlying driver or I/O failure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        details = {}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(message, "StoreError", details)
        self.cause = cause


class StoreDisposedError(IdentityStoreError):
    """An operation was attempted on a store after dispose()."""

    def __init__(self, store_name: str):
        super().__init__(
            f"Cannot access a disposed object: {store_name}",
            "Disposed",
            {"store": store_name},
        )


class NotSupportedError(IdentityStoreError, NotImplementedError):
    """The operation is part of the declared contract but has no implementation."""

    def __init__(self, operation: str):
        super().__init__(
            f"Operation '{operation}' is not supported by this store",
            "NotSupported",
            {"operation": operation},
        )
        self.operation = operation


class OperationCancelledError(IdentityStoreError):
    """The caller's cancellation signal was set before the operation started."""

    def __init__(self, operation: Optional[str] = None):
        super().__init__(
            "The operation was cancelled",
            "OperationCancelled",
            {"operation": operation} if operation else None,
        )
