"""
Store lifecycle and cooperative cancellation helpers.
"""
import asyncio
from enum import Enum
from typing import Optional

from mongo_identity.core.exceptions import OperationCancelledError


class StoreState(str, Enum):
    """Lifecycle states of a store."""
    OPEN = "open"
    DISPOSED = "disposed"


def throw_if_cancelled(
    cancellation: Optional[asyncio.Event],
    operation: Optional[str] = None,
) -> None:
    """
    Fail fast if the caller already signalled cancellation.

    Raises:
        OperationCancelledError: If the event is set
    """
    if cancellation is not None and cancellation.is_set():
        raise OperationCancelledError(operation)
