"""
Identifier key codecs.

A store is parameterised over its key type. The caller supplies how keys are
parsed from and formatted to their canonical string form (used in URLs and
other textual lookups) and how new keys are generated.
"""
import uuid
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from bson import ObjectId

TKey = TypeVar("TKey")


@dataclass(frozen=True)
class KeyCodec(Generic[TKey]):
    """Two-way conversion between a key type and its string form."""

    parse: Callable[[str], TKey]
    format: Callable[[TKey], str]
    generate: Callable[[], TKey]

    def try_parse(self, text: Optional[str]) -> Optional[TKey]:
        """
        Parse a key from text.

        Returns:
            The key, or None if the text is blank or cannot be parsed
        """
        if text is None or not text.strip():
            return None
        try:
            return self.parse(text)
        except (ValueError, TypeError):
            return None

    def to_string(self, key: Optional[TKey]) -> Optional[str]:
        if key is None:
            return None
        return self.format(key)


def _parse_object_id(text: str) -> ObjectId:
    if not ObjectId.is_valid(text):
        raise ValueError(f"'{text}' is not a valid ObjectId")
    return ObjectId(text)


STRING_KEYS: KeyCodec[str] = KeyCodec(
    parse=str,
    format=str,
    generate=lambda: str(uuid.uuid4()),
)

OBJECT_ID_KEYS: KeyCodec[ObjectId] = KeyCodec(
    parse=_parse_object_id,
    format=str,
    generate=ObjectId,
)
