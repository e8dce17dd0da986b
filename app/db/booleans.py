"""
Boolean normalization between Python and the store.

Stores may hand back 0/1, "true"/"false" or native booleans depending on the
engine and driver. Everything touching ``is_correct`` goes through here.
"""
import numbers
from typing import Any

from sqlalchemy.types import Integer, TypeDecorator

_TRUE_STRINGS = {"true", "1"}


def to_storage(value: bool) -> int:
    """Canonical storage encoding of a boolean."""
    return 1 if value else 0


def from_storage(value: Any) -> bool:
    """
    Read a boolean from whatever the store returned.

    Native ``True``, numeric ``1`` and the strings ``"true"``/``"1"`` are true.
    Anything else, ``None`` included, is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Number):
        return value == 1
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


class StorageBoolean(TypeDecorator):
    """Integer column that always round-trips through to_storage/from_storage."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return to_storage(from_storage(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return from_storage(value)
