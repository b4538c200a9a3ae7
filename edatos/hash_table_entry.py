"""Slot of an open-addressing hash table."""

from __future__ import annotations

import enum
from typing import Any

_MISSING = object()


class EntryState(enum.Enum):
    EMPTY = enum.auto()
    VALID = enum.auto()
    DELETED = enum.auto()


class HashTableEntry:
    """A key/value slot that is empty, holds a valid pair or is marked deleted."""

    def __init__(self, key: Any = _MISSING, value: Any = None) -> None:
        self._key: Any = None
        self._value: Any = None
        self.state = EntryState.EMPTY
        if key is not _MISSING:
            self.set(key, value)

    def __repr__(self) -> str:
        if self.is_empty():
            return "HashTableEntry()"
        return f"HashTableEntry({self._key!r}, {self._value!r}, {self.state.name})"

    def is_valid(self) -> bool:
        return self.state is EntryState.VALID

    def is_empty(self) -> bool:
        return self.state is EntryState.EMPTY

    def is_deleted(self) -> bool:
        return self.state is EntryState.DELETED

    def key(self) -> Any:
        if self.is_empty():
            raise ValueError("an empty entry holds no key")
        return self._key

    def value(self) -> Any:
        if self.is_empty():
            raise ValueError("an empty entry holds no value")
        return self._value

    def set(self, key: Any, value: Any) -> None:
        """Store a pair and mark the entry valid."""
        self._key = key
        self._value = value
        self.state = EntryState.VALID

    def set_value(self, value: Any) -> None:
        if not self.is_valid():
            raise ValueError("only a valid entry can change its value")
        self._value = value

    def set_deleted(self) -> None:
        if not self.is_valid():
            raise ValueError("only a valid entry can be deleted")
        self.state = EntryState.DELETED