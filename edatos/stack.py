"""Stack built on a linked list."""

from __future__ import annotations

from typing import Any

from .linked_list import LinkedList


class Stack:
    """A last-in first-out stack."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def __len__(self) -> int:
        return len(self._items)

    def top(self) -> Any:
        if self.is_empty():
            raise IndexError("top of an empty stack")
        return self._items.front()

    def push(self, item: Any) -> None:
        self._items.push_front(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop_front()