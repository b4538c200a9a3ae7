"""Doubly linked node with support for an item-less dummy node."""

from __future__ import annotations

from typing import Any, Optional

_NO_ITEM = object()


class DNode:
    """A node holding an item and links to its neighbours."""

    def __init__(
        self,
        item: Any,
        next: Optional["DNode"] = None,
        prev: Optional["DNode"] = None,
    ) -> None:
        self._item = item
        self.next = next
        self.prev = prev

    @classmethod
    def dummy(cls) -> "DNode":
        """Create a dummy node, linked to itself in both directions."""
        node = cls(_NO_ITEM)
        node.next = node
        node.prev = node
        return node

    def is_dummy(self) -> bool:
        return self._item is _NO_ITEM

    def item(self) -> Any:
        """Return the stored item; a dummy node holds none."""
        if self.is_dummy():
            raise ValueError("a dummy node holds no item")
        return self._item

    def set_item(self, item: Any) -> None:
        self._item = item