"""Doubly linked list with a dummy node marking the end of the sequence."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Optional

from .dnode import DNode

Compare = Callable[[Any, Any], bool]


class LinkedList:
    """A doubly linked list whose positions are its nodes.

    ``begin()`` gives the first node and ``end()`` the dummy node that follows
    the last one. Positions stay valid across insertions, removals of other
    nodes and splices, which move nodes between lists without copying.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._dummy = DNode.dummy()
        self._size = 0
        for item in items:
            self.push_back(item)

    @classmethod
    def unfold(cls, text: str) -> "LinkedList":
        """Build a list of ints from the format '[ item1 item2 ... ]'."""
        tokens = iter(text.split())
        if next(tokens, None) != "[":
            raise ValueError("Wrong input format.")
        result = cls()
        for token in tokens:
            if token == "]":
                return result
            try:
                result.push_back(int(token))
            except ValueError:
                raise ValueError("Wrong input format.") from None
        raise ValueError("Wrong input format.")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._dummy.next
        while node is not self._dummy:
            yield node.item()
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("front of an empty list")
        return self._dummy.next.item()

    def back(self) -> Any:
        if self.is_empty():
            raise IndexError("back of an empty list")
        return self._dummy.prev.item()

    def fold(self) -> str:
        """Return the text form '[ item1 item2 ... ]'."""
        return " ".join(["[", *(str(item) for item in self), "]"])

    def begin(self) -> DNode:
        """Position of the first item, or ``end()`` when empty."""
        return self._dummy.next

    def end(self) -> DNode:
        """Position one past the last item."""
        return self._dummy

    def find(self, item: Any, start: Optional[DNode] = None) -> DNode:
        """Position of the first item equal to ``item`` from ``start`` on, or ``end()``."""
        node = self.begin() if start is None else start
        while node is not self._dummy and node.item() != item:
            node = node.next
        return node

    def _hook(self, node: DNode, pos: DNode) -> None:
        node.prev = pos.prev
        node.next = pos
        pos.prev.next = node
        pos.prev = node
        self._size += 1

    def _unhook(self, node: DNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.next = None
        node.prev = None
        self._size -= 1

    def insert(self, pos: DNode, item: Any) -> DNode:
        """Insert ``item`` before ``pos`` and return its position."""
        node = DNode(item)
        self._hook(node, pos)
        return node

    def remove(self, pos: DNode) -> DNode:
        """Remove the item at ``pos`` and return the position that followed it."""
        if pos is self._dummy or pos.is_dummy():
            raise IndexError("cannot remove the end position")
        following = pos.next
        self._unhook(pos)
        return following

    def push_front(self, item: Any) -> None:
        self.insert(self.begin(), item)

    def push_back(self, item: Any) -> None:
        self.insert(self.end(), item)

    def pop_front(self) -> Any:
        """Remove and return the first item."""
        if self.is_empty():
            raise IndexError("pop from an empty list")
        item = self.front()
        self.remove(self.begin())
        return item

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("pop from an empty list")
        item = self.back()
        self.remove(self._dummy.prev)
        return item

    def splice(
        self,
        pos: DNode,
        other: "LinkedList",
        first: Optional[DNode] = None,
        last: Optional[DNode] = None,
    ) -> None:
        """Move nodes of ``other`` before ``pos``.

        With no ``first`` every node moves; with ``first`` alone only that
        node moves; with both the range ``[first, last)`` moves.
        """
        if first is None:
            first, last = other.begin(), other.end()
        elif last is None:
            if first is other._dummy:
                raise IndexError("cannot splice the end position")
            last = first.next
        moving = []
        node = first
        while node is not last:
            if node is other._dummy:
                raise ValueError("range does not belong to the other list")
            moving.append(node)
            node = node.next
        for node in moving:
            other._unhook(node)
            self._hook(node, pos)

    def merge(self, other: "LinkedList", cmp: Compare = operator.lt) -> None:
        """Merge the sorted ``other`` into this sorted list, emptying ``other``."""
        if other is self:
            return
        pos = self.begin()
        while not other.is_empty():
            if pos is self._dummy:
                self.splice(pos, other)
                break
            candidate = other.begin()
            if cmp(candidate.item(), pos.item()):
                self.splice(pos, other, candidate)
            else:
                pos = pos.next

    def sort(self, cmp: Compare = operator.lt) -> None:
        """Stable merge sort in O(N log N)."""
        if self._size < 2:
            return
        middle = self.begin()
        for _ in range(self._size // 2):
            middle = middle.next
        second_half = LinkedList()
        second_half.splice(second_half.end(), self, middle, self.end())
        self.sort(cmp)
        second_half.sort(cmp)
        self.merge(second_half, cmp)