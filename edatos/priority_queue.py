"""Priority queue built on a heap."""

from __future__ import annotations

import operator
from typing import Any, List, Optional

from .heap import Compare, Heap


class PriorityQueue:
    """A priority queue whose front is the item ``comp`` puts first.

    The default comparison gives precedence to the greatest items.
    """

    def __init__(
        self, values: Optional[List[Any]] = None, comp: Compare = operator.ge
    ) -> None:
        if values is None:
            values = []
        if values:
            raise ValueError("the buffer of a new priority queue must be empty")
        self._heap = Heap(values, comp)

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def __len__(self) -> int:
        return len(self._heap)

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("front of an empty priority queue")
        return self._heap.item()

    def enqueue(self, item: Any) -> None:
        self._heap.insert(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise IndexError("dequeue from an empty priority queue")
        return self._heap.remove()