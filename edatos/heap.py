"""Binary heap over a caller-supplied list, and heapsort."""

from __future__ import annotations

from typing import Any, Callable, List

Compare = Callable[[Any, Any], bool]


class Heap:
    """A binary heap stored in ``values``.

    ``comp(a, b)`` is true when ``a`` goes before ``b``; the root is the item
    that goes before all others. The list is shared with the caller: items
    removed from the heap are moved past its end rather than deleted.
    """

    def __init__(self, values: List[Any], comp: Compare) -> None:
        self._values = values
        self._comp = comp
        self._size = len(values)
        self._heapify()

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def item(self) -> Any:
        """Return the root item."""
        if self.is_empty():
            raise IndexError("item of an empty heap")
        return self._values[0]

    def insert(self, item: Any) -> None:
        if self._size < len(self._values):
            self._values[self._size] = item
        else:
            self._values.append(item)
        self._size += 1
        self._shift_up(self._size - 1)

    def remove(self) -> Any:
        """Remove and return the root item, moving it just past the heap's end."""
        if self.is_empty():
            raise IndexError("remove from an empty heap")
        values = self._values
        root = values[0]
        last = self._size - 1
        values[0], values[last] = values[last], values[0]
        self._size = last
        self._shift_down(0)
        return root

    def _shift_up(self, i: int) -> None:
        values = self._values
        while i > 0:
            parent = (i - 1) // 2
            if self._comp(values[parent], values[i]):
                break
            values[parent], values[i] = values[i], values[parent]
            i = parent

    def _shift_down(self, i: int) -> None:
        values = self._values
        while True:
            left = 2 * i + 1
            if left >= self._size:
                return
            child = left
            right = left + 1
            if right < self._size and self._comp(values[right], values[left]):
                child = right
            if self._comp(values[i], values[child]):
                return
            values[i], values[child] = values[child], values[i]
            i = child

    def _heapify(self) -> None:
        for i in reversed(range(self._size // 2)):
            self._shift_down(i)


def heapsort(values: List[Any], comp: Compare) -> None:
    """Sort ``values`` in place so that items ``comp`` puts first end up last."""
    heap = Heap(values, comp)
    while not heap.is_empty():
        heap.remove()