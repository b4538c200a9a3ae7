"""A circular dynamic array that grows by doubling its capacity."""

from __future__ import annotations

from typing import Any, Iterator


class CDArray:
    """Circular dynamic array with amortised O(1) pushes at both ends."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @classmethod
    def unfold(cls, text: str) -> "CDArray":
        """Build an array of ints from the format '[ item1 item2 ... ]'."""
        tokens = iter(text.split())
        if next(tokens, None) != "[":
            raise ValueError("Wrong input format.")
        array = cls(1)
        for token in tokens:
            if token == "]":
                return array
            try:
                array.push_back(int(token))
            except ValueError:
                raise ValueError("Wrong input format.") from None
        raise ValueError("Wrong input format.")

    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        cap = len(self._buffer)
        return (self._buffer[(self._front + i) % cap] for i in range(self._size))

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._buffer)

    def fold(self) -> str:
        """Return the text form '[ item1 item2 ... ]'."""
        return " ".join(["[", *(str(item) for item in self), "]"])

    def _slot(self, pos: int) -> int:
        if pos < 0:
            pos += self._size
        if not 0 <= pos < self._size:
            raise IndexError("position out of range")
        return (self._front + pos) % len(self._buffer)

    def __getitem__(self, pos: int) -> Any:
        return self._buffer[self._slot(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._buffer[self._slot(pos)] = value

    def _relayout(self, items: list[Any], capacity: int) -> None:
        self._buffer = items + [None] * (capacity - len(items))
        self._front = 0
        self._size = len(items)

    def _grow(self) -> None:
        self._relayout(list(self), 2 * len(self._buffer))

    def push_front(self, item: Any) -> None:
        if self.is_full():
            self._grow()
        self._front = (self._front - 1) % len(self._buffer)
        self._buffer[self._front] = item
        self._size += 1

    def push_back(self, item: Any) -> None:
        if self.is_full():
            self._grow()
        self._buffer[(self._front + self._size) % len(self._buffer)] = item
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first item."""
        if self.is_empty():
            raise IndexError("pop from an empty array")
        item = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % len(self._buffer)
        self._size -= 1
        return item

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("pop from an empty array")
        slot = self._slot(self._size - 1)
        item = self._buffer[slot]
        self._buffer[slot] = None
        self._size -= 1
        return item

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError("position out of range")

    def insert(self, pos: int, item: Any) -> None:
        """Insert an item before the existing item at pos."""
        self._check_position(pos)
        if pos == 0:
            self.push_front(item)
            return
        if self.is_full():
            self._grow()
        items = list(self)
        items.insert(pos, item)
        self._relayout(items, len(self._buffer))

    def remove(self, pos: int) -> Any:
        """Remove and return the item at pos."""
        self._check_position(pos)
        items = list(self)
        removed = items.pop(pos)
        self._relayout(items, len(self._buffer))
        return removed