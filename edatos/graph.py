"""Vertices, edges and keyed data items of a weighted graph."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any


@functools.total_ordering
class Item:
    """A data item compared, ordered and hashed by its key.

    The key of an item is its data.
    """

    __slots__ = ("data",)

    def __init__(self, data: Any = None) -> None:
        self.data = data

    def key(self) -> Any:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.key() == other.key()

    def __lt__(self, other: "Item") -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.key() < other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"Item({self.data!r})"


@dataclass(eq=False)
class Vertex:
    """A labelled vertex holding an item and a visited flag."""

    label: int
    item: Any
    visited: bool = False


@dataclass(eq=False)
class Edge:
    """An edge linking two vertices, holding an item and a visited flag."""

    first: Vertex
    second: Vertex
    item: Any
    visited: bool = False

    def has(self, vertex: Vertex) -> bool:
        """Is ``vertex`` one of the ends of this edge?"""
        return vertex is self.first or vertex is self.second

    def other(self, vertex: Vertex) -> Vertex:
        """Return the end of the edge opposite to ``vertex``."""
        if vertex is self.first:
            return self.second
        if vertex is self.second:
            return self.first
        raise ValueError("the vertex is not an end of this edge")