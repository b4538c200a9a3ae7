"""Node of an AVL tree that keeps its height and a link to its parent."""

from __future__ import annotations

from typing import Any, Optional

LEFT = 0
RIGHT = 1


def _height_of(node: Optional["AVLTNode"]) -> int:
    return -1 if node is None else node.height()


class AVLTNode:
    """An AVL tree node; linking a child updates its parent and this height."""

    def __init__(self, item: Any) -> None:
        self.item = item
        self.parent: Optional[AVLTNode] = None
        self._left: Optional[AVLTNode] = None
        self._right: Optional[AVLTNode] = None
        self._height = 0

    @property
    def left(self) -> Optional["AVLTNode"]:
        return self._left

    @property
    def right(self) -> Optional["AVLTNode"]:
        return self._right

    def height(self) -> int:
        """Height of the node; an absent node has height -1."""
        return self._height

    def balance_factor(self) -> int:
        """Right subtree height minus left subtree height."""
        return _height_of(self._right) - _height_of(self._left)

    def check_height_invariant(self) -> bool:
        return self._height == max(_height_of(self._left), _height_of(self._right)) + 1

    def update_height(self) -> None:
        self._height = max(_height_of(self._left), _height_of(self._right)) + 1

    @staticmethod
    def _check_direction(direction: int) -> None:
        if direction not in (LEFT, RIGHT):
            raise ValueError("direction must be 0 (left) or 1 (right)")

    def child(self, direction: int) -> Optional["AVLTNode"]:
        self._check_direction(direction)
        return self._left if direction == LEFT else self._right

    def set_left(self, child: Optional["AVLTNode"]) -> None:
        self._left = child
        if child is not None:
            child.parent = self
        self.update_height()

    def set_right(self, child: Optional["AVLTNode"]) -> None:
        self._right = child
        if child is not None:
            child.parent = self
        self.update_height()

    def set_child(self, direction: int, child: Optional["AVLTNode"]) -> None:
        self._check_direction(direction)
        if direction == LEFT:
            self.set_left(child)
        else:
            self.set_right(child)