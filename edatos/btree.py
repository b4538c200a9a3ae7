"""Binary tree whose subtrees share their nodes with the tree they come from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

_EMPTY = object()
_FORMAT_ERROR = "Wrong input format."


@dataclass(eq=False)
class BTNode:
    """A binary tree node holding an item and two child links."""

    item: Any
    left: Optional["BTNode"] = None
    right: Optional["BTNode"] = None


def _parse_node(tokens: Iterator[str]) -> Optional[BTNode]:
    token = next(tokens, None)
    if token == "[]":
        return None
    if token != "[":
        raise ValueError(_FORMAT_ERROR)
    item_token = next(tokens, None)
    if item_token is None or item_token == "[":
        raise ValueError(_FORMAT_ERROR)
    if item_token == "]":
        return None
    try:
        item = int(item_token)
    except ValueError:
        raise ValueError(_FORMAT_ERROR) from None
    left = _parse_node(tokens)
    right = _parse_node(tokens)
    if next(tokens, None) != "]":
        raise ValueError(_FORMAT_ERROR)
    return BTNode(item, left, right)


def _fold_node(node: Optional[BTNode]) -> str:
    if node is None:
        return "[]"
    return f"[ {node.item} {_fold_node(node.left)} {_fold_node(node.right)} ]"


class BTree:
    """A binary tree; it is empty when built with no item.

    The subtrees returned by ``left()`` and ``right()`` share nodes with this
    tree, so changes made through them are seen here too.
    """

    def __init__(self, item: Any = _EMPTY) -> None:
        self._root: Optional[BTNode] = None if item is _EMPTY else BTNode(item)

    @classmethod
    def _from_node(cls, node: Optional[BTNode]) -> "BTree":
        tree = cls()
        tree._root = node
        return tree

    @classmethod
    def unfold(cls, text: str) -> "BTree":
        """Build an integer tree from '[]' or '[ <item> <left-subtree> <right-subtree> ]'."""
        return cls._from_node(_parse_node(iter(text.split())))

    def __repr__(self) -> str:
        return f"BTree.unfold({self.fold()!r})"

    def is_empty(self) -> bool:
        return self._root is None

    def _require_root(self) -> BTNode:
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._root

    def item(self) -> Any:
        return self._require_root().item

    def left(self) -> "BTree":
        return self._from_node(self._require_root().left)

    def right(self) -> "BTree":
        return self._from_node(self._require_root().right)

    def fold(self) -> str:
        """Return the text form read by ``unfold``."""
        return _fold_node(self._root)

    def create_root(self, item: Any) -> None:
        if self._root is not None:
            raise ValueError("the tree already has a root")
        self._root = BTNode(item)

    def set_item(self, item: Any) -> None:
        self._require_root().item = item

    def set_left(self, subtree: "BTree") -> None:
        self._require_root().left = subtree._root

    def set_right(self, subtree: "BTree") -> None:
        self._require_root().right = subtree._root