"""Tree vertex holding a key, its cached subtree height and two children."""

from __future__ import annotations

from typing import Generic, Optional

from .types import K


class Node(Generic[K]):
    """A node in an AVL tree.

    Each node exclusively owns its children. A fresh node is a leaf of
    height 1.
    """

    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: K) -> None:
        self.key: K = key
        self.height: int = 1
        self.left: Optional[Node[K]] = None
        self.right: Optional[Node[K]] = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, height={self.height})"


def height(node: Optional[Node]) -> int:
    """Return the cached height of a subtree; 0 for an absent one."""
    return node.height if node is not None else 0


def update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Node) -> int:
    return height(node.left) - height(node.right)
