"""AVL tree implementation - main public API.

Owns the node graph and keeps it height-balanced through rotations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, List, Optional, TextIO

from .config import RenderConfig
from .errors import InvariantError
from .node import Node, balance_factor, height, update_height
from .types import K
from ..components.renderer import TreeRenderer

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class BalancedTree(Generic[K]):
    """Height-balanced binary search tree.

    Args:
        render_config: Options used by render(), display() and str()

    Public API:
        - insert(value, *values): Add keys, duplicates are ignored
        - remove(value): Delete a key if present
        - search(value): Node holding the key, or None
        - height(): Height of the whole tree
        - render() / display(out): ASCII drawing of the current shape

    Invariants:
        - Left subtree keys < node key < right subtree keys
        - node.height == 1 + max(child heights), absent child is 0
        - Child heights differ by at most 1 at every node
    """

    def __init__(self, render_config: RenderConfig | None = None) -> None:
        self._root: Optional[Node[K]] = None
        self._size: int = 0
        self._renderer = TreeRenderer(render_config)

    @property
    def root(self) -> Optional[Node[K]]:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: K) -> bool:
        return self.search(value) is not None

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return height(self._root)

    # -------------------------------
    # Search
    # -------------------------------
    def search(self, value: K) -> Optional[Node[K]]:
        """Return the node holding value, or None. O(height)."""
        node = self._root
        while node is not None:
            if value < node.key:
                node = node.left
            elif value > node.key:
                node = node.right
            else:
                return node
        return None

    # -------------------------------
    # Rotations
    # -------------------------------
    @staticmethod
    def _rotate_right(root: Node[K]) -> Node[K]:
        new_root = root.left
        assert new_root is not None
        root.left = new_root.right
        new_root.right = root

        # old root first, new root's height depends on it
        update_height(root)
        update_height(new_root)

        logger.debug(f"Right rotation: {new_root.key!r} replaces {root.key!r}")
        return new_root

    @staticmethod
    def _rotate_left(root: Node[K]) -> Node[K]:
        new_root = root.right
        assert new_root is not None
        root.right = new_root.left
        new_root.left = root

        update_height(root)
        update_height(new_root)

        logger.debug(f"Left rotation: {new_root.key!r} replaces {root.key!r}")
        return new_root

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, value: K, *values: K) -> None:
        """Insert one or more values, in argument order.

        Values already present are ignored.
        """
        self._root = self._insert(self._root, value)
        for v in values:
            self._root = self._insert(self._root, v)

    def _insert(self, node: Optional[Node[K]], value: K) -> Node[K]:
        if node is None:
            self._size += 1
            return Node(value)

        if value < node.key:
            node.left = self._insert(node.left, value)
        elif value > node.key:
            node.right = self._insert(node.right, value)
        else:
            logger.debug(f"Ignoring duplicate key {value!r}")
            return node

        update_height(node)
        balance = balance_factor(node)

        # The inserted value tells which grandchild grew
        if balance > 1:
            assert node.left is not None
            if value < node.left.key:
                return self._rotate_right(node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            assert node.right is not None
            if value > node.right.key:
                return self._rotate_left(node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # -------------------------------
    # Remove
    # -------------------------------
    def remove(self, value: K) -> None:
        """Remove value from the tree. Absent values are ignored."""
        self._root = self._remove(self._root, value)

    def _remove(self, node: Optional[Node[K]], value: K) -> Optional[Node[K]]:
        if node is None:
            logger.debug(f"Key {value!r} not present, nothing to remove")
            return None

        if value < node.key:
            node.left = self._remove(node.left, value)
        elif value > node.key:
            node.right = self._remove(node.right, value)
        else:
            self._size -= 1
            if node.right is None:
                child = node.left
                self._discard(node)
                return child
            if node.left is None:
                child = node.right
                self._discard(node)
                return child
            self._replace_with_successor(node)

        return self._rebalance(node)

    def _replace_with_successor(self, node: Node[K]) -> None:
        """Overwrite node's key with its in-order successor and unlink it.

        The successor and its parent are found in one pass by looking one
        level ahead down the left spine of the right subtree. Every node
        passed on the way is kept in `path` so its stale height can be
        repaired afterwards.
        """
        candidate = node.right
        assert candidate is not None
        path: List[Node[K]] = [candidate]
        while candidate.left is not None and candidate.left.left is not None:
            candidate = candidate.left
            path.append(candidate)

        if candidate.left is None:
            # candidate is node.right and is itself the successor
            node.key = candidate.key
            node.right = candidate.right
            self._discard(candidate)
            return

        successor = candidate.left
        node.key = successor.key
        # successor has no left child, its right subtree takes its slot
        candidate.left = successor.right
        self._discard(successor)

        subtree = self._rebalance(path[-1])
        for parent in reversed(path[:-1]):
            parent.left = subtree
            subtree = self._rebalance(parent)
        node.right = subtree

    def _rebalance(self, node: Node[K]) -> Node[K]:
        """Restore balance at node after a removal below it.

        With no inserted value to steer by, grandchild heights pick between
        the single and the double rotation.
        """
        update_height(node)
        balance = balance_factor(node)

        if balance > 1:
            assert node.left is not None
            if height(node.left.left) >= height(node.left.right):
                return self._rotate_right(node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            assert node.right is not None
            if height(node.right.right) >= height(node.right.left):
                return self._rotate_left(node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    @staticmethod
    def _discard(node: Node[K]) -> None:
        # nothing in the tree stays reachable through a removed node
        node.left = None
        node.right = None
        logger.debug(f"Discarded node {node.key!r}")

    # -------------------------------
    # Utility
    # -------------------------------
    def in_order(self) -> List[K]:
        """Return all keys in ascending order."""
        result: List[K] = []
        stack: List[Node[K]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def check_invariants(self) -> None:
        """Verify ordering, cached heights and balance of every node.

        Raises:
            InvariantError: naming the first offending key
        """
        count = 0

        def _check(node: Optional[Node[K]], low: Optional[K], high: Optional[K]) -> int:
            nonlocal count
            if node is None:
                return 0
            count += 1
            if low is not None and not low < node.key:
                raise InvariantError(f"Key {node.key!r} is not greater than ancestor {low!r}")
            if high is not None and not node.key < high:
                raise InvariantError(f"Key {node.key!r} is not less than ancestor {high!r}")

            left_height = _check(node.left, low, node.key)
            right_height = _check(node.right, node.key, high)

            expected = 1 + max(left_height, right_height)
            if node.height != expected:
                raise InvariantError(
                    f"Node {node.key!r} caches height {node.height}, actual {expected}"
                )
            if abs(left_height - right_height) > 1:
                raise InvariantError(
                    f"Node {node.key!r} unbalanced: left {left_height}, right {right_height}"
                )
            return expected

        _check(self._root, None, None)
        if count != self._size:
            raise InvariantError(f"Tree holds {count} nodes but tracks size {self._size}")

    def render(self) -> List[str]:
        return self._renderer.render(self)

    def display(self, out: TextIO) -> TextIO:
        return self._renderer.display(self, out)

    def __repr__(self) -> str:
        return f"BalancedTree({self.in_order()})"

    def __str__(self) -> str:
        return self._renderer.to_text(self)


def build_tree(values: Iterable[K], render_config: RenderConfig | None = None) -> BalancedTree[K]:
    """Create a tree holding values, inserted in iteration order."""
    tree: BalancedTree[K] = BalancedTree(render_config)
    for v in values:
        tree.insert(v)
    return tree
