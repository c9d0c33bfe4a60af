"""AVL tree core package."""

from .node import Node
from .tree import BalancedTree, build_tree

__all__ = ["BalancedTree", "Node", "build_tree"]
