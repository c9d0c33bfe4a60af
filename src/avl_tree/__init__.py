"""AVL Tree - height-balanced binary search tree with an ASCII renderer."""

from .core.config import RenderConfig, load_render_config
from .core.errors import AVLError, ConfigError, InvariantError
from .core.node import Node, height
from .core.tree import BalancedTree, build_tree
from .components.renderer import TreeRenderer

__all__ = [
    "RenderConfig",
    "load_render_config",
    "AVLError",
    "ConfigError",
    "InvariantError",
    "Node",
    "height",
    "BalancedTree",
    "build_tree",
    "TreeRenderer",
]
