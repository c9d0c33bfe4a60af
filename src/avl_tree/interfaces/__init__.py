"""Protocols shared by the tree, renderer and CLI."""

from .renderer import Renderer
from .tree import SearchTree

__all__ = ["Renderer", "SearchTree"]
