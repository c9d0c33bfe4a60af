"""Protocol definition for tree renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from .tree import SearchTree


class Renderer(Protocol):
    """Read-only text view of a tree's shape."""

    def render(self, tree: SearchTree) -> list[str]:
        """Return the drawing as lines, root first."""
        ...

    def display(self, tree: SearchTree, out: TextIO) -> TextIO:
        """Write the drawing to out and return out."""
        ...
