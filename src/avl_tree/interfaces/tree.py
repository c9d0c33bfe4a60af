"""Protocol definition for a balanced search tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..core.node import Node


class SearchTree(Protocol):
    """Ordered key set backed by a node graph."""

    @property
    def root(self) -> Node | None:
        """Root node, or None for an empty tree."""
        ...

    def insert(self, value: Any) -> None:
        """Add value; a value already present is ignored."""
        ...

    def remove(self, value: Any) -> None:
        """Delete value; a value not present is ignored."""
        ...

    def search(self, value: Any) -> Node | None:
        """Return the node holding value, or None."""
        ...

    def height(self) -> int:
        """Return the height of the whole tree, 0 when empty."""
        ...
