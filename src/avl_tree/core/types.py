"""Common type definitions for the AVL tree implementation.

Defines the key bound shared by the tree and the cell/grid types used by
the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar


# Keys only need a total order; equality comes from object
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=Comparable)


@dataclass(frozen=True)
class Cell:
    """One slot of the render grid.

    Attributes:
        value: Stringified key, empty for absent slots
        present: Whether a node occupies this slot
    """

    value: str = ""
    present: bool = False


# One row per tree level, root first; level d holds 2**d cells
Grid = list[list[Cell]]
