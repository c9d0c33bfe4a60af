"""Render grid construction.

Lays the tree out as a perfect binary structure, recording every slot down
to the deepest level as present or absent.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Optional

from ..core.node import height
from ..core.types import Cell, Grid

if TYPE_CHECKING:
    from ..core.node import Node

logger = logging.getLogger(__name__)


def build_grid(root: Optional[Node]) -> Grid:
    """Return one row of cells per level, root first.

    Level d has exactly 2**d cells. Slots under a missing node are carried
    down as None so deeper rows keep their gaps. The deepest level is
    collected without descending further: its slots are leaves or gaps.
    """
    max_depth = height(root)
    if max_depth == 0:
        return []

    grid: Grid = []
    level: deque[Optional[Node]] = deque([root])
    for depth in range(max_depth):
        grid.append([Cell(str(n.key), True) if n is not None else Cell() for n in level])
        if depth == max_depth - 1:
            break

        below: deque[Optional[Node]] = deque()
        while level:
            node = level.popleft()
            if node is None:
                below.extend((None, None))
            else:
                below.extend((node.left, node.right))
        level = below

    logger.debug(f"Built render grid with {max_depth} levels")
    return grid
