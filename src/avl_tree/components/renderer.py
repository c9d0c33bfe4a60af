"""ASCII tree renderer.

Reads a tree's shape and produces text lines; never mutates the tree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, TextIO

from ..core.config import RenderConfig
from .formatter import format_grid, trim_left
from .grid import build_grid

if TYPE_CHECKING:
    from ..interfaces.tree import SearchTree

logger = logging.getLogger(__name__)


class TreeRenderer:
    """Draws a tree as aligned ASCII text.

    Args:
        config: Render configuration, defaults when omitted

    Example output for keys 10, 20, 30:

          20
         / \\
        10 30
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config if config is not None else RenderConfig()

    def render(self, tree: SearchTree) -> List[str]:
        """Return the drawing of tree, root line first.

        An empty tree yields only the empty indicator.
        """
        if tree.height() == 0:
            return [self.config.empty_indicator]

        grid = build_grid(tree.root)
        lines = trim_left(format_grid(grid, self.config.min_cell_width))
        logger.debug(f"Rendered tree of height {len(grid)} into {len(lines)} lines")
        return lines

    def display(self, tree: SearchTree, out: TextIO) -> TextIO:
        """Write the drawing of tree to out and return out."""
        if tree.height() == 0:
            out.write(self.config.empty_indicator + "\n")
            return out
        for line in self.render(tree):
            out.write(self.config.line_prefix + line + "\n")
        return out

    def to_text(self, tree: SearchTree) -> str:
        """Return the displayed drawing as one string without a trailing newline."""
        if tree.height() == 0:
            return self.config.empty_indicator
        return "\n".join(self.config.line_prefix + line for line in self.render(tree))
