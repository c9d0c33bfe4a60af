"""Grid to text formatting.

Turns a render grid into aligned lines of keys joined by slash connectors.
"""

from __future__ import annotations

from typing import List

from ..core.types import Grid


def cell_width(grid: Grid, minimum: int = 3) -> int:
    """Width every key is centered in: longest key, at least minimum, odd."""
    width = minimum
    for row in grid:
        for cell in row:
            if cell.present and len(cell.value) > width:
                width = len(cell.value)
    if width % 2 == 0:
        width += 1
    return width


def format_grid(grid: Grid, min_cell_width: int = 3) -> List[str]:
    """Format a grid into text lines, root line first.

    Works from the deepest level up. Each level gets one line of keys and,
    below every level but the root, `space` lines of connectors that step
    one column inwards per line towards the parent above.
    """
    if not grid:
        return []

    width = cell_width(grid, min_cell_width)
    lines: List[str] = []

    row_count = len(grid)
    elem_count = 1 << (row_count - 1)  # cells in the current row
    left_pad = 0  # leading spaces before the first cell of the current row

    for r in range(row_count):
        row = grid[row_count - r - 1]
        space = (1 << r) * (width + 1) // 2 - 1

        parts: List[str] = []
        for c in range(elem_count):
            parts.append(" " * (2 * left_pad + 1 if c else left_pad))
            cell = row[c]
            if cell.present:
                # Uneven padding goes outwards: left children left, right children right
                long_pad = width - len(cell.value)
                short_pad = long_pad // 2
                long_pad -= short_pad
                is_right = c % 2 == 1
                parts.append(" " * (short_pad if is_right else long_pad))
                parts.append(cell.value)
                parts.append(" " * (long_pad if is_right else short_pad))
            else:
                parts.append(" " * width)
        lines.append("".join(parts))

        if elem_count == 1:
            break

        left_space = space + 1
        right_space = space - 1
        for _ in range(space):
            parts = []
            for c in range(elem_count):
                if c % 2 == 0:
                    parts.append(" " * (2 * left_space + 1 if c else left_space))
                    parts.append("/" if row[c].present else " ")
                    parts.append(" " * (right_space + 1))
                else:
                    parts.append(" " * right_space)
                    parts.append("\\" if row[c].present else " ")
            lines.append("".join(parts))
            left_space += 1
            right_space -= 1

        left_pad += space + 1
        elem_count //= 2

    lines.reverse()
    return lines


def trim_left(lines: List[str]) -> List[str]:
    """Strip the leading spaces every line has in common.

    At least one line of the result starts with a non-space character,
    unless every line is blank.
    """
    if not lines:
        return []
    common = min(len(line) - len(line.lstrip(" ")) for line in lines)
    if common == 0:
        return list(lines)
    return [line[common:] for line in lines]
