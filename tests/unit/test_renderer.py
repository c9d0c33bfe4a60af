"""Unit tests for the ASCII renderer and grid formatter."""

import io

import pytest

from avl_tree import BalancedTree, RenderConfig, TreeRenderer, build_tree
from avl_tree.components.formatter import cell_width, format_grid, trim_left
from avl_tree.components.grid import build_grid
from avl_tree.core.types import Cell


@pytest.fixture
def renderer():
    """Create renderer with default configuration."""
    return TreeRenderer()


def leading(line):
    return len(line) - len(line.lstrip(" "))


def test_render_empty_tree(renderer):
    """Test an empty tree renders only the empty indicator."""
    assert renderer.render(BalancedTree()) == ["<empty tree>"]


def test_render_single_node(renderer):
    """Test a lone key is centered in a three-wide cell and trimmed."""
    assert renderer.render(build_tree([5])) == ["5 "]


def test_render_three_nodes(renderer):
    """Test a root with two children."""
    assert renderer.render(build_tree([10, 20, 30])) == [
        "  20",
        " / \\",
        "10 30 ",
    ]


def test_render_gap_below_left_child(renderer):
    """Test connectors and padding around an absent slot."""
    assert renderer.render(build_tree([20, 10, 30, 35])) == [
        "    20",
        "   / \\",
        "  /   \\",
        " /     \\",
        "10     30 ",
        "         \\",
        "         35 ",
    ]


def test_render_wide_keys(renderer):
    """Test keys longer than three characters widen every cell to odd width."""
    assert renderer.render(build_tree([1000, 2000, 3000])) == [
        "   2000",
        "   / \\",
        "  /   \\",
        "1000 3000 ",
    ]


def test_render_root_is_first_line(renderer):
    """Test the root key heads the drawing and the deepest keys end it."""
    tree = build_tree(range(1, 16))
    lines = renderer.render(tree)

    assert lines[0].strip() == "8"
    assert lines[-1].split() == [str(k) for k in (1, 3, 5, 7, 9, 11, 13, 15)]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 13, 21])
def test_render_is_left_trimmed(renderer, n):
    """Test at least one line starts at column zero."""
    lines = renderer.render(build_tree(range(n)))
    assert min(leading(line) for line in lines) == 0


def test_render_does_not_mutate_tree(renderer):
    """Test rendering leaves keys and heights as they were."""
    tree = build_tree([8, 3, 10, 1, 6, 14, 4, 7, 13])
    before = [(n.key, n.height) for n in (tree.search(k) for k in tree.in_order())]

    renderer.render(tree)

    after = [(n.key, n.height) for n in (tree.search(k) for k in tree.in_order())]
    assert after == before
    tree.check_invariants()


def test_display_writes_prefixed_lines(renderer):
    """Test display prefixes each line and returns the sink."""
    out = io.StringIO()
    result = renderer.display(build_tree([10, 20, 30]), out)

    assert result is out
    assert out.getvalue() == "   20\n  / \\\n 10 30 \n"


def test_display_empty_tree(renderer):
    """Test display writes only the indicator for an empty tree."""
    out = io.StringIO()
    renderer.display(BalancedTree(), out)

    assert out.getvalue() == "<empty tree>\n"


def test_custom_config():
    """Test indicator, prefix and minimum width come from configuration."""
    config = RenderConfig(min_cell_width=5, empty_indicator="(empty)", line_prefix="")
    renderer = TreeRenderer(config)

    assert renderer.render(BalancedTree()) == ["(empty)"]

    out = io.StringIO()
    renderer.display(build_tree([1, 2, 3]), out)
    assert out.getvalue().splitlines() == [
        "   2  ",
        "  / \\",
        " /   \\",
        "1     3  ",
    ]


def test_tree_str_and_render_use_its_config():
    """Test the tree's own render helpers."""
    tree = build_tree([10, 20, 30])
    assert tree.render() == ["  20", " / \\", "10 30 "]
    assert str(tree) == "   20\n  / \\\n 10 30 "
    assert str(BalancedTree()) == "<empty tree>"

    out = io.StringIO()
    assert tree.display(out) is out
    assert out.getvalue() == "   20\n  / \\\n 10 30 \n"


@pytest.mark.parametrize(
    "keys, minimum, expected",
    [
        (["7"], 3, 3),
        (["12"], 3, 3),
        (["1000"], 3, 5),
        (["12345"], 3, 5),
        (["123456"], 3, 7),
        (["1"], 4, 5),
    ],
)
def test_cell_width(keys, minimum, expected):
    """Test width is the longest key, floored at minimum, rounded up to odd."""
    grid = [[Cell(k, True) for k in keys]]
    assert cell_width(grid, minimum) == expected


def test_cell_width_ignores_absent_cells():
    """Test absent slots do not widen cells."""
    grid = [[Cell("1", True)], [Cell("ignored-text", False), Cell()]]
    assert cell_width(grid) == 3


def test_format_empty_grid():
    """Test formatting nothing yields nothing."""
    assert format_grid([]) == []


def test_format_grid_untrimmed():
    """Test the raw formatter output keeps the shared indentation."""
    grid = build_grid(build_tree([10, 20, 30]).root)
    assert format_grid(grid) == ["   20", "  / \\", " 10 30 "]


@pytest.mark.parametrize(
    "lines, expected",
    [
        ([], []),
        (["a", "  b"], ["a", "  b"]),
        (["   a", "  b"], [" a", "b"]),
        (["    ", "  x"], ["  ", "x"]),
    ],
)
def test_trim_left(lines, expected):
    """Test only the common leading whitespace is removed."""
    assert trim_left(lines) == expected


def test_render_four_level_sparse_tree(renderer):
    """Test exact placement of keys and connectors around gaps on two levels."""
    tree = build_tree([8, 4, 12, 2, 10, 14, 15])

    assert renderer.render(tree) == [
        " " * 12 + "8 ",
        " " * 10 + "/ \\",
        " " * 9 + "/" + " " * 3 + "\\",
        " " * 8 + "/" + " " * 5 + "\\",
        " " * 7 + "/" + " " * 7 + "\\",
        " " * 6 + "/" + " " * 9 + "\\",
        " " * 5 + "/" + " " * 11 + "\\",
        " " * 4 + "/" + " " * 13 + "\\",
        " " * 4 + "4" + " " * 14 + "12 ",
        " " * 2 + "/" + " " * 15 + "/ \\",
        " " + "/" + " " * 15 + "/" + " " * 3 + "\\",
        "/" + " " * 15 + "/" + " " * 5 + "\\",
        "2" + " " * 15 + "10" + " " * 5 + "14 ",
        " " * 24 + "\\",
        " " * 24 + "15 ",
    ]
