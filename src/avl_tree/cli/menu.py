# Interactive text menu over an integer AVL tree, plus the argparse entry point.
from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, TextIO

from avl_tree.components.renderer import TreeRenderer
from avl_tree.core.config import RenderConfig, load_render_config
from avl_tree.core.errors import ConfigError
from avl_tree.core.tree import BalancedTree
from avl_tree.interfaces.renderer import Renderer
from avl_tree.interfaces.tree import SearchTree

logger = logging.getLogger(__name__)

MENU_OPTIONS = (
    "Insert a number into the AVL tree",
    "Delete a number from the AVL tree",
    "Print the AVL tree",
    "Exit",
)


class Choice(Enum):
    INVALID = 0
    INSERT = 1
    DELETE = 2
    PRINT = 3
    EXIT = 4


def read_choice(read: Callable[[str], str], out: TextIO) -> Choice:
    """Print the menu and return the user's selection.

    Anything outside 1..len(MENU_OPTIONS) is Choice.INVALID.
    """
    out.write("-" * 40 + "\n")
    for i, option in enumerate(MENU_OPTIONS, start=1):
        out.write(f"{i}. {option}\n")
    out.flush()

    response = read("Choose an option: ").strip()
    try:
        number = int(response)
    except ValueError:
        return Choice.INVALID
    if not 1 <= number <= len(MENU_OPTIONS):
        return Choice.INVALID
    return Choice(number)


def read_int(read: Callable[[str], str], out: TextIO, prompt: str) -> int:
    """Prompt until the user enters an integer."""
    while True:
        response = read(prompt).strip()
        try:
            return int(response)
        except ValueError:
            out.write(f"Not an integer: {response!r}, try again!\n")


def run_menu(
    tree: SearchTree,
    renderer: Renderer,
    read: Callable[[str], str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Serve the menu until the user exits or input runs out.

    Reads with input() and writes to stdout unless told otherwise.
    Returns the process exit status.
    """
    read = read if read is not None else input
    out = out if out is not None else sys.stdout
    try:
        while True:
            choice = read_choice(read, out)

            if choice is Choice.INVALID:
                out.write("Invalid choice, try again!\n")
            elif choice is Choice.INSERT:
                value = read_int(read, out, "Enter an integer to insert: ")
                tree.insert(value)
                logger.info(f"Inserted {value}")
            elif choice is Choice.DELETE:
                value = read_int(read, out, "Enter an integer to delete: ")
                tree.remove(value)
                logger.info(f"Removed {value}")
            elif choice is Choice.PRINT:
                out.write("\n")
                renderer.display(tree, out)
                out.write("\n")
            else:
                return 0
    except EOFError:
        logger.info("End of input, leaving menu")
        return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="avl-tree", description="Interactively build and draw an AVL tree of integers"
    )
    p.add_argument("--config", type=Path, help="TOML file with a [render] table")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_render_config(args.config) if args.config else RenderConfig()
    except ConfigError as e:
        print(f"Error loading config: {e}")
        return 2

    tree: BalancedTree[int] = BalancedTree(config)
    return run_menu(tree, TreeRenderer(config))


if __name__ == "__main__":
    raise SystemExit(main())
