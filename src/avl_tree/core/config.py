"""Configuration for the AVL tree renderer.

Defines the tunable parameters of the ASCII output and loads them from TOML.
"""

from __future__ import annotations

import tomllib  # Python 3.11+
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError


@dataclass
class RenderConfig:
    """Configuration parameters for tree rendering.

    Attributes:
        min_cell_width: Narrowest cell a key is centered in (rounded up to odd)
        empty_indicator: Text produced for a tree with no nodes
        line_prefix: Prepended to every line written by display()
    """

    min_cell_width: int = 3
    empty_indicator: str = "<empty tree>"
    line_prefix: str = " "

    def __post_init__(self) -> None:
        if not isinstance(self.min_cell_width, int) or isinstance(self.min_cell_width, bool):
            raise ConfigError(f"min_cell_width must be an integer, got {self.min_cell_width!r}")
        if not isinstance(self.empty_indicator, str) or not isinstance(self.line_prefix, str):
            raise ConfigError("empty_indicator and line_prefix must be strings")
        if self.min_cell_width < 1:
            raise ConfigError(f"min_cell_width must be positive, got {self.min_cell_width}")
        if "\n" in self.empty_indicator or "\n" in self.line_prefix:
            raise ConfigError("empty_indicator and line_prefix must be single-line")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenderConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown render options: {', '.join(sorted(unknown))}")
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid render options: {e}") from e


def load_render_config(path: Path) -> RenderConfig:
    """Load a RenderConfig from the [render] table of a TOML file.

    A file without a [render] table yields the defaults.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    section = data.get("render", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[render] in {path} must be a table")
    return RenderConfig.from_dict(section)
