"""Exception hierarchy for the AVL tree.

Duplicate inserts and removal of absent keys are not errors; they are
silent no-ops.
"""

from __future__ import annotations


class AVLError(Exception):
    """Base exception for all AVL tree errors."""
    pass


class InvariantError(AVLError):
    """Raised when a structural check finds a broken tree invariant."""
    pass


class ConfigError(AVLError):
    """Raised when render configuration is invalid or cannot be loaded."""
    pass
