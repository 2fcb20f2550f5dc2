"""Key Algebra exceptions."""

from __future__ import annotations


class InvalidOrder(ValueError):
    """Bounds passed to a generator are not strictly ordered, or leave no room."""


class InvalidKey(ValueError):
    """A string that is not a usable sort key."""
