"""Sort key validation and the validated SortKey string type."""

from __future__ import annotations

import re

from boardkeys.keys.errors import InvalidKey

_KEY_PATTERN = re.compile(r"[A-Za-z]+")


def is_valid_key(value: object) -> bool:
    """True for a non-empty string made only of ASCII letters."""
    if not isinstance(value, str) or not value:
        return False
    return _KEY_PATTERN.fullmatch(value) is not None


def require_valid_key(value: object) -> str:
    """Return value unchanged, or raise InvalidKey.

    Meant for data read from disk or another process before it is trusted
    as a sort key.
    """
    if not is_valid_key(value):
        raise InvalidKey(f"Invalid sort key {value!r}: expected a non-empty string of ASCII letters")
    return value  # type: ignore[return-value]


class SortKey(str):
    """A str that is known to be a valid sort key.

    Compares, hashes and serialises exactly like the underlying string.
    """

    __slots__ = ()

    def __new__(cls, value: object) -> "SortKey":
        return super().__new__(cls, require_valid_key(value))

    def __repr__(self) -> str:
        return f"SortKey({str(self)!r})"
