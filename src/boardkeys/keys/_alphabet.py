"""Digit vocabulary for sort keys."""

from __future__ import annotations

from boardkeys.keys.errors import InvalidKey

# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

# Primary alphabet: what fresh keys, midpoints and migrations are built from
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Every character a key may hold, in code-point order (A-Z sort before a-z)
DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ" + ALPHABET

FIRST = ALPHABET[0]
LAST = ALPHABET[-1]
MID = "m"

# Sorts below the whole primary alphabet; leaves room before an all-"a" run
SENTINEL = "Z"

# Highest digit, used when descending a level between adjacent characters
FILLER = LAST

# Lowest digit; a key ending in it has no key directly below its extensions
MIN_DIGIT = DIGITS[0]

_RANK: dict[str, int] = {c: i for i, c in enumerate(DIGITS)}


def rank(ch: str) -> int:
    """Position of a character in DIGITS."""
    try:
        return _RANK[ch]
    except KeyError:
        raise InvalidKey(f"{ch!r} is not a sort key character") from None


def prev_digit(ch: str) -> str:
    return DIGITS[rank(ch) - 1]


def next_digit(ch: str) -> str:
    return DIGITS[rank(ch) + 1]


def is_lower(ch: str) -> bool:
    return ch in ALPHABET
