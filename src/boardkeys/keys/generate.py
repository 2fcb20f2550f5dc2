"""Mint sort keys relative to zero, one or two existing keys.

Keys compare by code point. The primary alphabet is a-z; uppercase letters
sort below every lowercase letter, so the sentinel "Z" always leaves room in
front of a run of "a" characters.

A key exists strictly between any two keys low < high unless high is low
followed only by "A" characters. Nothing minted here ends in "A", so keys
produced by this module never reach that dead end.
"""

from __future__ import annotations

import logging

from boardkeys.keys._alphabet import (
    ALPHABET,
    DIGITS,
    FILLER,
    FIRST,
    LAST,
    MID,
    MIN_DIGIT,
    SENTINEL,
    is_lower,
    next_digit,
    prev_digit,
    rank,
)
from boardkeys.keys.errors import InvalidOrder
from boardkeys.keys.validate import SortKey, require_valid_key

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def initial_key() -> SortKey:
    """Seed key for an empty collection."""
    return SortKey(MID)


def key_before(key: str) -> SortKey:
    """Return a key strictly less than key.

    Raises InvalidOrder for a key made only of "A", which has no
    predecessor.
    """
    return SortKey(_before(require_valid_key(key)))


def key_after(key: str) -> SortKey:
    """Return a key strictly greater than key. Never fails for a valid key."""
    return SortKey(_after(require_valid_key(key)))


def key_between(low: str, high: str) -> SortKey:
    """Return a key k with low < k < high.

    Raises InvalidOrder when low >= high, or when high is low padded with
    "A" characters (no key fits).
    """
    return SortKey(_between(require_valid_key(low), require_valid_key(high)))


def generate_key(before: str | None = None, after: str | None = None) -> SortKey:
    """Key for a slot bounded by before and/or after.

    Either bound may be omitted (None or empty). With neither bound the
    initial key is returned.

    Examples:
        generate_key()            -> "m"
        generate_key("b")         -> "c"
        generate_key(None, "b")   -> "a"
        generate_key("a", "c")    -> "b"
        generate_key("a", "ab")   -> "aa"
    """
    if not before and not after:
        return initial_key()
    if not before:
        return key_before(after)  # type: ignore[arg-type]
    if not after:
        return key_after(before)
    return key_between(before, after)


# ---------------------------------------------------------------------------
# String-level helpers (inputs already validated)
# ---------------------------------------------------------------------------


def _before(key: str) -> str:
    if not key.strip(MIN_DIGIT):
        raise InvalidOrder(f"No sort key orders before {key!r}")
    if not key.strip(FIRST):
        # Degenerate low end: "a", "aa", ... -> "Za", "Zaa", ...
        return SENTINEL + key

    for i, ch in enumerate(key):
        if ch == FIRST:
            continue
        head = key[:i]
        if rank(ch) > 1:
            return head + prev_digit(ch)
        if ch != MIN_DIGIT:
            # "B": dropping to "A" alone would leave nothing below it
            return head + MIN_DIGIT + MID
        tail = key[i + 1:]
        if tail.strip(MIN_DIGIT):
            return head + ch + _before(tail)
        # head is a run of "a" and a strict prefix of key
        return head

    raise AssertionError(f"unreachable: {key!r}")


def _after(key: str) -> str:
    last = key[-1]
    if last != LAST:
        return key[:-1] + next_digit(last)
    # Carry: grow by one digit
    return key + FIRST


def _between(low: str, high: str) -> str:
    if low >= high:
        raise InvalidOrder(f"Invalid key order: {low!r} should be < {high!r}")

    i = 0
    while i < len(low) and low[i] == high[i]:
        i += 1

    if i == len(low):
        # low is a strict prefix of high
        tail = high[i:]
        if not tail.strip(MIN_DIGIT):
            raise InvalidOrder(f"No sort key fits between {low!r} and {high!r}")
        ch = tail[0]
        if is_lower(ch):
            if ch == FIRST:
                return low + SENTINEL
            return low + ALPHABET[ALPHABET.index(ch) // 2]
        if rank(ch) > 1:
            return low + DIGITS[rank(ch) // 2]
        return low + _before(tail)

    lo, hi = rank(low[i]), rank(high[i])
    if hi - lo > 1:
        return low[:i] + DIGITS[lo + (hi - lo) // 2]

    # Adjacent digits: nothing fits at this depth, extend low instead.
    # The result keeps low[:i + 1], so it stays below high; the suffix is
    # chosen to sort above low's own remainder.
    rest = low[i + 1:]
    log.debug("key_between(%r, %r): adjacent digits at %d, descending", low, high, i)
    if not rest:
        return low + MID
    if rest[0] != FILLER:
        return low[:i + 1] + FILLER
    return low[:i + 1] + _after(rest)
