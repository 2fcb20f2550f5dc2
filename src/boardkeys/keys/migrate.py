"""Numeric-position migration and evenly spaced batches of keys."""

from __future__ import annotations

import logging
import math

from boardkeys.keys._alphabet import ALPHABET, FIRST
from boardkeys.keys.generate import _after, initial_key
from boardkeys.keys.validate import SortKey

log = logging.getLogger(__name__)

MAX_MIGRATED_LENGTH = 4
DEFAULT_TOTAL_ITEMS_HINT = 1000

# A remainder below this is treated as an exact hit and ends the key early
_PRECISION = 0.001


def position_to_key(position: float, total_items_hint: int = DEFAULT_TOTAL_ITEMS_HINT) -> SortKey:
    """Map a legacy numeric position onto a short (<= 4 char) sort key.

    The position is scaled to a fraction of total_items_hint * 1000, clamped
    to [0, 1], and written out as base-26 lowercase digits. The mapping is
    non-decreasing in position; positions whose fractions differ within four
    digits get strictly increasing keys.
    """
    scale = total_items_hint * 1000
    fraction = position / scale if scale else 0.0
    if math.isnan(fraction):
        fraction = 0.0
    fraction = max(0.0, min(1.0, fraction))

    base = len(ALPHABET)
    digits: list[str] = []
    remaining = fraction
    for _ in range(MAX_MIGRATED_LENGTH):
        remaining *= base
        # Clamp before subtracting so fraction 1.0 becomes "zzzz", not "z"
        index = min(int(math.floor(remaining)), base - 1)
        digits.append(ALPHABET[index])
        remaining -= index
        if remaining < _PRECISION:
            break

    return SortKey("".join(digits) or FIRST)


def batch_keys(count: int) -> list[SortKey]:
    """Return count strictly increasing keys spread across the key space."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return []
    if count == 1:
        return [initial_key()]

    keys: list[SortKey] = []
    for i in range(count):
        fraction = i / (count - 1)
        key = position_to_key(fraction * 1000, 1)
        if keys and key <= keys[-1]:
            # Four digits ran out of resolution for this batch size
            log.debug("batch_keys(%d): slot %d collides with %r, bumping", count, i, keys[-1])
            key = SortKey(_after(keys[-1]))
        keys.append(key)
    return keys
