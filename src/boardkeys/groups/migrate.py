"""Upgrade raw or legacy records into keyed Items.

Imported and older boards may carry a numeric `position` instead of a sort
key, a malformed key, or no ordering at all. migrate_legacy_items assigns
every record a valid key while keeping each group's existing order.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping

from boardkeys.groups._helpers import normalize_group
from boardkeys.groups.item import Item, canonical_record
from boardkeys.keys import generate_key, is_valid_key, key_after, position_to_key

log = logging.getLogger(__name__)


def _numeric_position(value: Any) -> float | None:
    """Return value as a float, or None when it is not a usable position."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        position = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(position):
        return None
    return position


def _positions_hint(positions: Iterable[float]) -> int:
    """Smallest total_items_hint that keeps every position below fraction 1."""
    highest = max(positions, default=0.0)
    if math.isinf(highest):
        return 1
    return max(1, math.ceil((highest + 1) / 1000))


def migrate_legacy_items(records: Iterable[Mapping[str, Any]]) -> list[Item]:
    """Convert raw records to Items with strictly increasing keys per group.

    - a valid sort_key / sortKey is kept
    - otherwise a numeric `position` is converted with position_to_key,
      preserving positional order within the group
    - records with neither are appended after the group's last key, in
      input order

    Colliding keys inside a group are bumped upward in sorted order, so the
    relative order is preserved and every key is unique. The returned list
    follows input order.
    """
    rows = [canonical_record(dict(record)) for record in records]

    keys: list[str | None] = []
    positions: list[float | None] = []
    for row in rows:
        row["group_id"] = normalize_group(row.get("group_id"))
        key = row.get("sort_key")
        if key is not None and not is_valid_key(key):
            log.warning("migrate_legacy_items: replacing invalid sort key %r on item %r", key, row.get("id"))
            key = None
        keys.append(key)
        positions.append(_numeric_position(row.get("position")) if key is None else None)

    hint = _positions_hint(p for p in positions if p is not None)
    for i, position in enumerate(positions):
        if position is not None:
            keys[i] = position_to_key(position, hint)

    by_group: dict[str | None, list[int]] = {}
    for i, row in enumerate(rows):
        by_group.setdefault(row["group_id"], []).append(i)

    for group_id, indexes in by_group.items():
        keyed = [i for i in indexes if keys[i] is not None]
        keyed.sort(key=lambda i: (keys[i], positions[i] if positions[i] is not None else 0.0, i))

        last: str | None = None
        for i in keyed:
            if last is not None and keys[i] <= last:  # type: ignore[operator]
                bumped = key_after(last)
                log.warning(
                    "migrate_legacy_items: key %r on item %r collides in group %r, using %r",
                    keys[i], rows[i].get("id"), group_id, bumped,
                )
                keys[i] = bumped
            last = keys[i]

        for i in indexes:
            if keys[i] is None:
                last = generate_key(last)
                keys[i] = last

    items: list[Item] = []
    for row, key in zip(rows, keys):
        row["sort_key"] = key
        items.append(Item.from_dict(row))
    return items
