"""Place items inside a group: append, insert at an index, move.

Every function here is pure. Inputs are never mutated; a repositioned item
comes back as a new Item carrying a fresh key. Out-of-range indices are
clamped, never rejected.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from boardkeys.groups._helpers import DEFAULT_GROUP, normalize_group
from boardkeys.groups.filter import group_and_sort, items_in_group, sort_by_key, sort_group
from boardkeys.groups.item import Item, create_item
from boardkeys.keys import SortKey, generate_key

log = logging.getLogger(__name__)

VALID_DIRECTIONS = {"up", "down"}


def key_between_items(before: Item | None, after: Item | None) -> SortKey:
    """Key for a slot between two items; either side may be None."""
    return generate_key(
        before.sort_key if before is not None else None,
        after.sort_key if after is not None else None,
    )


def neighbours_at(ordered: Sequence[Item], target_index: int) -> tuple[Item | None, Item | None]:
    """The (before, after) pair straddling target_index in a sorted list.

    target_index <= 0 is the front of the list, >= len(ordered) the end.
    """
    if not ordered:
        return None, None
    if target_index <= 0:
        return None, ordered[0]
    if target_index >= len(ordered):
        return ordered[-1], None
    return ordered[target_index - 1], ordered[target_index]


def key_for_new_item(items: Iterable[Item], group_id: str | None) -> SortKey:
    """Key that appends after the last item of a group (initial key if empty)."""
    members = sort_group(items, group_id)
    if members:
        return generate_key(members[-1].sort_key)
    return generate_key()


def append_to_group(type: str, group_id: str | None, items: Iterable[Item]) -> Item:
    """Create a new item of type at the end of group_id."""
    group_id = normalize_group(group_id)
    return create_item(type, group_id, key_for_new_item(items, group_id))


def key_for_position(
    items: Iterable[Item],
    group_id: str | None,
    target_index: int,
    exclude_id: str | None = None,
) -> SortKey:
    """Key that lands at target_index within a group.

    exclude_id removes the item being moved before indexing so the target
    index refers to the list the user sees once the item is picked up.
    """
    members = group_and_sort(items).get(normalize_group(group_id), [])
    if exclude_id is not None:
        members = [item for item in members if item.id != exclude_id]
    before, after = neighbours_at(members, target_index)
    return key_between_items(before, after)


def move_within_group(item: Item, target_index: int, group_items: Iterable[Item]) -> Item:
    """Return item re-keyed to sit at target_index among its group's other items."""
    others = sort_by_key(
        other for other in items_in_group(group_items, item.group_id) if other.id != item.id
    )
    before, after = neighbours_at(others, target_index)
    return item.with_key(key_between_items(before, after))


def move_up_down(item: Item, direction: str, items: Iterable[Item]) -> Item:
    """Swap item one step up or down in its group.

    At either end of the group the item is returned unchanged.
    """
    if direction not in VALID_DIRECTIONS:
        raise ValueError(f"Invalid direction '{direction}'. Valid: {', '.join(sorted(VALID_DIRECTIONS))}")

    items = list(items)
    members = sort_group(items, item.group_id)
    index = next((i for i, member in enumerate(members) if member.id == item.id), -1)
    if index == -1:
        return item

    new_index = index - 1 if direction == "up" else index + 1
    if new_index < 0 or new_index >= len(members):
        return item
    return item.with_key(key_for_position(items, item.group_id, new_index, exclude_id=item.id))


def dissolve_group(items: Iterable[Item], group_id: str | None) -> list[Item]:
    """Move every item of group_id into the default group.

    Moved items keep their relative order and are appended after the
    default group's current last item. Nothing else changes.
    """
    items = list(items)
    group_id = normalize_group(group_id)
    if group_id is DEFAULT_GROUP:
        return items

    moving = sort_group(items, group_id)
    if not moving:
        return items

    defaults = sort_group(items, DEFAULT_GROUP)
    last_key = defaults[-1].sort_key if defaults else None
    replaced: dict[str, Item] = {}
    for member in moving:
        last_key = generate_key(last_key)
        replaced[member.id] = member.with_group(DEFAULT_GROUP, last_key)

    log.debug("dissolve_group(%r): moved %d items to the default group", group_id, len(replaced))
    return [replaced.get(item.id, item) for item in items]
