"""Translate drag-and-drop slots into sort keys.

The gesture layer reports (moving item, source group, destination group,
visual drop index). These helpers pick the neighbour pair for that slot and
mint one key for the moving item.

Pointer math is imprecise at list boundaries, so a drop on (or past) the
last visible item appends to the end instead of inserting before it.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from boardkeys.groups._helpers import normalize_group
from boardkeys.groups.filter import group_and_sort
from boardkeys.groups.item import Item
from boardkeys.groups.position import key_between_items, neighbours_at
from boardkeys.keys import SortKey, generate_key


def _append_key(ordered: Sequence[Item]) -> SortKey:
    return generate_key(ordered[-1].sort_key) if ordered else generate_key()


def slot_to_key_intra_group(
    grouped: Mapping[str | None, Sequence[Item]],
    group_id: str | None,
    active_index: int,
    over_index: int,
    moving_id: str,
) -> SortKey:
    """Key for reordering an item inside its own group.

    grouped is the output of group_and_sort. active_index is where the
    moving item sits now, over_index the item it was dropped on; both index
    the full sorted group. Dropping on the item's own slot keeps its key.
    """
    members = list(grouped.get(normalize_group(group_id), []))
    moving = next((item for item in members if item.id == moving_id), None)
    if moving is not None and active_index == over_index:
        return moving.sort_key

    others = [item for item in members if item.id != moving_id]
    if over_index >= len(members) - 1:
        return _append_key(others)

    # Moving down lands after the target, moving up lands before it; with
    # the moving item removed both reduce to the same neighbour pair.
    before, after = neighbours_at(others, over_index)
    return key_between_items(before, after)


def slot_to_key_inter_group(target_items: Sequence[Item], target_index: int) -> SortKey:
    """Key for an item dropped into another group before target_index.

    target_items is the destination group in sorted order. A negative index
    (target not found), an index past the end, or the last item all append.
    """
    if target_index < 0 or target_index >= len(target_items) - 1:
        return _append_key(target_items)
    before = target_items[target_index - 1] if target_index > 0 else None
    return key_between_items(before, target_items[target_index])


def drop_key(
    items: Iterable[Item],
    moving_id: str,
    source_group: str | None,
    dest_group: str | None,
    dest_index: int | None = None,
) -> SortKey:
    """Resolve one drop gesture to the moving item's new key.

    dest_index None means the item was dropped on the group itself rather
    than on an item: it is appended, or left alone when the group did not
    change.
    """
    grouped = group_and_sort(items)
    source = normalize_group(source_group)
    dest = normalize_group(dest_group)

    if source == dest:
        members = grouped.get(dest, [])
        active_index = next((i for i, item in enumerate(members) if item.id == moving_id), -1)
        if dest_index is None:
            if active_index != -1:
                return members[active_index].sort_key
            return _append_key(members)
        return slot_to_key_intra_group(grouped, dest, active_index, dest_index, moving_id)

    target = [item for item in grouped.get(dest, []) if item.id != moving_id]
    return slot_to_key_inter_group(target, -1 if dest_index is None else dest_index)


def move_to_group(
    item: Item,
    dest_group: str | None,
    dest_index: int | None,
    items: Iterable[Item],
) -> Item:
    """Return item moved to dest_group at the drop slot dest_index."""
    key = drop_key(items, item.id, item.group_id, dest_group, dest_index)
    return item.with_group(dest_group, key)
