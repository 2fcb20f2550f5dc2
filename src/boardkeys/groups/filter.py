"""Group membership and key ordering over item collections."""

from __future__ import annotations

from typing import Iterable

from boardkeys.groups._helpers import normalize_group
from boardkeys.groups.item import Item


def items_in_group(items: Iterable[Item], group_id: str | None) -> list[Item]:
    """Items whose group matches group_id, in input order (not sorted)."""
    target = normalize_group(group_id)
    return [item for item in items if normalize_group(item.group_id) == target]


def sort_by_key(items: Iterable[Item]) -> list[Item]:
    """New list sorted by sort key, code-point order, stable on ties.

    Display code must always go through this (or group_and_sort); insertion
    order carries no meaning.
    """
    return sorted(items, key=lambda item: str(item.sort_key))


def sort_group(items: Iterable[Item], group_id: str | None) -> list[Item]:
    """One group's items in display order."""
    return sort_by_key(items_in_group(items, group_id))


def group_and_sort(items: Iterable[Item]) -> dict[str | None, list[Item]]:
    """Partition items by group in one pass, each group sorted by key.

    Groups appear in the order they are first seen.
    """
    grouped: dict[str | None, list[Item]] = {}
    for item in items:
        grouped.setdefault(normalize_group(item.group_id), []).append(item)
    return {group_id: sort_by_key(members) for group_id, members in grouped.items()}
