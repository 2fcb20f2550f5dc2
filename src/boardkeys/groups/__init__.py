"""Group Positioning — apply sort keys to items partitioned into groups.

Groups are implicit: items sharing a group id (None for the default group).
Order inside a group is ascending sort key; nothing else is meaningful.
"""

from ._helpers import DEFAULT_GROUP, ITEM_TYPES, normalize_group
from .filter import group_and_sort, items_in_group, sort_by_key, sort_group
from .item import Item, create_item, validate_item
from .migrate import migrate_legacy_items
from .position import (
    append_to_group,
    dissolve_group,
    key_between_items,
    key_for_new_item,
    key_for_position,
    move_up_down,
    move_within_group,
)
from .slots import drop_key, move_to_group, slot_to_key_inter_group, slot_to_key_intra_group

__all__: list[str] = [
    "DEFAULT_GROUP",
    "ITEM_TYPES",
    "Item",
    "append_to_group",
    "create_item",
    "dissolve_group",
    "drop_key",
    "group_and_sort",
    "items_in_group",
    "key_between_items",
    "key_for_new_item",
    "key_for_position",
    "migrate_legacy_items",
    "move_to_group",
    "move_up_down",
    "move_within_group",
    "normalize_group",
    "slot_to_key_inter_group",
    "slot_to_key_intra_group",
    "sort_by_key",
    "sort_group",
    "validate_item",
]
