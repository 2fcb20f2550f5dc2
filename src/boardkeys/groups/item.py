"""Item record: an identified, grouped, keyed entry on a board."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from boardkeys.groups._helpers import (
    DEFAULT_ITEM_TYPE,
    ITEM_TYPES,
    _new_id,
    _now_iso,
    normalize_group,
)
from boardkeys.keys import SortKey, generate_key, is_valid_key

# Record fields that are not per-type content
_CORE_FIELDS = {"id", "type", "group_id", "sort_key", "created_at"}

# Spellings used by older exports
_ALIASES = {"topicGroupId": "group_id", "sortKey": "sort_key"}


@dataclass(frozen=True)
class Item:
    """One board entry. Immutable; repositioning returns a new Item."""

    id: str
    sort_key: SortKey
    group_id: str | None = None
    type: str = DEFAULT_ITEM_TYPE
    created_at: str = field(default_factory=_now_iso)
    fields: dict[str, Any] = field(default_factory=dict)

    def with_key(self, sort_key: str) -> "Item":
        return replace(self, sort_key=SortKey(sort_key))

    def with_group(self, group_id: str | None, sort_key: str) -> "Item":
        return replace(self, group_id=normalize_group(group_id), sort_key=SortKey(sort_key))

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the persisted record shape (plain str key)."""
        return {
            "id": self.id,
            "type": self.type,
            "group_id": self.group_id,
            "sort_key": str(self.sort_key),
            "created_at": self.created_at,
            **self.fields,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Build an Item from a persisted record.

        Accepts the camelCase names older exports used. The sort key must
        already be valid (SortKey raises InvalidKey otherwise); use
        migrate_legacy_items for untrusted or positional data.
        """
        record = canonical_record(data)
        raw_id = record.get("id")
        content = {k: v for k, v in record.items() if k not in _CORE_FIELDS and k != "position"}
        return cls(
            id=_new_id() if raw_id is None or raw_id == "" else str(raw_id),
            sort_key=SortKey(record.get("sort_key")),
            group_id=normalize_group(record.get("group_id")),
            type=record.get("type") or DEFAULT_ITEM_TYPE,
            created_at=record.get("created_at") or _now_iso(),
            fields=content,
        )


def canonical_record(data: dict[str, Any]) -> dict[str, Any]:
    """Copy of a raw record with legacy field names renamed.

    YAML readers hand back ints for numeric ids and datetimes for bare
    timestamps; both are turned back into strings here.
    """
    record = {_ALIASES.get(k, k): v for k, v in data.items()}
    group_id = normalize_group(record.get("group_id"))
    record["group_id"] = None if group_id is None else str(group_id)
    created_at = record.get("created_at")
    if created_at is not None and not isinstance(created_at, str):
        record["created_at"] = created_at.isoformat() if hasattr(created_at, "isoformat") else str(created_at)
    return record


def create_item(type: str, group_id: str | None = None, sort_key: str | None = None) -> Item:
    """New item of the given type with empty content fields.

    Without an explicit sort_key the initial key is used.
    """
    return Item(
        id=_new_id(),
        sort_key=SortKey(sort_key) if sort_key else generate_key(),
        group_id=normalize_group(group_id),
        type=type,
        fields={name: "" for name in ITEM_TYPES.get(type, ())},
    )


def validate_item(item: object) -> bool:
    """True when item carries an id, type, timestamp, valid key and group id."""
    if not isinstance(item, Item):
        return False
    return bool(
        item.id
        and item.type
        and item.created_at
        and is_valid_key(item.sort_key)
        and (item.group_id is None or isinstance(item.group_id, str))
    )
