"""Tests for group positioning — filtering, appends, index moves, dissolve."""

from __future__ import annotations

import pytest

from boardkeys.groups import (
    Item,
    append_to_group,
    create_item,
    dissolve_group,
    group_and_sort,
    items_in_group,
    key_between_items,
    key_for_new_item,
    key_for_position,
    move_up_down,
    move_within_group,
    normalize_group,
    sort_by_key,
    sort_group,
    validate_item,
)
from boardkeys.keys import InvalidKey, SortKey, is_valid_key


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _item(item_id: str, key: str, group_id: str | None = None) -> Item:
    return Item(id=item_id, sort_key=SortKey(key), group_id=group_id, created_at="2024-01-01T00:00:00+00:00")


def _keys(items) -> list[str]:
    return [str(item.sort_key) for item in items]


@pytest.fixture
def board():
    """Default group a/m/z plus a two-item group "g1", deliberately unsorted."""
    return [
        _item("z", "z"),
        _item("g1-b", "b", "g1"),
        _item("a", "a"),
        _item("g1-a", "a", "g1"),
        _item("m", "m"),
    ]


def _by_id(items, item_id):
    return next(item for item in items if item.id == item_id)


# ---------------------------------------------------------------------------
# Filtering and sorting
# ---------------------------------------------------------------------------


class TestFiltering:
    def test_normalize_group(self):
        assert normalize_group() is None
        assert normalize_group(None) is None
        assert normalize_group("t1") == "t1"

    def test_items_in_group_keeps_input_order(self, board):
        assert [i.id for i in items_in_group(board, None)] == ["z", "a", "m"]
        assert [i.id for i in items_in_group(board, "g1")] == ["g1-b", "g1-a"]

    def test_items_in_unknown_group(self, board):
        assert items_in_group(board, "nope") == []

    def test_sort_by_key(self, board):
        assert _keys(sort_by_key(board)) == ["a", "a", "b", "m", "z"]

    def test_sort_by_key_uppercase_first(self):
        items = [_item("1", "b"), _item("2", "Z"), _item("3", "a")]
        assert _keys(sort_by_key(items)) == ["Z", "a", "b"]

    def test_sort_by_key_is_stable(self):
        items = [_item("first", "m"), _item("second", "m")]
        assert [i.id for i in sort_by_key(items)] == ["first", "second"]

    def test_sort_does_not_mutate(self, board):
        before = list(board)
        sort_by_key(board)
        assert board == before

    def test_sort_group(self, board):
        assert [i.id for i in sort_group(board, None)] == ["a", "m", "z"]

    def test_group_and_sort(self, board):
        grouped = group_and_sort(board)
        assert list(grouped) == [None, "g1"]
        assert [i.id for i in grouped[None]] == ["a", "m", "z"]
        assert [i.id for i in grouped["g1"]] == ["g1-a", "g1-b"]

    def test_group_and_sort_empty(self):
        assert group_and_sort([]) == {}


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


class TestItem:
    def test_create_item_initialises_content_fields(self):
        item = create_item("qandablock", "g1")
        assert item.fields == {"question": "", "answer": ""}
        assert item.group_id == "g1"
        assert item.sort_key == "m"
        assert validate_item(item)

    def test_create_item_unknown_type_has_no_fields(self):
        assert create_item("sketchblock").fields == {}

    def test_items_are_immutable(self):
        item = _item("x", "m")
        with pytest.raises(AttributeError):
            item.sort_key = SortKey("n")  # type: ignore[misc]

    def test_with_key_returns_new_item(self):
        item = _item("x", "m")
        moved = item.with_key("n")
        assert moved.sort_key == "n"
        assert item.sort_key == "m"
        assert moved.id == item.id

    def test_with_key_rejects_bad_key(self):
        with pytest.raises(InvalidKey):
            _item("x", "m").with_key("n1")

    def test_to_dict_spreads_content(self):
        item = create_item("factblock", None, "c")
        data = item.to_dict()
        assert data["fact"] == ""
        assert data["sort_key"] == "c"
        assert type(data["sort_key"]) is str
        assert data["group_id"] is None

    def test_from_dict_accepts_legacy_names(self):
        item = Item.from_dict({"id": "1", "type": "textblock", "topicGroupId": "t1", "sortKey": "q", "text": "hi"})
        assert item.group_id == "t1"
        assert item.sort_key == "q"
        assert item.fields == {"text": "hi"}

    def test_from_dict_requires_valid_key(self):
        with pytest.raises(InvalidKey):
            Item.from_dict({"id": "1", "sort_key": "??"})

    def test_validate_item(self):
        assert validate_item(_item("x", "m", "g"))
        assert not validate_item({"id": "x", "sort_key": "m"})
        assert not validate_item(Item(id="", sort_key=SortKey("m")))
        assert not validate_item(Item(id="x", sort_key=SortKey("m"), group_id=7))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Appending and index placement
# ---------------------------------------------------------------------------


class TestAppend:
    def test_key_for_new_item_in_empty_group(self, board):
        assert key_for_new_item(board, "fresh") == "m"

    def test_key_for_new_item_appends(self, board):
        assert key_for_new_item(board, None) == "za"
        assert key_for_new_item(board, "g1") == "c"

    def test_append_to_group(self, board):
        item = append_to_group("todoblock", "g1", board)
        assert item.group_id == "g1"
        assert item.type == "todoblock"
        assert item.fields == {"todo": ""}
        assert item.sort_key > max(_keys(items_in_group(board, "g1")))

    def test_append_does_not_touch_input(self, board):
        before = list(board)
        append_to_group("textblock", None, board)
        assert board == before

    def test_key_between_items(self):
        assert key_between_items(None, None) == "m"
        assert key_between_items(_item("1", "a"), None) == "b"
        assert key_between_items(None, _item("1", "b")) == "a"
        assert key_between_items(_item("1", "a"), _item("2", "c")) == "b"


class TestKeyForPosition:
    def test_front(self, board):
        assert key_for_position(board, None, 0) == "Za"

    def test_between(self, board):
        assert key_for_position(board, None, 1) == "g"
        assert key_for_position(board, None, 2) == "s"

    def test_end(self, board):
        assert key_for_position(board, None, 3) == "za"

    def test_indices_clamp(self, board):
        assert key_for_position(board, None, -5) == "Za"
        assert key_for_position(board, None, 99) == "za"

    def test_exclude_id(self, board):
        # without "m" the default group is a, z
        assert key_for_position(board, None, 1, exclude_id="m") == "m"

    def test_empty_group(self, board):
        assert key_for_position(board, "fresh", 4) == "m"

    def test_only_target_group_counts(self, board):
        assert key_for_position(board, "g1", 1) == "am"


class TestMoveWithinGroup:
    def test_move_to_front(self, board):
        moved = move_within_group(_by_id(board, "z"), 0, board)
        assert moved.sort_key == "Za"
        assert moved.group_id is None

    def test_move_to_middle(self, board):
        moved = move_within_group(_by_id(board, "a"), 1, board)
        assert moved.sort_key == "s"

    def test_move_to_end(self, board):
        moved = move_within_group(_by_id(board, "a"), 2, board)
        assert moved.sort_key == "za"

    def test_resulting_order(self, board):
        moved = move_within_group(_by_id(board, "a"), 1, board)
        result = [moved if i.id == "a" else i for i in board]
        assert [i.id for i in sort_group(result, None)] == ["m", "a", "z"]

    def test_input_item_unchanged(self, board):
        before = _by_id(board, "a")
        move_within_group(before, 2, board)
        assert before.sort_key == "a"


class TestMoveUpDown:
    def test_up(self, board):
        assert move_up_down(_by_id(board, "m"), "up", board).sort_key == "Za"

    def test_down(self, board):
        assert move_up_down(_by_id(board, "m"), "down", board).sort_key == "za"
        assert move_up_down(_by_id(board, "a"), "down", board).sort_key == "s"

    def test_boundaries_return_item_unchanged(self, board):
        top = _by_id(board, "a")
        bottom = _by_id(board, "z")
        assert move_up_down(top, "up", board) is top
        assert move_up_down(bottom, "down", board) is bottom

    def test_unknown_item_unchanged(self, board):
        stranger = _item("stranger", "q")
        assert move_up_down(stranger, "up", board) is stranger

    def test_invalid_direction(self, board):
        with pytest.raises(ValueError, match="Invalid direction"):
            move_up_down(_by_id(board, "m"), "sideways", board)


# ---------------------------------------------------------------------------
# Dissolving groups
# ---------------------------------------------------------------------------


class TestDissolveGroup:
    def test_moves_members_after_default_group(self, board):
        result = dissolve_group(board, "g1")
        assert [i.id for i in result] == [i.id for i in board]
        assert all(i.group_id is None for i in result)
        assert [i.id for i in sort_group(result, None)] == ["a", "m", "z", "g1-a", "g1-b"]
        assert _by_id(result, "g1-a").sort_key == "za"
        assert _by_id(result, "g1-b").sort_key == "zb"

    def test_other_items_untouched(self, board):
        result = dissolve_group(board, "g1")
        for item_id in ("a", "m", "z"):
            assert _by_id(result, item_id) is _by_id(board, item_id)

    def test_into_empty_default_group(self):
        items = [_item("1", "q", "g"), _item("2", "r", "g")]
        result = dissolve_group(items, "g")
        assert _keys(result) == ["m", "n"]

    def test_default_and_unknown_groups_are_no_ops(self, board):
        assert dissolve_group(board, None) == board
        assert dissolve_group(board, "nope") == board


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


def test_append_sort_and_move_scenario():
    first = _item("first", "m", "t1")
    items = [first]

    second = append_to_group("textblock", "t1", items)
    assert second.sort_key > "m"
    items.append(second)

    assert _keys(sort_group(items, "t1")) == ["m", second.sort_key]

    moved = move_within_group(second, 0, items)
    assert moved.sort_key < "m"
    assert is_valid_key(moved.sort_key)
    items = [moved if i.id == second.id else i for i in items]
    assert [i.id for i in sort_group(items, "t1")] == [second.id, "first"]


def test_groups_order_independently(board):
    moved = move_within_group(_by_id(board, "g1-b"), 0, board)
    result = [moved if i.id == moved.id else i for i in board]
    assert [i.id for i in sort_group(result, "g1")] == ["g1-b", "g1-a"]
    assert [i.id for i in sort_group(result, None)] == ["a", "m", "z"]
