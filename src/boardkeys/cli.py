"""Click CLI entrypoint — `boardkeys <group> <subcommand>`.

Every call is stateless: board commands load the board file, apply one
operation, and write it back. JSON output by default, --human for text.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from boardkeys.board import load_board, save_board
from boardkeys.defaults import resolve_board_path, resolve_log_level
from boardkeys.groups import (
    Item,
    append_to_group,
    dissolve_group,
    group_and_sort,
    move_to_group,
    move_up_down,
    move_within_group,
    sort_group,
)
from boardkeys.groups._helpers import DEFAULT_GROUP, DEFAULT_ITEM_TYPE
from boardkeys.keys import (
    InvalidKey,
    InvalidOrder,
    batch_keys,
    generate_key,
    initial_key,
    is_valid_key,
    key_after,
    key_before,
    key_between,
    position_to_key,
)
from boardkeys.output import output

_ERRORS = (InvalidOrder, InvalidKey, ValueError)


@click.group()
@click.version_option(package_name="boardkeys")
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.option("--verbose", is_flag=True, help="Debug logging to stderr")
@click.option("--board", "board_path", default=None, help="Board file (default: $BOARDKEYS_BOARD or .work/board.yaml)")
@click.pass_context
def cli(ctx: click.Context, human: bool, verbose: bool, board_path: str | None) -> None:
    """boardkeys — fractional sort keys for grouped boards."""
    logging.basicConfig(level=resolve_log_level(verbose), format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["human"] = human
    ctx.obj["board"] = resolve_board_path(board_path)


def _emit(ctx: click.Context, data: dict[str, object]) -> None:
    output(data, ctx.obj["human"])


# =========================================================================
# Key Algebra
# =========================================================================

@cli.group()
def key() -> None:
    """Mint and check sort keys."""


@key.command()
@click.pass_context
def initial(ctx: click.Context) -> None:
    """Seed key for an empty group."""
    _emit(ctx, {"key": initial_key()})


@key.command()
@click.argument("after_key")
@click.pass_context
def before(ctx: click.Context, after_key: str) -> None:
    """Key that sorts before AFTER_KEY."""
    try:
        _emit(ctx, {"key": key_before(after_key), "before": after_key})
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})


@key.command()
@click.argument("before_key")
@click.pass_context
def after(ctx: click.Context, before_key: str) -> None:
    """Key that sorts after BEFORE_KEY."""
    try:
        _emit(ctx, {"key": key_after(before_key), "after": before_key})
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})


@key.command()
@click.argument("low")
@click.argument("high")
@click.pass_context
def between(ctx: click.Context, low: str, high: str) -> None:
    """Key strictly between LOW and HIGH."""
    try:
        _emit(ctx, {"key": key_between(low, high), "low": low, "high": high})
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})


@key.command()
@click.option("--before", "before_key", default=None, help="Key of the item above the slot")
@click.option("--after", "after_key", default=None, help="Key of the item below the slot")
@click.pass_context
def generate(ctx: click.Context, before_key: str | None, after_key: str | None) -> None:
    """Key for a slot bounded by --before and/or --after."""
    try:
        _emit(ctx, {"key": generate_key(before_key, after_key)})
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})


@key.command()
@click.argument("value")
@click.pass_context
def validate(ctx: click.Context, value: str) -> None:
    """Report whether VALUE is a valid sort key."""
    _emit(ctx, {"key": value, "valid": is_valid_key(value)})


@key.command()
@click.argument("count", type=int)
@click.pass_context
def batch(ctx: click.Context, count: int) -> None:
    """COUNT increasing keys spread across the key space."""
    try:
        _emit(ctx, {"keys": batch_keys(count)})
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})


@key.command("from-position")
@click.argument("positions", nargs=-1, required=True, type=float)
@click.option("--hint", default=1000, type=int, help="Total items hint used to scale positions")
@click.pass_context
def from_position(ctx: click.Context, positions: tuple[float, ...], hint: int) -> None:
    """Convert legacy numeric POSITIONS to sort keys."""
    _emit(ctx, {"keys": [position_to_key(p, hint) for p in positions]})


# =========================================================================
# Board
# =========================================================================

@cli.group()
def board() -> None:
    """Inspect and rearrange a board file."""


def _load(ctx: click.Context) -> list[Item]:
    return load_board(ctx.obj["board"])


def _save(ctx: click.Context, items: list[Item]) -> Path:
    return save_board(ctx.obj["board"], items)


def _find(items: list[Item], item_id: str) -> Item | None:
    return next((item for item in items if item.id == item_id), None)


def _replace(items: list[Item], updated: Item) -> list[Item]:
    return [updated if item.id == updated.id else item for item in items]


@board.command()
@click.option("--group", "group", default=None, help="Only this group")
@click.option("--default-group", "default_group", is_flag=True, help="Only the default (ungrouped) items")
@click.pass_context
def show(ctx: click.Context, group: str | None, default_group: bool) -> None:
    """Items grouped and in display order.

    Groups are listed by raw id; the default group has group_id null.
    """
    if group is not None and default_group:
        _emit(ctx, {"error": "--group and --default-group are mutually exclusive."})
        return
    try:
        items = _load(ctx)
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    if default_group:
        grouped = {DEFAULT_GROUP: sort_group(items, DEFAULT_GROUP)}
    elif group is not None:
        grouped = {group: sort_group(items, group)}
    else:
        grouped = group_and_sort(items)
    _emit(ctx, {
        "board": str(ctx.obj["board"]),
        "groups": [
            {"group_id": group_id, "items": [m.to_dict() for m in members]}
            for group_id, members in grouped.items()
        ],
    })


@board.command()
@click.option("--type", "item_type", default=DEFAULT_ITEM_TYPE, help="Item type (e.g. textblock, todoblock)")
@click.option("--group", "group", default=None, help="Target group (omit for the default group)")
@click.pass_context
def append(ctx: click.Context, item_type: str, group: str | None) -> None:
    """Add a new item at the end of a group."""
    try:
        items = _load(ctx)
        item = append_to_group(item_type, group, items)
        _save(ctx, items + [item])
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    _emit(ctx, {"item": item.to_dict()})


@board.command()
@click.argument("item_id")
@click.option("--index", "index", required=True, type=int, help="Target index within the item's group")
@click.pass_context
def move(ctx: click.Context, item_id: str, index: int) -> None:
    """Move ITEM_ID to INDEX inside its own group."""
    try:
        items = _load(ctx)
        item = _find(items, item_id)
        if item is None:
            _emit(ctx, {"error": f"Item '{item_id}' not found."})
            return
        moved = move_within_group(item, index, items)
        _save(ctx, _replace(items, moved))
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    _emit(ctx, {"item": moved.to_dict(), "previous_key": str(item.sort_key)})


@board.command()
@click.argument("item_id")
@click.option("--direction", required=True, type=click.Choice(["up", "down"]))
@click.pass_context
def step(ctx: click.Context, item_id: str, direction: str) -> None:
    """Move ITEM_ID one place up or down."""
    try:
        items = _load(ctx)
        item = _find(items, item_id)
        if item is None:
            _emit(ctx, {"error": f"Item '{item_id}' not found."})
            return
        moved = move_up_down(item, direction, items)
        if moved is not item:
            _save(ctx, _replace(items, moved))
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    _emit(ctx, {"item": moved.to_dict(), "moved": moved is not item})


@board.command()
@click.argument("item_id")
@click.option("--to-group", "to_group", default=None, help="Destination group (default: the item's own group)")
@click.option("--to-default", "to_default", is_flag=True, help="Drop into the default (ungrouped) group")
@click.option("--index", "index", default=None, type=int, help="Visual index dropped on; omit to drop on the group")
@click.pass_context
def drop(ctx: click.Context, item_id: str, to_group: str | None, to_default: bool, index: int | None) -> None:
    """Apply a drag-and-drop of ITEM_ID."""
    if to_group is not None and to_default:
        _emit(ctx, {"error": "--to-group and --to-default are mutually exclusive."})
        return
    try:
        items = _load(ctx)
        item = _find(items, item_id)
        if item is None:
            _emit(ctx, {"error": f"Item '{item_id}' not found."})
            return
        if to_default:
            dest = DEFAULT_GROUP
        else:
            dest = item.group_id if to_group is None else to_group
        moved = move_to_group(item, dest, index, items)
        _save(ctx, _replace(items, moved))
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    _emit(ctx, {"item": moved.to_dict(), "from_group": item.group_id})


@board.command()
@click.argument("group")
@click.pass_context
def dissolve(ctx: click.Context, group: str) -> None:
    """Move every item of GROUP into the default group."""
    try:
        items = _load(ctx)
        updated = dissolve_group(items, group)
        _save(ctx, updated)
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    moved = [new.id for old, new in zip(items, updated) if new is not old]
    _emit(ctx, {"dissolved": group, "moved": moved})


@board.command()
@click.pass_context
def migrate(ctx: click.Context) -> None:
    """Rewrite the board with migrated, valid sort keys."""
    try:
        items = _load(ctx)
        path = _save(ctx, items)
    except _ERRORS as exc:
        _emit(ctx, {"error": str(exc)})
        return
    _emit(ctx, {"board": str(path), "items": len(items)})
