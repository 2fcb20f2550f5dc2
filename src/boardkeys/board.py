"""Board files — an item collection stored as YAML (default) or JSON.

A board document is either a bare list of item records or a mapping with an
`items` list. Loading runs every record through migrate_legacy_items, so
positional or hand-edited boards come back with valid, unique keys.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Iterable

import yaml

from boardkeys.groups import Item, migrate_legacy_items

log = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"


class _BoardLoader(yaml.SafeLoader):
    """yaml.SafeLoader that only reads true/false as booleans.

    A hand-typed `sort_key: on` or `group_id: yes` stays a string.
    """


_BoardLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_BoardLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _is_json(path: Path) -> bool:
    return path.suffix.lower() == ".json"


def _parse(path: Path, text: str) -> Any:
    try:
        if _is_json(path):
            return json.loads(text)
        return yaml.load(text, Loader=_BoardLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Corrupt board {path}: {exc}") from exc


def load_board(path: str | Path) -> list[Item]:
    """Read a board file. A missing file is an empty board."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("load_board: %s does not exist, starting empty", path)
        return []

    data = _parse(path, text)
    if data is None:
        return []
    records = data.get("items", []) if isinstance(data, dict) else data
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError(f"Board {path} must hold a list of item records")

    items = migrate_legacy_items(records)
    log.debug("load_board: %d items from %s", len(items), path)
    return items


def dump_board(items: Iterable[Item], as_json: bool = False) -> str:
    """Serialise items to board document text."""
    document = {"items": [item.to_dict() for item in items]}
    if as_json:
        return json.dumps(document, indent=2) + "\n"
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def save_board(path: str | Path, items: Iterable[Item]) -> Path:
    """Write items to path atomically (temp file in the same dir, then rename)."""
    path = Path(path)
    content = dump_board(items, as_json=_is_json(path))
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
    log.debug("save_board: wrote %s", path)
    return path
