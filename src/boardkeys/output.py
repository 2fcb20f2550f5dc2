"""CLI output formatting — JSON by default, human-readable on request."""
from __future__ import annotations

import json
import sys

import click


def output(data: dict[str, object], human: bool = False) -> None:
    """Print result as JSON (default) or human-readable text.

    A payload carrying "error" goes to stderr and exits with status 1.
    """
    if "error" in data:
        click.echo(json.dumps(data, indent=2, default=str), err=True)
        sys.exit(1)
    if not human:
        click.echo(json.dumps(data, indent=2, default=str))
        return

    groups = data.get("groups")
    if isinstance(groups, list):
        click.echo(_format_groups(groups))
        return
    for k, v in data.items():
        if isinstance(v, (list, dict)):
            click.echo(f"{k}: {json.dumps(v, indent=2, default=str)}")
        else:
            click.echo(f"{k}: {v}")


def _format_groups(groups: list[object]) -> str:
    """One block per group, one `key  id  type` line per item.

    Named groups print as [name]; the default group as (default group).
    """
    lines: list[str] = []
    for entry in groups:
        if not isinstance(entry, dict):
            continue
        if lines:
            lines.append("")
        group_id = entry.get("group_id")
        lines.append("(default group)" if group_id is None else f"[{group_id}]")
        members = entry.get("items")
        if not isinstance(members, list) or not members:
            lines.append("  (empty)")
            continue
        for m in members:
            if isinstance(m, dict):
                lines.append(f"  {m.get('sort_key', ''):10s} {m.get('id', '')}  {m.get('type', '')}")
    return "\n".join(lines)
