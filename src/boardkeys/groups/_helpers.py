"""Shared helpers for group positioning."""

from __future__ import annotations

import datetime
import uuid

# ---------------------------------------------------------------------------
# Vocabulary constants
# ---------------------------------------------------------------------------

# Item type -> content fields initialised on creation
ITEM_TYPES: dict[str, tuple[str, ...]] = {
    "textblock": ("text",),
    "qandablock": ("question", "answer"),
    "researchblock": ("topic", "result"),
    "factblock": ("fact",),
    "decisionblock": ("decision",),
    "issueblock": ("issue",),
    "todoblock": ("todo",),
    "goalblock": ("goal",),
    "followupblock": ("followup",),
    "ideablock": ("idea",),
    "referenceblock": ("reference",),
}

DEFAULT_ITEM_TYPE = "textblock"

# The implicit default group ("ungrouped" column)
DEFAULT_GROUP: str | None = None


# ---------------------------------------------------------------------------
# Group identifiers
# ---------------------------------------------------------------------------


def normalize_group(group_id: str | None = None) -> str | None:
    """Collapse an absent group id onto the default group (None).

    Every comparison between group ids goes through here.
    """
    if group_id is None:
        return DEFAULT_GROUP
    return group_id


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------


def _now_iso() -> str:
    """Current UTC timestamp in ISO 8601 format."""
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())
