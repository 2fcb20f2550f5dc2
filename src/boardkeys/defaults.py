"""Shared constants — env var names, default paths, resolvers.

Single source of truth for board path and log level resolution.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_BOARD_PATH = "BOARDKEYS_BOARD"
ENV_LOG_LEVEL = "BOARDKEYS_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

# Project-local work directory holding the board file
WORK_DIR_NAME = ".work"
BOARD_FILE_NAME = "board.yaml"

DEFAULT_LOG_LEVEL = "WARNING"


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def resolve_board_path(explicit: str | Path | None = None) -> Path:
    """Resolve board file: explicit argument > ENV_BOARD_PATH > ./.work/board.yaml."""
    if explicit:
        return Path(explicit).expanduser()
    from_env = os.getenv(ENV_BOARD_PATH)
    if from_env:
        return Path(from_env).expanduser()
    return Path.cwd() / WORK_DIR_NAME / BOARD_FILE_NAME


def resolve_log_level(verbose: bool = False) -> int:
    """Resolve log level: --verbose > ENV_LOG_LEVEL > WARNING.

    Unknown level names fall back to the default.
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)
