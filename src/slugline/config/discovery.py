"""Locate the slugline.toml that applies to an invocation.

Resolution order: ``--config`` path, then the ``SLUGLINE_CONFIG`` env var,
then a walk up from the start directory (like git looking for .git/).
A named file that does not exist means "no config", not an error.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "slugline.toml"
CONFIG_ENV_VAR = "SLUGLINE_CONFIG"


def _existing(path: str) -> Path | None:
    p = Path(path)
    return p if p.is_file() else None


def walk_up(start: Path) -> Path | None:
    """Return the nearest ``slugline.toml`` in *start* or its ancestors."""
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for this invocation, or None for code defaults."""
    if config_path:
        return _existing(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing(env_path)
    return walk_up((start or Path.cwd()).resolve())
