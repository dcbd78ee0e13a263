"""Locate the datectl.toml that settings are read from.

Lookup order:
  1. an explicit ``--config`` path,
  2. the ``DATECTL_CONFIG`` environment variable,
  3. the nearest ``datectl.toml`` in the start directory or a parent,
     the way git finds ``.git/``.

An explicit path (flag or env var) that is not a file means no config
file at all; the walk-up is skipped.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "datectl.toml"
CONFIG_ENV_VAR = "DATECTL_CONFIG"


def _existing_file(path: str) -> Path | None:
    p = Path(path).expanduser()
    return p if p.is_file() else None


def _walk_up(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the config file to load, or None.

    *start* defaults to the current directory.
    """
    if explicit:
        return _existing_file(explicit)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing_file(env_path)
    for directory in _walk_up(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
