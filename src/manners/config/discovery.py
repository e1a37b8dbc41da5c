"""Locate ``manners.toml`` for the CLI.

``MANNERS_CONFIG`` names the file outright; otherwise the search walks up
from the working directory the way git looks for ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "manners.toml"
CONFIG_ENV_VAR = "MANNERS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``manners.toml`` at or above *start*, or None.

    A ``MANNERS_CONFIG`` that points at a missing file disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
