"""Config file discovery.

Walk-up finder locates displaykit.toml, similar to how git finds .git/.
Supports the DISPLAYKIT_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "displaykit.toml"
CONFIG_ENV_VAR = "DISPLAYKIT_CONFIG"


def walk_up(start: Path | None, filename: str) -> Path | None:
    """Return the first ``<dir>/<filename>`` found from *start* upwards."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / filename
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for displaykit.toml.

    Returns the path to the config file, or None if not found.
    Checks DISPLAYKIT_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None
    return walk_up(start, CONFIG_FILENAME)

