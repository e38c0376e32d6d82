"""Locating and reading ``typeguards.toml``.

The file is found by walking up from the working directory, the same way
git finds ``.git/``. ``TYPEGUARDS_CONFIG`` pins an explicit file instead.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from typeguards.domain.errors import ConfigError

CONFIG_FILENAME = "typeguards.toml"
CONFIG_ENV_VAR = "TYPEGUARDS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``typeguards.toml`` at or above *start* (default: cwd).

    When ``TYPEGUARDS_CONFIG`` is set it wins outright: its file is returned
    if it exists and no walk-up happens either way.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigError: The file is not valid TOML.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
