from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")
ROOT_TABLE = "cardinal"


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Read config.toml (or ``path``) into a dict.

    A missing file yields ``{}``; every setting then comes from the
    environment or its default.
    """
    target = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(config: Dict[str, Any] | None, name: str) -> Dict[str, Any]:
    """Return the ``[cardinal.<name>]`` table, or ``{}`` when absent."""

    table = (config or {}).get(ROOT_TABLE, {}).get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{ROOT_TABLE}.{name}] must be a table")
    return table


__all__ = ["load_raw_config", "section", "DEFAULT_CONFIG_PATH", "ROOT_TABLE"]
