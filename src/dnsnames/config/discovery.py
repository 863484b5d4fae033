"""Locating and reading ``dnsnames.toml``.

Lookup order: the ``DNSNAMES_CONFIG`` env var, if set, names the file
outright (a missing file means no config). Otherwise the working directory
and each of its ancestors is searched, nearest first, the way git finds
``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "dnsnames.toml"
CONFIG_ENV_VAR = "DNSNAMES_CONFIG"


class ConfigFileError(click.ClickException):
    """A config file exists but is not valid TOML."""


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigFileError: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(f"Invalid TOML in {path}: {exc}") from exc
