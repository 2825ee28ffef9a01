"""Locate and read ``wordnetctl.toml``.

The file is found the way git finds ``.git/``: the start directory and
then each parent in turn. ``WORDNETCTL_CONFIG`` names a file directly
and disables the walk.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from wordnetctl.config.models import WordNetConfig

CONFIG_FILENAME = "wordnetctl.toml"
CONFIG_ENV_VAR = "WORDNETCTL_CONFIG"

logger = logging.getLogger(__name__)


class ConfigFileError(ValueError):
    """A config file exists but cannot be read as TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid TOML in {path}: {reason}")


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    An env var pointing at a missing file logs a warning and yields None
    (code defaults) without walking up for another config.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        candidate = Path(override).expanduser()
        if candidate.is_file():
            return candidate
        logger.warning("%s names a missing file: %s; using defaults", CONFIG_ENV_VAR, candidate)
        return None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML; raises :class:`ConfigFileError` on bad syntax."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(path, str(exc)) from exc


def load_config(path: Path | None = None, *, start: Path | None = None) -> WordNetConfig:
    """Validated section config from *path*, or from discovery when omitted.

    Without any config file the code defaults apply.
    """
    path = path or find_config(start)
    if path is None:
        return WordNetConfig()
    return WordNetConfig.model_validate(read_config_file(path))
