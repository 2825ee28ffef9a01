"""WordNetSettings — one frozen object for CLI flags, env vars, and TOML.

Sources, strongest first:

1. keyword arguments (the CLI flags Click parsed)
2. ``WORDNETCTL_*`` environment variables (``__`` reaches into sections,
   e.g. ``WORDNETCTL_QUERY__NOUNS_LIMIT=20``)
3. the sections of ``wordnetctl.toml``
4. defaults baked into :mod:`wordnetctl.config.models`
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from wordnetctl.config.discovery import ConfigFileError, find_config, read_config_file
from wordnetctl.config.models import DataConfig, OutcastConfig, QueryConfig

logger = logging.getLogger(__name__)

# Tables of wordnetctl.toml; anything else in the file is ignored.
TOML_SECTIONS = ("data", "query", "outcast")

# Config file picked by from_cli, read by settings_customise_sources.
_active_config: ContextVar[Path | None] = ContextVar("_active_config", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source yielding the known sections of one TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections: dict[str, Any] = {}
        if toml_path is None:
            return
        raw = read_config_file(toml_path)
        for name, value in raw.items():
            if name in TOML_SECTIONS:
                self._sections[name] = value
            else:
                logger.warning("ignoring unknown section [%s] in %s", name, toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return dict(self._sections)


class WordNetSettings(BaseSettings):
    """Settings shared by every command, stored on :class:`AppContext`.

    Attributes:
        data_root: Directory that relative input paths resolve against
            (the config file's directory, else the CWD).
        config_path: The config file in effect, or None.
        synsets_path: ``--synsets`` override of ``[data] synsets``.
        hypernyms_path: ``--hypernyms`` override of ``[data] hypernyms``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WORDNETCTL_",
        "env_nested_delimiter": "__",
    }

    data_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # Global flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    synsets_path: Path | None = None
    hypernyms_path: Path | None = None

    # wordnetctl.toml sections
    data: DataConfig = Field(default_factory=DataConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    outcast: OutcastConfig = Field(default_factory=OutcastConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_config.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: Path | None = None,
        data_root: Path | None = None,
        **cli_flags: Any,
    ) -> WordNetSettings:
        """Build settings for one CLI invocation.

        *config_path* (``--config``) wins over discovery. Flags left at
        None are dropped so an unset flag never masks env or TOML values.
        A malformed config file becomes a :class:`click.ClickException`.
        """
        toml_path = config_path or find_config(data_root)
        if data_root is None:
            data_root = toml_path.parent if toml_path else Path.cwd()
        flags = {name: value for name, value in cli_flags.items() if value is not None}

        token = _active_config.set(toml_path)
        try:
            return cls(data_root=data_root, config_path=toml_path, **flags)
        except ConfigFileError as exc:
            raise click.ClickException(str(exc)) from exc
        finally:
            _active_config.reset(token)

    @property
    def synsets_file(self) -> Path:
        """Synsets input: ``--synsets`` override, else ``[data] synsets``."""
        return self._resolve(self.synsets_path or self.data.synsets)

    @property
    def hypernyms_file(self) -> Path:
        """Hypernyms input: ``--hypernyms`` override, else ``[data] hypernyms``."""
        return self._resolve(self.hypernyms_path or self.data.hypernyms)

    def _resolve(self, path: Path) -> Path:
        path = path.expanduser()
        return path if path.is_absolute() else self.data_root / path
