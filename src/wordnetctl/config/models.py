"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wordnetctl.toml only contains
overrides. A directory holding ``synsets.txt`` and ``hypernyms.txt`` needs
no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

# --- wordnetctl.toml sections ---


class DataConfig(BaseModel):
    """[data] section — input files, relative to the config directory."""

    model_config = {"frozen": True}

    synsets: Path = Path("synsets.txt")
    hypernyms: Path = Path("hypernyms.txt")


class QueryConfig(BaseModel):
    """[query] section."""

    model_config = {"frozen": True}

    nouns_limit: int = Field(default=100, ge=1)


class OutcastConfig(BaseModel):
    """[outcast] section."""

    model_config = {"frozen": True}

    max_nouns: int = Field(default=64, ge=3)


class WordNetConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    data: DataConfig = Field(default_factory=DataConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    outcast: OutcastConfig = Field(default_factory=OutcastConfig)
