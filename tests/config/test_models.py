"""Tests for the config section models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wordnetctl.config.models import DataConfig, OutcastConfig, QueryConfig, WordNetConfig


class TestDefaults:
    def test_data_defaults(self) -> None:
        data = DataConfig()
        assert data.synsets == Path("synsets.txt")
        assert data.hypernyms == Path("hypernyms.txt")

    def test_section_defaults(self) -> None:
        cfg = WordNetConfig()
        assert cfg.query.nouns_limit == 100
        assert cfg.outcast.max_nouns == 64


class TestValidation:
    def test_sparse_sections(self) -> None:
        cfg = WordNetConfig.model_validate({"query": {"nouns_limit": 5}})
        assert cfg.query.nouns_limit == 5
        assert cfg.outcast.max_nouns == 64

    def test_paths_coerced(self) -> None:
        cfg = WordNetConfig.model_validate({"data": {"synsets": "wn/synsets.txt"}})
        assert cfg.data.synsets == Path("wn/synsets.txt")

    def test_nouns_limit_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            QueryConfig(nouns_limit=0)

    def test_outcast_needs_room_for_three(self) -> None:
        with pytest.raises(ValidationError):
            OutcastConfig(max_nouns=2)

    def test_frozen(self) -> None:
        cfg = QueryConfig()
        with pytest.raises(ValidationError):
            cfg.nouns_limit = 7  # type: ignore[misc]
