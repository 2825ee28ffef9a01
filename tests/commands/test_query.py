"""Tests for query CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from wordnetctl.cli import cli


def _json(runner: CliRunner, *args: str) -> dict:
    result = runner.invoke(cli, ["--json", *args])
    return json.loads(result.output)


@pytest.mark.usefixtures("_isolated_data")
class TestDistanceCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "query", "distance", "horse", "zebra"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["distance"] == 2

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "distance", "zebra", "idea"])
        assert result.exit_code == 0
        assert result.output.strip() == "7"

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "distance", "cat", "bear"])
        assert result.exit_code == 0
        assert "distance: 2" in result.output

    def test_unknown_word_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "query", "distance", "horse", "unicorn"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "UNKNOWN_WORD"
        assert data["error"]["detail"]["word"] == "unicorn"

    def test_verbose_attaches_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "query", "distance", "horse", "zebra"])
        assert result.exit_code == 0
        assert "QueryService.distance" in result.output


@pytest.mark.usefixtures("_isolated_data")
class TestScaCommand:
    def test_quiet_prints_gloss(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "sca", "horse", "table"])
        assert result.exit_code == 0
        assert "make a room, or other area, ready" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "query", "sca", "horse", "zebra")
        assert data["data"]["ancestor_id"] == 80
        assert data["data"]["gloss"].startswith("hoofed mammals")


@pytest.mark.usefixtures("_isolated_data")
class TestAncestorCommand:
    def test_subsets(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "query", "ancestor", "--a", "60", "--a", "130", "--b", "90"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "100 2"

    def test_unknown_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "query", "ancestor", "--a", "60", "--b", "999"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "UNKNOWN_ID"

    def test_negative_id_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "ancestor", "--a", "-1", "--b", "10"])
        assert result.exit_code == 2

    def test_both_subsets_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "ancestor", "--a", "60"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_data")
class TestNounsCommand:
    def test_limit(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "query", "nouns", "--limit", "3")
        assert data["data"]["count"] == 3

    def test_prefix(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "nouns", "--prefix", "eq"])
        assert result.exit_code == 0
        assert result.output.split() == ["equine", "equid"]

    def test_default_limit_from_config(self, cli_runner: CliRunner, data_dir: Path) -> None:
        (data_dir / "wordnetctl.toml").write_text("[query]\nnouns_limit = 4\n")
        assert _json(cli_runner, "query", "nouns")["data"]["count"] == 4

    def test_all_ignores_limit(self, cli_runner: CliRunner, data_dir: Path) -> None:
        (data_dir / "wordnetctl.toml").write_text("[query]\nnouns_limit = 4\n")
        assert _json(cli_runner, "query", "nouns", "--all")["data"]["count"] == 22


@pytest.mark.usefixtures("_isolated_data")
class TestHasCommand:
    def test_known(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "query", "has", "horse")
        assert data["data"]["is_noun"] is True
        assert data["data"]["synsets"] == [60, 130]

    def test_unknown_is_not_an_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "has", "unicorn"])
        assert result.exit_code == 0
        assert result.output.strip() == "false"


class TestMissingData:
    def test_load_failure(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("WORDNETCTL_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json", "query", "distance", "horse", "zebra"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["op"] == "load"
        assert data["error"]["code"] == "DATA_NOT_FOUND"

    def test_explicit_inputs(
        self,
        cli_runner: CliRunner,
        data_dir: Path,
        tmp_path_factory: pytest.TempPathFactory,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("WORDNETCTL_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
        result = cli_runner.invoke(
            cli,
            [
                "-q",
                "--synsets",
                str(data_dir / "synsets.txt"),
                "--hypernyms",
                str(data_dir / "hypernyms.txt"),
                "query",
                "distance",
                "horse",
                "zebra",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_malformed_input(
        self, cli_runner: CliRunner, data_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("WORDNETCTL_CONFIG", raising=False)
        monkeypatch.chdir(data_dir)
        (data_dir / "hypernyms.txt").write_text("20,ten\n")
        result = cli_runner.invoke(cli, ["--json", "query", "distance", "horse", "zebra"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "PARSE_ERROR"
        assert data["error"]["detail"]["line"] == 1

    def test_invalid_utf8_input(
        self, cli_runner: CliRunner, data_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("WORDNETCTL_CONFIG", raising=False)
        monkeypatch.chdir(data_dir)
        (data_dir / "synsets.txt").write_bytes(b"1,caf\xe9,g\n")
        result = cli_runner.invoke(cli, ["--json", "query", "has", "horse"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["op"] == "load"
        assert data["error"]["code"] == "PARSE_ERROR"
        assert data["error"]["detail"]["line"] == 1
