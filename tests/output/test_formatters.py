"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest
from pydantic import ValidationError

from wordnetctl.output.formatters import OutputSettings, format_result
from wordnetctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "distance", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "distance", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="UNKNOWN_WORD", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert (s.json_output, s.quiet, s.verbose) == (False, False, False)

    def test_frozen(self) -> None:
        s = OutputSettings()
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]


class TestJson:
    def test_success_payload(self) -> None:
        result = _ok(noun1="horse", noun2="zebra", distance=2)
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "distance"
        assert data["data"]["distance"] == 2

    def test_error_payload(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "UNKNOWN_WORD"
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        output = format_result(_ok(noun1="a", noun2="b", distance=4), settings=settings)
        assert json.loads(output)["data"]["distance"] == 4


class TestQuietAndRich:
    def test_quiet_prints_answer_only(self) -> None:
        output = format_result(
            _ok(noun1="a", noun2="b", distance=4), settings=OutputSettings(quiet=True)
        )
        assert output == "4"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok(noun1="horse", noun2="zebra", distance=2))
        assert "OK" in output
        assert "horse, zebra" in output
