"""Typed payload contracts for service boundaries.

Payloads are validated before they leave the service layer so shape
regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class GraphStatsData(BaseModel):
    """Payload contract for ``GraphService.stats``."""

    synsets: int
    nouns: int
    vertices: int
    edges: int


class CheckIssue(BaseModel):
    """One structural finding returned by ``GraphService.check``."""

    model_config = ConfigDict(extra="allow")

    category: Literal["cycle", "roots", "unlinked"]
    severity: Literal["warning", "error"]
    message: str
    node_ids: list[int] = []


class CheckResultData(BaseModel):
    """Payload contract for ``GraphService.check``."""

    issues: list[CheckIssue]
    count: int
    error_count: int
    warning_count: int
    roots: list[int]
    components: int
    healthy: bool
