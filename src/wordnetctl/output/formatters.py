"""Format dispatch: JSON, quiet, or Rich human output.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
``--quiet`` prints only the answer so results compose in shell pipelines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from wordnetctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from wordnetctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet, and quiet over the default Rich output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
