"""Rich Console factory and theme for wordnetctl output.

Consoles render into a StringIO buffer so renderers can return plain
strings. Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WN_THEME = Theme(
    {
        "wn.ok": "bold green",
        "wn.error": "bold red",
        "wn.warning": "bold yellow",
        "wn.op": "bold cyan",
        "wn.key": "dim",
        "wn.id": "bold blue",
        "wn.noun": "bold",
        "wn.gloss": "italic",
        "wn.distance": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=WN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
