"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from wordnetctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from wordnetctl.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the answer, for ``--quiet`` mode and shell pipelines."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    match result.op:
        case "distance":
            return str(d["distance"])
        case "sca":
            return str(d["gloss"])
        case "ancestor":
            return f"{d['ancestor_id']} {d['distance']}"
        case "nouns":
            return "\n".join(d.get("items", []))
        case "is_noun":
            return "true" if d["is_noun"] else "false"
        case "outcast":
            return str(d["outcast"])
        case "dump":
            return str(d["dump"]).rstrip("\n")
        case "check":
            return "healthy" if d["healthy"] else "unhealthy"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="wn.ok"), Text(f"  {result.op}", style="wn.op"))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field without wrapping."""
    if not style and (key == "id" or key.endswith("_id")):
        style = "wn.id"
    console.print(Text.assemble((f"  {key}: ", "wn.key"), (str(value), style)), soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}", markup=False)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="wn.error"),
        Text(f"  {result.op}", style="wn.op"),
        Text(" — "),
        Text(msg),
        soft_wrap=True,
    )
    if err:
        _field(console, "code", err.code)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}", markup=False)


# ── Query renderers ───────────────────────────────────────────────────


def _render_distance(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "nouns", f"{d['noun1']}, {d['noun2']}", style="wn.noun")
    _field(console, "distance", d["distance"], style="wn.distance")


def _render_sca(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    if "noun1" in d:
        _field(console, "nouns", f"{d['noun1']}, {d['noun2']}", style="wn.noun")
    else:
        _field(console, "subset_a", " ".join(map(str, d["subset_a"])))
        _field(console, "subset_b", " ".join(map(str, d["subset_b"])))
    _field(console, "ancestor_id", d["ancestor_id"])
    if "gloss" in d:
        _field(console, "gloss", d["gloss"], style="wn.gloss")
    _field(console, "distance", d["distance"], style="wn.distance")


def _render_nouns(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    for noun in items:
        console.print(Text(noun, style="wn.noun"))
    console.print(f"\n{result.data.get('count', len(items))} nouns")


def _render_is_noun(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "word", d["word"], style="wn.noun")
    _field(console, "is_noun", "yes" if d["is_noun"] else "no")
    if d.get("synsets"):
        _field(console, "synsets", " ".join(map(str, d["synsets"])))


def _render_outcast(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "outcast", d["outcast"] or "(none)", style="wn.noun")
    scores: dict[str, int] = d.get("scores", {})
    if not scores:
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Noun", style="wn.noun")
    table.add_column("Distance Sum", style="wn.distance", justify="right")
    for noun, score in sorted(scores.items(), key=lambda kv: (-kv[1], kv[0])):
        marker = Text(noun, style="wn.warning") if noun == d["outcast"] else Text(noun)
        table.add_row(marker, str(score))
    console.print()
    console.print(table)


# ── Graph renderers ───────────────────────────────────────────────────


def _render_dump(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data["dump"]).rstrip("\n")), soft_wrap=True)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "healthy", "yes" if d["healthy"] else "no")
    _field(console, "components", d["components"])
    _field(console, "roots", " ".join(map(str, d["roots"])) or "(none)")
    for issue in d.get("issues", []):
        style = "wn.error" if issue["severity"] == "error" else "wn.warning"
        line = Text("  ")
        line.append(issue["severity"], style=style)
        line.append(f" [{issue['category']}] {issue['message']}")
        console.print(line, soft_wrap=True)
        if verbose and issue.get("node_ids"):
            console.print(f"    ids: {' '.join(map(str, issue['node_ids']))}", markup=False)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, _Renderer] = {
    # Query
    "distance": _render_distance,
    "sca": _render_sca,
    "ancestor": _render_sca,
    "nouns": _render_nouns,
    "is_noun": _render_is_noun,
    "outcast": _render_outcast,
    # Graph
    "dump": _render_dump,
    "stats": _render_generic,
    "check": _render_check,
}
