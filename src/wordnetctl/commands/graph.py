"""Command group: hypernym graph diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wordnetctl.commands._base import WnGroup
from wordnetctl.services.graph import GraphService

if TYPE_CHECKING:
    from wordnetctl.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  wordnetctl graph stats
  wordnetctl graph check
  wordnetctl -q graph dump > adjacency.txt"""


@click.group(cls=WnGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Inspect the hypernym graph."""


@graph.command(
    examples="""\
  wordnetctl graph dump
  wordnetctl -q graph dump | head"""
)
@click.pass_obj
def dump(app: AppContext) -> None:
    """Print every vertex with its hypernym ids."""
    app.emit(GraphService(app.wordnet).dump())


@graph.command(
    examples="""\
  wordnetctl graph stats
  wordnetctl --json graph stats"""
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Synset, noun, vertex, and edge counts."""
    app.emit(GraphService(app.wordnet).stats())


@graph.command(
    examples="""\
  wordnetctl graph check
  wordnetctl -v graph check"""
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Report cycles, extra roots, and synsets missing from the graph."""
    app.emit(GraphService(app.wordnet).check())
