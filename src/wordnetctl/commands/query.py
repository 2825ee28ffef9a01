"""Command group: noun and synset queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wordnetctl.commands._base import WnGroup
from wordnetctl.services.query import QueryService

if TYPE_CHECKING:
    from wordnetctl.commands._context import AppContext

_QUERY_EXAMPLES = """\
  wordnetctl query distance horse zebra
  wordnetctl query sca horse zebra
  wordnetctl query ancestor --a 22 --b 34 --b 35
  wordnetctl query nouns --prefix eq --limit 20
  wordnetctl query has zebra"""


@click.group(cls=WnGroup, examples=_QUERY_EXAMPLES)
def query() -> None:
    """Distance, common ancestor, and noun lookups."""


@query.command(
    examples="""\
  wordnetctl query distance horse zebra
  wordnetctl -q query distance horse zebra
  wordnetctl --json query distance horse zebra"""
)
@click.argument("noun1")
@click.argument("noun2")
@click.pass_obj
def distance(app: AppContext, noun1: str, noun2: str) -> None:
    """Length of the shortest ancestral path between two nouns."""
    app.emit(QueryService(app.wordnet).distance(noun1, noun2))


@query.command(
    examples="""\
  wordnetctl query sca horse zebra
  wordnetctl -q query sca horse zebra"""
)
@click.argument("noun1")
@click.argument("noun2")
@click.pass_obj
def sca(app: AppContext, noun1: str, noun2: str) -> None:
    """Gloss of the shortest common ancestor of two nouns."""
    app.emit(QueryService(app.wordnet).sca(noun1, noun2))


@query.command(
    examples="""\
  wordnetctl query ancestor --a 22 --b 34
  wordnetctl query ancestor --a 22 --a 23 --b 34 --b 35"""
)
@click.option("--a", "ids_a", type=click.IntRange(min=0), multiple=True, required=True,
              help="Synset id in the first subset (repeatable).")
@click.option("--b", "ids_b", type=click.IntRange(min=0), multiple=True, required=True,
              help="Synset id in the second subset (repeatable).")
@click.pass_obj
def ancestor(app: AppContext, ids_a: tuple[int, ...], ids_b: tuple[int, ...]) -> None:
    """Shortest common ancestor of two synset id subsets."""
    app.emit(QueryService(app.wordnet).ancestor(ids_a, ids_b))


@query.command(
    examples="""\
  wordnetctl query nouns
  wordnetctl query nouns --prefix horse --limit 5
  wordnetctl -q query nouns --all"""
)
@click.option("--prefix", default=None, help="Only nouns starting with this prefix.")
@click.option("--limit", default=None, type=click.IntRange(min=1),
              help="Max nouns (default from [query] nouns_limit).")
@click.option("--all", "show_all", is_flag=True, help="List every noun, ignoring the limit.")
@click.pass_obj
def nouns(app: AppContext, prefix: str | None, limit: int | None, show_all: bool) -> None:
    """List nouns stored in the WordNet."""
    if show_all:
        limit = None
    elif limit is None:
        limit = app.settings.query.nouns_limit
    app.emit(QueryService(app.wordnet).nouns(prefix=prefix, limit=limit))


@query.command(
    examples="""\
  wordnetctl query has zebra
  wordnetctl -q query has unicorn"""
)
@click.argument("word")
@click.pass_obj
def has(app: AppContext, word: str) -> None:
    """Check whether WORD is a noun in the WordNet."""
    app.emit(QueryService(app.wordnet).is_noun(word))
