"""Standalone command: outcast detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wordnetctl.commands._base import WnCommand
from wordnetctl.services.outcast import OutcastService

if TYPE_CHECKING:
    from wordnetctl.commands._context import AppContext


@click.command(
    cls=WnCommand,
    examples="""\
  wordnetctl outcast horse zebra cat bear table
  wordnetctl -q outcast water soda bed orange_juice milk apple_juice tea coffee
  wordnetctl --json outcast apple pear peach banana lime lemon blueberry strawberry mango""",
)
@click.argument("nouns", nargs=-1, required=True)
@click.pass_obj
def outcast(app: AppContext, nouns: tuple[str, ...]) -> None:
    """Find the noun least related to the others."""
    app.emit(
        OutcastService(app.wordnet).outcast(nouns, max_nouns=app.settings.outcast.max_nouns)
    )
