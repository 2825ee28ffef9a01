"""Subcommand modules for wordnetctl.

Provides register_commands() which uses deferred imports to keep
``wordnetctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    from wordnetctl.commands.graph import graph
    from wordnetctl.commands.outcast import outcast
    from wordnetctl.commands.query import query

    cli.add_command(query)
    cli.add_command(graph)
    cli.add_command(outcast)
