"""Click command and group classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-paste invocations
and exits.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` option when *examples* text is given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if not value or ctx.resilient_parsing:
                return
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(examples)
            ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show_examples,
                help="Show usage examples.",
            )
        )


class WnCommand(_ExamplesMixin, click.Command):
    """Click Command that accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class WnGroup(_ExamplesMixin, click.Group):
    """Click Group whose subcommands default to :class:`WnCommand`."""

    command_class = WnCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
