"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Loads the WordNet lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from wordnetctl.domain.errors import WordNetError
from wordnetctl.output.formatters import OutputSettings, format_result
from wordnetctl.services.base import error_result

if TYPE_CHECKING:
    from wordnetctl.config.settings import WordNetSettings
    from wordnetctl.infrastructure.wordnet import WordNet
    from wordnetctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The WordNet is built on first use so ``--help``, ``--version`` and
    ``--examples`` never read the input files.
    """

    def __init__(self, settings: WordNetSettings) -> None:
        self.settings = settings
        self._wordnet: WordNet | None = None

        from wordnetctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from wordnetctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def wordnet(self) -> WordNet:
        """The WordNet (built lazily on first access).

        Input errors are emitted as a ``load`` failure and exit with code 1.
        """
        if self._wordnet is None:
            from wordnetctl.infrastructure.wordnet import WordNet

            synsets = self.settings.synsets_file
            hypernyms = self.settings.hypernyms_file
            logger.debug("loading wordnet from %s and %s", synsets, hypernyms)
            try:
                self._wordnet = WordNet.from_paths(synsets, hypernyms)
            except (WordNetError, OSError) as exc:
                self.emit(error_result("load", exc))
        assert self._wordnet is not None
        return self._wordnet

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON payloads already carry their warnings; quiet mode drops them.
            if not (settings.json_output or settings.quiet):
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
