"""Root CLI group for wordnetctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from wordnetctl import __version__
from wordnetctl.commands import register_commands
from wordnetctl.commands._context import AppContext
from wordnetctl.config.settings import WordNetSettings

_INPUT_PATH = click.Path(dir_okay=False, resolve_path=True, path_type=Path)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wordnetctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and timing telemetry.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Config file (skips wordnetctl.toml discovery).")
@click.option("--synsets", "synsets_path", type=_INPUT_PATH, default=None,
              help="Synsets file (overrides [data] synsets).")
@click.option("--hypernyms", "hypernyms_path", type=_INPUT_PATH, default=None,
              help="Hypernyms file (overrides [data] hypernyms).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: Path | None,
    synsets_path: Path | None,
    hypernyms_path: Path | None,
) -> None:
    """wordnetctl — WordNet distance, common ancestor, and outcast queries."""
    settings = WordNetSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        synsets_path=synsets_path,
        hypernyms_path=hypernyms_path,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
