"""Root CLI group for toyrobot with global flags and command registration."""

from __future__ import annotations

import click

from toyrobot import __version__
from toyrobot.commands import register_commands
from toyrobot.commands._context import AppContext
from toyrobot.config.settings import RobotSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="toyrobot")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print report lines only.")
@click.option("-v", "--verbose", is_flag=True, help="Per-line trace and debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--width", type=click.IntRange(min=1), default=None, help="Grid width.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Grid height.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    width: int | None,
    height: int | None,
) -> None:
    """toyrobot — toy robot simulator on a square table."""
    ctx.ensure_object(dict)
    settings = RobotSettings.from_cli(
        config_path=config_path,
        width=width,
        height=height,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
