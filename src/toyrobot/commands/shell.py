"""Command: read commands from stdin and act on each line as it arrives."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, TextIO

import click

from toyrobot.commands._base import RobotCommand

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext
    from toyrobot.services.session import LineResult

PROMPT = "> "


def _prompted(stream: TextIO) -> Iterator[str]:
    """Yield lines from an interactive stream, showing a prompt before each."""
    while True:
        click.echo(PROMPT, nl=False)
        line = stream.readline()
        if not line:
            click.echo()
            return
        yield line


def _report_failure(result: LineResult) -> None:
    if result.error is not None:
        click.echo(f"Command execution failed: {result.error.message}", err=True)


@click.command(
    cls=RobotCommand,
    examples="""\
  toyrobot shell
  printf 'PLACE 0,0,NORTH\\nMOVE\\nREPORT\\n' | toyrobot shell
  toyrobot --json shell < commands.txt""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read commands from stdin, one per line, as a single session.

    Reports are printed as soon as they happen; end of input ends the session.
    """
    stream = click.get_text_stream("stdin")
    if app.settings.json_output:
        app.emit(app.session_service().run_stream(stream, source="<stdin>"))
        return

    service = app.session_service(sink=click.echo, observer=_report_failure)
    lines = _prompted(stream) if stream.isatty() else stream
    result = service.run_stream(lines, source="<stdin>")
    if not result.ok:
        app.emit(result)
    if app.settings.verbose:
        click.echo(f"final: {result.data['final']}", err=True)
