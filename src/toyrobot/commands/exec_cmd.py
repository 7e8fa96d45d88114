"""Command: run command strings given on the command line as one session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from toyrobot.commands._base import RobotCommand

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext


@click.command(
    "exec",
    cls=RobotCommand,
    examples="""\
  toyrobot exec "PLACE 0,0,NORTH" MOVE REPORT
  toyrobot exec "PLACE 1,2,EAST" MOVE MOVE LEFT MOVE REPORT
  toyrobot -v exec "PLACE 0,4,NORTH" MOVE REPORT""",
)
@click.argument("commands", nargs=-1, required=True)
@click.pass_obj
def exec_cmd(app: AppContext, commands: tuple[str, ...]) -> None:
    """Execute COMMANDS in order against a fresh robot."""
    app.emit(app.session_service().run(commands, source="<args>"))
