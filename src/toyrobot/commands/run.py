"""Command: run command files, one isolated robot session per file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from toyrobot.commands._base import RobotCommand
from toyrobot.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext

PATHS_PROMPT = "Please enter the file paths separated by a comma (,)"


def split_paths(raw: str) -> list[Path]:
    """Split a comma-separated path list, trimming blanks."""
    return [Path(part.strip()) for part in raw.split(",") if part.strip()]


def _no_input(message: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="run",
        error=ServiceError(code="NO_INPUT_FILES", message=message),
    )


@click.command(
    cls=RobotCommand,
    examples="""\
  toyrobot run commands.txt
  toyrobot run a.txt b.txt c.txt
  toyrobot --json run a.txt
  toyrobot --width 10 --height 10 run big-table.txt
  toyrobot run            # prompts for comma-separated paths""",
)
@click.argument("paths", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def run(app: AppContext, paths: tuple[Path, ...]) -> None:
    """Run each command file as its own robot session.

    With no PATHS, prompts for a comma-separated list. Missing files are
    skipped with a warning.
    """
    candidates = list(paths)
    if not candidates:
        raw = click.prompt(PATHS_PROMPT, default="", show_default=False)
        if not raw.strip():
            app.emit(_no_input("No input provided."))
            return
        candidates = split_paths(raw)

    existing: list[Path] = []
    for path in candidates:
        if path.is_file():
            existing.append(path)
        else:
            click.echo(f"WARNING: skipping missing file: {path}", err=True)

    if not existing:
        app.emit(_no_input("No valid input files found."))
        return

    app.emit_many(app.session_service().run_files(existing))
