"""Rich Console factory and theme for toyrobot output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROBOT_THEME = Theme(
    {
        "robot.report": "bold green",
        "robot.error": "bold red",
        "robot.header": "bold cyan",
        "robot.line": "dim",
        "robot.status.applied": "green",
        "robot.status.ignored": "yellow",
        "robot.status.reported": "bold green",
        "robot.status.empty_input": "red",
        "robot.status.invalid_command": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROBOT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a line status."""
    name = f"robot.status.{status}"
    return name if name in ROBOT_THEME.styles else ""
