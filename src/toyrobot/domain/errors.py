"""Per-line command failures.

Grammar problems are signaled as exceptions. Bounds rejections are not
errors at all and have no type here.
"""

from __future__ import annotations


class CommandError(Exception):
    """Base class for a command line that could not be processed."""

    code = "COMMAND_ERROR"

    def __init__(self, message: str, *, line: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class EmptyInputError(CommandError):
    """The line was empty or whitespace only."""

    code = "EMPTY_INPUT"

    def __init__(self, line: str = "") -> None:
        super().__init__("Command cannot be empty.", line=line)


class InvalidCommandError(CommandError):
    """The line is neither a PLACE command nor a known bare keyword."""

    code = "INVALID_COMMAND"

    def __init__(self, token: str, *, line: str = "") -> None:
        super().__init__(f"Invalid command: {token}", line=line or token)
        self.token = token
