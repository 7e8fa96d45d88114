"""Parsed command types.

A line parses to either a :class:`Place` or a bare :class:`Keyword`.
Keywords are not validated here; the dispatcher decides whether a token
names a real command.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from toyrobot.domain.direction import Direction


class CommandName(StrEnum):
    """The command vocabulary."""

    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"


# Commands that take no arguments.
BARE_COMMANDS: frozenset[str] = frozenset(
    {CommandName.MOVE, CommandName.LEFT, CommandName.RIGHT, CommandName.REPORT}
)


@dataclass(frozen=True)
class Place:
    """``PLACE X,Y,F``. Coordinates are not range-checked at parse time."""

    x: int
    y: int
    direction: Direction

    name = CommandName.PLACE


@dataclass(frozen=True)
class Keyword:
    """A bare, uppercased token such as ``MOVE`` or ``JUMP``."""

    token: str

    @property
    def name(self) -> CommandName | None:
        """The command this token names, or None when unrecognised."""
        if self.token in BARE_COMMANDS:
            return CommandName(self.token)
        return None


Command = Place | Keyword
