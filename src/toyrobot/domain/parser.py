"""Text line -> :data:`Command`.

Grammar rules are tried in priority order; the first match wins. A line
that matches no rule becomes a bare :class:`Keyword` holding the
uppercased line.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from toyrobot.domain.commands import Command, Keyword, Place
from toyrobot.domain.direction import Direction
from toyrobot.domain.errors import EmptyInputError

PLACE_PATTERN = re.compile(
    r"^PLACE\s+(?P<x>[0-9]+),(?P<y>[0-9]+),(?P<direction>NORTH|EAST|SOUTH|WEST)$",
    re.IGNORECASE,
)


def _match_place(text: str) -> Command | None:
    match = PLACE_PATTERN.match(text)
    if match is None:
        return None
    return Place(
        x=int(match["x"]),
        y=int(match["y"]),
        direction=Direction.from_name(match["direction"]),
    )


GRAMMAR: tuple[Callable[[str], Command | None], ...] = (_match_place,)


def parse(line: str) -> Command:
    """Parse one command line.

    Surrounding whitespace (including a trailing newline) is ignored.

    Raises:
        EmptyInputError: If *line* is empty or whitespace only.
    """
    text = line.strip()
    if not text:
        raise EmptyInputError(line)

    for rule in GRAMMAR:
        command = rule(text)
        if command is not None:
            return command

    return Keyword(text.upper())
