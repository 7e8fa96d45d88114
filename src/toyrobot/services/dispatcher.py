"""Command dispatcher — applies parsed commands to a robot.

Bounds rejections inside the robot are invisible here: PLACE and MOVE
come back as ``APPLIED`` whether or not the robot actually moved.
Unknown keywords raise :class:`InvalidCommandError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from toyrobot.domain.commands import Command, CommandName, Keyword, Place
from toyrobot.domain.errors import InvalidCommandError
from toyrobot.domain.robot import Robot

ReportSink = Callable[[str], None]


class Outcome(StrEnum):
    """What happened to a command line."""

    APPLIED = "applied"
    REPORTED = "reported"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Execution:
    """Result of dispatching one command. ``output`` is set for reports."""

    outcome: Outcome
    output: str | None = None


def _place(robot: Robot, command: Command) -> str | None:
    assert isinstance(command, Place)
    robot.place(command.x, command.y, command.direction)
    return None


def _move(robot: Robot, _command: Command) -> str | None:
    robot.move()
    return None


def _left(robot: Robot, _command: Command) -> str | None:
    robot.left()
    return None


def _right(robot: Robot, _command: Command) -> str | None:
    robot.right()
    return None


def _report(robot: Robot, _command: Command) -> str | None:
    return robot.report()


_HANDLERS: dict[CommandName, Callable[[Robot, Command], str | None]] = {
    CommandName.PLACE: _place,
    CommandName.MOVE: _move,
    CommandName.LEFT: _left,
    CommandName.RIGHT: _right,
    CommandName.REPORT: _report,
}


def execute(robot: Robot, command: Command, *, sink: ReportSink | None = None) -> Execution:
    """Apply *command* to *robot*.

    REPORT text is handed to *sink* (if given) and returned on the
    :class:`Execution`.

    Raises:
        InvalidCommandError: If *command* is a keyword outside the vocabulary.
    """
    name = command.name
    if name is None:
        assert isinstance(command, Keyword)
        raise InvalidCommandError(command.token)

    output = _HANDLERS[name](robot, command)
    if output is None:
        return Execution(Outcome.APPLIED)

    if sink is not None:
        sink(output)
    return Execution(Outcome.REPORTED, output)


class Dispatcher:
    """Binds one robot and one display sink for a command stream."""

    def __init__(self, robot: Robot, sink: ReportSink | None = None) -> None:
        self.robot = robot
        self.sink = sink

    def execute(self, command: Command) -> Execution:
        return execute(self.robot, command, sink=self.sink)
