"""Robot state machine on a bounded grid.

INVARIANT: the robot's position always lies inside [0, width) x [0, height).
Requests that would break this (off-grid PLACE, MOVE over the edge) are
silent no-ops, never errors.

The robot starts at (0, 0) facing North. There is no separate "not placed"
state: a REPORT before any PLACE yields ``0,0,North``.
"""

from __future__ import annotations

from dataclasses import dataclass

from toyrobot.domain.direction import STEPS, Direction, rotate_left, rotate_right

DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 5


@dataclass(frozen=True)
class Pose:
    """Immutable snapshot of the robot's position and facing."""

    x: int
    y: int
    facing: Direction

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.facing.value}"


class Robot:
    """A single robot on a ``width`` x ``height`` grid.

    Mutated only through :meth:`place`, :meth:`move`, :meth:`left` and
    :meth:`right`.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width < 1 or height < 1:
            msg = f"Grid must be at least 1x1, got {width}x{height}"
            raise ValueError(msg)
        self.width = width
        self.height = height
        self.x = 0
        self.y = 0
        self.facing = Direction.NORTH

    def __repr__(self) -> str:
        return f"Robot({self.pose}, grid={self.width}x{self.height})"

    @property
    def pose(self) -> Pose:
        return Pose(self.x, self.y, self.facing)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (*x*, *y*) is a cell on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def place(self, x: int, y: int, direction: Direction) -> None:
        """Put the robot at (*x*, *y*) facing *direction*; ignored if off-grid."""
        if self.in_bounds(x, y):
            self.x = x
            self.y = y
            self.facing = direction

    def move(self) -> None:
        """Step one cell forward; ignored if the step would leave the grid."""
        dx, dy = STEPS[self.facing]
        nx, ny = self.x + dx, self.y + dy
        if self.in_bounds(nx, ny):
            self.x = nx
            self.y = ny

    def left(self) -> None:
        self.facing = rotate_left(self.facing)

    def right(self) -> None:
        self.facing = rotate_right(self.facing)

    def report(self) -> str:
        """Current state as ``X,Y,Facing`` (e.g. ``3,4,West``)."""
        return str(self.pose)
