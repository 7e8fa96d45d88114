"""Compass directions and the rotation model.

Rotation is index arithmetic over the fixed clockwise order
North -> East -> South -> West.
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Compass direction the robot is facing.

    Values are the canonical report spelling (``North``, not ``NORTH``).
    """

    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by name, case-insensitively.

        Raises:
            ValueError: If *name* is not one of the four compass points.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            msg = f"Unknown direction: {name!r}"
            raise ValueError(msg) from None

    def rotate_left(self) -> Direction:
        return rotate_left(self)

    def rotate_right(self) -> Direction:
        return rotate_right(self)


# Clockwise order; index arithmetic wraps at both ends.
COMPASS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

# One-step (dx, dy) offsets per facing.
STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def rotate_left(direction: Direction) -> Direction:
    """Previous direction in compass order; North wraps to West."""
    return COMPASS[(COMPASS.index(direction) - 1) % len(COMPASS)]


def rotate_right(direction: Direction) -> Direction:
    """Next direction in compass order; West wraps to North."""
    return COMPASS[(COMPASS.index(direction) + 1) % len(COMPASS)]
