"""Core value types shared by the game: points, directions and obstacles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

SCREEN_WIDTH = 100
SCREEN_HEIGHT = 45


class Point(NamedTuple):
    """A cell on the game board."""

    x: int
    y: int


class Direction(Enum):
    """Movement direction; the values match the order up, right, down, left."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return Direction((self.value + 2) % 4)

    def step(self, point: Point) -> Point:
        """Return the cell one step from ``point`` in this direction."""
        dx, dy = _DELTAS[self]
        return Point(point.x + dx, point.y + dy)


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass
class Obstacle:
    """A group of blocked cells that may drift across the board."""

    segments: list[Point] = field(default_factory=list)
    is_moving: bool = False
    move_direction: Direction = Direction.UP
    move_speed: int = 1
    move_counter: int = 0

    def occupies(self, point: Point) -> bool:
        """Tell whether any segment of the obstacle lies on ``point``."""
        return point in self.segments