"""Directions and integer points on a grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Dir(Enum):
    """One of the four grid directions; y grows downwards."""

    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"

    def clockwise(self) -> Dir:
        """Return the direction a quarter turn clockwise from this one."""
        return _CLOCKWISE[self]


_CLOCKWISE = {
    Dir.UP: Dir.RIGHT,
    Dir.RIGHT: Dir.DOWN,
    Dir.DOWN: Dir.LEFT,
    Dir.LEFT: Dir.UP,
}


@dataclass(frozen=True, order=True)
class Point:
    """An immutable point with integer coordinates."""

    x: int
    y: int

    def dir_steps(self, direction: Dir, steps: int) -> Point:
        """Return the point `steps` cells away in `direction`."""
        match direction:
            case Dir.UP:
                return Point(self.x, self.y - steps)
            case Dir.RIGHT:
                return Point(self.x + steps, self.y)
            case Dir.DOWN:
                return Point(self.x, self.y + steps)
            case Dir.LEFT:
                return Point(self.x - steps, self.y)
        raise ValueError(f"unknown direction: {direction!r}")

    def step(self, direction: Dir) -> Point:
        """Return the neighbouring point in `direction`."""
        return self.dir_steps(direction, 1)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)