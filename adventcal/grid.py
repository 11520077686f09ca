"""A rectangular grid stored row by row."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from adventcal.geometry import Point

T = TypeVar("T")


class Grid(Generic[T]):
    """A fixed-width grid of values addressed by `Point`."""

    def __init__(self, content: list[T], width: int) -> None:
        if width <= 0:
            raise ValueError("grid width must be positive")
        self._content = list(content)
        self._width = width

    @classmethod
    def from_input(cls, text: str, create_element: Callable[[str], T]) -> Grid[T]:
        """Build a grid from newline-separated rows, one element per character.

        The width is the length of the first line; the text must contain a newline.
        """
        try:
            width = text.index("\n")
        except ValueError:
            raise ValueError("grid input must contain at least one newline") from None
        content = [create_element(c) for c in text.replace("\n", "")]
        return cls(content, width)

    def _index(self, point: Point) -> int:
        if not (0 <= point.x < self._width and 0 <= point.y < self.height):
            raise IndexError(f"point {point} lies outside the grid")
        return point.x + point.y * self._width

    def __getitem__(self, point: Point) -> T:
        return self._content[self._index(point)]

    def __setitem__(self, point: Point, value: T) -> None:
        self._content[self._index(point)] = value

    def __copy__(self) -> Grid[T]:
        return type(self)(self._content, self._width)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._content) // self._width