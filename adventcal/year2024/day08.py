"""Resonant Collinearity: count antinodes of antenna pairs."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Callable, Iterator

from adventcal.day import Day, Solutions
from adventcal.geometry import Point

Frequencies = dict[str, list[Point]]


@dataclass(frozen=True)
class Day08Context:
    frequencies: Frequencies
    width: int
    height: int


def _antenna_pairs(frequencies: Frequencies) -> Iterator[tuple[Point, Point]]:
    # Stops entirely at the first frequency with a lone antenna.
    for antennas in frequencies.values():
        if len(antennas) < 2:
            return
        yield from combinations(antennas, 2)


def get_antinodes(start: Point, dx: int, dy: int, width: int, height: int) -> list[Point]:
    """Points from `start` stepping by (dx, dy) until leaving the map."""
    antinodes = []
    x, y = start.x, start.y
    while 0 <= x < width and 0 <= y < height:
        antinodes.append(Point(x, y))
        x += dx
        y += dy
    return antinodes


class Day08(Day):
    title = "Resonant Collinearity"
    solutions = Solutions(part1_example=14, part1=289, part2_example=34, part2=1030)

    def parse(self, text: str) -> Day08Context:
        rows = text.splitlines()
        frequencies: Frequencies = {}
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char != ".":
                    frequencies.setdefault(char, []).append(Point(x, y))
        return Day08Context(frequencies, len(rows[0]), len(rows))

    def _collect(
        self, context: Day08Context, pick: Callable[[list[Point]], list[Point]]
    ) -> int:
        antinodes: set[Point] = set()
        for a, b in _antenna_pairs(context.frequencies):
            dx, dy = b.x - a.x, b.y - a.y
            antinodes.update(pick(get_antinodes(a, -dx, -dy, context.width, context.height)))
            antinodes.update(pick(get_antinodes(b, dx, dy, context.width, context.height)))
        return len(antinodes)

    def solve_part1(self, context: Day08Context) -> int:
        return self._collect(context, lambda line: line[1:2])

    def solve_part2(self, context: Day08Context) -> int:
        return self._collect(context, lambda line: line)