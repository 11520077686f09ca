"""Hoof It: score hiking trails on a height map."""

from __future__ import annotations

from dataclasses import dataclass

from adventcal.day import Day, Solutions
from adventcal.geometry import Dir, Point
from adventcal.grid import Grid

_PEAK = 9


@dataclass(frozen=True)
class Day10Context:
    grid: Grid[int]
    trail_heads: list[Point]


def _neighbours(point: Point, grid: Grid[int]) -> list[Point]:
    candidates = (point.step(d) for d in (Dir.UP, Dir.RIGHT, Dir.DOWN, Dir.LEFT))
    return [p for p in candidates if 0 <= p.x < grid.width and 0 <= p.y < grid.height]


def trail_score(start: Point, grid: Grid[int], distinct: bool) -> int:
    """Count peaks reachable by rising one step at a time.

    With `distinct`, each cell is visited once, so every peak counts once;
    otherwise every distinct path to a peak is counted.
    """
    visited: set[Point] | None = set() if distinct else None

    def walk(point: Point, level: int) -> int:
        if visited is not None:
            if point in visited:
                return 0
            visited.add(point)
        if level == _PEAK:
            return 1
        return sum(
            walk(nxt, level + 1)
            for nxt in _neighbours(point, grid)
            if grid[nxt] == level + 1
        )

    return walk(start, 0)


class Day10(Day):
    title = "Hoof It"
    solutions = Solutions(part1_example=36, part1=719, part2_example=81, part2=1530)

    def parse(self, text: str) -> Day10Context:
        grid = Grid.from_input(text, int)
        heads = [
            Point(x, y)
            for y in range(grid.height)
            for x in range(grid.width)
            if grid[Point(x, y)] == 0
        ]
        return Day10Context(grid, heads)

    def solve_part1(self, context: Day10Context) -> int:
        return sum(trail_score(head, context.grid, True) for head in context.trail_heads)

    def solve_part2(self, context: Day10Context) -> int:
        return sum(trail_score(head, context.grid, False) for head in context.trail_heads)