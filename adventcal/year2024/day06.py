"""Guard Gallivant: follow a guard around a lab and look for loops."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace

from adventcal.day import Day, Solutions
from adventcal.geometry import Dir, Point
from adventcal.grid import Grid


@dataclass(frozen=True)
class GuardState:
    """Where the guard stands and which way it faces."""

    point: Point
    dir: Dir


@dataclass
class PathEval:
    """The outcome of walking the guard until it leaves the map or loops."""

    is_loop: bool
    visited: set[GuardState] = field(default_factory=set)


@dataclass(frozen=True)
class Day06Context:
    state: GuardState
    grid: Grid[str]


def _at_edge(state: GuardState, grid: Grid[str]) -> bool:
    match state.dir:
        case Dir.UP:
            return state.point.y == 0
        case Dir.RIGHT:
            return state.point.x == grid.width - 1
        case Dir.DOWN:
            return state.point.y == grid.height - 1
        case Dir.LEFT:
            return state.point.x == 0
    raise ValueError(f"unknown direction: {state.dir!r}")


def eval_guard_path(context: Day06Context) -> PathEval:
    """Walk the guard, turning right at '#', until it exits or repeats a state."""
    state = context.state
    grid = context.grid
    visited: set[GuardState] = set()
    while state not in visited:
        visited.add(state)
        if _at_edge(state, grid):
            return PathEval(is_loop=False, visited=visited)
        next_point = state.point.step(state.dir)
        ahead = grid[next_point]
        if ahead == "#":
            state = GuardState(state.point, state.dir.clockwise())
        elif ahead in (".", "^"):
            state = GuardState(next_point, state.dir)
    return PathEval(is_loop=True, visited=visited)


def _visited_points(context: Day06Context) -> set[Point]:
    return {state.point for state in eval_guard_path(context).visited}


class Day06(Day):
    title = "Guard Gallivant"
    solutions = Solutions(part1_example=41, part1=4826, part2_example=6, part2=1721)

    def parse(self, text: str) -> Day06Context:
        grid = Grid.from_input(text, str)
        start = text.index("^")
        point = Point(start % (grid.width + 1), start // (grid.width + 1))
        return Day06Context(GuardState(point, Dir.UP), grid)

    def solve_part1(self, context: Day06Context) -> int:
        return len(_visited_points(context))

    def solve_part2(self, context: Day06Context) -> int:
        obstacles = 0
        for point in _visited_points(context):
            grid = copy.copy(context.grid)
            grid[point] = "#"
            if eval_guard_path(replace(context, grid=grid)).is_loop:
                obstacles += 1
        return obstacles