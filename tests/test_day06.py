import pytest

from adventcal.geometry import Dir, Point
from adventcal.year2024.day06 import (
    Day06,
    Day06Context,
    GuardState,
    PathEval,
    eval_guard_path,
)

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOPING = """.#..
...#
#^..
..#.
"""


@pytest.fixture
def day():
    return Day06()


def test_example_part1(day):
    assert day.solve_part1(day.parse(EXAMPLE)) == 41


def test_example_part2(day):
    assert day.solve_part2(day.parse(EXAMPLE)) == 6


def test_parse_finds_guard(day):
    context = day.parse(EXAMPLE)
    assert context.state == GuardState(Point(4, 6), Dir.UP)
    assert context.grid.width == 10
    assert context.grid.height == 10


def test_example_path_leaves_map(day):
    result = eval_guard_path(day.parse(EXAMPLE))
    assert isinstance(result, PathEval)
    assert result.is_loop is False
    assert GuardState(Point(4, 6), Dir.UP) in result.visited


def test_looping_path_detected(day):
    result = eval_guard_path(day.parse(LOOPING))
    assert result.is_loop is True
    assert {s.point for s in result.visited} == {
        Point(1, 2),
        Point(1, 1),
        Point(2, 1),
        Point(2, 2),
    }


def test_walk_off_top(day):
    context = day.parse("..\n^.\n")
    result = eval_guard_path(context)
    assert result.is_loop is False
    assert {s.point for s in result.visited} == {Point(0, 1), Point(0, 0)}


def test_part2_does_not_modify_context(day):
    context = day.parse(EXAMPLE)
    day.solve_part2(context)
    assert context.grid[Point(4, 6)] == "^"
    assert day.solve_part1(context) == 41


def test_context_is_frozen(day):
    context = day.parse(EXAMPLE)
    with pytest.raises(AttributeError):
        context.state = GuardState(Point(0, 0), Dir.DOWN)
    assert isinstance(context, Day06Context)


def test_solve_text_checks_answers(day):
    from adventcal.day import InputType

    output = day.solve_text(EXAMPLE, InputType.EXAMPLE)
    assert output.part1.is_correct is True
    assert output.part2.is_correct is True