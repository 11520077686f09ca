import copy

import pytest

from adventcal.geometry import Point
from adventcal.grid import Grid


def test_from_input_dimensions():
    grid = Grid.from_input("abc\ndef\n", str)
    assert grid.width == 3
    assert grid.height == 2


def test_from_input_elements_by_point():
    grid = Grid.from_input("abc\ndef\n", str)
    assert grid[Point(0, 0)] == "a"
    assert grid[Point(2, 0)] == "c"
    assert grid[Point(1, 1)] == "e"


def test_create_element_is_applied():
    grid = Grid.from_input("12\n34\n", int)
    assert grid[Point(1, 1)] == 4


def test_set_then_get():
    grid = Grid.from_input("..\n..\n", str)
    grid[Point(1, 0)] = "#"
    assert grid[Point(1, 0)] == "#"
    assert grid[Point(0, 0)] == "."


def test_copy_is_independent():
    grid = Grid.from_input("..\n..\n", str)
    duplicate = copy.copy(grid)
    duplicate[Point(0, 1)] = "#"
    assert grid[Point(0, 1)] == "."
    assert duplicate[Point(0, 1)] == "#"


@pytest.mark.parametrize("point", [Point(-1, 0), Point(0, -1), Point(2, 0), Point(0, 2)])
def test_out_of_range_raises(point):
    with pytest.raises(IndexError):
        Grid.from_input("ab\ncd\n", str)[point]


def test_in_range_corner_is_reachable():
    grid = Grid.from_input("ab\ncd\n", str)
    assert grid[Point(1, 1)] == "d"


def test_input_without_newline_is_rejected():
    with pytest.raises(ValueError):
        Grid.from_input("abc", str)