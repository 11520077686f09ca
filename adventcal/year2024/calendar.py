"""The 2024 calendar: maps each day number to its solver."""

from __future__ import annotations

from adventcal.day import Day, DayOutput, InputType, Year
from adventcal.year2024.day01 import Day01
from adventcal.year2024.day02 import Day02
from adventcal.year2024.day03 import Day03
from adventcal.year2024.day04 import Day04
from adventcal.year2024.day06 import Day06
from adventcal.year2024.day07 import Day07
from adventcal.year2024.day08 import Day08
from adventcal.year2024.day09 import Day09
from adventcal.year2024.day10 import Day10
from adventcal.year2024.day11 import Day11
from adventcal.year2024.day13 import Day13

_SOLVERS: dict[int, type[Day]] = {
    1: Day01,
    2: Day02,
    3: Day03,
    4: Day04,
    6: Day06,
    7: Day07,
    8: Day08,
    9: Day09,
    10: Day10,
    11: Day11,
    13: Day13,
}


class Year2024(Year):
    year = 2024

    def day_solver(self, day: int) -> Day | None:
        """Return the solver for `day`, or None if there is none."""
        solver = _SOLVERS.get(day)
        return None if solver is None else solver()

    def solve_day(self, day: int, input_type: InputType) -> DayOutput | None:
        solver = self.day_solver(day)
        if solver is None:
            return None
        return solver.solve(self.year, day, input_type, self.root)