"""Ceres Search: find XMAS in a letter grid."""

from __future__ import annotations

from adventcal.day import Day, Solutions

_DIRECTIONS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]
_CROSSES = {"MSAMS", "SSAMM", "MMASS", "SMASM"}


class Day04(Day):
    title = "Ceres Search"
    solutions = Solutions(part1_example=18, part1=2599, part2_example=9, part2=1948)

    def parse(self, text: str) -> list[str]:
        """Return the rows of the square letter grid."""
        return text.splitlines()

    def solve_part1(self, context: list[str]) -> int:
        size = len(context)
        count = 0
        for y in range(size):
            for x in range(size):
                for dx, dy in _DIRECTIONS:
                    end_x, end_y = x + 3 * dx, y + 3 * dy
                    if not (0 <= end_x < size and 0 <= end_y < size):
                        continue
                    word = "".join(context[y + k * dy][x + k * dx] for k in range(4))
                    if word == "XMAS":
                        count += 1
        return count

    def solve_part2(self, context: list[str]) -> int:
        size = len(context)
        count = 0
        for y in range(size - 2):
            for x in range(size - 2):
                word = (
                    context[y][x]
                    + context[y][x + 2]
                    + context[y + 1][x + 1]
                    + context[y + 2][x]
                    + context[y + 2][x + 2]
                )
                if word in _CROSSES:
                    count += 1
        return count