"""Red-Nosed Reports: count safely increasing or decreasing reports."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from adventcal.day import Day, Solutions

Report = tuple[int, ...]


def is_safe_report(report: Sequence[int]) -> bool:
    """True if levels strictly increase or decrease by 1 to 3 at each step."""
    diffs = [b - a for a, b in pairwise(report)]
    return all(1 <= d <= 3 for d in diffs) or all(-3 <= d <= -1 for d in diffs)


def is_probe_safe_report(report: Sequence[int]) -> bool:
    """True if the report is safe, or becomes safe with one level removed."""
    if is_safe_report(report):
        return True
    levels = list(report)
    return any(
        is_safe_report(levels[:i] + levels[i + 1 :]) for i in range(len(levels))
    )


class Day02(Day):
    title = "Red-Nosed Reports"
    solutions = Solutions(part1_example=2, part1=379, part2_example=4, part2=430)

    def parse(self, text: str) -> list[Report]:
        return [tuple(int(n) for n in line.split(" ")) for line in text.splitlines()]

    def solve_part1(self, context: list[Report]) -> int:
        return sum(1 for report in context if is_safe_report(report))

    def solve_part2(self, context: list[Report]) -> int:
        return sum(1 for report in context if is_probe_safe_report(report))