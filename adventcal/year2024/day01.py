"""Historian Hysteria: compare two lists of location ids."""

from __future__ import annotations

from collections import Counter

from adventcal.day import Day, Solutions


class Day01(Day):
    title = "Historian Hysteria"
    solutions = Solutions(
        part1_example=11, part1=2192892, part2_example=31, part2=22962826
    )

    def parse(self, text: str) -> tuple[list[int], list[int]]:
        """Split each line into a left and a right number."""
        left: list[int] = []
        right: list[int] = []
        for line in text.splitlines():
            parts = [int(part) for part in line.split()]
            left.append(parts[0])
            right.append(parts[1])
        return left, right

    def solve_part1(self, context: tuple[list[int], list[int]]) -> int:
        left, right = context
        return sum(abs(l - r) for l, r in zip(sorted(left), sorted(right)))

    def solve_part2(self, context: tuple[list[int], list[int]]) -> int:
        left, right = context
        occurrences = Counter(right)
        return sum(l * occurrences[l] for l, _ in zip(sorted(left), right))