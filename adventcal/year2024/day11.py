"""Plutonian Pebbles: count stones that split and change on every blink."""

from __future__ import annotations

from collections import Counter
from typing import Mapping

from adventcal.day import Day, Solutions

Stones = dict[str, int]


def blink(stones: Mapping[str, int]) -> Stones:
    """Apply one blink to every stone, keeping counts per engraved number."""
    new_stones: Counter[str] = Counter()
    for stone, count in stones.items():
        if stone == "0":
            new_stones["1"] += count
        elif len(stone) % 2 == 0:
            half = len(stone) // 2
            new_stones[str(int(stone[:half]))] += count
            new_stones[str(int(stone[half:]))] += count
        else:
            new_stones[str(int(stone) * 2024)] += count
    return dict(new_stones)


def blink_n_times(stones: Mapping[str, int], n: int) -> int:
    """Total number of stones after `n` blinks."""
    current: Mapping[str, int] = stones
    for _ in range(n):
        current = blink(current)
    return sum(current.values())


class Day11(Day):
    title = "Plutonian Pebbles"
    solutions = Solutions(
        part1_example=55312,
        part1=191690,
        part2_example=65601038650482,
    )

    def parse(self, text: str) -> Stones:
        """Each distinct engraved number starts as one stone."""
        return {stone: 1 for stone in text.split()}

    def solve_part1(self, context: Stones) -> int:
        return blink_n_times(context, 25)

    def solve_part2(self, context: Stones) -> int:
        return blink_n_times(context, 75)