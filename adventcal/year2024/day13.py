"""Claw Contraption: find the cheapest button presses to reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass

from adventcal.day import Day, Solutions
from adventcal.geometry import Point

_COORDS = re.compile(r"X(?:\+|=)(\d+),\sY(?:\+|=)(\d+)")
_PRIZE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class ClawMachine:
    a: Point
    b: Point
    prize: Point


def solve_machine(machine: ClawMachine) -> tuple[int, int] | None:
    """Return the presses of A and B reaching the prize, or None if not whole."""
    a, b, prize = machine.a, machine.b, machine.prize
    b_numerator = prize.y * a.x - prize.x * a.y
    b_denominator = b.y * a.x - b.x * a.y
    if b_numerator % b_denominator != 0:
        return None
    b_presses = b_numerator // b_denominator

    a_numerator = prize.x - b.x * b_presses
    if a_numerator % a.x != 0:
        return None
    return a_numerator // a.x, b_presses


def _coins(machines: list[ClawMachine]) -> int:
    total = 0
    for machine in machines:
        presses = solve_machine(machine)
        if presses is not None:
            a, b = presses
            total += a * 3 + b
    return total


class Day13(Day):
    title = "Claw Contraption"
    solutions = Solutions(
        part1_example=480,
        part1=26599,
        part2_example=875318608908,
        part2=106228669504887,
    )

    def parse(self, text: str) -> list[ClawMachine]:
        machines = []
        for block in text.split("\n\n"):
            coords = [Point(int(x), int(y)) for x, y in _COORDS.findall(block)]
            if len(coords) < 3:
                raise ValueError(f"incomplete claw machine description: {block!r}")
            machines.append(ClawMachine(coords[0], coords[1], coords[2]))
        return machines

    def solve_part1(self, context: list[ClawMachine]) -> int:
        return _coins(context)

    def solve_part2(self, context: list[ClawMachine]) -> int:
        offset = Point(_PRIZE_OFFSET, _PRIZE_OFFSET)
        return _coins(
            [ClawMachine(m.a, m.b, m.prize + offset) for m in context]
        )