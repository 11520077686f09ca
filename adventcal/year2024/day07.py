"""Bridge Repair: find operators that make calibration equations true."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from adventcal.day import Day, Solutions


@dataclass(frozen=True)
class Equation:
    target: int
    nums: tuple[int, ...]


class Operator(Enum):
    SUM = "+"
    MULTIPLY = "*"
    CONCAT = "||"

    def apply(self, left: int, right: int) -> int:
        match self:
            case Operator.SUM:
                return left + right
            case Operator.MULTIPLY:
                return left * right
            case Operator.CONCAT:
                return int(f"{left}{right}")
        raise ValueError(f"unknown operator: {self!r}")


def equation_is_possible(equation: Equation, operators: Sequence[Operator]) -> bool:
    """True if some left-to-right choice of operators yields the target."""
    if not equation.nums:
        raise ValueError("equation has no numbers")
    first, *rest = equation.nums
    reachable = {first}
    for num in rest:
        reachable = {op.apply(value, num) for value in reachable for op in operators}
    return equation.target in reachable


def evaluate(equations: Iterable[Equation], operators: Sequence[Operator]) -> int:
    """Sum the targets of every equation that can be made true."""
    return sum(eq.target for eq in equations if equation_is_possible(eq, operators))


class Day07(Day):
    title = "Bridge Repair"
    solutions = Solutions(
        part1_example=3749,
        part1=465126289353,
        part2_example=11387,
        part2=70597497486371,
    )

    def parse(self, text: str) -> list[Equation]:
        equations = []
        for line in text.splitlines():
            target, nums = line.split(": ")
            equations.append(Equation(int(target), tuple(int(n) for n in nums.split(" "))))
        return equations

    def solve_part1(self, context: list[Equation]) -> int:
        return evaluate(context, (Operator.SUM, Operator.MULTIPLY))

    def solve_part2(self, context: list[Equation]) -> int:
        return evaluate(context, (Operator.SUM, Operator.MULTIPLY, Operator.CONCAT))