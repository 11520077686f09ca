"""Mull It Over: pick multiplication instructions out of corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from adventcal.day import Day, Solutions


@dataclass(frozen=True)
class Do:
    """Enable later multiplications."""


@dataclass(frozen=True)
class Dont:
    """Disable later multiplications."""


@dataclass(frozen=True)
class Mul:
    a: int
    b: int


Command = Union[Do, Dont, Mul]

_COMMAND = re.compile(r"(do)\(\)|(don't)\(\)|(mul)\((\d{1,3}),(\d{1,3})\)")


def parse_commands(text: str) -> list[Command]:
    """Return every well-formed instruction in `text`, in order."""
    commands: list[Command] = []
    for match in _COMMAND.finditer(text):
        if match.group(1) is not None:
            commands.append(Do())
        elif match.group(2) is not None:
            commands.append(Dont())
        else:
            commands.append(Mul(int(match.group(4)), int(match.group(5))))
    return commands


class Day03(Day):
    title = "Mull It Over"
    solutions = Solutions(
        part1_example=161, part1=170778545, part2_example=48, part2=82868252
    )

    def parse(self, text: str) -> list[Command]:
        return parse_commands(text)

    def solve_part1(self, context: list[Command]) -> int:
        return sum(c.a * c.b for c in context if isinstance(c, Mul))

    def solve_part2(self, context: list[Command]) -> int:
        total = 0
        enabled = True
        for command in context:
            match command:
                case Do():
                    enabled = True
                case Dont():
                    enabled = False
                case Mul(a, b) if enabled:
                    total += a * b
        return total