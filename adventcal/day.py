"""Framework for solving a puzzle day and a calendar year of days."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Generic, Iterator, TypeVar

DEFAULT_INPUT_ROOT = Path("inputs")

P1 = TypeVar("P1")
P2 = TypeVar("P2")


class InputType(Enum):
    """Which input file a day is solved against; the value is the file extension."""

    EXAMPLE = "example"
    PUZZLE = "in"

    @property
    def extension(self) -> str:
        return self.value


@dataclass(frozen=True)
class Solutions(Generic[P1, P2]):
    """Known answers for a day; None where the answer is unknown."""

    part1_example: P1 | None = None
    part1: P1 | None = None
    part2_example: P2 | None = None
    part2: P2 | None = None


@dataclass(frozen=True)
class PartOutput:
    """The displayed answer of one part and whether it matches the known one."""

    value: str
    is_correct: bool | None


@dataclass(frozen=True)
class DayOutput:
    title: str
    part1: PartOutput
    part2: PartOutput


@dataclass(frozen=True)
class FullDayOutput:
    part1: PartOutput
    part1_example: PartOutput
    part2: PartOutput
    part2_example: PartOutput


def part_output(value: Any, expected: Any) -> PartOutput:
    """Describe `value`, comparing its text with `expected` when one is known."""
    text = str(value)
    return PartOutput(text, None if expected is None else text == str(expected))


class Day(ABC):
    """One puzzle day: parse the input once, then solve both parts."""

    title: ClassVar[str]
    solutions: ClassVar[Solutions[Any, Any]] = Solutions()

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Turn the raw input into the context both parts work on."""

    @abstractmethod
    def solve_part1(self, context: Any) -> Any:
        """Answer part one."""

    @abstractmethod
    def solve_part2(self, context: Any) -> Any:
        """Answer part two."""

    def read_input(
        self,
        year: int,
        day: int,
        input_type: InputType,
        root: str | Path = DEFAULT_INPUT_ROOT,
    ) -> str:
        """Read `<root>/yearYYYY/dayDD.<ext>`."""
        path = Path(root) / f"year{year:0>4}" / f"day{day:0>2}.{input_type.extension}"
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Expected input file at {path}") from exc

    def solve(
        self,
        year: int,
        day: int,
        input_type: InputType,
        root: str | Path = DEFAULT_INPUT_ROOT,
    ) -> DayOutput:
        """Read the input file for the day and solve both parts."""
        return self.solve_text(self.read_input(year, day, input_type, root), input_type)

    def solve_text(self, text: str, input_type: InputType) -> DayOutput:
        """Solve both parts of `text`, checked against the answers for `input_type`."""
        context = self.parse(text)
        known = self.solutions
        if input_type is InputType.EXAMPLE:
            expected1, expected2 = known.part1_example, known.part2_example
        else:
            expected1, expected2 = known.part1, known.part2
        part1 = part_output(self.solve_part1(context), expected1)
        part2 = part_output(self.solve_part2(context), expected2)
        return DayOutput(self.title, part1, part2)


class Year(ABC):
    """A calendar of up to 25 days."""

    year: ClassVar[int]

    def __init__(self, root: str | Path = DEFAULT_INPUT_ROOT) -> None:
        self.root = Path(root)

    @abstractmethod
    def solve_day(self, day: int, input_type: InputType) -> DayOutput | None:
        """Solve one day, or return None if the day has no solver."""

    def solve_all(self) -> Iterator[FullDayOutput | None]:
        """Yield example and puzzle results for days 1 to 25 in order."""
        for day in range(1, 26):
            example = self.solve_day(day, InputType.EXAMPLE)
            puzzle = self.solve_day(day, InputType.PUZZLE)
            if example is None or puzzle is None:
                yield None
                continue
            yield FullDayOutput(
                part1=puzzle.part1,
                part1_example=example.part1,
                part2=puzzle.part2,
                part2_example=example.part2,
            )