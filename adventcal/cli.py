"""Command line for running puzzle solutions."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, Sequence

from adventcal.day import DEFAULT_INPUT_ROOT, FullDayOutput, InputType, PartOutput
from adventcal.year2024.calendar import Year2024

DEFAULT_YEAR = 2024

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_DIM = "\x1b[2m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"

_CELL_HEIGHT = 3
_CELL_WIDTH = 6
_CALENDAR_CELLS = 5
_CALENDAR_HEIGHT = _CALENDAR_CELLS * _CELL_HEIGHT + 1
_CALENDAR_WIDTH = _CALENDAR_CELLS * _CELL_WIDTH + 1


def _style(text: str, *codes: str) -> str:
    return "".join(codes) + text + _RESET


def format_duration(seconds: float) -> str:
    """Describe an elapsed time as whole seconds, then milli- and microseconds."""
    total_micros = round(seconds * 1_000_000)
    secs, rest = divmod(total_micros, 1_000_000)
    millis, micros = divmod(rest, 1_000)
    return f"Execution time: {secs}.{millis}{micros} seconds"


def icon(is_correct: bool | None) -> str:
    """A coloured mark: tick when correct, cross when wrong, question mark if unknown."""
    if is_correct is None:
        return _style("?", _BOLD, _DIM)
    if is_correct:
        return _style("✓", _BOLD, _GREEN)
    return _style("x", _BOLD, _RED)


def _calendar_for(year: int, root: str | Path) -> Year2024:
    if year != Year2024.year:
        raise ValueError(f"Year {year} not found.")
    return Year2024(root)


def run(
    year: int,
    day: int,
    example: bool,
    root: str | Path = DEFAULT_INPUT_ROOT,
) -> None:
    """Solve one day and print both answers with their correctness."""
    calendar = _calendar_for(year, root)
    input_type = InputType.EXAMPLE if example else InputType.PUZZLE
    start = time.perf_counter()
    output = calendar.solve_day(day, input_type)
    if output is None:
        raise LookupError(f"Day {day} not found for year {year}.")
    elapsed = time.perf_counter() - start

    print(f"AoC {year}-{day}: {output.title}")
    print(f"{icon(output.part1.is_correct)} Solution 1: {output.part1.value}")
    print(f"{icon(output.part2.is_correct)} Solution 2: {output.part2.value}")
    print(format_duration(elapsed))


class _Cursor:
    def __init__(self, write: Callable[[str], object]) -> None:
        self._write = write

    def write(self, text: str) -> None:
        self._write(text)

    def move(self, dx: int, dy: int) -> None:
        if dx > 0:
            self._write(f"\x1b[{dx}C")
        elif dx < 0:
            self._write(f"\x1b[{-dx}D")
        if dy > 0:
            self._write(f"\x1b[{dy}B")
        elif dy < 0:
            self._write(f"\x1b[{-dy}A")


def _icon_pair(
    solution: FullDayOutput | None,
    parts: Callable[[FullDayOutput], tuple[PartOutput, PartOutput]],
) -> str:
    if solution is None:
        missing = _style("-", _BOLD, _DIM)
        return missing + missing
    first, second = parts(solution)
    return icon(first.is_correct) + icon(second.is_correct)


def show_all(year: int, root: str | Path = DEFAULT_INPUT_ROOT) -> None:
    """Solve every day of the year and draw the results as a 5x5 calendar."""
    calendar = _calendar_for(year, root)
    solutions = calendar.solve_all()
    cursor = _Cursor(sys.stdout.write)
    start = time.perf_counter()

    for index, solution in enumerate(solutions):
        if index == 0:
            cursor.write("\n" * (_CALENDAR_HEIGHT + 1))
            cursor.move(0, -_CALENDAR_HEIGHT - 1)
            cursor.write(f"+-=-AoC {year}: All solutions-=-+\n")

        cursor.write("+-----+")
        cursor.move(-(_CELL_WIDTH + 1), 1)

        example_icons = _icon_pair(solution, lambda s: (s.part1_example, s.part2_example))
        cursor.write(f"|{index + 1:0>2} {example_icons}|")
        cursor.move(-(_CELL_WIDTH + 1), 1)

        puzzle_icons = _icon_pair(solution, lambda s: (s.part1, s.part2))
        cursor.write(f"|   {puzzle_icons}|")
        cursor.move(-(_CELL_WIDTH + 1), 1)
        cursor.write("+-----+")

        if index % _CALENDAR_CELLS == _CALENDAR_CELLS - 1:
            cursor.move(-_CALENDAR_WIDTH, 0)
        else:
            cursor.move(-1, -_CELL_HEIGHT)

        if index == 24:
            cursor.move(0, 1)
        sys.stdout.flush()

    elapsed = time.perf_counter() - start
    print(format_duration(elapsed))


def _ranged(low: int, high: int) -> Callable[[str], int]:
    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
        if not low <= number < high:
            raise argparse.ArgumentTypeError(f"{number} is not in {low}..{high}")
        return number

    return parse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adventcal")
    commands = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "-y", "--year", type=_ranged(2024, 2025), default=DEFAULT_YEAR
        )
        sub.add_argument(
            "--root",
            type=Path,
            default=DEFAULT_INPUT_ROOT,
            help="directory holding the yearYYYY input folders",
        )

    run_parser = commands.add_parser("run", help="Runs one Advent of Code solution")
    add_common(run_parser)
    run_parser.add_argument("-d", "--day", type=_ranged(1, 26), required=True)
    run_parser.add_argument("-e", "--example", action="store_true")

    all_parser = commands.add_parser(
        "all", help="Runs all available Advent of Code solutions"
    )
    add_common(all_parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "run":
            run(args.year, args.day, args.example, args.root)
        else:
            show_all(args.year, args.root)
    except (LookupError, ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0