# adventcal

Solutions for a number of the 2024 Advent of Code puzzles, checked against
known answers and shown on a small terminal calendar.

## Installing

    pip install .

Install with the `test` extra to run the test suite with pytest:

    pip install ".[test]"

## Inputs

Inputs are read from files below a root directory, `inputs` in the current
directory by default, one pair of files per day:

    inputs/year2024/day01.in        the puzzle input
    inputs/year2024/day01.example   the example from the puzzle text

Another root can be given with `--root` on the command line, or as the
`root` argument in Python.

## Solved days

Days 1, 2, 3, 4, 6, 7, 8, 9, 10, 11 and 13 of 2024 have solvers. The other
days of the calendar have none: `run` reports them as not found, and `all`
shows them as `--`.

## Running

Solve one day with the puzzle input:

    adventcal run --day 1

Use the example input instead:

    adventcal run --day 1 --example

The title and both answers are printed. Each answer carries a coloured mark:
`✓` when it matches the known answer, `x` when it does not, and `?` when no
answer is known. The elapsed time is reported at the end.

Show every day of the year as a 5x5 calendar of marks, example results on the
upper row of each cell and puzzle results on the lower:

    adventcal all

The calendar is drawn with ANSI cursor movements, so it needs a terminal that
understands them.

Both commands take `--year` (only 2024 is accepted, and it is the default)
and `--root`. A missing input file or a day without a solver ends the command
with an error message and exit status 1.

## Using it from Python

Solve a day straight from text:

    from adventcal.day import InputType
    from adventcal.year2024.day01 import Day01

    output = Day01().solve_text("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n",
                                InputType.EXAMPLE)
    print(output.title, output.part1.value, output.part2.value)
    # Historian Hysteria 11 31

Or solve from the input files through the calendar:

    from adventcal.day import InputType
    from adventcal.year2024.calendar import Year2024

    calendar = Year2024("inputs")
    output = calendar.solve_day(1, InputType.PUZZLE)   # None for a day without a solver
    for day_result in calendar.solve_all():             # days 1 to 25, in order
        ...

`solve_all` yields a `FullDayOutput` with example and puzzle results for each
day, or `None` for a day without a solver.

New days subclass `adventcal.day.Day`, set `title` and `solutions`, and
implement `parse`, `solve_part1` and `solve_part2`.

## What it does not do

There is no command to benchmark a solution or to add a new, empty day; the
only commands are `run` and `all`. Puzzle inputs are not downloaded; they must
be placed in the input directory by hand.