import pytest

from adventcal.year2024.day09 import Day09, Empty, Used, checksum

EXAMPLE = "2333133121414131402"


@pytest.fixture
def day():
    return Day09()


def test_example_part1(day):
    assert day.solve_part1(day.parse(EXAMPLE)) == 1928


def test_example_part2(day):
    assert day.solve_part2(day.parse(EXAMPLE)) == 2858


def test_parse_alternates_files_and_space(day):
    assert day.parse("12345") == [
        Used(0, 1),
        Empty(2),
        Used(1, 3),
        Empty(4),
        Used(2, 5),
    ]


def test_parse_skips_zero_sizes(day):
    assert day.parse("102") == [Used(0, 1), Used(1, 2)]


def test_parse_rejects_non_digit(day):
    with pytest.raises(ValueError):
        day.parse("12a")


def test_parse_rejects_newline(day):
    with pytest.raises(ValueError):
        day.parse("12\n")


def test_checksum_skips_empty_space():
    assert checksum([Used(0, 2), Empty(1), Used(1, 1)]) == 3


def test_no_gaps_means_no_change(day):
    memory = day.parse("10203")
    assert day.solve_part1(memory) == checksum(memory)
    assert day.solve_part2(memory) == checksum(memory)


def test_solving_does_not_mutate_context(day):
    memory = day.parse(EXAMPLE)
    before = list(memory)
    day.solve_part1(memory)
    day.solve_part2(memory)
    assert memory == before