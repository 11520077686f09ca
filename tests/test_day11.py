from adventcal.day import InputType
from adventcal.year2024.day11 import Day11, blink, blink_n_times


def test_zero_becomes_one():
    assert blink({"0": 3}) == {"1": 3}


def test_odd_length_is_multiplied_by_2024():
    assert blink({"1": 1}) == {"2024": 1}


def test_even_length_splits_and_drops_leading_zeros():
    assert blink({"1000": 2}) == {"10": 2, "0": 2}


def test_blink_preserves_or_grows_total():
    stones = {"125": 1, "17": 1}
    for _ in range(10):
        new = blink(stones)
        assert sum(new.values()) >= sum(stones.values())
        stones = new


def test_zero_blinks_counts_start():
    assert blink_n_times({"7": 1, "9": 1}, 0) == 2


def test_parse_counts_each_number_once():
    assert Day11().parse("5 5 12\n") == {"5": 1, "12": 1}


def test_example_part1():
    day = Day11()
    assert day.solve_part1(day.parse("125 17")) == 55312


def test_example_part2():
    day = Day11()
    assert day.solve_part2(day.parse("125 17")) == 65601038650482


def test_solve_text_checks_known_answers():
    output = Day11().solve_text("125 17", InputType.EXAMPLE)
    assert output.title == "Plutonian Pebbles"
    assert output.part1.value == "55312"
    assert output.part1.is_correct is True
    assert output.part2.is_correct is True


def test_puzzle_part2_has_no_known_answer():
    output = Day11().solve_text("125 17", InputType.PUZZLE)
    assert output.part2.is_correct is None