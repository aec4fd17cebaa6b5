import pytest

from advent2024.day07 import can_produce, prepare, solve_both

EXAMPLE_INPUT = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_example_prepare():
    equations = prepare(EXAMPLE_INPUT)
    assert len(equations) == 9
    assert equations[0] == (190, [10, 19])


def test_example_part1():
    assert solve_both(prepare(EXAMPLE_INPUT))[0] == 3749


def test_example_part2():
    assert solve_both(prepare(EXAMPLE_INPUT))[1] == 11387


def test_can_produce_with_and_without_concat():
    assert can_produce([10, 19], 190, False) is True
    assert can_produce([15, 6], 156, False) is False
    assert can_produce([15, 6], 156, True) is True


def test_no_solvable_equation_rejected():
    with pytest.raises(ValueError):
        solve_both(prepare("83: 17 5"))


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        prepare("190 10 19")