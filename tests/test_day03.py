from advent2024 import day03
from advent2024.measure import MeasureContext

PART1_EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
PART2_EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_example_part1():
    assert day03.solve_both(PART1_EXAMPLE)[0] == 161


def test_example_part2():
    assert day03.solve_both(PART2_EXAMPLE)[1] == 48


def test_sum_stretch_matches_part1_without_switches():
    assert day03.sum_stretch(PART1_EXAMPLE) == day03.solve_both(PART1_EXAMPLE)[0]


def test_sum_stretch_ignores_overflowing_arguments():
    assert day03.sum_stretch("mul(4294967296,1)") == 0


def test_solve_records_nothing():
    ctx = MeasureContext()
    result = day03.solve(ctx, PART2_EXAMPLE)
    assert result.part2 == 48
    assert list(ctx.measurements()) == []