from advent2024 import day04
from advent2024.measure import MeasureContext

EXAMPLE_INPUT = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def test_example_prepare():
    assert day04.prepare(EXAMPLE_INPUT).dimensions == (10, 10)


def test_example_part1():
    assert day04.solve_part1(day04.prepare(EXAMPLE_INPUT)) == 18


def test_example_part2():
    assert day04.solve_part2(day04.prepare(EXAMPLE_INPUT)) == 9


def test_solve_example():
    ctx = MeasureContext()
    assert tuple(day04.solve(ctx, EXAMPLE_INPUT)) == (18, 9)
    assert [label for label, _ in ctx.measurements()] == ["prepare", "part1", "part2"]


def test_part1_row_both_directions():
    grid = day04.prepare("XMASAMX\n.......\n.......\n.......")
    assert day04.solve_part1(grid) == 2