from advent2024.day08 import prepare, solve_both
from advent2024.position import Dimensions

EXAMPLE_INPUT = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_example_prepare():
    dimensions, antennas = prepare(EXAMPLE_INPUT)
    assert dimensions == Dimensions(12, 12)
    assert len(antennas) == 2
    assert set(antennas) == {"0", "A"}


def test_example_part1():
    assert solve_both(prepare(EXAMPLE_INPUT))[0] == 14


def test_example_part1_2():
    text = """..........
..........
..........
....a.....
..........
.....a....
..........
..........
..........
.........."""
    assert solve_both(prepare(text))[0] == 2


def test_example_part1_3():
    text = """..........
..........
..........
....a.....
........a.
.....a....
..........
..........
..........
.........."""
    assert solve_both(prepare(text))[0] == 4


def test_example_part2():
    assert solve_both(prepare(EXAMPLE_INPUT))[1] == 34


def test_example_part2_2():
    text = """T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
.........."""
    assert solve_both(prepare(text))[1] == 9