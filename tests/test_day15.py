import pytest

from advent2024.day15 import (
    ScaledTile,
    Tile,
    gps,
    prepare,
    solve,
    solve_part1,
    solve_part2,
    try_move,
)
from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import Direction, Position

EXAMPLE = """##########
#..O..O.O#
#......O.#
#.OO..O.O#
#..O@..O.#
#O#..O...#
#O..O..O.#
#.OO.O.OO#
#....O...#
##########

<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^
vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v
><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<
<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^
^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><
^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^
>^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^
<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>
^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>
v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^"""

SMALLER_EXAMPLE = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<"""

PART2_SMALLER_EXAMPLE = """#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^"""


def test_prepare_smaller_example():
    grid, starting_position, movements = prepare(SMALLER_EXAMPLE)
    assert tuple(grid.dimensions) == (8, 8)
    assert starting_position == Position(2, 2)
    assert len(movements) == 15


def test_part1_smaller_example():
    assert solve_part1(prepare(SMALLER_EXAMPLE)) == 2028


def test_part1_example():
    assert solve_part1(prepare(EXAMPLE)) == 10092


def test_part1_leaves_input_untouched():
    warehouse = prepare(SMALLER_EXAMPLE)
    solve_part1(warehouse)
    assert solve_part1(warehouse) == 2028


def test_part2_smaller_example():
    assert solve_part2(prepare(PART2_SMALLER_EXAMPLE)) == 105 + 207 + 306


def test_part2_example():
    assert solve_part2(prepare(EXAMPLE)) == 9021


def test_gps():
    assert gps(Position(1, 4)) == 104


def test_try_move_pushes_box_right():
    grid = Grid.from_rows(
        [[ScaledTile.EMPTY, ScaledTile.BOX, ScaledTile.RIGHT_SIDE_BOX, ScaledTile.EMPTY]]
    )
    boxes = []
    assert try_move(grid, Position(0, 0), Direction.RIGHT, boxes) is True
    assert boxes == [Position(0, 1)]


def test_try_move_blocked_by_wall():
    grid = Grid.from_rows(
        [[ScaledTile.EMPTY, ScaledTile.BOX, ScaledTile.RIGHT_SIDE_BOX, ScaledTile.WALL]]
    )
    boxes = []
    assert try_move(grid, Position(0, 0), Direction.RIGHT, boxes) is False
    assert boxes == []


def test_solve():
    result = solve(MeasureContext(), SMALLER_EXAMPLE)
    assert result.part1 == 2028


def test_tile_glyph():
    grid, _, _ = prepare("#@O#\n\n<")
    box = grid.get(Position(0, 2))
    assert box == Tile.BOX
    assert box.glyph == "O"
    assert grid.get(Position(0, 1)) == Tile.EMPTY


def test_prepare_rejects_unknown_tile():
    with pytest.raises(ValueError):
        prepare("#@x#\n\n<")


def test_prepare_requires_two_sections():
    with pytest.raises(ValueError):
        prepare("#@.#")