"""Warehouse Woes: a robot pushing boxes around."""

from __future__ import annotations

import copy
import enum
from typing import List, Optional, Tuple

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import Direction, Position
from advent2024.solution import SolutionPair


class Tile(enum.Enum):
    EMPTY = " "
    WALL = "█"
    BOX = "O"

    @property
    def glyph(self) -> str:
        return self.value


class ScaledTile(enum.Enum):
    EMPTY = " "
    WALL = "█"
    BOX = "["
    RIGHT_SIDE_BOX = "]"

    @property
    def glyph(self) -> str:
        return self.value


Warehouse = Tuple[Grid[Tile], Position, List[Direction]]

_TILES = {".": Tile.EMPTY, "@": Tile.EMPTY, "#": Tile.WALL, "O": Tile.BOX}
_MOVES = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}
_SCALED = {
    Tile.EMPTY: (ScaledTile.EMPTY, ScaledTile.EMPTY),
    Tile.WALL: (ScaledTile.WALL, ScaledTile.WALL),
    Tile.BOX: (ScaledTile.BOX, ScaledTile.RIGHT_SIDE_BOX),
}


def _lookup(table: dict, char: str, what: str):
    try:
        return table[char]
    except KeyError:
        raise ValueError(f"unexpected {what} character {char!r}") from None


def prepare(text: str) -> Warehouse:
    """Parse the map, the robot's starting position and its movements."""
    sections = text.split("\n\n")
    if len(sections) != 2:
        raise ValueError(f"expected 2 sections, found {len(sections)}")
    grid_section, movements_section = sections
    lines = grid_section.splitlines()
    grid = Grid.from_rows([_lookup(_TILES, char, "map") for char in line] for line in lines)
    start = next(
        (Position(y, line.index("@")) for y, line in enumerate(lines) if "@" in line),
        None,
    )
    if start is None:
        raise ValueError("the map has no robot")
    movements = [
        _lookup(_MOVES, char, "movement") for char in movements_section if char != "\n"
    ]
    return grid, start, movements


def gps(pos: Position) -> int:
    """Return the GPS coordinate of a position."""
    return pos.y * 100 + pos.x


def solve_part1(warehouse: Warehouse) -> int:
    """Sum the GPS coordinates of all boxes after the robot has moved."""
    grid, position, movements = warehouse
    grid = copy.copy(grid)
    for mov in movements:
        target: Optional[Position] = None
        for tile_pos in position.positions(grid.dimensions, mov):
            tile = grid.get(tile_pos)
            if tile is Tile.WALL:
                break
            if tile is Tile.EMPTY:
                target = tile_pos
                break
        if target is None:
            continue
        position = position.moved(mov)
        if target != position:
            grid.set(position, Tile.EMPTY)
            grid.set(target, Tile.BOX)
    return sum(gps(pos) for pos in grid.positions_where(lambda tile: tile is Tile.BOX))


def try_move(
    grid: Grid[ScaledTile],
    position: Position,
    direction: Direction,
    boxes_to_move: List[Position],
) -> bool:
    """Return whether the thing at position can move; collect the boxes to push."""
    next_position = position.moved(direction)
    tile = grid.get(next_position)
    if tile is ScaledTile.EMPTY:
        return True
    if tile is ScaledTile.WALL:
        return False

    if tile is ScaledTile.BOX:
        box_position = next_position
        right_side = next_position.moved(Direction.RIGHT)
        if direction is Direction.LEFT:
            raise RuntimeError("moved left into the left side of a box")
    else:
        box_position = next_position.moved(Direction.LEFT)
        right_side = next_position
        if direction is Direction.RIGHT:
            raise RuntimeError("moved right into the right side of a box")

    if direction in (Direction.UP, Direction.DOWN):
        movable = try_move(grid, box_position, direction, boxes_to_move) and try_move(
            grid, right_side, direction, boxes_to_move
        )
    elif direction is Direction.RIGHT:
        movable = try_move(grid, right_side, direction, boxes_to_move)
    else:
        movable = try_move(grid, box_position, direction, boxes_to_move)

    if movable:
        boxes_to_move.append(box_position)
    return movable


def solve_part2(warehouse: Warehouse) -> int:
    """Sum the GPS coordinates of all boxes in the doubled-width warehouse."""
    grid, start, movements = warehouse
    scaled = Grid.from_rows(
        [half for tile in row for half in _SCALED[tile]] for row in grid.rows()
    )
    position = Position(start.y, start.x * 2)
    for mov in movements:
        boxes: List[Position] = []
        if not try_move(scaled, position, mov, boxes):
            continue
        for box in boxes:
            scaled.set(box, ScaledTile.EMPTY)
            scaled.set(box.moved(Direction.RIGHT), ScaledTile.EMPTY)
        for box in boxes:
            moved = box.moved(mov)
            scaled.set(moved, ScaledTile.BOX)
            scaled.set(moved.moved(Direction.RIGHT), ScaledTile.RIGHT_SIDE_BOX)
        position = position.moved(mov)
    return sum(
        gps(pos) for pos in scaled.positions_where(lambda tile: tile is ScaledTile.BOX)
    )


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    warehouse = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(warehouse)),
        ctx.measure("part2", lambda: solve_part2(warehouse)),
    )