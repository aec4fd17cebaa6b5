"""Guard Gallivant: a guard walking through a lab."""

from __future__ import annotations

import enum
from typing import Callable, Set, Tuple

from advent2024.grid import Grid
from advent2024.intset import IntSet
from advent2024.measure import MeasureContext
from advent2024.position import Direction, Position, RotationalDirection
from advent2024.solution import SolutionPair


class Tile(enum.Enum):
    EMPTY = "."
    OBSTRUCTION = "#"
    GUARD_UPWARD_FACING = "^"


class WalkResult(enum.Enum):
    OUT_OF_BOUNDS = enum.auto()
    LOOP = enum.auto()


def _tile(char: str) -> Tile:
    try:
        return Tile(char)
    except ValueError:
        raise ValueError(f"Unexpected char {char}") from None


def prepare(text: str) -> Grid[Tile]:
    """Parse the lab map."""
    return Grid.from_rows([_tile(char) for char in line] for line in text.splitlines())


def walk(
    grid: Grid[Tile],
    visited: IntSet,
    pos: Position,
    direction: Direction,
    is_obstruction: Callable[[Position], bool],
    on_step: Callable[[Position, Direction, IntSet], None],
) -> WalkResult:
    """Walk until leaving the grid or turning at a known (position, direction)."""
    if grid.dimensions.height >= 256 or grid.dimensions.width >= 256:
        raise ValueError("grid must be smaller than 256x256")

    while True:
        on_step(pos, direction, visited)
        for next_pos in pos.positions(grid.dimensions, direction):
            if grid.get(next_pos) is Tile.OBSTRUCTION or is_obstruction(next_pos):
                key = (pos.y << 10) | (pos.x << 2) | direction.value
                if not visited.insert(key):
                    return WalkResult.LOOP
                direction = direction.rotated(RotationalDirection.CLOCKWISE)
                break
            on_step(next_pos, direction, visited)
            pos = next_pos
        else:
            return WalkResult.OUT_OF_BOUNDS


def solve_both(grid: Grid[Tile]) -> Tuple[int, int]:
    """Count visited cells and the cells where one obstruction causes a loop."""
    visited: Set[Position] = set()
    start = next(grid.positions_where(lambda tile: tile is Tile.GUARD_UPWARD_FACING))
    extra_obstructions = 0

    def on_step(pos: Position, direction: Direction, turns: IntSet) -> None:
        nonlocal extra_obstructions
        visited.add(pos)
        obstruction_pos = pos.checked_moved(grid.dimensions, direction)
        if obstruction_pos is None:
            return
        if grid.get(obstruction_pos) is Tile.EMPTY and obstruction_pos not in visited:
            result = walk(
                grid,
                turns.copy(),
                pos,
                direction.rotated(RotationalDirection.CLOCKWISE),
                lambda candidate: candidate == obstruction_pos,
                lambda *_: None,
            )
            if result is WalkResult.LOOP:
                extra_obstructions += 1

    result = walk(
        grid,
        IntSet.with_maximum(grid.dimensions.height << 10),
        start,
        Direction.UP,
        lambda _: False,
        on_step,
    )
    if result is not WalkResult.OUT_OF_BOUNDS:
        raise ValueError("the guard never leaves the lab")
    return len(visited), extra_obstructions


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    grid = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(grid)))