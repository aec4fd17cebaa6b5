"""RAM Run: escaping a memory grid while bytes fall."""

from __future__ import annotations

import re
from bisect import bisect_left
from typing import List, Optional

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import DIRECTIONS, Dimensions, Position
from advent2024.solution import SolutionPair
from advent2024.solver import solve_breadth_first

_LINE = re.compile(r"([0-9]+),([0-9]+)")


def _line(line: str) -> Position:
    match = _LINE.fullmatch(line)
    if match is None:
        raise ValueError(f"malformed coordinate: {line!r}")
    x, y = (int(group) for group in match.groups())
    return Position(y, x)


def prepare(text: str) -> List[Position]:
    """Parse one X,Y coordinate per line."""
    return [_line(line) for line in text.splitlines()]


def attempt(grid: Grid[bool]) -> Optional[int]:
    """Return the fewest steps from the top left to the bottom right, or None.

    Cells of grid that are True are blocked; visited cells are marked in grid.
    """
    height, width = grid.dimensions
    end_position = Position(height - 1, width - 1)

    def step(upcoming: List[Position], position: Position, _round: int) -> bool:
        if position == end_position:
            return True
        for direction in DIRECTIONS:
            next_position = position.checked_moved(grid.dimensions, direction)
            if next_position is not None and grid.insert(next_position):
                upcoming.append(next_position)
        return False

    found = solve_breadth_first(step, [Position(0, 0)])
    return None if found is None else found[1]


def solve_part1(positions: List[Position], dimensions: Dimensions, limit: int) -> int:
    """Return the shortest path length after the first limit bytes have fallen."""
    steps = attempt(Grid.from_positions(dimensions, positions[:limit]))
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def solve_part2(positions: List[Position], dimensions: Dimensions, skip: int) -> str:
    """Return "X,Y" of the first byte that cuts off the exit."""

    def blocked(count: int) -> bool:
        return attempt(Grid.from_positions(dimensions, positions[:count])) is None

    offset = bisect_left(range(skip, len(positions)), True, key=blocked)
    byte = positions[skip + offset - 1]
    return f"{byte.x},{byte.y}"


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    positions = ctx.measure("prepare", lambda: prepare(text))
    dimensions = Dimensions(71, 71)
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(positions, dimensions, 1024)),
        ctx.measure("part2", lambda: solve_part2(positions, dimensions, 1024)),
    )