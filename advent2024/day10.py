"""Hoof It: hiking trails on a topographic map."""

from __future__ import annotations

from typing import Dict, FrozenSet, Set, Tuple

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import Direction, Position
from advent2024.solution import SolutionPair

_NEIGHBOURS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def _height(char: str) -> int:
    if not char.isdigit():
        raise ValueError(f"not a height: {char!r}")
    return int(char)


def prepare(text: str) -> Grid[int]:
    """Parse the map of heights."""
    return Grid.from_rows([_height(char) for char in line] for line in text.splitlines())


def solve_both(grid: Grid[int]) -> Tuple[int, int]:
    """Sum the trailhead scores (reachable summits) and ratings (distinct trails)."""
    reach: Dict[Position, Tuple[Set[Position], int]] = {
        pos: ({pos}, 1) for pos in grid.positions_where(lambda height: height == 9)
    }
    for level in range(8, -1, -1):
        below: Dict[Position, Tuple[Set[Position], int]] = {}
        for pos in grid.positions_where(lambda height: height == level):
            summits: Set[Position] = set()
            trails = 0
            for direction in _NEIGHBOURS:
                above = pos.checked_moved(grid.dimensions, direction)
                if above is None or above not in reach:
                    continue
                above_summits, above_trails = reach[above]
                summits |= above_summits
                trails += above_trails
            below[pos] = (summits, trails)
        reach = below

    return (
        sum(len(summits) for summits, _ in reach.values()),
        sum(trails for _, trails in reach.values()),
    )


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    grid = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(grid)))