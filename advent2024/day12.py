"""Garden Groups: fencing regions of plants."""

from __future__ import annotations

from typing import Set, Tuple

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import DIRECTIONS, Direction, Position
from advent2024.solution import SolutionPair
from advent2024.solver import StateStack, solve_depth_first

Edge = Tuple[Position, Direction]


def prepare(text: str) -> Grid[str]:
    """Build a grid of plant letters."""
    return Grid.from_rows(list(line) for line in text.splitlines())


def _remove_run(edges: Set[Edge], keys) -> None:
    for key in keys:
        if key not in edges:
            return
        edges.remove(key)


def _count_sides(edges: Set[Edge], grid: Grid[str]) -> int:
    height, width = grid.dimensions
    sides = 0
    while edges:
        pos, direction = next(iter(edges))
        sides += 1
        if direction in (Direction.UP, Direction.DOWN):
            _remove_run(edges, ((Position(pos.y, x), direction) for x in range(pos.x, width)))
            _remove_run(edges, ((Position(pos.y, x), direction) for x in range(pos.x - 1, -1, -1)))
        else:
            _remove_run(edges, ((Position(y, pos.x), direction) for y in range(pos.y, height)))
            _remove_run(edges, ((Position(y, pos.x), direction) for y in range(pos.y - 1, -1, -1)))
    return sides


def solve_both(grid: Grid[str]) -> Tuple[int, int]:
    """Return the fence price by perimeter and by number of sides."""
    visited = Grid.from_dimensions(grid.dimensions, False)
    p1 = 0
    p2 = 0
    for start, plant in grid.items():
        if not visited.insert(start):
            continue

        area = 0
        edges: Set[Edge] = set()

        def step(stack: StateStack[Position], pos: Position) -> None:
            nonlocal area
            area += 1
            for direction in DIRECTIONS:
                neighbour = pos.checked_moved(grid.dimensions, direction)
                if neighbour is not None and grid.get(neighbour) == plant:
                    if visited.insert(neighbour):
                        stack.push(neighbour)
                    continue
                edges.add((pos, direction))

        solve_depth_first(step, [start])

        perimeter = len(edges)
        sides = _count_sides(edges, grid)
        p1 += area * perimeter
        p2 += area * sides
    return p1, p2


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    grid = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(grid)))