"""Race Condition: cheating through walls on a race track."""

from __future__ import annotations

from typing import List, Optional, Tuple

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import DIRECTIONS, Position
from advent2024.solution import SolutionPair
from advent2024.solver import solve_breadth_first

_CHEAT = 20


def parse(text: str) -> Tuple[Grid[bool], Position, Position]:
    """Parse the track into a wall grid, the start and the end."""
    start: Optional[Position] = None
    end: Optional[Position] = None
    rows: List[List[bool]] = []
    for y, line in enumerate(text.splitlines()):
        row: List[bool] = []
        for x, char in enumerate(line):
            if char == "#":
                row.append(True)
            elif char == ".":
                row.append(False)
            elif char == "S":
                start = Position(y, x)
                row.append(False)
            elif char == "E":
                end = Position(y, x)
                row.append(False)
            else:
                raise ValueError(f"Unexpected character {char!r}")
        rows.append(row)
    if start is None:
        raise ValueError("the track has no start")
    if end is None:
        raise ValueError("the track has no end")
    return Grid.from_rows(rows), start, end


def prepare(grid: Grid[bool], start: Position, end: Position) -> Grid[int]:
    """Return the distance map from the start, counted from 1; walls stay 0."""
    distances = Grid.from_dimensions(grid.dimensions, 0)
    distances.set(start, 1)

    def forward(upcoming: List[Position], pos: Position, time: int) -> bool:
        for direction in DIRECTIONS:
            next_position = pos.moved(direction)
            if grid.contains(next_position):
                continue
            current = distances.get(next_position)
            if current != 0 and current <= time + 2:
                continue
            distances.set(next_position, time + 2)
            if next_position == end:
                return True
            upcoming.append(next_position)
        return False

    solve_breadth_first(forward, [start])
    best_time = distances.get(end)

    def backward(upcoming: List[Position], pos: Position, time: int) -> bool:
        for direction in DIRECTIONS:
            next_position = pos.moved(direction)
            if grid.contains(next_position):
                continue
            distance = best_time - (time + 1)
            if distances.get(next_position) <= distance:
                continue
            distances.set(next_position, distance)
            if next_position == end:
                return True
            upcoming.append(next_position)
        return False

    solve_breadth_first(backward, [end])
    return distances


def _saving(a: int, b: int) -> int:
    return max(abs(a - b) - 2, 0)


def solve_part1(distances: Grid[int], minimum: int) -> int:
    """Count two-step cheats through a single wall saving at least minimum."""
    count = 0
    for window in distances.iter_windows3_where(lambda tile: tile == 0):
        left, right = window.left(), window.right()
        top, bottom = window.top(), window.bottom()
        if (left != 0 and right != 0 and _saving(left, right) >= minimum) or (
            top != 0 and bottom != 0 and _saving(top, bottom) >= minimum
        ):
            count += 1
    return count


def solve_part2(distances: Grid[int], minimum: int) -> int:
    """Count cheats of up to 20 steps saving at least minimum."""
    height, width = distances.dimensions
    total = 0
    for pos in distances.positions_where(lambda tile: tile != 0):
        start = distances.get(pos)
        for y in range(max(pos.y - _CHEAT, 0), min(pos.y + _CHEAT + 1, height)):
            y_dist = abs(y - pos.y)
            remaining = _CHEAT - y_dist
            row = distances.row(y)
            for x in range(max(pos.x - remaining, 0), min(pos.x + remaining + 1, width)):
                cheat_distance = y_dist + abs(x - pos.x)
                if row[x] >= minimum + start + cheat_distance:
                    total += 1
    return total


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    grid, start, end = ctx.measure("parse", lambda: parse(text))
    distances = ctx.measure("prepare", lambda: prepare(grid, start, end))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(distances, 100)),
        ctx.measure("part2", lambda: solve_part2(distances, 100)),
    )