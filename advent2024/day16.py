"""Reindeer Maze: the cheapest paths from start to end."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import takewhile
from typing import Dict, Set, Tuple

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import Direction, Position, RotationalDirection
from advent2024.solution import SolutionPair
from advent2024.solver import StateStack, solve_depth_first, solve_priority

_TURN_COST = 1000
_ROTATIONS = (RotationalDirection.ANTICLOCKWISE, RotationalDirection.CLOCKWISE)


@dataclass(frozen=True)
class State:
    """A reindeer at a position, facing a direction, with the score so far."""

    position: Position
    direction: Direction
    score: int

    def __lt__(self, other: State) -> bool:
        return self.score < other.score


def prepare(text: str) -> Grid[bool]:
    """Parse the maze into a grid that is True where there is a wall."""
    return Grid.from_rows([char == "#" for char in line] for line in text.splitlines())


def solve_both(walls: Grid[bool]) -> Tuple[int, int]:
    """Return the lowest score and the number of tiles on any best path."""
    height, width = walls.dimensions
    start_position = Position(height - 2, 1)
    end_position = Position(1, width - 2)
    best_score = sys.maxsize
    best_scores: Dict[Tuple[Position, Direction], int] = {}

    def add_best_score(position: Position, direction: Direction, score: int) -> bool:
        key = (position, direction)
        known = best_scores.get(key)
        if known is not None and known <= score:
            return False
        best_scores[key] = score
        return True

    def forward(queue, s: State) -> bool:
        nonlocal best_score
        if s.score > best_score:
            return True
        if s.position == end_position:
            best_score = s.score
            return False

        add_best_score(s.position, s.direction, s.score)

        corridor = takewhile(
            lambda candidate: not walls.contains(candidate),
            s.position.positions(walls.dimensions, s.direction),
        )
        for i, position in enumerate(corridor):
            position_score = s.score + i + 1
            if position == end_position:
                best_score = position_score
                return False
            add_best_score(position, s.direction, position_score)

            for rotation in _ROTATIONS:
                next_rotation = s.direction.rotated(rotation)
                next_position = position.moved(next_rotation)
                if not walls.contains(next_position) and add_best_score(
                    next_position, next_rotation, position_score + _TURN_COST + 1
                ):
                    add_best_score(position, next_rotation, position_score + _TURN_COST)
                    queue.push(
                        State(next_position, next_rotation, s.score + _TURN_COST + i + 2)
                    )
        return False

    stopped = solve_priority(
        forward,
        [
            State(start_position, Direction.RIGHT, 0),
            State(start_position, Direction.UP, _TURN_COST),
        ],
    )
    if stopped is None:
        raise ValueError("the end of the maze cannot be reached")

    best_visited: Set[Position] = set()

    def backward(stack: StateStack[State], s: State) -> None:
        best_visited.add(s.position)
        previous = s.position.moved(s.direction.inverted())
        known = best_scores.get((previous, s.direction))
        if known is not None and known + 1 == s.score:
            stack.push(State(previous, s.direction, s.score - 1))
        for rotation in _ROTATIONS:
            next_rotation = s.direction.rotated(rotation)
            known = best_scores.get((s.position, next_rotation))
            if known is not None and known + _TURN_COST == s.score:
                stack.push(State(s.position, next_rotation, s.score - _TURN_COST))

    solve_depth_first(
        backward,
        [
            State(end_position, Direction.RIGHT, best_score),
            State(end_position, Direction.UP, best_score),
        ],
    )
    return best_score, len(best_visited)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    walls = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(walls)))