"""Restroom Redoubt: robots wrapping around a room."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List

from advent2024.measure import MeasureContext
from advent2024.position import Dimensions, Position, PositionOffset
from advent2024.solution import SolutionPair

_ROBOT = re.compile(r"p=([0-9]+),([0-9]+) v=([+-]?[0-9]+),([+-]?[0-9]+)")


@dataclass(frozen=True)
class Robot:
    pos: Position
    vel: PositionOffset


def _robot(line: str) -> Robot:
    match = _ROBOT.fullmatch(line)
    if match is None:
        raise ValueError(f"malformed robot: {line!r}")
    px, py, vx, vy = (int(group) for group in match.groups())
    return Robot(Position(py, px), PositionOffset(vy, vx))


def prepare(text: str) -> List[Robot]:
    """Parse one robot per line."""
    return [_robot(line) for line in text.splitlines()]


def solve_part1(robots: List[Robot], dimensions: Dimensions) -> int:
    """Return the safety factor after 100 seconds."""
    halfway_y = dimensions[0] // 2
    halfway_x = dimensions[1] // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        pos = robot.pos.wrapping_offset(dimensions, robot.vel * 100)
        if pos.y == halfway_y or pos.x == halfway_x:
            continue
        quadrants[(pos.y > halfway_y) * 2 + (pos.x > halfway_x)] += 1
    return math.prod(quadrants)


def solve_part2(robots: List[Robot], dimensions: Dimensions) -> int:
    """Return the first second at which no two robots share a tile."""
    period = dimensions[0] * dimensions[1]
    for second in range(period):
        occupied = set()
        for robot in robots:
            pos = robot.pos.wrapping_offset(dimensions, robot.vel * second)
            if pos in occupied:
                break
            occupied.add(pos)
        else:
            return second
    raise ValueError("the robots never spread out over distinct tiles")


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    dimensions = Dimensions(103, 101)
    robots = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(robots, dimensions)),
        ctx.measure("part2", lambda: solve_part2(robots, dimensions)),
    )