"""Resonant Collinearity: antinodes of antenna pairs."""

from __future__ import annotations

from itertools import combinations
from math import gcd
from typing import Dict, List, Set, Tuple

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.position import Dimensions, Position
from advent2024.solution import SolutionPair

Antennas = Tuple[Dimensions, Dict[str, List[Position]]]


def prepare(text: str) -> Antennas:
    """Return the map size and the antenna positions per frequency."""
    grid = Grid.from_rows(list(line) for line in text.splitlines())
    antennas: Dict[str, List[Position]] = {}
    for pos, tile in grid.items():
        if tile != ".":
            antennas.setdefault(tile, []).append(pos)
    return grid.dimensions, antennas


def solve_both(antennas: Antennas) -> Tuple[int, int]:
    """Count antinodes at double distance and along whole lines."""
    dimensions, by_frequency = antennas
    p1: Set[Position] = set()
    p2: Set[Position] = set()
    for positions in by_frequency.values():
        for first, second in combinations(positions, 2):
            offset = second - first
            offset = offset // gcd(offset.y, offset.x)
            p2.add(first)
            for step in (offset, -offset):
                for pos in first.positions_steps(dimensions, step):
                    a = first.manhattan_distance(pos)
                    b = second.manhattan_distance(pos)
                    if a == b * 2 or a * 2 == b:
                        p1.add(pos)
                    p2.add(pos)
    return len(p1), len(p2)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    antennas = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(antennas)))