"""Template day: one signed integer per line."""

from __future__ import annotations

import re
from typing import List

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _line(line: str) -> int:
    if not _INTEGER.fullmatch(line):
        raise ValueError(f"not an integer: {line!r}")
    return int(line)


def prepare(text: str) -> List[int]:
    """Parse one integer per line."""
    return [_line(line) for line in text.splitlines()]


def solve_part1(numbers: List[int]) -> int:
    """Count the numbers."""
    return len(numbers)


def solve_part2(numbers: List[int]) -> int:
    """Count the numbers."""
    return len(numbers)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    numbers = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(numbers)),
        ctx.measure("part2", lambda: solve_part2(numbers)),
    )