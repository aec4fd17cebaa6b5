"""Historian Hysteria: comparing two location lists."""

from __future__ import annotations

from collections import Counter
from typing import List, Tuple

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

Lists = Tuple[List[int], List[int]]

_U32_MAX = 2**32 - 1


def _number(token: str) -> int:
    value = int(token)
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"location id out of range: {token}")
    return value


def _line(line: str) -> Tuple[int, int]:
    tokens = line.split()
    if len(tokens) < 2:
        raise ValueError(f"expected two numbers: {line!r}")
    return _number(tokens[0]), _number(tokens[1])


def prepare(text: str) -> Lists:
    """Split the input into the left and right columns."""
    left: List[int] = []
    right: List[int] = []
    for line in text.splitlines():
        a, b = _line(line)
        left.append(a)
        right.append(b)
    return left, right


def solve_part1(lists: Lists) -> int:
    """Sum the distances between the sorted columns."""
    left, right = lists
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def solve_part2(lists: Lists) -> int:
    """Sum each left number times its occurrences on the right."""
    left, right = lists
    counts = Counter(right)
    return sum(num * counts[num] for num in left)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    lists = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(lists)),
        ctx.measure("part2", lambda: solve_part2(lists)),
    )