"""Plutonian Pebbles: stones that split when you blink."""

from __future__ import annotations

from collections import Counter
from typing import List

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair


def _stone(token: str) -> int:
    token = token.strip()
    if not token.isdigit():
        raise ValueError(f"not a stone number: {token!r}")
    return int(token)


def prepare(text: str) -> List[int]:
    """Parse the space-separated stone numbers."""
    return [_stone(token) for token in text.split(" ")]


def _blink(stone: int) -> List[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        factor = 10 ** (len(digits) // 2)
        return [stone // factor, stone % factor]
    return [stone * 2024]


def blink_iterations(stones: List[int], count: int) -> int:
    """Return the number of stones after blinking count times."""
    tally = Counter(stones)
    for _ in range(count):
        following: Counter = Counter()
        for stone, amount in tally.items():
            for result in _blink(stone):
                following[result] += amount
        tally = following
    return sum(tally.values())


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    stones = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: blink_iterations(stones, 25)),
        ctx.measure("part2", lambda: blink_iterations(stones, 75)),
    )