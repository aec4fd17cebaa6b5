"""Mull It Over: summing products in corrupted memory."""

from __future__ import annotations

import re
from typing import Tuple

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_ARGUMENTS = re.compile(r"([0-9]+),([0-9]+)\)")
_U32_MAX = 2**32 - 1


def _product(part: str) -> int:
    match = _ARGUMENTS.match(part)
    if match is None:
        return 0
    a, b = int(match.group(1)), int(match.group(2))
    if a > _U32_MAX or b > _U32_MAX:
        return 0
    return a * b


def sum_stretch(stretch: str) -> int:
    """Sum the products of every well-formed mul(a,b) in stretch."""
    return sum(_product(part) for part in stretch.split("mul(")[1:])


def solve_both(text: str) -> Tuple[int, int]:
    """Return the sum of all products and the sum of enabled products."""
    enabled = 0
    disabled = 0
    while True:
        stretch, _, rest = text.partition("don't()")
        enabled += sum_stretch(stretch)
        stretch, found, rest = rest.partition("do()")
        if not found:
            break
        disabled += sum_stretch(stretch)
        text = rest
    return enabled + disabled, enabled


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    return SolutionPair(*solve_both(text))