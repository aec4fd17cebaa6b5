"""Bridge Repair: operators between calibration numbers."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

Equation = Tuple[int, List[int]]

_MAX_NUMBERS = 12
_U16_MAX = 2**16 - 1


def _number(token: str) -> int:
    if not token.isdigit():
        raise ValueError(f"not a number: {token!r}")
    value = int(token)
    if value > _U16_MAX:
        raise ValueError(f"number out of range: {token}")
    return value


def _line(line: str) -> Equation:
    result, separator, rest = line.partition(": ")
    if not separator or not result.isdigit():
        raise ValueError(f"malformed equation: {line!r}")
    numbers = [_number(token) for token in rest.split(" ")]
    if len(numbers) > _MAX_NUMBERS:
        raise ValueError(f"at most {_MAX_NUMBERS} numbers allowed: {line!r}")
    return int(result), numbers


def prepare(text: str) -> List[Equation]:
    """Parse one equation per line."""
    return [_line(line) for line in text.splitlines()]


def _test(numbers: Sequence[int], index: int, expected: int, concat_enabled: bool) -> bool:
    last = numbers[index]
    if index == 0:
        return last == expected
    if expected % last == 0 and _test(numbers, index - 1, expected // last, concat_enabled):
        return True
    if expected >= last and _test(numbers, index - 1, expected - last, concat_enabled):
        return True
    if concat_enabled:
        factor = 10 ** len(str(last))
        if expected % factor == last and _test(
            numbers, index - 1, expected // factor, concat_enabled
        ):
            return True
    return False


def can_produce(numbers: Sequence[int], expected: int, concat_enabled: bool) -> bool:
    """Return whether +, * (and || if enabled) applied left to right give expected."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    return _test(numbers, len(numbers) - 1, expected, concat_enabled)


def solve_both(equations: List[Equation]) -> Tuple[int, int]:
    """Sum the results that can be produced without and with concatenation."""
    results = []
    for expected, numbers in equations:
        if can_produce(numbers, expected, False):
            results.append((expected, expected))
        elif can_produce(numbers, expected, True):
            results.append((0, expected))
    if not results:
        raise ValueError("no equation can be satisfied")
    return sum(p1 for p1, _ in results), sum(p2 for _, p2 in results)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    equations = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(equations)))