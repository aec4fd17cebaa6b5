"""Red-Nosed Reports: safe level sequences."""

from __future__ import annotations

from typing import List, Optional, Sequence

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_MAX_LEVELS = 8


def _report(line: str) -> List[int]:
    levels = [int(token) for token in line.split()]
    if len(levels) > _MAX_LEVELS:
        raise ValueError(f"a report holds at most {_MAX_LEVELS} levels: {line!r}")
    if any(not 0 <= level <= 255 for level in levels):
        raise ValueError(f"level out of range: {line!r}")
    return levels


def prepare(text: str) -> List[List[int]]:
    """Parse one report of levels per line."""
    return [_report(line) for line in text.splitlines()]


def find_nonincreasing(current: int, remaining: Sequence[int]) -> Optional[int]:
    """Return the index in remaining where an increase by 1 to 3 first fails."""
    for index, num in enumerate(remaining):
        if num <= current or num - current > 3:
            return index
        current = num
    return None


def find_nondecreasing(current: int, remaining: Sequence[int]) -> Optional[int]:
    """Return the index in remaining where a decrease by 1 to 3 first fails."""
    for index, num in enumerate(remaining):
        if num >= current or current - num > 3:
            return index
        current = num
    return None


def _is_safe(report: Sequence[int]) -> bool:
    return (
        find_nonincreasing(report[0], report[1:]) is None
        or find_nondecreasing(report[0], report[1:]) is None
    )


def solve_part1(reports: List[List[int]]) -> int:
    """Count the strictly monotonic reports with steps of 1 to 3."""
    return sum(1 for report in reports if _is_safe(report))


def _recovers(report: Sequence[int], failure: int, find) -> bool:
    if find(report[failure], report[failure + 2:]) is None:
        return True
    if failure > 0:
        return find(report[failure - 1], report[failure + 1:]) is None
    return find(report[1], report[2:]) is None


def _is_safe_dampened(report: Sequence[int]) -> bool:
    inner = report[1:-1]
    nonincreasing = find_nonincreasing(report[0], inner)
    if nonincreasing is None:
        return True
    nondecreasing = find_nondecreasing(report[0], inner)
    if nondecreasing is None:
        return True
    return _recovers(report, nonincreasing, find_nonincreasing) or _recovers(
        report, nondecreasing, find_nondecreasing
    )


def solve_part2(reports: List[List[int]]) -> int:
    """Count reports that are safe after removing at most one level."""
    return sum(1 for report in reports if _is_safe_dampened(report))


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    reports = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(reports)),
        ctx.measure("part2", lambda: solve_part2(reports)),
    )