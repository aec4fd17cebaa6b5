"""Ceres Search: finding XMAS in a letter grid."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List

from advent2024.grid import Grid
from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_WORDS = ("XMAS", "SAMX")


def prepare(text: str) -> Grid[str]:
    """Build a grid of single letters."""
    return Grid.from_rows(list(line) for line in text.splitlines())


def _count_words(lines: Iterable[List[str]]) -> int:
    total = 0
    for line in lines:
        text = "".join(line)
        total += sum(text.count(word) for word in _WORDS)
    return total


def solve_part1(grid: Grid[str]) -> int:
    """Count XMAS in every direction, horizontally, vertically and diagonally."""
    return (
        _count_words(grid.rows())
        + _count_words(grid.columns())
        + _count_words(grid.diagonals_lower())
        + _count_words(islice(grid.diagonals_upper(), 1, None))
        + _count_words(grid.anti_diagonals_upper())
        + _count_words(islice(grid.anti_diagonals_lower(), 1, None))
    )


def _is_mas(a: str, b: str) -> bool:
    return {a, b} == {"M", "S"}


def solve_part2(grid: Grid[str]) -> int:
    """Count the crosses of two diagonal MAS words."""
    return sum(
        1
        for window in grid.iter_windows3_where(lambda cell: cell == "A")
        if _is_mas(window.top_left(), window.bottom_right())
        and _is_mas(window.top_right(), window.bottom_left())
    )


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    grid = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(grid)),
        ctx.measure("part2", lambda: solve_part2(grid)),
    )