"""Linen Layout: arranging towels into patterns."""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_COLOURS = frozenset("wubrg")


def _checked(towel: str) -> str:
    if not towel:
        raise ValueError("a towel pattern must not be empty")
    if towel[0] not in _COLOURS:
        raise ValueError(f"unknown stripe colour {towel[0]!r}")
    return towel


class TowelSet:
    """The available towel patterns and the length of the longest."""

    def __init__(self, towels: Iterable[str] = ()):
        self._towels: Set[str] = set()
        self.largest = 0
        for towel in towels:
            self.add(towel)

    def add(self, towel: str) -> bool:
        """Add a pattern; return True if it was not present before."""
        _checked(towel)
        self.largest = max(self.largest, len(towel))
        if towel in self._towels:
            return False
        self._towels.add(towel)
        return True

    def __contains__(self, towel: str) -> bool:
        return _checked(towel) in self._towels

    def __len__(self) -> int:
        return len(self._towels)


Onsen = Tuple[TowelSet, List[str]]


def prepare(text: str) -> Onsen:
    """Parse the available patterns and the designs to make."""
    sections = text.split("\n\n")
    if len(sections) != 2:
        raise ValueError(f"expected 2 sections, found {len(sections)}")
    available_section, target_section = sections
    return TowelSet(available_section.split(", ")), target_section.splitlines()


def get_number_of_combinations(available: TowelSet, target: str) -> int:
    """Count the ways target can be built from the available patterns."""
    length = len(target)
    if length == 0:
        raise ValueError("a design must not be empty")
    ways = [0] * length
    for offset in range(length - 1, -1, -1):
        remaining = min(length - offset, available.largest)
        total = 0
        for end in range(offset + 1, offset + remaining + 1):
            if target[offset:end] not in available:
                continue
            total += 1 if end == length else ways[end]
        ways[offset] = total
    return ways[0]


def solve_both(onsen: Onsen) -> Tuple[int, int]:
    """Count the possible designs and sum the ways to make each of them."""
    available, targets = onsen
    counts = [get_number_of_combinations(available, target) for target in targets]
    return sum(1 for count in counts if count > 0), sum(counts)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    onsen = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(onsen)))