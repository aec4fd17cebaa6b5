"""Print Queue: ordering page updates by rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from advent2024.intset import ArraySet64
from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_PAGE_LIMIT = 100


def _two_digit(token: str) -> int:
    if len(token) != 2 or not token.isdigit():
        raise ValueError(f"expected a two-digit page number: {token!r}")
    return int(token)


@dataclass
class PrintQueue:
    """Ordering rules and the updates to check against them."""

    # Indexed by the later page; holds the pages that must come before it.
    page_ordering_rules: List[ArraySet64]
    updates: List[List[int]]


def _rules(section: str) -> List[ArraySet64]:
    rules = [ArraySet64(2) for _ in range(_PAGE_LIMIT)]
    for line in section.splitlines():
        if len(line) != 5:
            raise ValueError(f"malformed ordering rule: {line!r}")
        first = _two_digit(line[0:2])
        second = _two_digit(line[3:5])
        rules[second].insert(first)
    return rules


def prepare(text: str) -> PrintQueue:
    """Parse the rules section and the updates section."""
    sections = text.split("\n\n")
    if len(sections) != 2:
        raise ValueError(f"expected 2 sections, found {len(sections)}")
    rules_section, updates_section = sections
    return PrintQueue(
        page_ordering_rules=_rules(rules_section),
        updates=[
            [_two_digit(token) for token in line.split(",")]
            for line in updates_section.splitlines()
        ],
    )


def _first_mismatch(queue: PrintQueue, pages: Sequence[int], start: int) -> Optional[int]:
    firsts = queue.page_ordering_rules[pages[start]]
    return next(
        (start + offset for offset, page in enumerate(pages[start:]) if page in firsts),
        None,
    )


def _fix_sort_halfway(queue: PrintQueue, update: Sequence[int]) -> Tuple[int, bool]:
    pages = list(update)
    modified = False
    middle = (len(pages) - 1) // 2
    index = 0
    while True:
        mismatch = _first_mismatch(queue, pages, index)
        if mismatch is not None:
            modified = True
            pages[index:mismatch + 1] = [pages[mismatch]] + pages[index:mismatch]
        elif index == middle:
            return pages[index], modified
        else:
            index += 1


def solve_both(queue: PrintQueue) -> Tuple[int, int]:
    """Sum the middle pages of correct updates and of corrected ones."""
    p1 = 0
    p2 = 0
    for update in queue.updates:
        if len(update) % 2 != 1:
            raise ValueError(f"update has an even number of pages: {update}")
        middle, modified = _fix_sort_halfway(queue, update)
        if modified:
            p2 += middle
        else:
            p1 += middle
    return p1, p2


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    queue = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(*ctx.measure("both", lambda: solve_both(queue)))