"""Answers of a puzzle day."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

Answer = Union[int, str]


def format_solution(value: Answer) -> str:
    """Render an integer or string answer."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"unsupported answer type {type(value).__name__}")
    return str(value)


@dataclass(frozen=True)
class SolutionPair:
    """The answers to both parts of a day."""

    part1: Answer
    part2: Answer

    def __post_init__(self) -> None:
        format_solution(self.part1)
        format_solution(self.part2)

    def __iter__(self) -> Iterator[Answer]:
        return iter((self.part1, self.part2))

    def __str__(self) -> str:
        return f"{format_solution(self.part1)}, {format_solution(self.part2)}"