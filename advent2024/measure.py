"""Accumulated wall-clock timings of labelled steps."""

from __future__ import annotations

import time
from typing import Callable, Dict, Iterator, Tuple, TypeVar

T = TypeVar("T")


class MeasureContext:
    """Times labelled calls and sums the durations per label."""

    def __init__(self) -> None:
        self._totals: Dict[str, float] = {}

    def measure(self, label: str, func: Callable[[], T]) -> T:
        """Call func, add its duration in seconds to label, and return its result."""
        start = time.perf_counter()
        result = func()
        elapsed = time.perf_counter() - start
        self._totals[label] = self._totals.get(label, 0.0) + elapsed
        return result

    def measurements(self) -> Iterator[Tuple[str, float]]:
        """Yield (label, seconds) in the order labels were first measured."""
        return iter(list(self._totals.items()))