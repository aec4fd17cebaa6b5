"""Generic search loops: depth first, breadth first and by priority."""

from __future__ import annotations

import heapq
from typing import Callable, Generic, Iterable, List, Optional, Set, Tuple, TypeVar

S = TypeVar("S")


class StateStack(Generic[S]):
    """A last-in first-out stack that keeps the latest push in a separate slot."""

    __slots__ = ("_next", "_has_next", "_states")

    def __init__(self, states: Iterable[S] = ()):
        self._next: Optional[S] = None
        self._has_next = False
        self._states: List[S] = list(states)

    def push(self, state: S) -> None:
        """Add a state to the stack."""
        if self._has_next:
            self._states.append(state)
        else:
            self._next = state
            self._has_next = True

    def pop(self) -> S:
        """Remove and return the next state; raise IndexError when empty."""
        if self._has_next:
            state = self._next
            self._next = None
            self._has_next = False
            return state  # type: ignore[return-value]
        if not self._states:
            raise IndexError("pop from an empty StateStack")
        return self._states.pop()

    def extend(self, states: Iterable[S]) -> None:
        """Push every state in turn."""
        for state in states:
            self.push(state)

    def __len__(self) -> int:
        return len(self._states) + self._has_next


def solve_depth_first(step: Callable[[StateStack[S], S], None], states: Iterable[S]) -> None:
    """Pop states until none remain, letting step push follow-up states."""
    stack = StateStack(states)
    while stack:
        step(stack, stack.pop())


def solve_breadth_first(
    step: Callable[[List[S], S, int], bool], states: Iterable[S]
) -> Optional[Tuple[S, int]]:
    """Process states round by round.

    step receives the list for the next round, the state and the round number,
    and returns True to stop; the stopping state and its round are returned.
    """
    current = list(states)
    round_number = 0
    while True:
        upcoming: List[S] = []
        for state in current:
            if step(upcoming, state, round_number):
                return state, round_number
        if not upcoming:
            return None
        current = upcoming
        round_number += 1


def solve_breadth_first_dedup(
    step: Callable[[Set[S], S, int], bool], states: Iterable[S]
) -> Optional[Tuple[S, int]]:
    """Like solve_breadth_first, but each round's states are kept in a set."""
    current = set(states)
    round_number = 0
    while True:
        upcoming: Set[S] = set()
        for state in current:
            if step(upcoming, state, round_number):
                return state, round_number
        if not upcoming:
            return None
        current = upcoming
        round_number += 1


class _PriorityQueue(Generic[S]):
    __slots__ = ("_heap",)

    def __init__(self, states: Iterable[S]):
        self._heap = list(states)
        heapq.heapify(self._heap)

    def push(self, state: S) -> None:
        heapq.heappush(self._heap, state)

    def pop(self) -> S:
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)


def solve_priority(
    step: Callable[[_PriorityQueue[S], S], bool], states: Iterable[S]
) -> Optional[S]:
    """Process the smallest state first; step returns True to stop with that state."""
    queue = _PriorityQueue(states)
    while queue:
        current = queue.pop()
        if step(queue, current):
            return current
    return None