import pytest

from advent2024.solver import (
    StateStack,
    solve_breadth_first,
    solve_breadth_first_dedup,
    solve_depth_first,
    solve_priority,
)


def test_state_stack_order():
    stack = StateStack()
    stack.push("a")
    stack.push("b")
    stack.push("c")
    assert [stack.pop() for _ in range(3)] == ["a", "c", "b"]


def test_state_stack_empty_pop_raises():
    stack = StateStack(["x"])
    assert stack.pop() == "x"
    with pytest.raises(IndexError):
        stack.pop()


def test_state_stack_extend_and_len():
    stack = StateStack([1])
    stack.extend([2, 3])
    assert len(stack) == 3
    assert sorted(stack.pop() for _ in range(3)) == [1, 2, 3]
    assert len(stack) == 0


def test_breadth_first_counts_rounds():
    def step(upcoming, value, round_number):
        if value == 5:
            return True
        upcoming.append(value + 1)
        return False

    assert solve_breadth_first(step, [0]) == (5, 5)


def test_breadth_first_round_matches_distance():
    def step(upcoming, value, round_number):
        assert value == round_number
        if value < 3:
            upcoming.append(value + 1)
        return False

    assert solve_breadth_first(step, [0]) is None


def test_breadth_first_dedup_merges_states():
    calls = []

    def step(upcoming, value, round_number):
        calls.append(value)
        if value < 3:
            upcoming.add(value + 1)
            upcoming.add(value + 1)
        return value == 3

    assert solve_breadth_first_dedup(step, [0, 0]) == (3, 3)
    assert calls == [0, 1, 2, 3]


def test_priority_pops_smallest_first():
    order = []

    def step(queue, value):
        order.append(value)
        return False

    assert solve_priority(step, [5, 1, 3]) is None
    assert order == [1, 3, 5]


def test_priority_stops_with_state():
    def step(queue, value):
        if value >= 10:
            return True
        queue.push(value + 7)
        queue.push(value + 3)
        return False

    result = solve_priority(step, [0])
    assert result >= 10