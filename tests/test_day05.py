import pytest

from advent2024.day05 import prepare, solve, solve_both
from advent2024.measure import MeasureContext

EXAMPLE_INPUT = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


def test_example_prepare():
    queue = prepare(EXAMPLE_INPUT)
    assert sum(len(rule) for rule in queue.page_ordering_rules) == 21
    assert len(queue.updates) == 6
    assert queue.updates[2] == [75, 29, 13]


def test_example_part1():
    assert solve_both(prepare(EXAMPLE_INPUT))[0] == 143


def test_example_part2():
    assert solve_both(prepare(EXAMPLE_INPUT))[1] == 123


def test_prepare_requires_two_sections():
    with pytest.raises(ValueError):
        prepare("47|53\n\n75,47\n\n12,13")


def test_even_update_rejected():
    with pytest.raises(ValueError):
        solve_both(prepare("47|53\n\n47,53"))


def test_solve_records_measurements():
    ctx = MeasureContext()
    pair = solve(ctx, EXAMPLE_INPUT)
    assert tuple(pair) == (143, 123)
    assert [label for label, _ in ctx.measurements()] == ["prepare", "both"]