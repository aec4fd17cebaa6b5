"""Claw Contraption: pressing buttons to reach prizes."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import List, Optional

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

_MACHINE = re.compile(
    r"Button A: X\+([0-9]+), Y\+([0-9]+)\n"
    r"Button B: X\+([0-9]+), Y\+([0-9]+)\n"
    r"Prize: X=([0-9]+), Y=([0-9]+)"
)
_PRIZE_OFFSET = 10000000000000
_U8_MAX = 255
_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class ButtonBehaviour:
    x: int
    y: int


@dataclass(frozen=True)
class Prize:
    x: int
    y: int


@dataclass(frozen=True)
class Machine:
    a: ButtonBehaviour
    b: ButtonBehaviour
    prize: Prize


def _machine(block: str) -> Machine:
    match = _MACHINE.fullmatch(block)
    if match is None:
        raise ValueError(f"malformed machine: {block!r}")
    ax, ay, bx, by, px, py = (int(group) for group in match.groups())
    if max(ax, ay, bx, by) > _U8_MAX or max(px, py) > _U64_MAX:
        raise ValueError(f"value out of range: {block!r}")
    return Machine(ButtonBehaviour(ax, ay), ButtonBehaviour(bx, by), Prize(px, py))


def prepare(text: str) -> List[Machine]:
    """Parse the machines, separated by blank lines."""
    return [_machine(block) for block in text.rstrip("\n").split("\n\n")]


def cost(machine: Machine) -> Optional[int]:
    """Return the tokens needed to win the prize, or None if it cannot be won."""
    a, b, prize = machine.a, machine.b, machine.prize
    b_presses, remainder = divmod(
        prize.y * a.x - prize.x * a.y, b.y * a.x - b.x * a.y
    )
    if b_presses < 0 or remainder != 0:
        return None
    a_presses, remainder = divmod(prize.x - b_presses * b.x, a.x)
    if a_presses < 0 or remainder != 0:
        return None
    return a_presses * 3 + b_presses


def _total(machines: List[Machine]) -> int:
    return sum(price for price in map(cost, machines) if price is not None)


def solve_part1(machines: List[Machine]) -> int:
    """Sum the cost of every winnable prize."""
    return _total(machines)


def solve_part2(machines: List[Machine]) -> int:
    """Sum the costs after moving every prize far away."""
    return _total(
        [
            dataclasses.replace(
                machine,
                prize=Prize(machine.prize.x + _PRIZE_OFFSET, machine.prize.y + _PRIZE_OFFSET),
            )
            for machine in machines
        ]
    )


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    machines = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(machines)),
        ctx.measure("part2", lambda: solve_part2(machines)),
    )