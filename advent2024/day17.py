"""Chronospatial Computer: a three-bit machine."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

Computer = Tuple[List[int], List[int]]


def _value_after_colon(line: str) -> str:
    return line.split(": ")[-1].strip()


def prepare(text: str) -> Computer:
    """Parse the three registers and the program."""
    sections = text.split("\n\n")
    if len(sections) != 2:
        raise ValueError(f"expected 2 sections, found {len(sections)}")
    register_section, program_section = sections
    registers = [int(_value_after_colon(line)) for line in register_section.splitlines()]
    if len(registers) != 3:
        raise ValueError(f"expected 3 registers, found {len(registers)}")
    program = [int(num) for num in _value_after_colon(program_section).split(",")]
    if any(not 0 <= num <= 255 for num in program):
        raise ValueError("program values must fit in a byte")
    return registers, program


def run_program(registers: Sequence[int], program: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Run program from the given registers; return final registers and output."""
    a, b, c = registers
    out: List[int] = []
    i = 0
    while i + 1 < len(program):
        instruction = program[i]
        operand = program[i + 1]

        def combo() -> int:
            if operand < 4:
                return operand
            if operand == 4:
                return a
            if operand == 5:
                return b
            if operand == 6:
                return c
            if operand == 7:
                raise ValueError("combo operand 7 is reserved and will not appear in valid programs")
            raise ValueError(f"invalid combo operand {operand}")

        if instruction == 0:
            a >>= combo()
        elif instruction == 1:
            b ^= operand
        elif instruction == 2:
            b = combo() % 8
        elif instruction == 3:
            if a != 0:
                i = operand
                continue
        elif instruction == 4:
            b ^= c
        elif instruction == 5:
            out.append(combo() % 8)
        elif instruction == 6:
            b = a >> combo()
        elif instruction == 7:
            c = a >> combo()
        else:
            raise ValueError(f"invalid instruction {instruction}")
        i += 2
    return [a, b, c], out


def solve_part1(computer: Computer) -> str:
    """Return the program's output joined by commas."""
    registers, program = computer
    _, out = run_program(registers, program)
    return ",".join(str(num) for num in out)


def _find(expected: int, carry: int, example: bool) -> List[int]:
    result = []
    for a in range(8):
        if example:
            value = a % 8
        else:
            b = (a % 8) ^ 1
            c = (a + carry) // (1 << b)
            b ^= 4
            b ^= c
            value = b % 8
        if value == expected:
            result.append(a)
    return result


def _find_recursive(expected: Sequence[int], carry: int, example: bool) -> List[int]:
    if not expected:
        return [carry if example else carry >> 3]
    return [
        result
        for num in _find(expected[0], carry, example)
        for result in _find_recursive(expected[1:], (carry + num) << 3, example)
    ]


def solve_part2(computer: Computer, example: bool = False) -> int:
    """Return the smallest register A value that makes the program output itself."""
    _, program = computer
    if len(program) < 4 or program[-4] != 5 or program[-2] != 3 or program[-1] != 0:
        raise ValueError("the program must end with an output and a jump to the start")
    if any(instruction in (3, 5) for instruction in program[: len(program) - 4: 2]):
        raise ValueError("the program body must not jump or output")

    results = _find_recursive(program[::-1], 0, example)
    for result in results:
        if run_program([result, 0, 0], program)[1] != list(program):
            raise ValueError(f"register value {result} does not reproduce the program")
    if not results:
        raise ValueError("no register value reproduces the program")
    return results[0]


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    computer = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(computer)),
        ctx.measure("part2", lambda: solve_part2(computer, False)),
    )