"""Command line runner that solves puzzle days and reports timings."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from advent2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
)
from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair

Solver = Callable[[MeasureContext, str], SolutionPair]

ALL_DAYS: Tuple[Solver, ...] = (
    day01.solve,
    day02.solve,
    day03.solve,
    day04.solve,
    day05.solve,
    day06.solve,
    day07.solve,
    day08.solve,
    day09.solve,
    day10.solve,
    day11.solve,
    day12.solve,
    day13.solve,
    day14.solve,
    day15.solve,
    day16.solve,
    day17.solve,
    day18.solve,
    day19.solve,
    day20.solve,
)

_UNITS = ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs"))


def _format_duration(nanoseconds: int) -> str:
    for size, unit in _UNITS:
        if nanoseconds >= size:
            whole, fraction = divmod(nanoseconds, size)
            digits = str(fraction).zfill(len(str(size)) - 1).rstrip("0")
            return f"{whole}.{digits}{unit}" if digits else f"{whole}{unit}"
    return f"{nanoseconds}ns"


def read_input(day: int, directory: str | Path = "input") -> str:
    """Read the puzzle input of a day from dayNN.txt in directory."""
    return (Path(directory) / f"day{day:02d}.txt").read_text()


def run_day(
    day: int, solver: Solver, text: str, repeat: int = 1, warmup: int = 0
) -> Tuple[List[str], int]:
    """Solve a day repeatedly; return the report lines and the mean time in nanoseconds."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    if warmup < 0:
        raise ValueError("warmup must not be negative")

    warmup_ctx = MeasureContext()
    for _ in range(warmup):
        solver(warmup_ctx, text)

    ctx = MeasureContext()
    start = time.perf_counter_ns()
    for _ in range(repeat - 1):
        solver(ctx, text)
    solution = solver(ctx, text)
    mean = (time.perf_counter_ns() - start) // repeat

    details = ", ".join(
        f"{label}: {_format_duration(round(seconds * 1e9) // repeat)}"
        for label, seconds in ctx.measurements()
    )
    timing = f"day{day}/solve_time: {_format_duration(mean)}"
    if details:
        timing += f" ({details})"
    part1, part2 = solution
    lines = [f"day{day}/part1: {part1}", f"day{day}/part2: {part2}", timing]
    return lines, mean


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve the puzzles and time the solutions.")
    parser.add_argument("day", nargs="?", type=int, help="Day")
    parser.add_argument("-r", "--repeat", type=int, default=1)
    parser.add_argument("-w", "--warmup", type=int, default=0)
    parser.add_argument("--input-dir", default="input", help="directory holding dayNN.txt")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if args.repeat < 1:
        parser.error("repeat must be at least 1")
    if args.warmup < 0:
        parser.error("warmup must not be negative")
    if args.day is not None and not 1 <= args.day <= len(ALL_DAYS):
        parser.error(f"day must be between 1 and {len(ALL_DAYS)}")

    days = range(1, len(ALL_DAYS) + 1) if args.day is None else [args.day]
    try:
        work = [(day, ALL_DAYS[day - 1], read_input(day, args.input_dir)) for day in days]
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    total = 0
    for day, solver, text in work:
        lines, mean = run_day(day, solver, text, args.repeat, args.warmup)
        print("\n".join(lines))
        total += mean
    if args.day is None:
        print(f"Total solve time: {_format_duration(total)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())