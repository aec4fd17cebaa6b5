# advent2024

Solutions to days 1 to 20 of the 2024 Advent of Code puzzles. Each day lives
in its own module (`advent2024.day01` to `advent2024.day20`). A small command
runs the solutions and reports how long each stage took.

`advent2024.day00` is a template day (one integer per line, both answers are
the line count). It is not run by the command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Puzzle input

By default the command reads inputs from an `input/` directory below the
directory you run it from. Name the files with two-digit day numbers:
`input/day01.txt`, `input/day02.txt`, and so on. Use `--input-dir` to read
them from somewhere else.

## Usage

Run every day in order and print the total solve time:

```
advent2024
```

Run a single day (1 to 20):

```
advent2024 7
```

Run a day several times and report the average time. Warm-up runs come first
and are not counted:

```
advent2024 7 --repeat 10 --warmup 3
```

Read inputs from another directory:

```
advent2024 7 --input-dir path/to/inputs
```

Options:

- `day`: the day to run; all days when left out.
- `-r`, `--repeat`: timed runs per day, at least 1 (default 1).
- `-w`, `--warmup`: untimed runs before the timed ones (default 0).
- `--input-dir`: the directory holding `dayNN.txt` (default `input`).

For each day the command prints both answers, then the average solve time.
Where a day times its stages separately, such as `parse`, `prepare`, `part1`,
`part2` or `both`, the average time of each stage follows in parentheses:

```
day7/part1: ...
day7/part2: ...
day7/solve_time: 1.234ms (prepare: 210.5µs, both: 1.01ms)
```

When all days are run, a final `Total solve time: ...` line follows. If an
input file cannot be read, the command prints the error and exits with
status 1 before solving anything.

## Library use

Every day module has `solve(ctx, text)`. It takes a
`advent2024.measure.MeasureContext` and the puzzle text, and returns a
`advent2024.solution.SolutionPair` holding `part1` and `part2`:

```python
from advent2024 import day01
from advent2024.measure import MeasureContext

ctx = MeasureContext()
with open("input/day01.txt") as handle:
    result = day01.solve(ctx, handle.read())
print(result)                 # "<part1>, <part2>"
part1, part2 = result
for label, seconds in ctx.measurements():
    print(label, seconds)
```

The day modules also expose their steps, such as `prepare`, `solve_part1`,
`solve_part2` or `solve_both`, for use on their own.

The command is also available as `advent2024.cli.main(argv=None)`, and a single
day can be timed with `advent2024.cli.run_day(day, solver, text, repeat, warmup)`,
which returns the report lines and the mean time in nanoseconds.

The shared helpers can be used on their own:

- `advent2024.position`: `Position`, `PositionOffset`, `Dimensions`,
  `Direction` and `RotationalDirection`.
- `advent2024.grid`: `Grid`, a dense row-major grid, with `GridWindow3` for
  3x3 neighbourhoods and `BackedGrid`, a read-only view over flat data with a
  row separator.
- `advent2024.intset`: `IntSet` and `ArraySet64`, bit sets of small
  non-negative integers.
- `advent2024.solver`: `solve_depth_first`, `solve_breadth_first`,
  `solve_breadth_first_dedup` and `solve_priority` search drivers, and the
  `StateStack` used by depth-first search.

## What it does not do

The package does not fetch puzzle inputs; you supply them as files. It covers
days 1 to 20 only; asking the command for any other day is an error.