"""Solutions to days 1 to 20 of the 2024 Advent of Code puzzles, with grid, bit-set and search helpers."""

__version__ = "0.1.0"