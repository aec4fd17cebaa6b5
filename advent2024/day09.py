"""Disk Fragmenter: compacting files on a disk."""

from __future__ import annotations

from typing import List

from advent2024.measure import MeasureContext
from advent2024.solution import SolutionPair


def prepare(text: str) -> List[int]:
    """Parse the dense disk map into digits."""
    text = text.rstrip("\n")
    if not text.isdigit():
        raise ValueError("the disk map must consist of digits only")
    return [int(char) for char in text]


def _end_ids(disk_map: List[int]):
    file_count = (len(disk_map) + 1) // 2
    for file_id, length in zip(reversed(range(file_count)), disk_map[::-1][::2]):
        for _ in range(length):
            yield file_id


def solve_part1(disk_map: List[int]) -> int:
    """Checksum after moving single blocks from the end into gaps."""
    required = sum(disk_map[::2])
    end_ids = _end_ids(disk_map)
    total = 0
    pos = 0
    for index, length in enumerate(disk_map):
        if pos >= required:
            break
        up_to = min(pos + length, required)
        if index % 2 == 0:
            total += sum(range(pos, up_to)) * (index // 2)
        else:
            for block in range(pos, up_to):
                total += block * next(end_ids)
        pos = up_to
    return total


def solve_part2(disk_map: List[int]) -> int:
    """Checksum after moving whole files into the leftmost fitting gap."""
    blocks: List[List[int]] = []
    empty: List[List[List[int]]] = [[] for _ in range(9)]
    pos = 0
    for index, length in enumerate(disk_map):
        start, pos = pos, pos + length
        if index % 2 == 0:
            blocks.append([index // 2, start, pos])
        elif length > 0:
            empty[length - 1].append([start, pos])
    for stack in empty:
        stack.reverse()

    for block in reversed(blocks):
        block_len = block[2] - block[1]
        if block_len == 0:
            raise ValueError(f"file {block[0]} has no blocks")
        candidates = [
            (offset, stack[-1])
            for offset, stack in enumerate(empty[block_len - 1:])
            if stack
        ]
        if not candidates:
            continue
        first, _ = min(candidates, key=lambda candidate: candidate[1][0])
        space = empty[block_len + first - 1].pop()
        if space[0] >= block[1]:
            continue
        block[1] = space[0]
        block[2] = space[0] + block_len
        space[0] += block_len

        space_len = space[1] - space[0]
        if space_len == 0:
            continue
        stack = empty[space_len - 1]
        insert_at = next(
            (
                offset + 1
                for offset, existing in reversed(list(enumerate(stack)))
                if existing[0] > space[0]
            ),
            len(stack),
        )
        stack.insert(insert_at, space)

    return sum(file_id * sum(range(start, end)) for file_id, start, end in blocks)


def solve(ctx: MeasureContext, text: str) -> SolutionPair:
    disk_map = ctx.measure("prepare", lambda: prepare(text))
    return SolutionPair(
        ctx.measure("part1", lambda: solve_part1(disk_map)),
        ctx.measure("part2", lambda: solve_part2(disk_map)),
    )