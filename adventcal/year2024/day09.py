"""Disk Fragmenter: compact a disk map and compute its checksum."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from adventcal.day import Day, Solutions


@dataclass(frozen=True)
class Empty:
    size: int


@dataclass(frozen=True)
class Used:
    file_id: int
    size: int


Block = Union[Empty, Used]

_DIGITS = {str(d): d for d in range(10)}


def checksum(memory: Iterable[Block]) -> int:
    """Sum of position times file id over every used cell."""
    total = 0
    position = 0
    for block in memory:
        if isinstance(block, Used):
            total += block.file_id * sum(range(position, position + block.size))
        position += block.size
    return total


def _compact_cells(memory: list[Block]) -> list[Block]:
    cells: list[int | None] = [
        block.file_id if isinstance(block, Used) else None
        for block in memory
        for _ in range(block.size)
    ]
    left, right = 0, len(cells) - 1
    while True:
        while left < right and cells[left] is not None:
            left += 1
        while left < right and cells[right] is None:
            right -= 1
        if left >= right:
            break
        cells[left], cells[right] = cells[right], None
    return [Empty(1) if cell is None else Used(cell, 1) for cell in cells]


def _compact_files(memory: list[Block]) -> list[Block]:
    memory = list(memory)
    i = len(memory) - 1
    while i > 0:
        block = memory[i]
        if isinstance(block, Used):
            target = next(
                (
                    j
                    for j, candidate in enumerate(memory[:i])
                    if isinstance(candidate, Empty) and candidate.size >= block.size
                ),
                None,
            )
            if target is not None:
                free = memory[target]
                memory[i] = Empty(block.size)
                memory[target] = block
                if free.size > block.size:
                    memory.insert(target + 1, Empty(free.size - block.size))
                    i += 1
        i -= 1
    return memory


class Day09(Day):
    title = "Disk Fragmenter"
    solutions = Solutions(
        part1_example=1928,
        part1=6370402949053,
        part2_example=2858,
        part2=6398096697992,
    )

    def parse(self, text: str) -> list[Block]:
        """Alternate file and free-space sizes; zero-sized blocks are dropped."""
        memory: list[Block] = []
        for index, char in enumerate(text):
            if char not in _DIGITS:
                raise ValueError(f"expected a digit, got {char!r}")
            size = _DIGITS[char]
            if size == 0:
                continue
            memory.append(Used(index // 2, size) if index % 2 == 0 else Empty(size))
        return memory

    def solve_part1(self, context: list[Block]) -> int:
        return checksum(_compact_cells(context))

    def solve_part2(self, context: list[Block]) -> int:
        return checksum(_compact_files(context))