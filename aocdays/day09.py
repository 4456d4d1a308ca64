"""Whole-file disk compaction and its checksum."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

FREE = -1


@dataclass
class Block:
    """An inclusive run of disk positions holding one file, or free space."""

    start: int
    end: int
    file_id: int = FREE

    @property
    def is_free(self) -> bool:
        return self.file_id == FREE


def parse_disk_map(line: str) -> list[Block]:
    """Turn a dense disk map into alternating file and free blocks."""
    blocks: list[Block] = []
    position = 0
    file_id = 0
    for index, char in enumerate(line):
        if not char.isdigit():
            raise ValueError(f"invalid digit in disk map: {char!r}")
        amount = int(char)
        if index % 2 == 0:
            if amount:
                blocks.append(Block(position, position + amount - 1, file_id))
            file_id += 1
        elif amount:
            blocks.append(Block(position, position + amount - 1, FREE))
        position += amount
    return blocks


def file_compact(blocks: Iterable[Block]) -> list[Block]:
    """Move each whole file, highest id first, to the leftmost free run that fits."""
    blocks = [replace(block) for block in blocks]
    j = len(blocks) - 1
    while j >= 0:
        moving = blocks[j]
        if not moving.is_free:
            size = moving.end - moving.start
            for i in range(j):
                free = blocks[i]
                if not free.is_free or size > free.end - free.start:
                    continue
                if size != free.end - free.start:
                    old_end = free.end
                    free.end = free.start + size
                    free.file_id = moving.file_id
                    moving.file_id = FREE
                    blocks.insert(i + 1, Block(free.end + 1, old_end, FREE))
                    j += 1
                else:
                    free.file_id = moving.file_id
                    moving.file_id = FREE
                break
        j -= 1
    return blocks


def check_sum(blocks: Iterable[Block]) -> int:
    """Sum position times file id over every file position."""
    return sum(
        position * block.file_id
        for block in blocks
        if not block.is_free
        for position in range(block.start, block.end + 1)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Log the checksum of the compacted disk."""
    parser = argparse.ArgumentParser(description="Compact a disk map.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    if not lines:
        parser.error("input file is empty")
    line = lines[0]
    logger.info("Line: %s", line)
    logger.info("Checksum: %d", check_sum(file_compact(parse_disk_map(line))))
    logger.info("Done!")
    return 0