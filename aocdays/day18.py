"""Shortest path through a memory grid as bytes fall into it."""

from __future__ import annotations

import argparse
import logging
import re
from collections import deque
from typing import Iterable, MutableSequence, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

_COORDINATE = re.compile(r"([0-9]+),([0-9]+)")


def empty_grid(size: int) -> list[str]:
    """A size by size grid of open cells."""
    return ["." * size for _ in range(size)]


def min_step(grid: Sequence[Sequence[str]], grid_size: int) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner, or None if cut off."""
    def open_cell(row: int, col: int) -> bool:
        return 0 <= row < grid_size and 0 <= col < grid_size and grid[row][col] != "#"

    if not open_cell(0, 0):
        return None
    end = (grid_size - 1, grid_size - 1)
    distances = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return distances[cell]
        row, col = cell
        for neighbour in ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col)):
            if neighbour not in distances and open_cell(*neighbour):
                distances[neighbour] = distances[cell] + 1
                queue.append(neighbour)
    return None


def _drop(grid: MutableSequence[list[str]], line: str) -> None:
    match = _COORDINATE.search(line)
    if match is None:
        raise ValueError(f"no coordinate in line: {line!r}")
    x, y = int(match.group(1)), int(match.group(2))
    grid[y][x] = "#"


def _drop_all(lines: Iterable[str], grid_size: int) -> tuple[str | None, list[list[str]]]:
    grid = [list(row) for row in empty_grid(grid_size)]
    for line in lines:
        _drop(grid, line)
        logger.info("%s", line)
        if min_step(grid, grid_size) is None:
            return line, grid
    return None, grid


def first_blocking_byte(lines: Iterable[str], grid_size: int) -> str | None:
    """Return the first byte line after which no path remains, or None."""
    blocking, _ = _drop_all(lines, grid_size)
    return blocking


def main(argv: Sequence[str] | None = None) -> int:
    """Log the first byte that cuts off the exit, or the final shortest path."""
    parser = argparse.ArgumentParser(description="Find the byte that blocks the exit.")
    parser.add_argument("input", help="path of the input file")
    parser.add_argument("size", type=int, help="width and height of the grid")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    blocking, grid = _drop_all(lines, args.size)
    if blocking is not None:
        logger.info("No path found!")
        logger.info("line: %s", blocking)
        return 0
    logger.info("minStep: %s", min_step(grid, args.size))
    for row in grid:
        print("".join(row))
    logger.info("Done!")
    return 0