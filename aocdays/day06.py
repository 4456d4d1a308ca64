"""Positions where one extra obstruction traps the patrolling guard in a loop."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

_STEPS = {0: (-1, 0), 1: (0, 1), 2: (1, 0), 3: (0, -1)}
_GUARDS = {"^": 0, ">": 1, "v": 2, "<": 3}

State = tuple[int, int, int]


def move_guard(
    row: int,
    col: int,
    direction: int,
    grid: Sequence[str],
    obstacle: tuple[int, int] | None,
) -> State | None:
    """Advance the guard one step, turning right at obstructions.

    Returns the new (row, col, direction), or None once the guard leaves the grid.
    """
    try:
        d_row, d_col = _STEPS[direction]
    except KeyError:
        raise ValueError(f"Invalid direction: {direction}") from None
    new_row, new_col = row + d_row, col + d_col
    if new_row < 0 or new_row >= len(grid) or new_col < 0 or new_col >= len(grid[0]):
        return None
    if grid[new_row][new_col] == "#" or (new_row, new_col) == obstacle:
        return row, col, (direction + 1) % 4
    return new_row, new_col, direction


def causes_loop(
    row: int,
    col: int,
    grid: Sequence[str],
    obstacle: tuple[int, int] | None,
    direction: int,
) -> bool:
    """Return whether the guard revisits a position and heading."""
    state: State | None = (row, col, direction)
    visited: set[State] = set()
    while state is not None:
        if state in visited:
            return True
        visited.add(state)
        state = move_guard(*state, grid, obstacle)
    return False


def find_start(grid: Sequence[str]) -> State:
    """Locate the guard; a later row holding a guard takes precedence."""
    start: State | None = None
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _GUARDS:
                logger.info("Found starting point: %s at %d, %d", char, row, col)
                start = (row, col, _GUARDS[char])
                break
    if start is None:
        raise ValueError("no guard in grid")
    return start


def count_loop_positions(grid: Sequence[str]) -> int:
    """Count the cells where a new obstruction makes the guard loop."""
    start_row, start_col, direction = find_start(grid)
    return sum(
        causes_loop(start_row, start_col, grid, (row, col), direction)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if (row, col) != (start_row, start_col) and char != "#"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Log the number of obstruction positions that cause a loop."""
    parser = argparse.ArgumentParser(description="Find loop-causing obstructions.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    grid = Data(args.input).log_lines()
    logger.info("Number of loops: %d", count_loop_positions(grid))
    logger.info("Done!")
    return 0