"""Counting X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


def check_x_mas(grid: Sequence[str], row: int, col: int) -> bool:
    """Return whether the corners around (row, col) form two crossing MAS words."""
    if row - 1 < 0 or row + 1 >= len(grid) or col - 1 < 0 or col + 1 >= len(grid[row]):
        return False
    word = (
        grid[row - 1][col - 1]
        + grid[row - 1][col + 1]
        + grid[row + 1][col - 1]
        + grid[row + 1][col + 1]
    )
    if word.count("M") != 2 or word.count("S") != 2:
        return False
    return ("MM" in word) == ("SS" in word)


def count_x_mas(grid: Sequence[str]) -> int:
    """Count the 'A' cells that are the centre of an X-MAS."""
    return sum(
        check_x_mas(grid, row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "A"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Log the number of X-MAS crosses in the input file."""
    parser = argparse.ArgumentParser(description="Count X-MAS crosses.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Count: %d", count_x_mas(lines))
    logger.info("Done!")
    return 0