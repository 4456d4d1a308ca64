"""Counting stones that split and change with every blink."""

from __future__ import annotations

import argparse
import logging
from functools import cache
from typing import Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


@cache
def blink(stone: int, iteration: int) -> int:
    """Return how many stones one stone becomes after the given number of blinks."""
    if iteration == 0:
        return 1
    if stone == 0:
        return blink(1, iteration - 1)
    digits = str(stone)
    if len(digits) % 2:
        return blink(stone * 2024, iteration - 1)
    half = len(digits) // 2
    return blink(int(digits[:half]), iteration - 1) + blink(int(digits[half:]), iteration - 1)


def count_stones(line: str, iterations: int) -> int:
    """Total stones after blinking the space separated stones of line."""
    tokens = line.split(" ")
    if tokens and tokens[-1] == "":
        tokens.pop()
    return sum(blink(int(token), iterations) for token in tokens)


def main(argv: Sequence[str] | None = None) -> int:
    """Log the number of stones after the given number of blinks."""
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("input", help="path of the input file")
    parser.add_argument("blinks", type=int, help="number of blinks")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    if not lines:
        parser.error("input file is empty")
    logger.info("Total stones: %d", count_stones(lines[0], args.blinks))
    logger.info("Done!")
    return 0