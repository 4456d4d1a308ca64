"""Similarity score of two location lists."""

from __future__ import annotations

import argparse
import logging
import os
from collections import Counter
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


def sort_values(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, logging each one."""
    result = sorted(values)
    for value in result:
        logger.info("sorted: %d", value)
    return result


def read_file(filename: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file."""
    return Data(filename).read_lines()


def _split_pair(line: str) -> tuple[int, int]:
    space = line.find(" ")
    if space == -1:
        return int(line), int(line)
    return int(line[:space]), int(line[space + 1 :])


def parse_locations(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split each line at its first space into a left and a right number."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        first, second = _split_pair(line)
        left.append(first)
        right.append(second)
    return left, right


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum each left number times how often it appears on the right."""
    left = list(left)
    left_counts = Counter(left)
    right_counts = Counter(right)
    for number, count in sorted(left_counts.items()):
        logger.info("num: %d count: %d", number, count)
    for number, count in sorted(right_counts.items()):
        logger.info("num: %d count: %d", number, count)
    return sum(number * right_counts[number] for number in left if number in right_counts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the similarity score of the lists in the input file."""
    parser = argparse.ArgumentParser(description="Similarity score of two location lists.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = read_file(args.input)
    logger.info("read file")
    left, right = parse_locations(lines)
    print(f"The difference is: {similarity_score(left, right)}")
    print("Done.")
    return 0