"""Counting the ways towel patterns make up a design."""

from __future__ import annotations

import argparse
import logging
from functools import cache
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


@cache
def _possible(design: str, towels: tuple[str, ...]) -> bool:
    if not design:
        return True
    return any(
        _possible(design[len(towel):], towels)
        for towel in towels
        if len(towel) <= len(design) and design.startswith(towel)
    )


@cache
def _arrangements(design: str, towels: tuple[str, ...]) -> int:
    if not design:
        return 1
    return sum(
        _arrangements(design[: len(design) - len(towel)], towels)
        for towel in towels
        if len(towel) <= len(design) and design.endswith(towel)
    )


def design_possible(design: str, towels: Iterable[str]) -> bool:
    """Return whether the design can be built from the towel patterns."""
    return _possible(design, tuple(towels))


def number_of_designs(design: str, towels: Iterable[str]) -> int:
    """Count the distinct sequences of towels that build the design."""
    return _arrangements(design, tuple(towels))


def parse_towels(line: str) -> list[str]:
    """Split the towel list; a space starts a new towel, a comma ends one."""
    towels: list[str] = []
    towel = ""
    for char in line:
        if char == " ":
            towel = ""
        elif char == ",":
            towels.append(towel)
        else:
            towel += char
    towels.append(towel)
    for towel in towels:
        logger.info("Towel: %s", towel)
    logger.info("Towels: %d", len(towels))
    return towels


def total_arrangements(lines: Sequence[str]) -> int:
    """Sum the arrangement counts of the designs listed from the third line on."""
    if not lines:
        raise ValueError("input has no towel line")
    towels = parse_towels(lines[0])
    return sum(number_of_designs(design, towels) for design in lines[2:])


def main(argv: Sequence[str] | None = None) -> int:
    """Log the total number of ways to make every design."""
    parser = argparse.ArgumentParser(description="Count towel arrangements.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    if not lines:
        parser.error("input file is empty")
    logger.info("Count: %d", total_arrangements(lines))
    logger.info("Done!")
    return 0