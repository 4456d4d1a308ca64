"""Calibration equations solved with addition, multiplication and concatenation."""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


def concat(a: int, b: int) -> int:
    """Join the decimal digits of a and b into one number."""
    return int(f"{a}{b}")


def test_calibration(nums: Sequence[int], count: int, desired: int) -> bool:
    """Return whether some choice of operators turns nums into desired.

    Operators apply left to right. A running count of zero restarts the
    expression at the next number.
    """
    if not nums:
        return count == desired
    front, rest = nums[0], nums[1:]
    if count == 0:
        return test_calibration(rest, front, desired)
    return (
        test_calibration(rest, count + front, desired)
        or test_calibration(rest, count * front, desired)
        or test_calibration(rest, concat(count, front), desired)
    )


def parse_equation(line: str) -> tuple[int, list[int]]:
    """Split 'target: a b c' into the target and its operands."""
    target, colon, rest = line.partition(":")
    if not colon:
        raise ValueError(f"missing ':' in equation: {line!r}")
    return int(target), [int(token) for token in rest.split()]


def calibration_sum(lines: Iterable[str]) -> int:
    """Sum the targets of the equations that can be made true."""
    total = 0
    for line in lines:
        target, nums = parse_equation(line)
        if test_calibration(nums, 0, target):
            logger.info("Valid count: %d", target)
            total += target
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Log the total calibration result of the input file."""
    parser = argparse.ArgumentParser(description="Sum solvable calibration equations.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Sum: %d", calibration_sum(lines))
    logger.info("Done!")
    return 0