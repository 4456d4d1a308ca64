"""Sum of enabled mul instructions in corrupted memory."""

from __future__ import annotations

import argparse
import logging
import re
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

_INSTRUCTION = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|(do\(\))|(don't\(\))")


def sum_enabled_products(lines: Iterable[str]) -> int:
    """Sum the products of mul(a,b) while enabled; do() and don't() toggle."""
    total = 0
    enabled = True
    for line in lines:
        logger.info("%s", line)
        for match in _INSTRUCTION.finditer(line):
            token = match.group(0)
            if token == "do()":
                enabled = True
            elif token == "don't()":
                enabled = False
            elif enabled:
                total += int(match.group(1)) * int(match.group(2))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Log the sum of enabled products in the input file."""
    parser = argparse.ArgumentParser(description="Sum enabled mul instructions.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Count: %d", sum_enabled_products(lines))
    logger.info("Done!")
    return 0