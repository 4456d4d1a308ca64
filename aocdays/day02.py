"""Safety checks of level reports, with a one-level dampener."""

from __future__ import annotations

import argparse
import logging
from itertools import pairwise
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


def pass_report(report: Sequence[int]) -> bool:
    """Return whether the levels move steadily in one direction by 1 to 3."""
    logger.info("Report: %s", " ".join(str(level) for level in report))
    direction = 0
    for previous, current in pairwise(report):
        if current == previous or abs(current - previous) > 3:
            return False
        step = 1 if current > previous else -1
        if direction == 0:
            direction = step
        elif step != direction:
            return False
    return True


def passes_with_dampener(report: Sequence[int]) -> bool:
    """Return whether the report passes as it is or with one level removed."""
    report = list(report)
    passed = pass_report(report)
    for index in range(len(report)):
        passed |= pass_report(report[:index] + report[index + 1 :])
    return passed


def _split(line: str, separator: str) -> list[str]:
    tokens = line.split(separator)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_reports(lines: Iterable[str]) -> list[list[int]]:
    """Parse each line as space separated integer levels."""
    return [[int(token) for token in _split(line, " ")] for line in lines]


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    """Count the reports that pass with the dampener."""
    passed = 0
    for row, report in enumerate(reports):
        logger.info("Report %d", row)
        if passes_with_dampener(report):
            passed += 1
    return passed


def main(argv: Sequence[str] | None = None) -> int:
    """Report how many reports in the input file are safe."""
    parser = argparse.ArgumentParser(description="Count safe level reports.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    data = Data(args.input)
    lines = data.log_lines()
    logger.info("Passed: %d", count_safe(parse_reports(lines)))
    print("Done.")
    return 0