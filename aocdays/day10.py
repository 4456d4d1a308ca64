"""Trailhead ratings on a topographic map."""

from __future__ import annotations

import argparse
import logging
from collections import deque
from typing import Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)


def trail_head_score(row: int, col: int, lines: Sequence[str]) -> int:
    """Count the distinct uphill trails from (row, col) that reach a 9."""
    score = 0
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        height = lines[r][c]
        if height == "9":
            score += 1
            continue
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if 0 <= nr < len(lines) and 0 <= nc < len(lines[nr]):
                if ord(lines[nr][nc]) - ord(height) == 1:
                    queue.append((nr, nc))
    logger.info("Score: %d", score)
    return score


def sum_scores(lines: Sequence[str]) -> int:
    """Sum the scores of every trailhead (cell holding 0)."""
    return sum(
        trail_head_score(row, col, lines)
        for row, line in enumerate(lines)
        for col, char in enumerate(line)
        if char == "0"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Log the sum of trailhead scores of the input map."""
    parser = argparse.ArgumentParser(description="Rate hiking trailheads.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Sum of Scores: %d", sum_scores(lines))
    logger.info("Done!")
    return 0