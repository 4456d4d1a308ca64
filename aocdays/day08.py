"""Resonant antinodes of same-frequency antennas."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Point = tuple[int, int]


def _ray(row: int, col: int, d_row: int, d_col: int, height: int, width: int) -> list[Point]:
    points = []
    while 0 <= row < height and 0 <= col < width:
        logger.info("Overlap at (%d, %d)", row, col)
        points.append((row, col))
        row += d_row
        col += d_col
    return points


def place_overlap(
    row_a: int, col_a: int, row_b: int, col_b: int, height: int, width: int
) -> list[Point]:
    """Return the in-bounds points on the line through A and B beyond each antenna."""
    logger.info(
        "Placing overlap between (%d, %d) and (%d, %d)", row_a, col_a, row_b, col_b
    )
    d_row, d_col = row_b - row_a, col_b - col_a
    beyond_a = _ray(row_a - d_row, col_a - d_col, -d_row, -d_col, height, width)
    beyond_b = _ray(row_b + d_row, col_b + d_col, d_row, d_col, height, width)
    return beyond_a + beyond_b


def antinodes(lines: Sequence[str]) -> set[Point]:
    """Return every antinode position, antennas included."""
    found: set[Point] = set()
    seen: dict[str, list[Point]] = {}
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == ".":
                continue
            found.add((row, col))
            for old_row, old_col in seen.get(char, []):
                found.update(place_overlap(row, col, old_row, old_col, len(lines), len(line)))
            seen.setdefault(char, []).append((row, col))
    return found


def _render(lines: Sequence[str], points: set[Point]) -> list[str]:
    return [
        "".join("X" if (row, col) in points else char for col, char in enumerate(line))
        for row, line in enumerate(lines)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Log the map with antinodes marked and their number."""
    parser = argparse.ArgumentParser(description="Count antenna antinodes.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    points = antinodes(lines)
    for line in _render(lines, points):
        logger.info("%s", line)
    logger.info("Overlaps: %d", len(points))
    logger.info("Done!")
    return 0