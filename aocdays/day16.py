"""Tiles on any cheapest path through the reindeer maze."""

from __future__ import annotations

import argparse
import logging
import math
from collections import deque
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Point = tuple[int, int]

_STEPS = {1: (-1, 0), 2: (0, 1), 3: (1, 0)}
_LEFT = (0, -1)
_ARROWS = {1: "^", 2: ">", 3: "v"}
_TURN_COST = 1000
_STEP_COST = 1


def render_path(
    lines: Sequence[str],
    pos: Point,
    end: Point,
    direction: int,
    moves: Iterable[Point],
) -> list[str]:
    """Draw the maze with the reindeer's heading, the end and visited tiles as '0'."""
    visited = set(moves)
    rows = []
    for i, line in enumerate(lines):
        row = []
        for j, char in enumerate(line):
            if (i, j) == pos:
                row.append(_ARROWS.get(direction, "<"))
            elif (i, j) == end:
                row.append("E")
            elif (i, j) in visited:
                row.append("0")
            else:
                row.append(char)
        rows.append("".join(row))
    return rows


def min_cost_tiles(lines: Sequence[str], start: Point, end: Point) -> list[Point]:
    """Return the tiles walked by the cheapest paths from start to end.

    The reindeer starts facing east; a step costs 1 and a quarter turn 1000.
    The end tile itself is not included; tiles may repeat.
    """
    queue: deque[tuple[Point, int, int, tuple[Point, ...]]] = deque(
        [(start, 0, 2, ())]
    )
    moves: list[Point] = []
    lowest: float = math.inf
    best: dict[tuple[Point, int], int] = {}
    while queue:
        pos, cost, direction, path = queue.popleft()
        if pos == end:
            if cost < lowest:
                lowest = cost
                moves = list(path)
            if cost == lowest:
                moves.extend(path)
        row, col = pos
        if (
            row < 0
            or row >= len(lines)
            or col < 0
            or col >= len(lines[0])
            or lines[row][col] == "#"
        ):
            continue
        key = (pos, direction)
        if key in best and best[key] < cost:
            continue
        new_path = path + (pos,)
        queue.append((pos, cost + _TURN_COST, (direction + 1) % 4, new_path))
        queue.append((pos, cost + _TURN_COST, (direction + 3) % 4, new_path))
        d_row, d_col = _STEPS.get(direction, _LEFT)
        queue.append(((row + d_row, col + d_col), cost + _STEP_COST, direction, new_path))
        best[key] = cost
    return moves


def find_endpoints(lines: Sequence[str]) -> tuple[Point, Point]:
    """Locate 'S' and 'E'; the last occurrence of each wins."""
    start: Point | None = None
    end: Point | None = None
    for i, line in enumerate(lines):
        for j, char in enumerate(line):
            if char == "S":
                start = (i, j)
            elif char == "E":
                end = (i, j)
    if start is None or end is None:
        raise ValueError("maze needs both a start 'S' and an end 'E'")
    return start, end


def best_seat_count(lines: Sequence[str]) -> int:
    """Number of distinct tiles on any cheapest path, the end included."""
    start, end = find_endpoints(lines)
    return len(set(min_cost_tiles(lines, start, end))) + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Log how many tiles lie on the cheapest paths through the maze."""
    parser = argparse.ArgumentParser(description="Count best seats in the maze.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    start, end = find_endpoints(lines)
    logger.info("Start: %d, %d", *start)
    logger.info("End: %d, %d", *end)
    moves = min_cost_tiles(lines, start, end)
    logger.info("Moves: %d", len(moves))
    logger.info("Visited: %d", len(set(moves)) + 1)
    logger.info("Done!")
    return 0