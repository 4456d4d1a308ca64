"""Counting race-track cheats that save a hundred picoseconds or more."""

from __future__ import annotations

import argparse
import logging
from collections import deque
from dataclasses import dataclass
from typing import Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Point = tuple[int, int]
Distances = list[list["int | None"]]

MIN_SAVING = 100

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class RaceMap:
    """The track with start and end marked as open cells."""

    grid: tuple[str, ...]
    start: Point
    end: Point

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def read_map(lines: Sequence[str]) -> RaceMap:
    """Parse the track; 'S' and 'E' become '.' and their positions are kept."""
    if not lines:
        raise ValueError("map is empty")
    width = len(lines[0])
    rows: list[str] = []
    start: Point | None = None
    end: Point | None = None
    for i, line in enumerate(lines):
        if len(line) < width:
            raise ValueError(f"line {i} is shorter than the first line")
        row = []
        for j, char in enumerate(line[:width]):
            if char == "S":
                start = (i, j)
                char = "."
            elif char == "E":
                end = (i, j)
                char = "."
            row.append(char)
        rows.append("".join(row))
    if start is None or end is None:
        raise ValueError("map needs both a start 'S' and an end 'E'")
    return RaceMap(tuple(rows), start, end)


def bfs(race_map: RaceMap) -> Distances:
    """Distance of each cell from the end, None where the search did not reach.

    The search stops once it takes the start from the queue.
    """
    distances: Distances = [[None] * race_map.width for _ in range(race_map.height)]
    end_row, end_col = race_map.end
    distances[end_row][end_col] = 0
    queue = deque([race_map.end])
    while queue:
        row, col = queue.popleft()
        if (row, col) == race_map.start:
            break
        step = distances[row][col] + 1
        for d_row, d_col in _DIRECTIONS:
            nr, nc = row + d_row, col + d_col
            if not (0 <= nr < race_map.height and 0 <= nc < race_map.width):
                continue
            if race_map.grid[nr][nc] == "#":
                continue
            if distances[nr][nc] is None:
                distances[nr][nc] = step
                queue.append((nr, nc))
    return distances


def cheat_scanning(race_map: RaceMap, distances: Distances, max_cheat: int) -> int:
    """Count pairs of track cells within max_cheat steps whose shortcut saves enough."""
    count = 0
    for row, line in enumerate(race_map.grid):
        for col, char in enumerate(line):
            if char != ".":
                continue
            here = distances[row][col]
            if here is None:
                continue
            for dy in range(max_cheat + 1):
                dx_start = 1 if dy == 0 else dy - max_cheat
                for dx in range(dx_start, max_cheat - dy + 1):
                    nr, nc = row + dy, col + dx
                    if not (0 <= nr < race_map.height and 0 <= nc < race_map.width):
                        continue
                    if race_map.grid[nr][nc] != ".":
                        continue
                    there = distances[nr][nc]
                    if there is None:
                        continue
                    saving = abs(there - here) - (abs(dx) + dy)
                    if saving >= MIN_SAVING:
                        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Log how many cheats of up to 20 steps save at least 100."""
    parser = argparse.ArgumentParser(description="Count race-track cheats.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    try:
        race_map = read_map(lines)
    except ValueError as error:
        parser.error(str(error))
    count = cheat_scanning(race_map, bfs(race_map), 20)
    logger.info("Number of paths that save 100 or more time: %d", count)
    logger.info("Done!")
    return 0