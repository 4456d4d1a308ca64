"""Robots patrolling a wrapping grid, and the picture they form."""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

SPACE = (101, 103)

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


def _truncating_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


@dataclass
class Robot:
    """A robot's position (x, y) and velocity per second."""

    pos: tuple[int, int]
    vel: tuple[int, int]

    def step(self, space: tuple[int, int] = SPACE) -> None:
        """Move one second, wrapping around the edges of the space."""
        width, height = space
        x, y = self.pos
        dx, dy = self.vel
        self.pos = (
            _truncating_mod(x + dx + width, width),
            _truncating_mod(y + dy + height, height),
        )


def parse_robots(lines: Iterable[str]) -> list[Robot]:
    """Parse 'p=x,y v=dx,dy' lines, skipping lines that do not match."""
    robots = []
    for line in lines:
        match = _ROBOT.fullmatch(line)
        if match:
            x, y, dx, dy = (int(group) for group in match.groups())
            robots.append(Robot((x, y), (dx, dy)))
    return robots


def render_grid(robots: Iterable[Robot], space: tuple[int, int] = SPACE) -> list[str]:
    """Draw the space row by row with '#' where a robot stands."""
    width, height = space
    grid = [["."] * width for _ in range(height)]
    for robot in robots:
        x, y = robot.pos
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"robot outside the space: {robot.pos}")
        grid[y][x] = "#"
    return ["".join(row) for row in grid]


def is_christmas_tree(robots: Iterable[Robot], space: tuple[int, int] = SPACE) -> bool:
    """Return whether five robots stand side by side in some row."""
    width, height = space
    occupied = {robot.pos for robot in robots}
    return any(
        all((col + offset, row) in occupied for offset in range(5))
        for row in range(height)
        for col in range(width - 4)
    )


def safety_factor(robots: Iterable[Robot], space: tuple[int, int] = SPACE) -> int:
    """Product of the robot counts in the four quadrants; middle lines count for none."""
    mid_x, mid_y = space[0] // 2, space[1] // 2
    top_left = top_right = bottom_left = bottom_right = 0
    for robot in robots:
        x, y = robot.pos
        if x < mid_x and y < mid_y:
            top_left += 1
        elif x < mid_x and y > mid_y:
            bottom_left += 1
        elif x > mid_x and y < mid_y:
            top_right += 1
        elif x > mid_x and y > mid_y:
            bottom_right += 1
    return top_left * top_right * bottom_left * bottom_right


def main(argv: Sequence[str] | None = None) -> int:
    """Print the grid at every second the robots line up like a tree."""
    parser = argparse.ArgumentParser(description="Watch robots for a picture.")
    parser.add_argument("input", help="path of the input file")
    parser.add_argument(
        "--max-seconds", type=int, default=100000, help="seconds to simulate"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    robots = parse_robots(lines)
    logger.info("Robots: %d", len(robots))
    for second in range(args.max_seconds):
        for robot in robots:
            robot.step(SPACE)
        if is_christmas_tree(robots, SPACE):
            logger.info("Seconds: %d", second)
            for row in render_grid(robots, SPACE):
                print(row)
            print()
    logger.info("Done!")
    return 0