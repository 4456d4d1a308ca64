"""A robot pushing double-width boxes around a warehouse."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Point = tuple[int, int]


class Direction(Enum):
    """A move of the robot, valued by its (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Tile(Enum):
    """What one cell of the widened warehouse holds, valued by how it is drawn."""

    EMPTY = "."
    WALL = "#"
    LBOX = "["
    RBOX = "]"
    ROBOT = "@"


_MOVES = {
    "^": Direction.UP,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
}

_WIDE = {
    ".": (Tile.EMPTY, Tile.EMPTY),
    "#": (Tile.WALL, Tile.WALL),
    "O": (Tile.LBOX, Tile.RBOX),
    "@": (Tile.ROBOT, Tile.EMPTY),
}


@dataclass
class Warehouse:
    """The widened warehouse grid and the robot's position in it."""

    grid: list[list[Tile]]
    robot: Point

    def _at(self, point: Point) -> Tile:
        return self.grid[point[0]][point[1]]

    def _set(self, point: Point, tile: Tile) -> None:
        self.grid[point[0]][point[1]] = tile

    def can_push(self, lbox: Point, rbox: Point, vec: Point) -> bool:
        """Return whether the box with halves lbox and rbox can move by vec."""
        d_row, d_col = vec
        new_l = (lbox[0] + d_row, lbox[1] + d_col)
        new_r = (rbox[0] + d_row, rbox[1] + d_col)

        if d_row == 0:
            if d_col == -1:
                tile = self._at(new_l)
                if tile is Tile.WALL:
                    return False
                if tile is Tile.RBOX and not self.can_push(
                    (new_l[0], new_l[1] - 1), new_l, vec
                ):
                    return False
            if d_col == 1:
                tile = self._at(new_r)
                if tile is Tile.WALL:
                    return False
                if tile is Tile.LBOX and not self.can_push(
                    new_r, (new_r[0], new_r[1] + 1), vec
                ):
                    return False

        if d_col == 0:
            left = self._at(new_l)
            right = self._at(new_r)
            if left is Tile.WALL or right is Tile.WALL:
                return False
            if left is Tile.LBOX and not self.can_push(new_l, new_r, vec):
                return False
            if left is Tile.RBOX and not self.can_push(
                (new_l[0], new_l[1] - 1), new_l, vec
            ):
                return False
            if right is Tile.LBOX and not self.can_push(
                new_r, (new_r[0], new_r[1] + 1), vec
            ):
                return False
        return True

    def push_box(self, lbox: Point, rbox: Point, vec: Point) -> None:
        """Move the box by vec, pushing every box in its way first."""
        d_row, d_col = vec
        new_l = (lbox[0] + d_row, lbox[1] + d_col)
        new_r = (rbox[0] + d_row, rbox[1] + d_col)

        if d_row == 0:
            if d_col == -1 and self._at(new_l) is Tile.RBOX:
                self.push_box((new_l[0], new_l[1] - 1), new_l, vec)
            if d_col == 1 and self._at(new_r) is Tile.LBOX:
                self.push_box(new_r, (new_r[0], new_r[1] + 1), vec)
            self._set(new_l, Tile.LBOX)
            self._set(new_r, Tile.RBOX)

        if d_col == 0:
            if self._at(new_l) is Tile.LBOX:
                self.push_box(new_l, new_r, vec)
            if self._at(new_l) is Tile.RBOX:
                other = (new_l[0], new_l[1] - 1)
                self.push_box(other, new_l, vec)
                self._set(other, Tile.EMPTY)
            if self._at(new_r) is Tile.LBOX:
                other = (new_r[0], new_r[1] + 1)
                self.push_box(new_r, other, vec)
                self._set(other, Tile.EMPTY)
            self._set(new_l, Tile.LBOX)
            self._set(new_r, Tile.RBOX)

    def apply(self, direction: Direction) -> None:
        """Try to move the robot one step, pushing boxes where they can move."""
        d_row, d_col = direction.value
        vec = (d_row, d_col)
        new_robot = (self.robot[0] + d_row, self.robot[1] + d_col)
        tile = self._at(new_robot)
        if tile is Tile.WALL:
            return
        if tile is Tile.EMPTY:
            self._set(self.robot, Tile.EMPTY)
            self._set(new_robot, Tile.ROBOT)
            self.robot = new_robot
            return
        if tile is Tile.RBOX:
            rbox = new_robot
            lbox = (new_robot[0], new_robot[1] - 1)
        elif tile is Tile.LBOX:
            lbox = new_robot
            rbox = (new_robot[0], new_robot[1] + 1)
        else:
            return

        if not self.can_push(lbox, rbox, vec):
            return
        self.push_box(lbox, rbox, vec)
        self._set(self.robot, Tile.EMPTY)
        self.robot = new_robot
        self._set(self.robot, Tile.ROBOT)
        if d_col == 0:
            if lbox == new_robot:
                self._set(rbox, Tile.EMPTY)
            if rbox == new_robot:
                self._set(lbox, Tile.EMPTY)

    def render(self) -> list[str]:
        """Draw the warehouse row by row."""
        return ["".join(tile.value for tile in row) for row in self.grid]

    def gps_sum(self) -> int:
        """Sum 100 * row + column over the left half of every box."""
        return sum(
            row * 100 + col
            for row, tiles in enumerate(self.grid)
            for col, tile in enumerate(tiles)
            if tile is Tile.LBOX
        )


def parse_map(lines: Iterable[str]) -> Warehouse:
    """Build the warehouse with every cell doubled in width.

    Characters other than '.', '#', 'O' and '@' are skipped.
    """
    grid: list[list[Tile]] = []
    robot: Point | None = None
    for row, line in enumerate(lines):
        tiles: list[Tile] = []
        for char in line:
            pair = _WIDE.get(char)
            if pair is None:
                continue
            if char == "@":
                robot = (row, len(tiles))
            tiles.extend(pair)
        grid.append(tiles)
    if robot is None:
        raise ValueError("map has no robot '@'")
    return Warehouse(grid, robot)


def parse_movements(lines: Iterable[str]) -> list[Direction]:
    """Read the arrow characters of the move list, ignoring anything else."""
    return [_MOVES[char] for line in lines for char in line if char in _MOVES]


def main(argv: Sequence[str] | None = None) -> int:
    """Log the GPS sum of the boxes after the robot has made every move."""
    parser = argparse.ArgumentParser(description="Push wide boxes around a warehouse.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    blank = next((index for index, line in enumerate(lines) if not line), 0)
    try:
        warehouse = parse_map(lines[:blank])
    except ValueError as error:
        parser.error(str(error))
    for movement in parse_movements(lines[blank + 1 :]):
        warehouse.apply(movement)
    logger.info("Number of GPS: %d", warehouse.gps_sum())
    logger.info("Done!")
    return 0