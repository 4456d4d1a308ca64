"""Shortest button sequences through a chain of robot-operated keypads."""

from __future__ import annotations

import argparse
import logging
from collections import deque
from dataclasses import dataclass
from functools import cache
from itertools import pairwise
from typing import Iterable, Iterator, Mapping, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Point = tuple[int, int]

NUMERIC_DEPTH = 25

_ARROWS = {(0, 1): ">", (0, -1): "<", (1, 0): "v", (-1, 0): "^"}
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True, eq=False)
class Keypad:
    """Key positions (row, column) and the gap the arm must never cross."""

    keys: Mapping[str, Point]
    dead: Point

    @property
    def max_row(self) -> int:
        return max(row for row, _ in self.keys.values())

    @property
    def max_col(self) -> int:
        return max(col for _, col in self.keys.values())

    def position(self, key: str) -> Point:
        """Where the key sits on the pad."""
        try:
            return self.keys[key]
        except KeyError:
            raise ValueError(f"no key {key!r} on this keypad") from None


NUMERIC = Keypad(
    {
        "7": (0, 0), "8": (0, 1), "9": (0, 2),
        "4": (1, 0), "5": (1, 1), "6": (1, 2),
        "1": (2, 0), "2": (2, 1), "3": (2, 2),
        "0": (3, 1), "A": (3, 2),
    },
    (3, 0),
)

DIRECTIONAL = Keypad(
    {"^": (0, 1), "A": (0, 2), "<": (1, 0), "v": (1, 1), ">": (1, 2)},
    (0, 0),
)


def all_shortest_paths(pad: Keypad, c1: str, c2: str) -> list[str]:
    """Every shortest sequence of arrows, ending in 'A', that moves from c1 to c2."""
    if c1 == c2:
        return ["A"]
    start = pad.position(c1)
    end = pad.position(c2)
    max_row, max_col = pad.max_row, pad.max_col

    def valid(cell: Point) -> bool:
        row, col = cell
        return 0 <= row <= max_row and 0 <= col <= max_col and cell != pad.dead

    dist = {start: 0}
    preds: dict[Point, list[Point]] = {}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        step = dist[cell] + 1
        for d_row, d_col in _DIRECTIONS:
            nxt = (cell[0] + d_row, cell[1] + d_col)
            if not valid(nxt):
                continue
            known = dist.get(nxt)
            if known is None or step < known:
                dist[nxt] = step
                preds[nxt] = [cell]
                queue.append(nxt)
            elif step == known:
                preds[nxt].append(cell)

    def walk(cell: Point, back: list[Point]) -> Iterator[list[Point]]:
        if cell == start:
            yield back[::-1]
            return
        for pred in preds.get(cell, []):
            yield from walk(pred, back + [pred])

    return [
        "".join(_ARROWS[(r2 - r1, c2_ - c1_)] for (r1, c1_), (r2, c2_) in pairwise(path))
        + "A"
        for path in walk(end, [end])
    ]


def get_pad(depth: int) -> Keypad:
    """The numeric pad at the top depth, directional pads below it."""
    return NUMERIC if depth == NUMERIC_DEPTH else DIRECTIONAL


@cache
def get_cost(c1: str, c2: str, depth: int) -> int:
    """Fewest presses at the bottom of the chain to move from c1 to c2 and press."""
    expansions = all_shortest_paths(get_pad(depth), c1, c2)
    if depth == 0:
        return min(len(path) for path in expansions)
    return min(
        sum(get_cost(a, b, depth - 1) for a, b in pairwise("A" + path))
        for path in expansions
    )


def complexity(lines: Iterable[str]) -> int:
    """Sum of each code's numeric part times its shortest sequence length."""
    total = 0
    for line in lines:
        length = sum(get_cost(a, b, NUMERIC_DEPTH) for a, b in pairwise("A" + line))
        logger.info("Processing line: %s", line)
        code = int(line[:-1])
        logger.info("Numeric code: %d Sequence length: %d", code, length)
        total += code * length
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Log the total complexity of the door codes in the input file."""
    parser = argparse.ArgumentParser(description="Keypad conundrum complexity.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Total complexity: %d", complexity(lines))
    logger.info("Done!")
    return 0