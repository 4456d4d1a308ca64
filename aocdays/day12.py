"""Fence prices of garden regions, charged per straight side."""

from __future__ import annotations

import argparse
import logging
from collections import defaultdict, deque
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Point = tuple[int, int]

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Edge:
    """A straight piece of fence between two grid corners.

    ``side`` tells the two faces of a fence line apart, so that fences on
    opposite sides of the same line are never merged.
    """

    side: int
    start: Point
    end: Point


def get_region(row: int, col: int, lines: Sequence[str]) -> list[Point]:
    """Return the cells connected to (row, col) holding the same plant, sorted."""
    height = len(lines)
    width = len(lines[0])
    visited: set[Point] = set()
    queue = deque([(row, col)])
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        r, c = current
        for d_row, d_col in _DIRECTIONS:
            nr, nc = r + d_row, c + d_col
            if 0 <= nr < height and 0 <= nc < width and lines[nr][nc] == lines[r][c]:
                queue.append((nr, nc))
    region = sorted(visited)
    logger.info("Region size: %d", len(region))
    return region


def _boundary_edges(region: Sequence[Point]) -> list[Edge]:
    cells = set(region)
    edges: list[Edge] = []
    for row, col in region:
        if (row - 1, col) not in cells:
            edges.append(Edge(1, (row, col), (row, col + 1)))
        if (row + 1, col) not in cells:
            edges.append(Edge(-1, (row + 1, col), (row + 1, col + 1)))
        if (row, col - 1) not in cells:
            edges.append(Edge(1, (row, col), (row + 1, col)))
        if (row, col + 1) not in cells:
            edges.append(Edge(-1, (row, col + 1), (row + 1, col + 1)))
    return edges


def _merge(edges: Iterable[Edge], axis: int) -> list[Edge]:
    """Join touching edges on the same line with the same side.

    ``axis`` is the coordinate that stays fixed along the line.
    """
    along = 1 - axis
    groups: dict[int, list[Edge]] = defaultdict(list)
    for edge in edges:
        groups[edge.start[axis]].append(edge)
    merged: list[Edge] = []
    for key in sorted(groups):
        line = sorted(groups[key], key=lambda edge: edge.start[along])
        current = line[0]
        for edge in line[1:]:
            if edge.start[along] <= current.end[along] and edge.side == current.side:
                end = list(current.end)
                end[along] = max(current.end[along], edge.end[along])
                current = replace(current, end=(end[0], end[1]))
            else:
                merged.append(current)
                current = edge
        merged.append(current)
    return merged


def fence_cost(region: Sequence[Point]) -> int:
    """Area of the region times its number of straight sides."""
    edges = _boundary_edges(region)
    horizontal = [edge for edge in edges if edge.start[0] == edge.end[0]]
    vertical = [edge for edge in edges if edge.start[0] != edge.end[0]]
    sides = _merge(horizontal, 0) + _merge(vertical, 1)
    for edge in sides:
        logger.info("Merged edge: %d %d %d %d", *edge.start, *edge.end)
    logger.info("Area: %d Perimeter: %d", len(region), len(sides))
    return len(region) * len(sides)


def find_regions(lines: Sequence[str]) -> list[list[Point]]:
    """Split the garden into its regions, in reading order of their first cell."""
    visited: set[Point] = set()
    regions: list[list[Point]] = []
    for row, line in enumerate(lines):
        for col in range(len(line)):
            if (row, col) in visited:
                continue
            region = get_region(row, col, lines)
            visited.update(region)
            regions.append(region)
    return regions


def total_price(lines: Sequence[str]) -> int:
    """Sum of the fence costs of every region."""
    return sum(fence_cost(region) for region in find_regions(lines))


def main(argv: Sequence[str] | None = None) -> int:
    """Log the total fence price of the garden in the input file."""
    parser = argparse.ArgumentParser(description="Price garden fences by sides.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Total price: %d", total_price(lines))
    logger.info("Done!")
    return 0