"""Finding a fully connected group in a LAN party network."""

from __future__ import annotations

import argparse
import logging
from typing import AbstractSet, Iterable, Mapping, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Connections = dict[str, set[str]]


def parse_connection(line: str) -> tuple[str, str]:
    """Split an 'ab-cd' line into its two two-letter computer names."""
    if len(line) < 5:
        raise ValueError(f"malformed connection: {line!r}")
    return line[0:2], line[3:5]


def build_connections(lines: Iterable[str]) -> tuple[list[str], Connections]:
    """Return the computers in order of first appearance and each one's neighbours."""
    order: list[str] = []
    connections: Connections = {}
    for line in lines:
        a, b = parse_connection(line)
        for name in (a, b):
            if name not in connections:
                order.append(name)
                connections[name] = set()
        connections[a].add(b)
        connections[b].add(a)
    return order, connections


def find_fully_connected(
    candidate: str,
    left: AbstractSet[str],
    found: Sequence[str],
    connections: Mapping[str, AbstractSet[str]],
) -> list[str]:
    """Grow the group found by candidate and then by the remaining computers.

    If candidate is not linked to every member, the last member is dropped
    and the shortened group returned. Otherwise the largest group reached
    from any of the remaining computers is returned.
    """
    group = list(found)
    if any(candidate not in connections.get(member, ()) for member in group):
        group.pop()
        return group
    remaining = set(left)
    remaining.discard(candidate)
    group.append(candidate)
    for other in sorted(remaining):
        grown = find_fully_connected(other, remaining, group, connections)
        if len(grown) > len(group):
            group = grown
    return group


def get_password(computers: Iterable[str]) -> str:
    """Join the sorted computer names with commas."""
    names = sorted(computers)
    if not names:
        raise ValueError("no computers to build a password from")
    return ",".join(names)


def main(argv: Sequence[str] | None = None) -> int:
    """Log the password of the group found from each computer."""
    parser = argparse.ArgumentParser(description="Find LAN party groups.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    order, connections = build_connections(lines)
    logger.info("Computers: %d", len(order))
    for computer in order:
        group = find_fully_connected(computer, connections[computer], [], connections)
        logger.info("%s", get_password(group))
    logger.info("Done!")
    return 0