"""Reordering print updates that break page ordering rules."""

from __future__ import annotations

import argparse
import logging
from typing import Mapping, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

Rules = dict[str, list[str]]


def _split(line: str, separator: str) -> list[str]:
    tokens = line.split(separator)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def lowest_edge(graph: Mapping[str, Sequence[str]]) -> str:
    """Return the key with the fewest dependencies, first in key order on ties."""
    if not graph:
        raise ValueError("graph is empty")
    edge = min(sorted(graph), key=lambda key: len(graph[key]))
    logger.info("Lowest edge: %s", edge)
    return edge


def parse_input(lines: Sequence[str]) -> tuple[Rules, list[str]]:
    """Split input into rules (page -> pages that must precede it) and updates."""
    rules: Rules = {}
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("input has no blank line after the rules") from None
    for line in lines[:blank]:
        bar = line.find("|")
        if bar == -1:
            before = after = line
        else:
            before, after = line[:bar], line[bar + 1 :]
        rules.setdefault(after, []).append(before)
    for page, predecessors in rules.items():
        logger.info("%s:%s", page, "".join(p + "," for p in predecessors))
    return rules, list(lines[blank + 1 :])


def needs_fix(update: str, rules: Mapping[str, Sequence[str]]) -> bool:
    """Return whether some page appears before a page that must precede it."""
    logger.info("Checking line %s", update)
    so_far = ""
    for token in _split(update, ","):
        so_far += token + ","
        for required in rules.get(token, ()):
            if required not in so_far and required in update:
                return True
    return False


def fix_update(update: str, rules: Mapping[str, Sequence[str]]) -> list[int]:
    """Order the update's pages so every rule is respected."""
    graph = {
        token: [page for page in rules.get(token, ()) if page in update]
        for token in _split(update, ",")
    }
    fixed: list[int] = []
    while graph:
        page = lowest_edge(graph)
        fixed.append(int(page))
        for key in graph:
            graph[key] = [q for q in graph[key] if q != page]
        del graph[page]
        logger.info("Erased %s", page)
    return fixed


def sum_fixed_middles(lines: Sequence[str]) -> int:
    """Sum the middle pages of the updates that had to be reordered."""
    rules, updates = parse_input(lines)
    total = 0
    for update in updates:
        if needs_fix(update, rules):
            fixed = fix_update(update, rules)
            total += fixed[(len(fixed) - 1) // 2]
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Log the sum of middle pages of the reordered updates."""
    parser = argparse.ArgumentParser(description="Fix badly ordered print updates.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Total: %d", sum_fixed_middles(lines))
    logger.info("Done!")
    return 0