"""Pseudo-random secret numbers and the best price-change sequence to sell on."""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

MODULUS = 16777216
STEPS = 2000


def mix(secret: int, value: int) -> int:
    """Combine a value into the secret by bitwise xor."""
    return secret ^ value


def prune(secret: int) -> int:
    """Keep the secret below 16777216."""
    return secret % MODULUS


def evolve(secret: int) -> int:
    """Produce the next secret number."""
    secret = prune(mix(secret, secret * 64))
    secret = prune(mix(secret, secret // 32))
    return prune(mix(secret, secret * 2048))


def changes(secret: int) -> list[tuple[int, int | None]]:
    """Return each price (last digit) with its change from the previous price.

    The first price has no change; 2000 evolutions follow it.
    """
    last = secret % 10
    result: list[tuple[int, int | None]] = [(last, None)]
    for _ in range(STEPS):
        secret = evolve(secret)
        digit = secret % 10
        result.append((digit, digit - last))
        last = digit
    return result


def max_bananas(secrets: Iterable[int]) -> int:
    """Most bananas one four-change sequence can buy across all buyers.

    Each buyer sells at the first time the sequence appears.
    """
    totals: Counter[tuple[int, ...]] = Counter()
    for secret in secrets:
        history = changes(secret)
        first_prices: dict[tuple[int, ...], int] = {}
        for index in range(1, len(history) - 3):
            window = history[index : index + 4]
            sequence = tuple(change for _, change in window if change is not None)
            first_prices.setdefault(sequence, window[-1][0])
        totals.update(first_prices)
    logger.info("Done building cache! Found %d sequences.", len(totals))
    return max(totals.values(), default=0)


def main(argv: Sequence[str] | None = None) -> int:
    """Log the most bananas that can be bought from the buyers in the input."""
    parser = argparse.ArgumentParser(description="Best banana-selling sequence.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    logger.info("Bananas: %d", max_bananas(int(line) for line in lines))
    logger.info("Done!")
    return 0