"""Fewest tokens to win claw machine prizes."""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

PRIZE_OFFSET = 10000000000000

_BUTTON_A = re.compile(r"Button A: X\+(\d+), Y\+(\d+)")
_BUTTON_B = re.compile(r"Button B: X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"Prize: X=(\d+), Y=(\d+)")


@dataclass(frozen=True)
class Game:
    """One claw machine: where each button moves the claw and where the prize is."""

    prize: tuple[int, int]
    button_a: tuple[int, int]
    button_b: tuple[int, int]


def _pair(match: re.Match[str]) -> tuple[int, int]:
    return int(match.group(1)), int(match.group(2))


def parse_games(lines: Iterable[str]) -> list[Game]:
    """Parse machines; each prize line completes one and is shifted by PRIZE_OFFSET."""
    games: list[Game] = []
    button_a = button_b = (0, 0)
    for line in lines:
        if match := _BUTTON_A.fullmatch(line):
            button_a = _pair(match)
        elif match := _BUTTON_B.fullmatch(line):
            button_b = _pair(match)
        elif match := _PRIZE.fullmatch(line):
            x, y = _pair(match)
            games.append(Game((x + PRIZE_OFFSET, y + PRIZE_OFFSET), button_a, button_b))
    for game in games:
        logger.info("Button A: %d, %d", *game.button_a)
        logger.info("Button B: %d, %d", *game.button_b)
        logger.info("Prize: %d, %d", *game.prize)
    logger.info("Games: %d", len(games))
    return games


def fewest_tokens(game: Game) -> int:
    """Cost of the unique whole, non-negative press counts (A costs 3, B costs 1), else 0."""
    a_x, a_y = game.button_a
    b_x, b_y = game.button_b
    prize_x, prize_y = game.prize
    det = a_x * b_y - a_y * b_x
    if det == 0:
        return 0
    a_num = prize_x * b_y - prize_y * b_x
    b_num = a_x * prize_y - a_y * prize_x
    if a_num % det or b_num % det:
        return 0
    a_presses, b_presses = a_num // det, b_num // det
    if a_presses < 0 or b_presses < 0:
        return 0
    return a_presses * 3 + b_presses


def main(argv: Sequence[str] | None = None) -> int:
    """Log the total tokens needed to win every winnable prize."""
    parser = argparse.ArgumentParser(description="Fewest tokens for claw machines.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    total = sum(fewest_tokens(game) for game in parse_games(lines))
    logger.info("Total: %d", total)
    logger.info("Done!")
    return 0