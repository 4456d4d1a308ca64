"""Line-oriented loading of puzzle input files."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Data:
    """A puzzle input file, read as a list of lines."""

    path: str | os.PathLike[str]

    def read_lines(self) -> list[str]:
        """Return the file's lines without their newline characters.

        A file that cannot be opened reads as having no lines.
        """
        try:
            with open(self.path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError:
            logger.warning("Could not open %s", self.path)
            text = ""
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        logger.info("Read %d lines from %s", len(lines), self.path)
        return lines

    def log_lines(self) -> list[str]:
        """Log every line with its index and return the lines."""
        lines = self.read_lines()
        for number, line in enumerate(lines):
            logger.info("%d: %s", number, line)
        logger.info("Printed %d lines", len(lines))
        return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Log the lines of the input file named on the command line."""
    parser = argparse.ArgumentParser(description="Print the lines of a puzzle input.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    Data(args.input).log_lines()
    logger.info("Done!")
    return 0