"""A three-bit computer and a search for a self-printing register value."""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

_REGISTER = re.compile(r"Register ([A,B,C]): ([0-9]+)")
_PROGRAM = re.compile(r"Program: (.*)")


@dataclass(frozen=True)
class Instruction:
    """One opcode and its operand."""

    opcode: int
    operand: int


@dataclass
class Computer:
    """Registers A, B, C and the instruction pointer (counted in instructions)."""

    a: int = 0
    b: int = 0
    c: int = 0
    ip: int = 0

    def combo_value(self, operand: int) -> int:
        """Literal 0-3, registers A, B, C for 4-6, and 0 otherwise."""
        if operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        return 0

    def execute(self, instruction: Instruction) -> int | None:
        """Run one instruction; return the value it outputs, if any."""
        opcode, operand = instruction.opcode, instruction.operand
        output = None
        if opcode == 0:
            self.a >>= self.combo_value(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = self.combo_value(operand) % 8
        elif opcode == 3:
            if self.a != 0:
                self.ip = operand // 2
                return None
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            output = self.combo_value(operand) % 8
        elif opcode == 6:
            self.b = self.a >> self.combo_value(operand)
        elif opcode == 7:
            self.c = self.a >> self.combo_value(operand)
        self.ip += 1
        return output

    def run(self, instructions: Sequence[Instruction]) -> str:
        """Run until the pointer leaves the program; outputs each end with a comma."""
        parts: list[str] = []
        while self.ip < len(instructions):
            value = self.execute(instructions[self.ip])
            if value is not None:
                parts.append(f"{value},")
        return "".join(parts)


def parse_computer(lines: Iterable[str]) -> Computer:
    """Read the register values; registers not given start at 0."""
    computer = Computer()
    for line in lines:
        match = _REGISTER.search(line)
        if match is None:
            continue
        value = int(match.group(2))
        if match.group(1) == "A":
            computer.a = value
        elif match.group(1) == "B":
            computer.b = value
        elif match.group(1) == "C":
            computer.c = value
    return computer


def _program_text(lines: Iterable[str]) -> str:
    text = ""
    for line in lines:
        match = _PROGRAM.search(line)
        if match:
            text = match.group(1)
    return text


def parse_program(lines: Iterable[str]) -> list[Instruction]:
    """Read the last program line as opcode/operand pairs of three-bit numbers."""
    numbers: list[int] = []
    for token in _program_text(lines).split(","):
        for part in token.split():
            number = int(part)
            if number < 0 or number > 7:
                raise ValueError(f"Invalid number in program: {number}")
            numbers.append(number)
    if len(numbers) % 2:
        raise ValueError("program has an opcode without an operand")
    return [Instruction(op, arg) for op, arg in zip(numbers[::2], numbers[1::2])]


def compare_suffix(a: str, b: str) -> bool:
    """Return whether a is a suffix of b."""
    return len(a) <= len(b) and b.endswith(a)


def find_quine(test_value: int, lines: Sequence[str], program: str) -> int:
    """Search, three bits at a time, for an A that makes the program print itself.

    ``program`` is the program text with a trailing comma. Returns 0 when the
    search below ``test_value`` finds nothing.
    """
    instructions = parse_program(lines)
    for offset in range(8):
        register_a = test_value + offset
        computer = parse_computer(lines)
        computer.a = register_a
        output = computer.run(instructions)
        logger.info("Output: %s for A = %d program: %s", output, register_a, program)
        if compare_suffix(output, program):
            if len(output) == len(program):
                logger.info("Found A = %d", register_a)
                return register_a
            found = find_quine(register_a * 8, lines, program)
            if found != 0:
                return found
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Log the register A value that makes the program output itself."""
    parser = argparse.ArgumentParser(description="Find a self-printing register A.")
    parser.add_argument("input", help="path of the input file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()
    program = _program_text(lines) + ","
    logger.info("A = %d", find_quine(0, lines, program))
    logger.info("Done!")
    return 0