"""Simulating a circuit of logic gates and searching for swapped gate outputs."""

from __future__ import annotations

import argparse
import logging
import operator
import random
import re
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from itertools import combinations
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Sequence

from aocdays.data import Data

logger = logging.getLogger(__name__)

SWAP_COUNT = 4
KNOWN_SWAPS = (("z12", "djg"), ("z19", "sbg"), ("z37", "dsd"))
SEED_SWAPS = (("z12", "djg"), ("z19", "sbg"))

_REGISTER = re.compile(r"([a-z0-9]+): (0|1)")
_GATE = re.compile(r"([a-z0-9]+) (AND|OR|XOR) ([a-z0-9]+) -> ([a-z0-9]+)")


class Operation(Enum):
    """A two-input logic operation."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, a: int, b: int) -> int:
        """Combine two bits with this operation."""
        return _OPERATORS[self](a, b)


_OPERATORS = {
    Operation.AND: operator.and_,
    Operation.OR: operator.or_,
    Operation.XOR: operator.xor,
}


@dataclass(frozen=True)
class Gate:
    """A gate reading two wires and driving one output wire."""

    id: int
    operation: Operation
    register1: str
    register2: str
    output: str


def parse_registers(lines: Iterable[str]) -> dict[str, int]:
    """Read 'name: bit' lines into initial wire values; other lines are skipped."""
    registers: dict[str, int] = {}
    for line in lines:
        match = _REGISTER.search(line)
        if match:
            registers[match.group(1)] = int(match.group(2))
    return registers


def parse_instructions(lines: Iterable[str]) -> list[Gate]:
    """Read 'a OP b -> out' lines into gates numbered from 0 in order."""
    gates: list[Gate] = []
    for line in lines:
        match = _GATE.search(line)
        if match:
            first, op, second, output = match.groups()
            gates.append(Gate(len(gates), Operation(op), first, second, output))
    return gates


def graphviz(instructions: Sequence[Gate]) -> str:
    """Describe the circuit as a Graphviz DOT digraph."""
    registers = dict.fromkeys(
        name
        for gate in instructions
        for name in (gate.register1, gate.register2, gate.output)
    )
    out = [
        "digraph G {\n",
        "    rankdir=LR;\n",
        '    node [fontname="Arial"];\n\n',
        "    // Register Nodes\n",
    ]
    out.extend(
        f'    "{name}" [shape=box, style=filled, color=lightblue];\n'
        for name in registers
    )
    out.append("\n    // Instruction Nodes\n")
    out.extend(
        f'    "instr{gate.id}" [shape=ellipse, style=filled, color=lightgreen, '
        f'label="{gate.operation.value}\\nID: {gate.id}"];\n'
        for gate in instructions
    )
    out.append("\n    // Edges\n")
    for gate in instructions:
        node = f"instr{gate.id}"
        out.append(f'    "{gate.register1}" -> "{node}";\n')
        out.append(f'    "{gate.register2}" -> "{node}";\n')
        out.append(f'    "{node}" -> "{gate.output}";\n')
    out.append("}\n")
    return "".join(out)


def execute_instruction(instruction: Gate, registers: dict[str, int]) -> int:
    """Evaluate one gate into registers and return its output bit.

    Input wires without a value read as 0.
    """
    result = instruction.operation.apply(
        registers.get(instruction.register1, 0),
        registers.get(instruction.register2, 0),
    )
    registers[instruction.output] = result
    return result


def execute_in_order(
    instructions: Iterable[Gate], registers: Mapping[str, int]
) -> dict[str, int]:
    """Evaluate every gate once its inputs are known and return all wire values.

    Raises ValueError when the remaining gates wait on wires nothing drives.
    """
    state = dict(registers)
    pending = deque(instructions)

    def ready(gate: Gate) -> bool:
        return gate.register1 in state and gate.register2 in state

    while pending:
        if not any(ready(gate) for gate in pending):
            raise ValueError(f"{len(pending)} gates can never be evaluated")
        gate = pending.popleft()
        if ready(gate):
            execute_instruction(gate, state)
        else:
            pending.append(gate)
    return state


def register_value(prefix: str, registers: Mapping[str, int]) -> int:
    """Read the wires starting with prefix as a binary number, lowest name first."""
    names = sorted(name for name in registers if name[:1] == prefix)
    if not names:
        raise ValueError(f"no wires start with {prefix!r}")
    bits = "".join(str(registers[name]) for name in reversed(names))
    return int(bits, 2)


def execute_swaps(
    instructions: Iterable[Gate], swaps: Iterable[tuple[str, str]]
) -> list[Gate]:
    """Exchange output wires of gates, applying each swap in turn."""
    swaps = list(swaps)
    result = []
    for gate in instructions:
        output = gate.output
        for first, second in swaps:
            if output == first:
                output = second
            elif output == second:
                output = first
        result.append(replace(gate, output=output))
    return result


def instruction_pairs(instructions: Sequence[Gate]) -> list[tuple[Gate, Gate]]:
    """Every unordered pair of distinct gates, in list order."""
    return list(combinations(instructions, 2))


def generate_combinations(
    desired: int,
    pairs: Sequence[tuple[Gate, Gate]],
    instructions: Sequence[Gate],
    registers: Mapping[str, int],
    current: Sequence[tuple[str, str]],
) -> Iterator[str]:
    """Yield the sorted, comma-joined wire names of every set of four output swaps
    that extends current and makes the z wires read desired.

    Sets are found in every order they can be built, so one may repeat.
    """
    current = tuple(current)
    if len(current) == SWAP_COUNT:
        swapped = execute_swaps(instructions, current)
        try:
            state = execute_in_order(swapped, registers)
        except ValueError:
            return
        if register_value("z", state) == desired:
            names = sorted(name for pair in current for name in pair)
            result = ",".join(names)
            logger.info("Result: %s", result)
            yield result
        return
    used = {name for pair in current for name in pair}
    for first, second in pairs:
        if first.output in used or second.output in used:
            continue
        yield from generate_combinations(
            desired,
            pairs,
            instructions,
            registers,
            current + ((first.output, second.output),),
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Search for the output swaps that make the circuit add x and y."""
    parser = argparse.ArgumentParser(description="Find swapped gate outputs.")
    parser.add_argument("input", help="path of the input file")
    parser.add_argument(
        "--graph", default="graph.dot", help="where to write the DOT description"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    lines = Data(args.input).log_lines()

    blank = next((index for index, line in enumerate(lines) if not line), 0)
    registers = parse_registers(lines[:blank])
    logger.info("Parsed registers: %d", len(registers))
    gates = execute_swaps(parse_instructions(lines[blank + 1 :]), KNOWN_SWAPS)
    Path(args.graph).write_text(graphviz(gates), encoding="utf-8")
    logger.info("Parsed instructions: %d", len(gates))

    try:
        desired = register_value("y", registers) + register_value("x", registers)
    except ValueError as error:
        parser.error(str(error))
    logger.info("Desired Z value: %d", desired)

    pairs = instruction_pairs(gates)
    random.shuffle(pairs)
    for _ in generate_combinations(desired, pairs, gates, registers, SEED_SWAPS):
        pass
    logger.info("Done!")
    return 0