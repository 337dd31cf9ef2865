from __future__ import annotations

"""
Day 10: Cathode-Ray Tube.

A one-register CPU runs `noop` (1 cycle) and `addx V` (2 cycles, register
updated when the second cycle ends). The clock loop is a plain iteration
over an explicit state: either awaiting the next command or executing one
with a number of cycles still remaining.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Union

from aoc2022.domain.errors import ParseError, StructuralError

logger = logging.getLogger(__name__)

TITLE = "Cathode-Ray Tube"

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
FIRST_SAMPLE = 20
SAMPLE_INTERVAL = 40

_ADDX_RE = re.compile(r"^addx (-?\d+)$")

# -----------------------------------------------------------------------------
# COMMANDS AND MACHINE STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Noop:
    cycles: int = 1


@dataclass(frozen=True)
class Addx:
    value: int
    cycles: int = 2


Instruction = Union[Noop, Addx]


@dataclass(frozen=True)
class AwaitingCommand:
    pass


@dataclass(frozen=True)
class Executing:
    command: Instruction
    remaining: int


MachineState = Union[AwaitingCommand, Executing]


@dataclass(frozen=True)
class Tick:
    """Register value *during* a cycle (1-based)."""
    cycle: int
    x: int


def parse_program(content: str) -> List[Instruction]:
    program: List[Instruction] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line == "noop":
            program.append(Noop())
            continue
        match = _ADDX_RE.match(line)
        if not match:
            raise ParseError("Unknown instruction", line_no=line_no, line=raw)
        program.append(Addx(int(match.group(1))))

    if not program:
        raise StructuralError("Empty input")
    return program


def run_program(program: List[Instruction]) -> Iterator[Tick]:
    """Yield the register value for every cycle until the program ends."""
    pending = list(reversed(program))
    state: MachineState = AwaitingCommand()
    x = 1
    cycle = 1

    while True:
        yield Tick(cycle, x)

        if isinstance(state, AwaitingCommand):
            if not pending:
                return
            command = pending.pop()
            state = Executing(command, command.cycles - 1) if command.cycles > 1 else AwaitingCommand()
        elif state.remaining == 1:
            if isinstance(state.command, Addx):
                x += state.command.value
            state = AwaitingCommand()
        else:
            state = Executing(state.command, state.remaining - 1)

        cycle += 1


def is_sample_cycle(cycle: int) -> bool:
    return cycle >= FIRST_SAMPLE and (cycle - FIRST_SAMPLE) % SAMPLE_INTERVAL == 0


def signal_strength(program: List[Instruction]) -> int:
    total = 0
    for tick in run_program(program):
        if is_sample_cycle(tick.cycle):
            total += tick.cycle * tick.x
            logger.debug(f"Cycle {tick.cycle} | X={tick.x} | Total Strength={total}")
    return total


def render_screen(program: List[Instruction], lit: str = "#", dark: str = ".") -> str:
    """Draw the CRT: the pixel of a cycle is lit when the 3-wide sprite covers it."""
    screen: List[List[str]] = [[dark] * SCREEN_WIDTH for _ in range(SCREEN_HEIGHT)]
    for tick in run_program(program):
        index = tick.cycle - 1
        row = index // SCREEN_WIDTH
        if row >= SCREEN_HEIGHT:
            break
        col = index % SCREEN_WIDTH
        if abs(tick.x - col) <= 1:
            screen[row][col] = lit
    return "\n".join("".join(line) for line in screen)


def solve_part1(content: str) -> int:
    return signal_strength(parse_program(content))


def solve_part2(content: str) -> str:
    return render_screen(parse_program(content))
