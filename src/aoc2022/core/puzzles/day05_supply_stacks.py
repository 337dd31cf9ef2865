from __future__ import annotations

"""
Day 5: Supply Stacks.

Input is a crate diagram, a line of stack labels, a blank separator and a
list of `move N from A to B` instructions. The reader walks the lines with
an explicit state (diagram, separator, moves). Moves are applied to
immutable snapshots so a failed move never leaves half-applied state.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from aoc2022.domain.errors import (
    UNEXPECTED_EOF,
    ParseError,
    SimulationError,
    StructuralError,
)

logger = logging.getLogger(__name__)

TITLE = "Supply Stacks"

_MOVE_RE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")
_LABELS_RE = re.compile(r"^\s*\d+(\s+\d+)*\s*$")

Stacks = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class Move:
    count: int
    source: int
    target: int


class _ReadState(Enum):
    DIAGRAM = auto()
    SEPARATOR = auto()
    MOVES = auto()

# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def parse_crate_row(line: str, line_no: int = 0) -> List[Optional[str]]:
    """Split a diagram row into 4-character cells, None for an empty slot."""
    cells: List[Optional[str]] = []
    for offset in range(0, len(line), 4):
        chunk = line[offset:offset + 4]
        if not chunk.strip():
            cells.append(None)
        elif len(chunk) >= 3 and chunk[0] == "[" and chunk[2] == "]" and chunk[3:].strip() == "":
            cells.append(chunk[1])
        else:
            raise ParseError(f"Invalid crate {chunk!r}", line_no=line_no, line=line)
    return cells


def build_stacks(rows: List[List[Optional[str]]], count: int) -> Stacks:
    """Turn top-to-bottom diagram rows into bottom-to-top stacks."""
    stacks: List[List[str]] = [[] for _ in range(count)]
    for row in reversed(rows):
        if len(row) > count:
            raise StructuralError(f"Diagram row has {len(row)} columns but only {count} stacks are labelled")
        for index, crate in enumerate(row):
            if crate is not None:
                stacks[index].append(crate)
    return tuple(tuple(s) for s in stacks)


def parse_move(line: str, line_no: int = 0) -> Move:
    match = _MOVE_RE.match(line.strip())
    if not match:
        raise ParseError("Invalid move", line_no=line_no, line=line)
    count, source, target = (int(g) for g in match.groups())
    return Move(count, source, target)


def parse_input(content: str) -> Tuple[Stacks, List[Move]]:
    rows: List[List[Optional[str]]] = []
    stack_count = 0
    moves: List[Move] = []
    state = _ReadState.DIAGRAM

    for line_no, line in enumerate(content.splitlines(), start=1):
        if state is _ReadState.DIAGRAM:
            if line.startswith("[") or line.startswith("    "):
                rows.append(parse_crate_row(line, line_no))
            elif _LABELS_RE.match(line):
                stack_count = len(line.split())
                state = _ReadState.SEPARATOR
            else:
                raise ParseError("Expected a crate row or the stack labels", line_no=line_no, line=line)
        elif state is _ReadState.SEPARATOR:
            if line.strip():
                raise ParseError("Expected a blank line after the stack labels", line_no=line_no, line=line)
            state = _ReadState.MOVES
        elif line.strip():
            moves.append(parse_move(line, line_no))

    if state is _ReadState.DIAGRAM:
        if not rows:
            raise StructuralError("Empty input")
        raise ParseError("Missing stack labels", kind=UNEXPECTED_EOF)

    return build_stacks(rows, stack_count), moves

# -----------------------------------------------------------------------------
# CRANES
# -----------------------------------------------------------------------------

def apply_move(stacks: Stacks, move: Move, *, keep_order: bool) -> Stacks:
    """
    Return new stacks with `move` applied.

    Args:
        stacks: Current stacks, bottom to top.
        move: Instruction with 1-based stack numbers.
        keep_order: False moves crates one at a time (reversing them),
            True moves them as a batch.

    Raises:
        SimulationError: Unknown stack or not enough crates.
    """
    for ref in (move.source, move.target):
        if not 1 <= ref <= len(stacks):
            raise SimulationError(f"Invalid stack {ref} referenced in {move}")

    source = stacks[move.source - 1]
    if len(source) < move.count:
        raise SimulationError(f"Impossible to apply {move} on stack {list(source)}")

    split = len(source) - move.count
    moving = source[split:] if keep_order else tuple(reversed(source[split:]))

    updated = list(stacks)
    updated[move.source - 1] = source[:split]
    updated[move.target - 1] = stacks[move.target - 1] + moving
    return tuple(updated)


def render_stacks(stacks: Stacks) -> str:
    """Draw stacks in the diagram format of the input."""
    height = max((len(s) for s in stacks), default=0)
    lines = []
    for level in range(height - 1, -1, -1):
        cells = [f"[{s[level]}]" if level < len(s) else "   " for s in stacks]
        lines.append(" ".join(cells))
    lines.append(" ".join(f" {i + 1} " for i in range(len(stacks))))
    return "\n".join(lines)


def top_crates(stacks: Stacks) -> str:
    return "".join(s[-1] for s in stacks if s)


def _run(content: str, keep_order: bool) -> str:
    stacks, moves = parse_input(content)
    for step, move in enumerate(moves, start=1):
        stacks = apply_move(stacks, move, keep_order=keep_order)
        logger.debug(f"Step {step} - {move}:\n{render_stacks(stacks)}")
    return top_crates(stacks)


def solve_part1(content: str) -> str:
    return _run(content, keep_order=False)


def solve_part2(content: str) -> str:
    return _run(content, keep_order=True)
