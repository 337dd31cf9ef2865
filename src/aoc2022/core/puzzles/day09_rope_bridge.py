from __future__ import annotations

"""
Day 9: Rope Bridge.

The head of a rope follows `<U|D|L|R> <steps>` commands one step at a time
and every following knot reacts to the offset of the knot ahead of it.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Set

from aoc2022.domain.errors import InvariantViolation, ParseError, StructuralError

logger = logging.getLogger(__name__)

TITLE = "Rope Bridge"

_COMMAND_RE = re.compile(r"^([UDLR])\s+(\d+)$")


class Vec(NamedTuple):
    x: int
    y: int

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)


ORIGIN = Vec(0, 0)

DIRECTIONS: Dict[str, Vec] = {
    "U": Vec(0, 1),
    "D": Vec(0, -1),
    "L": Vec(-1, 0),
    "R": Vec(1, 0),
}


def _follow_table() -> Dict[Vec, Vec]:
    """Offset of the knot ahead -> move of the following knot."""
    table: Dict[Vec, Vec] = {}
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            table[Vec(dx, dy)] = ORIGIN
    for diff in ((0, 2), (0, -2), (2, 0), (-2, 0)):
        table[Vec(*diff)] = Vec(diff[0] // 2, diff[1] // 2)
    for sx in (1, -1):
        for sy in (1, -1):
            for diff in ((2 * sx, sy), (sx, 2 * sy), (2 * sx, 2 * sy)):
                table[Vec(*diff)] = Vec(sx, sy)
    return table


FOLLOW: Dict[Vec, Vec] = _follow_table()


@dataclass(frozen=True)
class Command:
    direction: str
    steps: int

    def unit_moves(self) -> Iterator[Vec]:
        delta = DIRECTIONS[self.direction]
        for _ in range(self.steps):
            yield delta


class Rope:
    """A chain of knots, all starting at the origin."""

    def __init__(self, knots: int) -> None:
        if knots < 1:
            raise ValueError("A rope needs at least one knot")
        self.knots: List[Vec] = [ORIGIN] * knots

    @property
    def tail(self) -> Vec:
        return self.knots[-1]

    def move_head(self, delta: Vec) -> None:
        self.knots[0] = self.knots[0] + delta
        for i in range(1, len(self.knots)):
            diff = self.knots[i - 1] - self.knots[i]
            step = FOLLOW.get(diff)
            if step is None:
                raise InvariantViolation(f"Unhandled knot offset {tuple(diff)} at knot {i}")
            self.knots[i] = self.knots[i] + step


def parse_commands(content: str) -> List[Command]:
    commands: List[Command] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        match = _COMMAND_RE.match(line)
        if not match:
            raise ParseError("Expected '<U|D|L|R> <steps>'", line_no=line_no, line=raw)
        commands.append(Command(match.group(1), int(match.group(2))))

    if not commands:
        raise StructuralError("Empty input")
    return commands


def tail_positions(commands: List[Command], knots: int) -> Set[Vec]:
    rope = Rope(knots)
    visited = {rope.tail}
    for command in commands:
        for delta in command.unit_moves():
            rope.move_head(delta)
            visited.add(rope.tail)
    logger.debug(f"{knots} knots: tail visited {len(visited)} positions")
    return visited


def solve_part1(content: str, knots: int = 2) -> int:
    return len(tail_positions(parse_commands(content), knots))


def solve_part2(content: str, knots: int = 10) -> int:
    return len(tail_positions(parse_commands(content), knots))
