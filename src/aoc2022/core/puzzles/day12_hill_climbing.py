from __future__ import annotations

"""
Day 12: Hill Climbing Algorithm.

Heightmap of letters a-z with `S` (start, height a) and `E` (end, height z).
Part 1 climbs from S to E, part 2 walks down from E to the nearest cell of
height a; both are the same breadth-first search with different rules.
"""

from dataclasses import dataclass
from typing import List

from aoc2022.core.analysis.path_search import shortest_path
from aoc2022.domain.errors import RAGGED, ParseError
from aoc2022.domain.grid_models import Grid, Pos

TITLE = "Hill Climbing Algorithm"

START_MARKER = "S"
END_MARKER = "E"
MIN_HEIGHT = 0
MAX_HEIGHT = ord("z") - ord("a")


@dataclass(frozen=True)
class Cell:
    marker: str

    @property
    def height(self) -> int:
        if self.marker == START_MARKER:
            return MIN_HEIGHT
        if self.marker == END_MARKER:
            return MAX_HEIGHT
        return ord(self.marker) - ord("a")

    @property
    def is_start(self) -> bool:
        return self.marker == START_MARKER

    @property
    def is_end(self) -> bool:
        return self.marker == END_MARKER


def parse_topology(content: str) -> Grid[Cell]:
    rows: List[List[Cell]] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        for char in line:
            if not ("a" <= char <= "z" or char in (START_MARKER, END_MARKER)):
                raise ParseError(f"Invalid cell '{char}'", line_no=line_no, line=raw)
        if rows and len(line) != len(rows[0]):
            raise ParseError(
                f"Row has {len(line)} cells, expected {len(rows[0])}",
                line_no=line_no, line=raw, kind=RAGGED,
            )
        rows.append([Cell(c) for c in line])
    return Grid(rows)


def can_climb(current: Cell, neighbour: Cell) -> bool:
    return neighbour.height <= current.height + 1


def can_descend(current: Cell, neighbour: Cell) -> bool:
    return neighbour.height >= current.height - 1


def ascent(content: str) -> List[Pos]:
    return shortest_path(
        parse_topology(content),
        start_predicate=lambda c: c.is_start,
        step_predicate=can_climb,
        goal_predicate=lambda c: c.is_end,
    )


def descent(content: str) -> List[Pos]:
    return shortest_path(
        parse_topology(content),
        start_predicate=lambda c: c.is_end,
        step_predicate=can_descend,
        goal_predicate=lambda c: c.height == MIN_HEIGHT,
    )


def solve_part1(content: str) -> int:
    return len(ascent(content)) - 1


def solve_part2(content: str) -> int:
    return len(descent(content)) - 1
