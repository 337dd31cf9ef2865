from __future__ import annotations

"""
Day 8: Treetop Tree House.

A rectangular grid of digit heights. Part 1 counts trees visible from
outside the grid, part 2 finds the best scenic score.
"""

from typing import Iterable, List, Tuple

from aoc2022.domain.errors import RAGGED, ParseError
from aoc2022.domain.grid_models import Grid

TITLE = "Treetop Tree House"

_DIGITS = "0123456789"


def parse_forest(content: str) -> Grid[int]:
    rows: List[List[int]] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        bad = next((c for c in line if c not in _DIGITS), None)
        if bad is not None:
            raise ParseError(f"Invalid number '{bad}'", line_no=line_no, line=raw)
        if rows and len(line) != len(rows[0]):
            raise ParseError(
                f"Row has {len(line)} trees, expected {len(rows[0])}",
                line_no=line_no, line=raw, kind=RAGGED,
            )
        rows.append([int(c) for c in line])
    return Grid(rows)


def lines_of_sight(forest: Grid[int], row: int, col: int) -> Tuple[Tuple[int, ...], ...]:
    """Heights seen from (row, col) looking up, down, right and left, nearest first."""
    line = forest.row(row)
    column = forest.column(col)
    return (
        tuple(reversed(column[:row])),
        column[row + 1:],
        line[col + 1:],
        tuple(reversed(line[:col])),
    )


def viewing_distance(height: int, trees: Iterable[int]) -> int:
    count = 0
    for tree in trees:
        count += 1
        if tree >= height:
            break
    return count


def is_visible(forest: Grid[int], row: int, col: int) -> bool:
    height = forest[row, col]
    return any(all(t < height for t in sight) for sight in lines_of_sight(forest, row, col))


def scenic_score(forest: Grid[int], row: int, col: int) -> int:
    height = forest[row, col]
    score = 1
    for sight in lines_of_sight(forest, row, col):
        score *= viewing_distance(height, sight)
    return score


def solve_part1(content: str) -> int:
    forest = parse_forest(content)
    return sum(1 for pos in forest.positions() if is_visible(forest, pos.row, pos.col))


def solve_part2(content: str) -> int:
    forest = parse_forest(content)
    return max(scenic_score(forest, pos.row, pos.col) for pos in forest.positions())
