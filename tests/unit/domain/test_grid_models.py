from __future__ import annotations

"""
Unit tests for the rectangular Grid model.

Verifies structural validation (empty and ragged input), row/column counts
and the bounds-checked neighbourhood.
"""

import pytest

from aoc2022.domain.errors import PuzzleError, StructuralError
from aoc2022.domain.grid_models import Grid, Pos


def test_empty_grid_is_structural_error() -> None:
    with pytest.raises(StructuralError, match="Empty input"):
        Grid([])


@pytest.mark.parametrize("rows", [
    ["abc", "ab"],
    ["a", "ab", "a"],
    ["abcd", "abcd", "abc"],
])
def test_ragged_grid_is_structural_error(rows) -> None:
    with pytest.raises(StructuralError, match="Ragged input"):
        Grid([list(r) for r in rows])


def test_structural_error_is_a_puzzle_error() -> None:
    assert issubclass(StructuralError, PuzzleError)


@pytest.mark.parametrize("rows, cols", [(1, 1), (3, 5), (7, 2)])
def test_shape_matches_input(rows: int, cols: int) -> None:
    grid = Grid([[0] * cols for _ in range(rows)])
    assert grid.shape() == (rows, cols)
    assert len(list(grid.positions())) == rows * cols


def test_neighbours_in_the_middle_follow_fixed_order() -> None:
    grid = Grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert grid.neighbours(Pos(1, 1)) == [
        (Pos(0, 1), 2),
        (Pos(2, 1), 8),
        (Pos(1, 2), 6),
        (Pos(1, 0), 4),
    ]


def test_neighbours_at_corner_are_clipped() -> None:
    grid = Grid([[1, 2], [3, 4]])
    assert grid.neighbours(Pos(0, 0)) == [(Pos(1, 0), 3), (Pos(0, 1), 2)]
    assert grid.neighbours(Pos(1, 1)) == [(Pos(0, 1), 2), (Pos(1, 0), 3)]


def test_neighbours_are_deterministic() -> None:
    grid = Grid([list("abc"), list("def")])
    assert grid.neighbours(Pos(0, 1)) == grid.neighbours(Pos(0, 1))


def test_find_uses_scan_order() -> None:
    grid = Grid([list("xax"), list("aaa")])
    assert grid.find(lambda v: v == "a") == Pos(0, 1)
    assert grid.find(lambda v: v == "z") is None


def test_row_and_column_access() -> None:
    grid = Grid([[1, 2], [3, 4], [5, 6]])
    assert grid.row(1) == (3, 4)
    assert grid.column(1) == (2, 4, 6)
    assert grid[2, 0] == 5
