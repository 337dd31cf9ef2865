from __future__ import annotations

"""
Tests for the tree visibility puzzle.
"""

import pytest

from aoc2022.core.puzzles import day08_treetop as day
from aoc2022.domain.errors import RAGGED, ParseError


def test_example_answers(example) -> None:
    content = example(8)
    assert day.solve_part1(content) == 21
    assert day.solve_part2(content) == 8


def test_scenic_scores(example) -> None:
    forest = day.parse_forest(example(8))
    assert day.scenic_score(forest, 1, 2) == 4
    assert day.scenic_score(forest, 3, 2) == 8
    assert day.scenic_score(forest, 0, 0) == 0


def test_edges_are_always_visible(example) -> None:
    forest = day.parse_forest(example(8))
    rows, cols = forest.shape()
    for pos in forest.positions():
        if pos.row in (0, rows - 1) or pos.col in (0, cols - 1):
            assert day.is_visible(forest, pos.row, pos.col)


def test_viewing_distance_stops_at_blocking_tree() -> None:
    assert day.viewing_distance(5, [3, 5, 3]) == 2
    assert day.viewing_distance(5, [1, 2]) == 2
    assert day.viewing_distance(5, []) == 0


def test_invalid_digit() -> None:
    with pytest.raises(ParseError, match="Invalid number 'x'"):
        day.solve_part1("123\n1x3\n")


def test_ragged_forest() -> None:
    with pytest.raises(ParseError) as info:
        day.solve_part1("123\n12\n")
    assert info.value.kind == RAGGED
    assert info.value.line_no == 2


def test_ragged_row_reports_source_line_after_blank_lines() -> None:
    with pytest.raises(ParseError) as info:
        day.parse_forest("123\n\n456\n78\n")
    assert info.value.kind == RAGGED
    assert info.value.line_no == 4
    assert info.value.line == "78"


@pytest.mark.parametrize("char", ["\u00b2", "\u0663"])
def test_non_ascii_digit_is_invalid(char: str) -> None:
    with pytest.raises(ParseError, match=f"Invalid number '{char}'") as info:
        day.solve_part1(f"12\n1{char}\n")
    assert info.value.line_no == 2
