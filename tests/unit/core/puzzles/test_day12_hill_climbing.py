from __future__ import annotations

"""
Tests for the heightmap path finding puzzle.
"""

import pytest

from aoc2022.core.puzzles import day12_hill_climbing as day
from aoc2022.core.puzzles.day12_hill_climbing import Cell
from aoc2022.domain.errors import RAGGED, ParseError, SearchError


def test_example_answers(example) -> None:
    content = example(12)
    assert day.solve_part1(content) == 31
    assert day.solve_part2(content) == 29


def test_marker_heights() -> None:
    assert Cell("S").height == Cell("a").height == 0
    assert Cell("E").height == Cell("z").height == 25


def test_climb_and_descend_are_mirrors() -> None:
    low, high = Cell("a"), Cell("c")
    assert not day.can_climb(low, high)
    assert day.can_climb(high, low)
    assert day.can_descend(low, high)
    assert not day.can_descend(high, low)


def test_ascent_path_endpoints(example) -> None:
    grid = day.parse_topology(example(12))
    path = day.ascent(example(12))
    assert grid[path[0]].is_start
    assert grid[path[-1]].is_end


def test_descent_is_never_longer_than_ascent(example) -> None:
    assert day.solve_part2(example(12)) <= day.solve_part1(example(12))


def test_unreachable_end() -> None:
    with pytest.raises(SearchError, match="No path found"):
        day.solve_part1("SazE\n")


def test_missing_start() -> None:
    with pytest.raises(SearchError, match="No start found"):
        day.solve_part1("abcE\n")


def test_invalid_cell() -> None:
    with pytest.raises(ParseError):
        day.solve_part1("Sab1E\n")


def test_ragged_heightmap() -> None:
    with pytest.raises(ParseError) as info:
        day.parse_topology("Sab\n\nabc\nabE\nab\n")
    assert info.value.kind == RAGGED
    assert info.value.line_no == 5
    assert info.value.line == "ab"
