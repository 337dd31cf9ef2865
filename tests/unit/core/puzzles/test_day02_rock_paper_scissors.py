from __future__ import annotations

"""
Tests for the rock paper scissors scoring puzzle.
"""

import pytest

from aoc2022.core.puzzles import day02_rock_paper_scissors as day
from aoc2022.core.puzzles.day02_rock_paper_scissors import Outcome, Shape, shape_for
from aoc2022.domain.errors import ParseError


def test_example_answers(example) -> None:
    content = example(2)
    assert day.solve_part1(content) == 15
    assert day.solve_part2(content) == 12


@pytest.mark.parametrize("opponent", list(Shape))
@pytest.mark.parametrize("outcome", list(Outcome))
def test_shape_for_produces_requested_outcome(opponent: Shape, outcome: Outcome) -> None:
    assert shape_for(opponent, outcome).against(opponent) is outcome


def test_invalid_line_is_a_parse_error() -> None:
    with pytest.raises(ParseError):
        day.solve_part1("A Y\nD X\n")
