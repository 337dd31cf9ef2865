from __future__ import annotations

"""
Tests for the calorie counting puzzle.
"""

import pytest

from aoc2022.core.puzzles import day01_calories as day
from aoc2022.domain.errors import ParseError, StructuralError


def test_example_answers(example) -> None:
    content = example(1)
    assert day.solve_part1(content) == 24000
    assert day.solve_part2(content) == 45000


def test_groups_are_split_on_blank_lines(example) -> None:
    assert day.calories_per_elf(example(1)) == [6000, 4000, 11000, 24000, 10000]


def test_consecutive_blank_lines_do_not_create_empty_groups() -> None:
    assert day.parse_inventories("1\n\n\n\n2\n") == [[1], [2]]


def test_top_is_configurable(example) -> None:
    assert day.solve_part2(example(1), top=1) == day.solve_part1(example(1))


def test_non_numeric_line_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as info:
        day.solve_part1("100\nabc\n")
    assert info.value.line_no == 2


def test_empty_input_is_a_structural_error() -> None:
    with pytest.raises(StructuralError):
        day.solve_part1("\n\n")


@pytest.mark.parametrize("line", ["²", "٣", "+5", "1_000"])
def test_non_ascii_or_signed_digits_are_parse_errors(line: str) -> None:
    with pytest.raises(ParseError) as info:
        day.solve_part1(f"100\n{line}\n")
    assert info.value.line_no == 2
    assert info.value.line == line
