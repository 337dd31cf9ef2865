from __future__ import annotations

"""
Integration tests for the puzzle runner.

Verifies:
1. Successful solves produce an ok SolveResult carrying the answer.
2. Typed puzzle failures become failed results with their category.
3. Configuration values reach the solvers.
4. Fatal invariant violations propagate.
"""

import pytest

from aoc2022.core import runner
from aoc2022.core.runner import run_day, run_puzzle
from aoc2022.domain.errors import InvariantViolation


@pytest.mark.parametrize("day, expected", [
    (1, [24000, 45000]),
    (2, [15, 12]),
    (3, [157, 70]),
    (4, [2, 4]),
    (5, ["CMZ", "MCD"]),
    (6, [[7, 5, 6, 10, 11], [19, 23, 23, 29, 26]]),
    (7, [95437, 24933642]),
    (8, [21, 8]),
    (9, [13, 1]),
    (11, [10605, 2713310158]),
    (12, [31, 29]),
])
def test_run_day_on_examples(example, day: int, expected) -> None:
    results = run_day(day, example(day), source=f"day{day:02d}_example.txt")

    assert [r.ok for r in results] == [True, True]
    assert [r.answer for r in results] == expected
    assert [r.part for r in results] == [1, 2]
    assert results[0].summary["source"] == f"day{day:02d}_example.txt"


def test_single_part(example) -> None:
    results = run_day(7, example(7), parts=(2,))
    assert len(results) == 1
    assert results[0].part == 2


def test_parse_failure_is_reported(example) -> None:
    content = example(2) + "Q Q\n"
    result = run_puzzle(2, 1, content)

    assert result.ok is False
    assert result.error_kind == "parse"
    assert result.answer is None
    assert result.summary["error_line"] == 4
    assert result.summary["error_parse_kind"] == "malformed"


def test_search_failure_is_reported() -> None:
    result = run_puzzle(12, 1, "SazE\n")
    assert result.ok is False
    assert result.error_kind == "search"
    assert "No path found" in result.error


def test_structural_failure_is_reported() -> None:
    result = run_puzzle(8, 1, "")
    assert result.ok is False
    assert result.error_kind == "structure"


def test_cd_into_listed_file_is_a_structural_failure() -> None:
    transcript = "$ cd /\n$ ls\n10 f\n$ cd f\n$ ls\n99999 g\n"
    result = run_puzzle(7, 1, transcript)
    assert result.ok is False
    assert result.error_kind == "structure"
    assert "already a file" in result.error


def test_superscript_digit_is_a_parse_failure() -> None:
    result = run_puzzle(1, 1, "100\n\u00b2\n")
    assert result.ok is False
    assert result.error_kind == "parse"


def test_unknown_day_is_reported() -> None:
    result = run_puzzle(20, 1, "")
    assert result.ok is False
    assert result.error_kind == "registry"


def test_config_reaches_solver(example) -> None:
    config = {"monkey_rounds_short": 1, "directory_size_limit": 1000}

    result = run_puzzle(7, 1, example(7), config)
    assert result.answer == 584
    assert result.summary["options"] == {"size_limit": 1000}


def test_invalid_config_falls_back_to_defaults(example) -> None:
    result = run_puzzle(7, 1, example(7), {"directory_size_limit": -1})
    assert result.ok
    assert result.answer == 95437


def test_invariant_violation_propagates(monkeypatch) -> None:
    def broken(content: str) -> int:
        raise InvariantViolation("impossible state")

    entry = runner.get_puzzle(1)
    monkeypatch.setitem(entry.solvers, 1, broken)

    with pytest.raises(InvariantViolation):
        run_puzzle(1, 1, "1\n")
