from __future__ import annotations

"""
Unit tests for the round-based actor simulation.

Verifies:
1. Items thrown to later actors are handled again in the same round.
2. Known inspection counters with and without relief.
3. The simulation never mutates its input.
"""

from collections import deque
from typing import List

import pytest

from aoc2022.core.analysis.cyclic_simulation import (
    divisor_product,
    monkey_business,
    run_round,
    run_simulation,
)
from aoc2022.core.puzzles.day11_monkeys import parse_monkeys
from aoc2022.domain.simulation_models import Monkey, Operation, RoutingRule


@pytest.fixture
def monkeys(example) -> List[Monkey]:
    return parse_monkeys(example(11))


def test_divisor_product(monkeys: List[Monkey]) -> None:
    assert divisor_product(monkeys) == 23 * 19 * 13 * 17


def test_first_round_with_relief(monkeys: List[Monkey]) -> None:
    state = [m.copy() for m in monkeys]
    run_round(state, relief=3)

    assert list(state[0].items) == [20, 23, 27, 26]
    assert list(state[1].items) == [2080, 25, 167, 207, 401, 1046]
    assert not state[2].items
    assert not state[3].items


def test_items_thrown_forward_are_reprocessed_in_same_round() -> None:
    chain = [
        Monkey(0, deque([1]), Operation("+", None, 1), RoutingRule(1, 1, 1)),
        Monkey(1, deque(), Operation("+", None, 1), RoutingRule(1, 2, 2)),
        Monkey(2, deque(), Operation("+", None, 1), RoutingRule(1, 0, 0)),
    ]
    run_round(chain)

    assert [m.inspected for m in chain] == [1, 1, 1]
    assert list(chain[0].items) == [4]


def test_twenty_rounds_with_relief(monkeys: List[Monkey]) -> None:
    final = run_simulation(monkeys, 20, relief=3)
    assert [m.inspected for m in final] == [101, 95, 7, 105]
    assert monkey_business(final) == 10605


def test_unrelieved_rounds_use_modular_reduction(monkeys: List[Monkey]) -> None:
    final = run_simulation(monkeys, 20, relief=1)
    assert [m.inspected for m in final] == [99, 97, 8, 103]


def test_long_run(monkeys: List[Monkey]) -> None:
    final = run_simulation(monkeys, 10_000, relief=1)
    assert [m.inspected for m in final] == [52166, 47830, 1938, 52013]
    assert monkey_business(final) == 2713310158


def test_simulation_does_not_mutate_input(monkeys: List[Monkey]) -> None:
    before = [(list(m.items), m.inspected) for m in monkeys]
    run_simulation(monkeys, 5, relief=3)
    assert [(list(m.items), m.inspected) for m in monkeys] == before
