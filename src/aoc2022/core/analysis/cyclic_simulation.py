from __future__ import annotations

"""
Round-Based Actor Simulation.

Runs the item-throwing simulation in fixed index order. An actor drains its
own queue during its turn; items it throws to higher-indexed actors are
inspected again later in the same round.
"""

import heapq
import logging
from math import prod
from typing import List, Sequence

from aoc2022.domain.simulation_models import Monkey

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def divisor_product(monkeys: Sequence[Monkey]) -> int:
    """Product of every routing modulus; reducing by it keeps all routing decisions."""
    return prod(m.rule.divisor for m in monkeys)


def run_round(monkeys: List[Monkey], relief: int = 1, modulus: int = 0) -> None:
    """
    Play one round in place.

    For each actor in index order, every queued value is optionally reduced
    modulo `modulus`, transformed, divided by `relief` and pushed to the
    queue of the receiver chosen by the routing rule.

    Args:
        monkeys: Actors, indexed by position.
        relief: Divisor applied after the operation (1 disables it).
        modulus: Reduction modulus applied right after dequeue (0 disables it).
    """
    for monkey in monkeys:
        while monkey.items:
            value = monkey.items.popleft()
            monkey.inspected += 1
            if modulus:
                value %= modulus
            value = monkey.operation.apply(value)
            if relief > 1:
                value //= relief
            monkeys[monkey.route(value)].items.append(value)


def run_simulation(monkeys: Sequence[Monkey], rounds: int, relief: int = 1) -> List[Monkey]:
    """
    Run `rounds` rounds on a copy of the actors.

    Modulo reduction by the divisor product is applied only when no relief
    division is configured: integer division does not commute with the
    reduction, while without division the values would otherwise grow
    without bound.

    Returns:
        List[Monkey]: The actors after the last round.
    """
    state = [m.copy() for m in monkeys]
    modulus = divisor_product(state) if relief <= 1 else 0

    logger.debug(f"Simulating {rounds} rounds for {len(state)} actors (relief={relief}, modulus={modulus})")
    for _ in range(rounds):
        run_round(state, relief=relief, modulus=modulus)

    return state


def monkey_business(monkeys: Sequence[Monkey]) -> int:
    """Product of the two highest inspection counters."""
    top = heapq.nlargest(2, (m.inspected for m in monkeys))
    return prod(top)
