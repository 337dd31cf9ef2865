from __future__ import annotations

"""
Day 11: Monkey in the Middle.

Blank-line separated monkey blocks; each block is six lines describing the
starting items, the operation, the divisibility test and its two targets.
"""

import logging
import re
from collections import deque
from typing import List, Optional

from aoc2022.core.analysis.cyclic_simulation import monkey_business, run_simulation
from aoc2022.domain.errors import UNEXPECTED_EOF, ParseError, StructuralError
from aoc2022.domain.simulation_models import Monkey, Operation, RoutingRule

logger = logging.getLogger(__name__)

TITLE = "Monkey in the Middle"

_HEADER_RE = re.compile(r"^Monkey (\d+):$")
_ITEMS_RE = re.compile(r"^Starting items:\s*(\d+(?:\s*,\s*\d+)*)?$")
_OPERATION_RE = re.compile(r"^Operation: new = (old|\d+) ([+*]) (old|\d+)$")
_TEST_RE = re.compile(r"^Test: divisible by (\d+)$")
_TRUE_RE = re.compile(r"^If true: throw to monkey (\d+)$")
_FALSE_RE = re.compile(r"^If false: throw to monkey (\d+)$")

BLOCK_PATTERNS = (_HEADER_RE, _ITEMS_RE, _OPERATION_RE, _TEST_RE, _TRUE_RE, _FALSE_RE)

# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def _operand(token: str) -> Optional[int]:
    return None if token == "old" else int(token)


def parse_monkey(lines: List[str], first_line_no: int) -> Monkey:
    """Parse one six-line block; `first_line_no` is used for diagnostics."""
    if len(lines) < len(BLOCK_PATTERNS):
        raise ParseError(
            f"Incomplete monkey block ({len(lines)} of {len(BLOCK_PATTERNS)} lines)",
            line_no=first_line_no + len(lines) - 1,
            line=lines[-1] if lines else "",
            kind=UNEXPECTED_EOF,
        )
    if len(lines) > len(BLOCK_PATTERNS):
        extra = first_line_no + len(BLOCK_PATTERNS)
        raise StructuralError(f"Unexpected line {extra} in monkey block: {lines[len(BLOCK_PATTERNS)]!r}")

    matches = []
    for offset, (pattern, raw) in enumerate(zip(BLOCK_PATTERNS, lines)):
        match = pattern.match(raw.strip())
        if not match:
            raise ParseError("Malformed monkey block line", line_no=first_line_no + offset, line=raw)
        matches.append(match)

    header, items, operation, test, if_true, if_false = matches
    item_values = [int(v) for v in items.group(1).split(",")] if items.group(1) else []

    return Monkey(
        index=int(header.group(1)),
        items=deque(item_values),
        operation=Operation(
            operator=operation.group(2),
            left=_operand(operation.group(1)),
            right=_operand(operation.group(3)),
        ),
        rule=RoutingRule(
            divisor=int(test.group(1)),
            if_true=int(if_true.group(1)),
            if_false=int(if_false.group(1)),
        ),
    )


def parse_monkeys(content: str) -> List[Monkey]:
    monkeys: List[Monkey] = []
    block: List[str] = []
    block_start = 1

    for line_no, raw in enumerate(content.splitlines(), start=1):
        if raw.strip():
            if not block:
                block_start = line_no
            block.append(raw)
        elif block:
            monkeys.append(parse_monkey(block, block_start))
            block = []
    if block:
        monkeys.append(parse_monkey(block, block_start))

    if not monkeys:
        raise StructuralError("Empty input")

    monkeys.sort(key=lambda m: m.index)
    _validate(monkeys)
    return monkeys


def _validate(monkeys: List[Monkey]) -> None:
    """Indexes must be 0..N-1, divisors positive, targets existing and never the thrower."""
    for position, monkey in enumerate(monkeys):
        if monkey.index != position:
            raise StructuralError(f"Monkey indexes must be 0..{len(monkeys) - 1}, found {monkey.index}")
        if monkey.rule.divisor <= 0:
            raise StructuralError(f"Monkey {monkey.index} has a non-positive divisor")
        for target in (monkey.rule.if_true, monkey.rule.if_false):
            if target >= len(monkeys):
                raise StructuralError(f"Monkey {monkey.index} throws to unknown monkey {target}")
            if target == monkey.index:
                raise StructuralError(f"Monkey {monkey.index} throws to itself")

# -----------------------------------------------------------------------------
# SOLVERS
# -----------------------------------------------------------------------------

def solve_part1(content: str, rounds: int = 20, relief: int = 3) -> int:
    monkeys = run_simulation(parse_monkeys(content), rounds, relief=relief)
    logger.debug(f"Inspections: {[m.inspected for m in monkeys]}")
    return monkey_business(monkeys)


def solve_part2(content: str, rounds: int = 10_000) -> int:
    monkeys = run_simulation(parse_monkeys(content), rounds, relief=1)
    logger.debug(f"Inspections: {[m.inspected for m in monkeys]}")
    return monkey_business(monkeys)
