from __future__ import annotations

"""
Cyclic Simulation Data Models.

Actors of the item-throwing simulation: each holds a queue of worry
levels, an arithmetic operation and a divisibility routing rule.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

# -----------------------------------------------------------------------------
# OPERATIONS AND ROUTING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Operation:
    """
    `new = left <operator> right` where an operand of None means `old`.

    Attributes:
        operator: "+" or "*".
        left: Left literal, or None for the old value.
        right: Right literal, or None for the old value.
    """
    operator: str
    left: Optional[int] = None
    right: Optional[int] = None

    def apply(self, old: int) -> int:
        lhs = old if self.left is None else self.left
        rhs = old if self.right is None else self.right
        if self.operator == "+":
            return lhs + rhs
        if self.operator == "*":
            return lhs * rhs
        raise ValueError(f"Unsupported operator: {self.operator!r}")


@dataclass(frozen=True)
class RoutingRule:
    """
    Divisibility test choosing the receiver of a value.

    Attributes:
        divisor: Test modulus.
        if_true: Receiver index when the value is divisible.
        if_false: Receiver index otherwise.
    """
    divisor: int
    if_true: int
    if_false: int

    def route(self, value: int) -> int:
        return self.if_true if value % self.divisor == 0 else self.if_false

# -----------------------------------------------------------------------------
# ACTORS
# -----------------------------------------------------------------------------

@dataclass
class Monkey:
    """
    One actor of the simulation.

    Attributes:
        index: Position in the processing order.
        items: Queue of worry levels waiting to be inspected.
        operation: Transform applied on inspection.
        rule: Routing rule applied after the transform.
        inspected: Number of items inspected so far.
    """
    index: int
    items: Deque[int]
    operation: Operation
    rule: RoutingRule
    inspected: int = field(default=0)

    def route(self, value: int) -> int:
        return self.rule.route(value)

    def copy(self) -> Monkey:
        return Monkey(
            index=self.index,
            items=deque(self.items),
            operation=self.operation,
            rule=self.rule,
            inspected=self.inspected,
        )
