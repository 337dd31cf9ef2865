from __future__ import annotations

"""
Day 3: Rucksack Reorganization.

Each line is a rucksack whose two halves are its compartments. Part 1 sums
the priority of the single item type found in both halves, part 2 the
priority of the single badge shared by each group of three rucksacks.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Set

from aoc2022.domain.errors import ParseError, SearchError, StructuralError

logger = logging.getLogger(__name__)

TITLE = "Rucksack Reorganization"

GROUP_SIZE = 3


@dataclass(frozen=True)
class Rucksack:
    first: str
    second: str

    @property
    def items(self) -> str:
        return self.first + self.second


def priority(item: str) -> int:
    """a-z -> 1-26, A-Z -> 27-52."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"Not an item: {item!r}")


def common_item(collections: Sequence[Iterable[str]]) -> str:
    """
    The unique item type present in every collection.

    Raises:
        SearchError: No shared item, or more than one.
    """
    shared: Set[str] = set(collections[0])
    for other in collections[1:]:
        shared &= set(other)

    if not shared:
        raise SearchError("No common item found")
    if len(shared) > 1:
        raise SearchError(f"Too many common items found: {sorted(shared)}")
    return shared.pop()


def parse_rucksacks(content: str) -> List[Rucksack]:
    rucksacks: List[Rucksack] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if not line.isalpha() or not line.isascii():
            raise ParseError("Rucksack items must be ASCII letters", line_no=line_no, line=raw)
        if len(line) % 2:
            raise ParseError("Rucksack has an odd number of items", line_no=line_no, line=raw)
        half = len(line) // 2
        rucksacks.append(Rucksack(line[:half], line[half:]))

    if not rucksacks:
        raise StructuralError("Empty input")
    return rucksacks


def solve_part1(content: str) -> int:
    total = 0
    for rucksack in parse_rucksacks(content):
        try:
            total += priority(common_item([rucksack.first, rucksack.second]))
        except SearchError as e:
            raise SearchError(f"Invalid rucksack {rucksack.items!r}: {e}") from e
    return total


def solve_part2(content: str) -> int:
    rucksacks = parse_rucksacks(content)
    if len(rucksacks) % GROUP_SIZE:
        raise StructuralError(
            f"{len(rucksacks)} rucksacks cannot be split into groups of {GROUP_SIZE}"
        )

    total = 0
    for start in range(0, len(rucksacks), GROUP_SIZE):
        group = rucksacks[start:start + GROUP_SIZE]
        try:
            total += priority(common_item([r.items for r in group]))
        except SearchError as e:
            raise SearchError(f"Invalid group starting at rucksack {start + 1}: {e}") from e

    logger.debug(f"{len(rucksacks) // GROUP_SIZE} groups processed")
    return total
