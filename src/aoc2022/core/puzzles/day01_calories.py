from __future__ import annotations

"""
Day 1: Calorie Counting.

Blank-line separated groups of integers, one group per elf.
"""

import heapq
import logging
import re
from typing import List

from aoc2022.domain.errors import ParseError, StructuralError

logger = logging.getLogger(__name__)

TITLE = "Calorie Counting"

_CALORIES_RE = re.compile(r"^[0-9]+$")


def parse_inventories(content: str) -> List[List[int]]:
    """Split the input into per-elf lists of calorie counts."""
    groups: List[List[int]] = []
    current: List[int] = []

    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            if current:
                groups.append(current)
                current = []
            continue
        if not _CALORIES_RE.match(line):
            raise ParseError("Expected a calorie count", line_no=line_no, line=raw)
        current.append(int(line))

    if current:
        groups.append(current)

    if not groups:
        raise StructuralError("Empty input")
    return groups


def calories_per_elf(content: str) -> List[int]:
    return [sum(group) for group in parse_inventories(content)]


def solve_part1(content: str) -> int:
    totals = calories_per_elf(content)
    logger.debug(f"{len(totals)} elves parsed")
    return max(totals)


def solve_part2(content: str, top: int = 3) -> int:
    return sum(heapq.nlargest(top, calories_per_elf(content)))
