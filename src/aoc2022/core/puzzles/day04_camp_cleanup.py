from __future__ import annotations

"""
Day 4: Camp Cleanup.

Each line is a pair of inclusive section ranges `a-b,c-d`.
"""

import re
from dataclasses import dataclass
from typing import List

from aoc2022.domain.errors import ParseError, StructuralError

TITLE = "Camp Cleanup"

_PAIR_RE = re.compile(r"^(\d+)-(\d+),(\d+)-(\d+)$")


@dataclass(frozen=True)
class SectionRange:
    start: int
    end: int

    def contains(self, other: SectionRange) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: SectionRange) -> bool:
        return self.start <= other.end and other.start <= self.end


@dataclass(frozen=True)
class ElfPair:
    left: SectionRange
    right: SectionRange

    def overlap_fully(self) -> bool:
        return self.left.contains(self.right) or self.right.contains(self.left)

    def overlap_partially(self) -> bool:
        return self.left.overlaps(self.right)


def parse_pairs(content: str) -> List[ElfPair]:
    pairs: List[ElfPair] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        match = _PAIR_RE.match(line)
        if not match:
            raise ParseError("Expected 'a-b,c-d'", line_no=line_no, line=raw)
        a, b, c, d = (int(g) for g in match.groups())
        if a > b or c > d:
            raise ParseError("Range start is after its end", line_no=line_no, line=raw)
        pairs.append(ElfPair(SectionRange(a, b), SectionRange(c, d)))

    if not pairs:
        raise StructuralError("Empty input")
    return pairs


def solve_part1(content: str) -> int:
    return sum(1 for pair in parse_pairs(content) if pair.overlap_fully())


def solve_part2(content: str) -> int:
    return sum(1 for pair in parse_pairs(content) if pair.overlap_partially())
