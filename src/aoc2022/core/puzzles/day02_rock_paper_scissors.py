from __future__ import annotations

"""
Day 2: Rock Paper Scissors.

Each line is `<opponent> <column>`. In part 1 the second column is the shape
to play, in part 2 it is the outcome to reach.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from aoc2022.domain.errors import ParseError, StructuralError

TITLE = "Rock Paper Scissors"

_ROUND_RE = re.compile(r"^([ABC])\s+([XYZ])$")


class Shape(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self) -> int:
        return self.value

    @property
    def beats(self) -> Shape:
        return _BEATS[self]

    @property
    def beaten_by(self) -> Shape:
        return _BEATEN_BY[self]

    def against(self, other: Shape) -> Outcome:
        if self is other:
            return Outcome.DRAW
        return Outcome.WIN if self.beats is other else Outcome.LOSS


class Outcome(Enum):
    LOSS = 0
    DRAW = 3
    WIN = 6

    @property
    def score(self) -> int:
        return self.value


_BEATS = {Shape.ROCK: Shape.SCISSORS, Shape.SCISSORS: Shape.PAPER, Shape.PAPER: Shape.ROCK}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}

_OPPONENT = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
_AS_SHAPE = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
_AS_OUTCOME = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}


@dataclass(frozen=True)
class Round:
    opponent: Shape
    column: str

    def score_as_shape(self) -> int:
        me = _AS_SHAPE[self.column]
        return me.score + me.against(self.opponent).score

    def score_as_outcome(self) -> int:
        outcome = _AS_OUTCOME[self.column]
        return shape_for(self.opponent, outcome).score + outcome.score


def shape_for(opponent: Shape, outcome: Outcome) -> Shape:
    """Shape to play against `opponent` to get `outcome`."""
    if outcome is Outcome.DRAW:
        return opponent
    if outcome is Outcome.WIN:
        return opponent.beaten_by
    return opponent.beats


def parse_rounds(content: str) -> List[Round]:
    rounds: List[Round] = []
    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        match = _ROUND_RE.match(line)
        if not match:
            raise ParseError("Expected '<A|B|C> <X|Y|Z>'", line_no=line_no, line=raw)
        rounds.append(Round(_OPPONENT[match.group(1)], match.group(2)))

    if not rounds:
        raise StructuralError("Empty input")
    return rounds


def solve_part1(content: str) -> int:
    return sum(r.score_as_shape() for r in parse_rounds(content))


def solve_part2(content: str) -> int:
    return sum(r.score_as_outcome() for r in parse_rounds(content))
