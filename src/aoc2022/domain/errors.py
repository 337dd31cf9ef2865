from __future__ import annotations

"""
Puzzle Error Taxonomy.

Every recoverable failure raised by a parser, model or solver derives from
PuzzleError so the runner can turn it into a failed SolveResult. Unreachable
simulation states raise InvariantViolation instead, which is not a
PuzzleError and aborts the run.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# PARSE ERROR KINDS
# -----------------------------------------------------------------------------

MALFORMED = "malformed"
UNEXPECTED_EOF = "unexpected_eof"
RAGGED = "ragged"

# -----------------------------------------------------------------------------
# RECOVERABLE ERRORS
# -----------------------------------------------------------------------------

class PuzzleError(Exception):
    """Base class for every typed failure returned to the runner."""

    category = "puzzle"


class ParseError(PuzzleError):
    """
    A line or token could not be parsed.

    Attributes:
        line_no: 1-based line number of the offending line (0 if unknown).
        line: Raw text of the offending line or segment.
        reason: Human readable description.
        kind: One of MALFORMED, UNEXPECTED_EOF or RAGGED.
    """

    category = "parse"

    def __init__(self, reason: str, *, line_no: int = 0, line: str = "", kind: str = MALFORMED) -> None:
        self.reason = reason
        self.line_no = line_no
        self.line = line
        self.kind = kind
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line_no:
            return f"line {self.line_no}: {self.reason} ({self.line!r})"
        if self.line:
            return f"{self.reason} ({self.line!r})"
        return self.reason


class StructuralError(PuzzleError):
    """Input tokenised fine but its overall shape is invalid (empty, ragged, unbalanced)."""

    category = "structure"


class SearchError(PuzzleError):
    """A required start, goal, path or unique element does not exist."""

    category = "search"


class SimulationError(PuzzleError):
    """A step of a simulation cannot be applied to the current state."""

    category = "simulation"


class PuzzleNotFound(PuzzleError):
    """No solver is registered for the requested day or part."""

    category = "registry"

    def __init__(self, day: int, part: Optional[int] = None) -> None:
        self.day = day
        self.part = part
        target = f"day {day}" if part is None else f"day {day} part {part}"
        super().__init__(f"No solver registered for {target}")

# -----------------------------------------------------------------------------
# FATAL ERRORS
# -----------------------------------------------------------------------------

class InvariantViolation(RuntimeError):
    """An internal modelling invariant was broken; never recovered from."""
