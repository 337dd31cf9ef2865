from __future__ import annotations

"""
Solve Result Domain Models.

Defines the immutable result object exchanged between the runner and the
interface layer, together with the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of running one part of one day.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Category of the failure (parse, structure, search...).
        day: Puzzle day (1-based).
        part: Puzzle part (1 or 2).
        title: Puzzle title.
        answer: Computed answer; int, str or list depending on the day.
        elapsed_ms: Wall time spent in the solver.
        summary: Extra metadata (input path, line count, options).
    """
    ok: bool
    error: str
    day: int
    part: int
    title: str = ""
    error_kind: str = ""
    answer: Any = None
    elapsed_ms: float = 0.0
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        day: int,
        part: int,
        answer: Any,
        *,
        title: str = "",
        elapsed_ms: float = 0.0,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> SolveResult:
    """
    Create a successful result instance.

    Args:
        day: Puzzle day.
        part: Puzzle part.
        answer: Value returned by the solver.
        title: Puzzle title.
        elapsed_ms: Solver wall time.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        SolveResult: An immutable success result.
    """
    return SolveResult(
        ok=True,
        error="",
        day=day,
        part=part,
        title=title,
        answer=answer,
        elapsed_ms=elapsed_ms,
        summary=summary_extra or {},
    )


def create_error_result(
        day: int,
        part: int,
        error: str,
        *,
        error_kind: str = "puzzle",
        title: str = "",
        elapsed_ms: float = 0.0,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> SolveResult:
    """
    Create a failed result instance.

    Args:
        day: Puzzle day.
        part: Puzzle part.
        error: Detailed error description.
        error_kind: Error category (see aoc2022.domain.errors).
        title: Puzzle title, when known.
        elapsed_ms: Time spent before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        SolveResult: An immutable error result.
    """
    return SolveResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        day=day,
        part=part,
        title=title,
        elapsed_ms=elapsed_ms,
        summary=summary_extra or {},
    )
