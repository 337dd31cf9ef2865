from __future__ import annotations

"""
Puzzle Runner.

Coordinates a single solve: validates the configuration, looks the day up
in the registry, calls the solver with its configured parameters and wraps
the outcome in a SolveResult. Typed puzzle failures become failed results;
anything else (including InvariantViolation) propagates to the caller.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from aoc2022.core.registry import PARTS, get_puzzle
from aoc2022.core.validator import validate_config
from aoc2022.domain.errors import ParseError, PuzzleError
from aoc2022.domain.result_models import (
    SolveResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_puzzle(
        day: int,
        part: int,
        content: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        source: str = "",
) -> SolveResult:
    """
    Solve one part of one day.

    Args:
        day: Puzzle day.
        part: 1 or 2.
        content: Full puzzle input text.
        config: Raw configuration (validated here); defaults when None.
        source: Where the input came from, recorded in the summary.

    Returns:
        SolveResult: Success with the answer, or failure with the error.
    """
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    summary: Dict[str, Any] = {
        "source": source,
        "input_lines": len(content.splitlines()),
    }

    try:
        entry = get_puzzle(day)
        solver = entry.solver(part)
    except PuzzleError as e:
        logger.error(str(e))
        return create_error_result(day, part, str(e), error_kind=e.category, summary_extra=summary)

    kwargs = entry.solver_kwargs(part, cfg)
    if kwargs:
        summary["options"] = kwargs

    logger.info(f"Day {day} part {part}: {entry.title}")
    started = time.perf_counter()
    try:
        answer = solver(content, **kwargs)
    except PuzzleError as e:
        elapsed = (time.perf_counter() - started) * 1000
        if isinstance(e, ParseError):
            summary["error_line"] = e.line_no
            summary["error_parse_kind"] = e.kind
        logger.error(f"Day {day} part {part} failed ({e.category}): {e}")
        return create_error_result(
            day, part, str(e),
            error_kind=e.category,
            title=entry.title,
            elapsed_ms=elapsed,
            summary_extra=summary,
        )

    elapsed = (time.perf_counter() - started) * 1000
    logger.debug(f"Day {day} part {part} solved in {elapsed:.2f} ms")
    return create_success_result(
        day, part, answer,
        title=entry.title,
        elapsed_ms=elapsed,
        summary_extra=summary,
    )


def run_day(
        day: int,
        content: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        parts: Sequence[int] = PARTS,
        source: str = "",
) -> List[SolveResult]:
    """Solve the requested parts of a day, in order."""
    return [run_puzzle(day, part, content, config, source=source) for part in parts]
