from __future__ import annotations

"""
Breadth-First Path Search.

Unit-weight shortest path over a Grid, expanded frontier by frontier. The
start, step and goal rules are passed in as predicates so the same search
answers both "shortest ascent from a fixed start" and "shortest descent to
any low point" by swapping start and goal and inverting the step rule.
"""

import logging
from typing import Callable, Dict, List, TypeVar

from aoc2022.domain.errors import SearchError
from aoc2022.domain.grid_models import Grid, Pos

logger = logging.getLogger(__name__)

T = TypeVar("T")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def shortest_path(
        grid: Grid[T],
        start_predicate: Callable[[T], bool],
        step_predicate: Callable[[T, T], bool],
        goal_predicate: Callable[[T], bool],
) -> List[Pos]:
    """
    Find a shortest path from the start cell to the nearest goal cell.

    The start is the first cell in scan order matching `start_predicate`.
    A neighbour enters the next frontier only if `step_predicate(current,
    neighbour)` holds and it has not been reached before; the first
    discovery of a cell fixes its predecessor.

    Args:
        grid: Grid to search.
        start_predicate: Selects the start cell.
        step_predicate: Whether moving from the first cell to the second is allowed.
        goal_predicate: Selects goal cells.

    Returns:
        List[Pos]: Positions from start to goal, both included. The number
        of steps is len(path) - 1.

    Raises:
        SearchError: No start cell, or the goal is unreachable.
    """
    start = grid.find(start_predicate)
    if start is None:
        raise SearchError("No start found")

    predecessors: Dict[Pos, Pos] = {}
    visited = {start}
    frontier: List[Pos] = [start]
    depth = 0

    while frontier:
        for pos in frontier:
            if goal_predicate(grid[pos]):
                logger.debug(f"Goal {pos} reached after {depth} steps")
                return _rebuild_path(predecessors, start, pos)

        next_frontier: List[Pos] = []
        for pos in frontier:
            current = grid[pos]
            for neighbour, value in grid.neighbours(pos):
                if neighbour in visited or not step_predicate(current, value):
                    continue
                visited.add(neighbour)
                predecessors[neighbour] = pos
                next_frontier.append(neighbour)

        frontier = next_frontier
        depth += 1

    logger.debug(f"Search from {start} exhausted after {depth} frontiers")
    raise SearchError("No path found")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _rebuild_path(predecessors: Dict[Pos, Pos], start: Pos, goal: Pos) -> List[Pos]:
    """Walk predecessor links back from goal to start."""
    path = [goal]
    current = goal
    while current != start:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path
