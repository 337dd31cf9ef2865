from __future__ import annotations

"""
Puzzle Registry.

Central table of the available days. Each entry binds a day number to its
title, its two solver functions and the configuration keys feeding their
keyword parameters.
"""

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional

from aoc2022.core.puzzles import (
    day01_calories,
    day02_rock_paper_scissors,
    day03_rucksacks,
    day04_camp_cleanup,
    day05_supply_stacks,
    day06_tuning_trouble,
    day07_no_space,
    day08_treetop,
    day09_rope_bridge,
    day10_cathode_ray,
    day11_monkeys,
    day12_hill_climbing,
)
from aoc2022.domain.errors import PuzzleNotFound

Solver = Callable[..., Any]

PARTS = (1, 2)


@dataclass(frozen=True)
class PuzzleEntry:
    """
    Registry record for one day.

    Attributes:
        day: Day number.
        title: Puzzle title.
        solvers: Part number to solver function.
        options: Part number to {solver keyword: configuration key}.
    """
    day: int
    title: str
    solvers: Dict[int, Solver]
    options: Dict[int, Dict[str, str]] = field(default_factory=dict)

    def solver(self, part: int) -> Solver:
        if part not in self.solvers:
            raise PuzzleNotFound(self.day, part)
        return self.solvers[part]

    def solver_kwargs(self, part: int, config: Dict[str, Any]) -> Dict[str, Any]:
        """Resolve the solver keyword arguments for `part` from `config`."""
        mapping = self.options.get(part, {})
        return {kwarg: config[key] for kwarg, key in mapping.items() if key in config}


def _entry(day: int, module: ModuleType, options: Optional[Dict[int, Dict[str, str]]] = None) -> PuzzleEntry:
    return PuzzleEntry(
        day=day,
        title=module.TITLE,
        solvers={1: module.solve_part1, 2: module.solve_part2},
        options=options or {},
    )


_REGISTRY: Dict[int, PuzzleEntry] = {
    entry.day: entry
    for entry in (
        _entry(1, day01_calories),
        _entry(2, day02_rock_paper_scissors),
        _entry(3, day03_rucksacks),
        _entry(4, day04_camp_cleanup),
        _entry(5, day05_supply_stacks),
        _entry(6, day06_tuning_trouble, {
            1: {"marker_size": "packet_marker_size"},
            2: {"marker_size": "message_marker_size"},
        }),
        _entry(7, day07_no_space, {
            1: {"size_limit": "directory_size_limit"},
            2: {"total_space": "disk_total_space", "required_space": "disk_required_space"},
        }),
        _entry(8, day08_treetop),
        _entry(9, day09_rope_bridge, {
            1: {"knots": "rope_knots_short"},
            2: {"knots": "rope_knots_long"},
        }),
        _entry(10, day10_cathode_ray),
        _entry(11, day11_monkeys, {
            1: {"rounds": "monkey_rounds_short", "relief": "monkey_relief"},
            2: {"rounds": "monkey_rounds_long"},
        }),
        _entry(12, day12_hill_climbing),
    )
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_puzzle(day: int) -> PuzzleEntry:
    """
    Look up a registered day.

    Raises:
        PuzzleNotFound: The day has no solver.
    """
    entry = _REGISTRY.get(day)
    if entry is None:
        raise PuzzleNotFound(day)
    return entry


def available_days() -> List[int]:
    return sorted(_REGISTRY)
