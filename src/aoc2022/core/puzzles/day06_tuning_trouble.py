from __future__ import annotations

"""
Day 6: Tuning Trouble.

Every input line is a datastream; the answer for a line is the number of
characters read when the last `size` characters first become distinct.
"""

from typing import Dict, List

from aoc2022.domain.errors import SearchError, StructuralError

TITLE = "Tuning Trouble"


def find_marker(stream: str, size: int) -> int:
    """
    End position of the first window of `size` distinct characters.

    Runs in one pass with a sliding window and a last-seen index per char.

    Raises:
        SearchError: The stream has no such window.
    """
    if size <= 0:
        raise ValueError("Marker size must be positive")

    last_seen: Dict[str, int] = {}
    window_start = 0
    for index, char in enumerate(stream):
        previous = last_seen.get(char)
        if previous is not None and previous >= window_start:
            window_start = previous + 1
        last_seen[char] = index
        if index - window_start + 1 == size:
            return index + 1

    raise SearchError(f"No marker of size {size} found in '{stream}'")


def _streams(content: str) -> List[str]:
    streams = [line.strip() for line in content.splitlines() if line.strip()]
    if not streams:
        raise StructuralError("Empty input")
    return streams


def solve_part1(content: str, marker_size: int = 4) -> List[int]:
    return [find_marker(s, marker_size) for s in _streams(content)]


def solve_part2(content: str, marker_size: int = 14) -> List[int]:
    return [find_marker(s, marker_size) for s in _streams(content)]
