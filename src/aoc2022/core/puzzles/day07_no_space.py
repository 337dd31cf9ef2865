from __future__ import annotations

"""
Day 7: No Space Left On Device.

A terminal transcript (`$ cd`, `$ ls` and listing lines) is classified line
by line into typed records, then replayed into a DirectoryTree.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Union

from aoc2022.domain.errors import ParseError, SearchError, StructuralError
from aoc2022.domain.tree_models import DirectoryTree

logger = logging.getLogger(__name__)

TITLE = "No Space Left On Device"

_CD_RE = re.compile(r"^\$ cd (\S+)$")
_LS_RE = re.compile(r"^\$ ls$")
_DIR_RE = re.compile(r"^dir (\S+)$")
_FILE_RE = re.compile(r"^([0-9]+) (\S+)$")
_DIGITS = "0123456789"

# -----------------------------------------------------------------------------
# LINE RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class ChangeDirectory:
    name: str


@dataclass(frozen=True)
class DirEntry:
    name: str


@dataclass(frozen=True)
class FileEntry:
    size: int
    name: str


TranscriptLine = Union[ListCommand, ChangeDirectory, DirEntry, FileEntry]


def classify_line(line: str, line_no: int = 0) -> TranscriptLine:
    """Map one transcript line to its record type by its leading shape."""
    if line.startswith("$"):
        match = _CD_RE.match(line)
        if match:
            return ChangeDirectory(match.group(1))
        if _LS_RE.match(line):
            return ListCommand()
        raise ParseError("Unknown command", line_no=line_no, line=line)

    if line.startswith("dir "):
        match = _DIR_RE.match(line)
        if match:
            return DirEntry(match.group(1))
    elif line[:1] in _DIGITS:
        match = _FILE_RE.match(line)
        if match:
            return FileEntry(int(match.group(1)), match.group(2))

    raise ParseError("Unrecognised transcript line", line_no=line_no, line=line)


def parse_transcript(content: str) -> List[TranscriptLine]:
    records = [
        classify_line(line.rstrip(), line_no)
        for line_no, line in enumerate(content.splitlines(), start=1)
        if line.strip()
    ]
    if not records:
        raise StructuralError("Empty input")
    return records

# -----------------------------------------------------------------------------
# MODEL CONSTRUCTION
# -----------------------------------------------------------------------------

def build_tree(records: Iterable[TranscriptLine]) -> DirectoryTree:
    tree = DirectoryTree()
    for record in records:
        if isinstance(record, ChangeDirectory):
            tree.change_directory(record.name)
        elif isinstance(record, DirEntry):
            tree.record_entry("dir", record.name)
        elif isinstance(record, FileEntry):
            tree.record_entry("file", record.name, record.size)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tree:\n" + "\n".join(tree.render()))
    return tree


def read_tree(content: str) -> DirectoryTree:
    return build_tree(parse_transcript(content))

# -----------------------------------------------------------------------------
# SOLVERS
# -----------------------------------------------------------------------------

def solve_part1(content: str, size_limit: int = 100_000) -> int:
    tree = read_tree(content)
    sizes = (tree.total_size(d) for d in tree.all_directories())
    return sum(s for s in sizes if s <= size_limit)


def solve_part2(
        content: str,
        total_space: int = 70_000_000,
        required_space: int = 30_000_000,
) -> int:
    tree = read_tree(content)
    used = tree.total_size()
    to_free = max(0, required_space - (total_space - used))
    logger.debug(f"Used {used}, need to free {to_free}")

    candidates = [s for s in (tree.total_size(d) for d in tree.all_directories()) if s >= to_free]
    if not candidates:
        raise SearchError("No directory found")
    return min(candidates)
