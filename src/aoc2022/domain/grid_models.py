from __future__ import annotations

"""
Grid Data Models.

Immutable rectangular grids addressed by (row, column), zero based and row
major, with bounds-checked 4-directional neighbourhood queries.
"""

from typing import Callable, Generic, Iterator, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from aoc2022.domain.errors import StructuralError

T = TypeVar("T")

# Fixed neighbour order: up, down, right, left
NEIGHBOUR_DELTAS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


class Pos(NamedTuple):
    row: int
    col: int


class Grid(Generic[T]):
    """
    Rectangular, read-only grid of cell values.

    Construction fails with StructuralError on zero rows or on rows of
    unequal length.
    """

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        if not rows:
            raise StructuralError("Empty input")

        width = len(rows[0])
        for row_no, row in enumerate(rows, start=1):
            if len(row) != width:
                raise StructuralError(
                    f"Ragged input: row {row_no} has {len(row)} cells, expected {width}"
                )

        self._cells: Tuple[Tuple[T, ...], ...] = tuple(tuple(row) for row in rows)
        self.rows = len(self._cells)
        self.columns = width

    def __getitem__(self, pos: Tuple[int, int]) -> T:
        row, col = pos
        return self._cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def row(self, index: int) -> Tuple[T, ...]:
        return self._cells[index]

    def column(self, index: int) -> Tuple[T, ...]:
        return tuple(row[index] for row in self._cells)

    def positions(self) -> Iterator[Pos]:
        """All positions in scan order."""
        for r in range(self.rows):
            for c in range(self.columns):
                yield Pos(r, c)

    def find(self, predicate: Callable[[T], bool]) -> Optional[Pos]:
        """First position in scan order whose value satisfies `predicate`."""
        for pos in self.positions():
            if predicate(self[pos]):
                return pos
        return None

    def neighbours(self, pos: Pos) -> List[Tuple[Pos, T]]:
        """Orthogonal neighbours inside the grid, paired with their values."""
        out: List[Tuple[Pos, T]] = []
        for d_row, d_col in NEIGHBOUR_DELTAS:
            row, col = pos.row + d_row, pos.col + d_col
            if self.in_bounds(row, col):
                out.append((Pos(row, col), self._cells[row][col]))
        return out

    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns
