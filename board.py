from __future__ import annotations
from typing import List, Sequence, Tuple

from cell import Cell
from rules import next_state

# (dx, dy) for the eight Moore neighbours, self excluded
OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class InvalidDimension(ValueError):
    """Board side length is not a positive integer."""


class OutOfBounds(IndexError):
    """Coordinates fall outside [0, dimension) on either axis."""


class Board:
    """
    Finite square Game of Life board. Cells are stored row-major and addressed
    as (x, y) where x is the column and y the row, i.e. ``cells[y][x]``.
    Positions outside the board are permanently dead; nothing wraps around.
    """

    def __init__(self, dimension: int):
        if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
            raise InvalidDimension(f"dimension must be a positive integer, got {dimension!r}")
        self._dimension = dimension
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(dimension)] for _ in range(dimension)
        ]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        """
        Build a board from a square nested list of 0/1 (or bool) values,
        ``grid[y][x]``.
        """
        n = len(grid)
        if n == 0 or any(len(row) != n for row in grid):
            raise InvalidDimension("grid must be a non-empty square")
        board = cls(n)
        for y, row in enumerate(grid):
            for x, value in enumerate(row):
                board.set_cell(x, y, bool(value))
        return board

    @property
    def dimension(self) -> int:
        return self._dimension

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._dimension and 0 <= y < self._dimension

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(
                f"({x}, {y}) outside board of dimension {self._dimension}"
            )

    def get_cell(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self._cells[y][x]

    def set_cell(self, x: int, y: int, state: bool) -> None:
        '''
        Manual edit of one cell. Pending is reset along with the current state
        so the cell never shows a stale staged value.
        '''
        cell = self.get_cell(x, y)
        cell.set_state(state)
        cell.set_pending(state)

    def count_live_neighbors(self, x: int, y: int) -> int:
        """
        Return number of live neighbours (Moore, eight cells) for cell (x, y).
        Off-board neighbours count as dead.
        """
        self._check(x, y)
        total = 0
        for dx, dy in OFFSETS:
            xx = x + dx
            yy = y + dy
            if self.in_bounds(xx, yy) and self._cells[yy][xx].get_state():
                total += 1
        return total

    def advance_generation(self) -> None:
        """
        One synchronous update. Every pending state is computed from the
        current grid before any cell commits.
        """
        n = self._dimension
        for y in range(n):
            for x in range(n):
                cell = self._cells[y][x]
                cell.set_pending(next_state(cell.get_state(), self.count_live_neighbors(x, y)))

        for row in self._cells:
            for cell in row:
                cell.commit()

    def snapshot(self) -> List[List[int]]:
        """Copy of the current states as ``grid[y][x]`` (1 = live, 0 = dead)."""
        return [[int(cell.get_state()) for cell in row] for row in self._cells]

    def live_cells(self) -> List[Tuple[int, int]]:
        return [
            (x, y)
            for y, row in enumerate(self._cells)
            for x, cell in enumerate(row)
            if cell.get_state()
        ]

    def count_alive(self) -> int:
        """Return number of live cells."""
        return sum(cell.get_state() for row in self._cells for cell in row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._dimension == other._dimension and self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return f"Board(dimension={self._dimension}, alive={self.count_alive()})"
