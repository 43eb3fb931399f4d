from __future__ import annotations
from typing import Dict, List, Tuple
import numpy as np
from board import Board

# Named starting patterns as (dx, dy) offsets from the top-left anchor.
PATTERNS: Dict[str, Tuple[Tuple[int, int], ...]] = {
    "block": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "blinker": ((0, 0), (1, 0), (2, 0)),  # horizontal phase
    "glider": ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2)),
}


def place_pattern(board: Board, name: str, x: int, y: int) -> List[Tuple[int, int]]:
    '''
    Set the named pattern live with its anchor at (x, y). Returns the cells
    that were set. A pattern that does not fit raises OutOfBounds before any
    cell is touched.
    '''
    try:
        offsets = PATTERNS[name]
    except KeyError:
        raise ValueError(
            f"unknown pattern {name!r}; choose from {sorted(PATTERNS)}"
        ) from None

    cells = [(x + dx, y + dy) for dx, dy in offsets]
    for cx, cy in cells:
        board.get_cell(cx, cy)  # bounds check only
    for cx, cy in cells:
        board.set_cell(cx, cy, True)
    return cells


class BoardGenerator:
    """
    Random starting boards. Each cell starts live with probability `density`.
    The same seed always yields the same board sequence.
    """
    def __init__(self, dimension: int, *, seed: int = 42, density: float = 0.5):
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be in [0, 1], got {density}")
        self.dimension = dimension
        self.density = density
        self.rng = np.random.default_rng(seed)

    def _make_grid(self) -> List[List[int]]:
        """
        Generate a random NxN binary grid with the given density.
        """
        return [
            [int(self.rng.random() < self.density) for _ in range(self.dimension)]
            for _ in range(self.dimension)
        ]

    def random_board(self) -> Board:
        return Board.from_grid(self._make_grid())
