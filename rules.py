from __future__ import annotations

# Moore neighbourhood
NEIGHBOR_COUNT = 8

# neighbour counts that keep a live cell alive / wake a dead one (B3/S23)
SURVIVE = frozenset({2, 3})
BIRTH = frozenset({3})


def next_state(alive: bool, live_neighbors: int) -> bool:
    """
    Return the next life state of a cell given its current state and the
    number of live cells among its eight neighbours.

    1. A live cell with fewer than two live neighbours dies (under-population).
    2. A live cell with two or three live neighbours lives on.
    3. A live cell with more than three live neighbours dies (over-population).
    4. A dead cell with exactly three live neighbours becomes live (reproduction).
    """
    if not (0 <= live_neighbors <= NEIGHBOR_COUNT):
        raise ValueError(f"invalid neighbor count {live_neighbors!r}")

    if alive:
        return live_neighbors in SURVIVE
    return live_neighbors in BIRTH
