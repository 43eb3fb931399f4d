from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class Cell:
    """
    One square of the board: the committed life state plus the staged state
    for the next generation. A new cell is dead unless told otherwise, and its
    pending state starts out mirroring the current one.
    """
    current: bool = False
    pending: Optional[bool] = None

    def __post_init__(self) -> None:
        self.current = bool(self.current)
        self.pending = self.current if self.pending is None else bool(self.pending)

    def get_state(self) -> bool:
        return self.current

    def set_state(self, state: bool) -> None:
        '''
        Overwrite the current state directly. Used for manual edits; the
        pending state is left alone.
        '''
        self.current = bool(state)

    def get_pending(self) -> bool:
        return self.pending

    def set_pending(self, state: bool) -> None:
        self.pending = bool(state)

    def commit(self) -> None:
        """Move forward one generation: current := pending."""
        self.current = self.pending

    def __bool__(self) -> bool:
        return self.current

    def __str__(self) -> str:
        return "X" if self.current else " "
