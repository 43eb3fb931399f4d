"""
render.py

Plain-text drawings of a board for the terminal. Live cells are drawn as
"X", dead cells as a blank. Both functions only read ``Board.snapshot()``.
"""
from __future__ import annotations
from typing import List

from board import Board


def _symbol(value: int) -> str:
    return "X" if value else " "


def draw_board(board: Board) -> str:
    '''
    Board without numbering: every cell row is followed by a blank spacer row.
    '''
    n = board.dimension
    spacer = "    " * n + " "
    lines: List[str] = [spacer]
    for row in board.snapshot():
        lines.append("".join(f"  {_symbol(v)} " for v in row) + " ")
        lines.append(spacer)
    return "\n".join(lines)


def draw_grid_board(board: Board) -> str:
    '''
    Board with a coordinate overlay: column numbers on top, row numbers on the
    left (both mod 10) and |---| separators around every cell.
    '''
    n = board.dimension
    separator = "   " + "|---" * n + "|"
    lines: List[str] = [
        "   " + "".join(f"  {col % 10} " for col in range(n)),
        separator,
    ]
    for y, row in enumerate(board.snapshot()):
        lines.append(f" {y % 10} " + "".join(f"| {_symbol(v)} " for v in row) + "|")
        lines.append(separator)
    return "\n".join(lines)
