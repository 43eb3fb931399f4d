from __future__ import annotations
import pathlib
import sys
from typing import Callable, Optional, TextIO

import pacing
from board import Board
from generation_logger import log_generation
from render import draw_board


def simulate(board: Board, generations: int = 1) -> Board:
    '''
    Advance `board` in place by `generations` steps and return it.
    '''
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")
    for _ in range(generations):
        board.advance_generation()
    return board


def run(
    board: Board,
    wait_ms: int = 500,
    turns: Optional[int] = None,
    *,
    render: Callable[[Board], str] = draw_board,
    out: TextIO = sys.stdout,
    log_file: Optional[pathlib.Path] = None,
    start_turn: int = 0,
) -> int:
    """
    Advance, draw and pause, over and over. With `turns` left as None the loop
    only stops when the caller interrupts it (KeyboardInterrupt propagates).
    Returns the number of generations played.
    """
    if turns is not None and turns < 0:
        raise ValueError(f"turns must be >= 0, got {turns}")

    pacing.set_interval_ms(wait_ms)
    pacing.reset()
    played = 0
    while turns is None or played < turns:
        pacing.wait_turn()  # returns at once on the first turn after reset()
        board.advance_generation()
        turn = start_turn + played
        print(f"=== Turn {turn} ===", file=out)
        print(render(board), file=out)
        if log_file is not None:
            log_generation(turn, board, log_file=log_file)
        played += 1
    return played
