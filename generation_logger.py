from __future__ import annotations

import json
import pathlib
import time

from board import Board

# Path to the default generation log file
LOG_PATH = pathlib.Path("logs") / "generations.log"


def log_generation(turn: int, board: Board, *, log_file: pathlib.Path = LOG_PATH) -> None:
    """Append a record of one finished generation to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - turn: generation number, starting at 0
      - alive: number of live cells after the generation
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "turn": turn,
        "alive": board.count_alive(),
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, ensure_ascii=False) + "\n")
