import json

from board import Board
from generation_logger import log_generation


def test_log_generation_appends_json_lines(tmp_path):
    log = tmp_path / "nested" / "gen.log"     # nested dir exercises mkdir
    board = Board(3)
    board.set_cell(0, 0, True)

    log_generation(0, board, log_file=log)
    board.set_cell(1, 1, True)
    log_generation(1, board, log_file=log)

    lines = log.read_text().splitlines()
    assert len(lines) == 2
    first, second = (json.loads(line) for line in lines)
    for field in ("ts", "turn", "alive"):
        assert field in first
    assert (first["turn"], first["alive"]) == (0, 1)
    assert (second["turn"], second["alive"]) == (1, 2)
    assert first["ts"].endswith("Z")
