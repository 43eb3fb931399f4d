import io
import json

import pytest
from game_of_life import main as life_cli, parse_dimension, parse_pattern, parse_wait_ms


def _play(argv, keys):
    """
    Run the interactive CLI with scripted input; returns (exit code, output).
    """
    out = io.StringIO()
    code = life_cli(argv, stdin=io.StringIO(keys), stdout=out)
    return code, out.getvalue()


@pytest.mark.parametrize(
    "raw,expected",
    [(None, 20), ("abc", 20), ("0", 20), ("-3", 20), ("7", 7), (" 12 ", 12)],
)
def test_parse_dimension(raw, expected):
    assert parse_dimension(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [(None, 500), ("slow", 500), ("-1", 500), ("0", 0), ("250", 250)],
)
def test_parse_wait_ms(raw, expected):
    assert parse_wait_ms(raw) == expected


def test_parse_pattern():
    assert parse_pattern("glider@3,4") == ("glider", 3, 4)


def test_quit_immediately():
    code, out = _play(["5", "0"], "q\n")
    assert code == 0
    assert "Welcome to Conway's Game of Life!" in out
    assert "[1] Input cells" in out


def test_eof_quits():
    code, _ = _play([], "")
    assert code == 0


def test_unknown_command():
    _, out = _play(["3", "0"], "x\nq\n")
    assert "Please select one of the menu options!" in out


def test_input_cell_prints_numbered_grid():
    _, out = _play(["3", "0"], "1\n1\n2\nq\n")
    assert "Enter x coordinate:" in out
    assert "Enter y coordinate:" in out
    assert " 2 |   | X |   |" in out


def test_input_out_of_range_returns_to_menu():
    code, out = _play(["3", "0"], "1\n5\n0\nq\n")
    assert code == 0
    assert "[error]" in out
    assert out.count("Select from the menu:") == 2


def test_input_not_a_number():
    code, out = _play(["3", "0"], "1\nfoo\n0\nq\n")
    assert code == 0
    assert "coordinates must be integers" in out


def test_run_blinker_turns():
    code, out = _play(
        ["5", "0", "--turns", "2", "--pattern", "blinker@1,2"],
        "2\nq\n",
    )
    assert code == 0
    assert "=== Turn 0 ===" in out
    assert "=== Turn 1 ===" in out
    assert "=== Turn 2 ===" not in out


def test_turn_numbers_continue_between_runs():
    _, out = _play(["4", "0", "--turns", "1"], "2\n2\nq\n")
    assert "=== Turn 0 ===" in out
    assert "=== Turn 1 ===" in out


def test_invalid_dimension_falls_back(capsys):
    code, _ = _play(["big", "0"], "q\n")
    assert code == 0
    assert "[warn] invalid dimension" in capsys.readouterr().err


def test_config_file_and_log(tmp_path):
    cfg = tmp_path / "life.yaml"
    log = tmp_path / "gen.log"
    cfg.write_text(
        "dimension: 6\n"
        "wait_ms: 0\n"
        "turns: 3\n"
        "patterns:\n"
        "  - {name: block, x: 1, y: 1}\n"
    )
    code, _ = _play(["--config", str(cfg), "--log", str(log)], "2\nq\n")
    assert code == 0
    entries = [json.loads(line) for line in log.read_text().splitlines()]
    assert [e["turn"] for e in entries] == [0, 1, 2]
    assert all(e["alive"] == 4 for e in entries)


def test_random_fill_is_seeded(tmp_path):
    logs = []
    for name in ("a.log", "b.log"):
        log = tmp_path / name
        _play(["8", "0", "--random", "--density", "0.4", "--seed", "3",
               "--turns", "2", "--log", str(log)], "2\nq\n")
        logs.append([json.loads(line)["alive"] for line in log.read_text().splitlines()])
    assert logs[0] == logs[1]


def test_missing_config_fails(tmp_path, capsys):
    code, _ = _play(["--config", str(tmp_path / "missing.yaml")], "q\n")
    assert code == 1
    assert "[error]" in capsys.readouterr().err


def test_pattern_off_board_fails(capsys):
    code, _ = _play(["3", "0", "--pattern", "glider@2,2"], "q\n")
    assert code == 1
    assert "[error]" in capsys.readouterr().err


def test_bad_pattern_argument():
    with pytest.raises(SystemExit) as exc:
        _play(["--pattern", "glider"], "q\n")
    assert exc.value.code == 2
