#!/usr/bin/env python
"""
game_of_life.py

Conway's Game of Life on a finite square board, played from the terminal.

Usage

python game_of_life.py [dimension] [wait_ms] \
       [--config life.yaml] [--turns N] \
       [--random --density 0.3 --seed 7] \
       [--pattern glider@0,0] [--log logs/generations.log]

dimension defaults to 20 and wait_ms to 500 when missing or unparsable.
"""
from __future__ import annotations
import argparse, pathlib, sys
from typing import List, Optional, TextIO, Tuple

from board import Board, OutOfBounds
from config import DEFAULT_DIMENSION, DEFAULT_WAIT_MS, GameConfig, load_config
from generate import PATTERNS, BoardGenerator, place_pattern
from render import draw_grid_board
from simulate import run

MENU = (
    "Select from the menu:\n"
    "[1] Input cells\n"
    "[2] Run Game of Life\n"
    "[q] Quit game"
)


def parse_dimension(value: Optional[str]) -> int:
    """Board side length from a raw argument; 20 if absent or unusable."""
    try:
        dimension = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return DEFAULT_DIMENSION
    return dimension if dimension > 0 else DEFAULT_DIMENSION


def parse_wait_ms(value: Optional[str]) -> int:
    """Pause between turns from a raw argument; 500 if absent or unusable."""
    try:
        wait_ms = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return DEFAULT_WAIT_MS
    return wait_ms if wait_ms >= 0 else DEFAULT_WAIT_MS


def parse_pattern(value: str) -> Tuple[str, int, int]:
    """
    Parse NAME@X,Y (e.g. ``glider@3,4``) for --pattern.
    """
    try:
        name, coords = value.split("@", 1)
        x, y = (int(v) for v in coords.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected NAME@X,Y, got {value!r}") from None
    if name not in PATTERNS:
        raise argparse.ArgumentTypeError(
            f"unknown pattern {name!r}; choose from {sorted(PATTERNS)}"
        )
    return name, x, y


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Conway's Game of Life on a finite square board.")
    p.add_argument("dimension", nargs="?", help=f"Board side length (default {DEFAULT_DIMENSION}).")
    p.add_argument("wait_ms", nargs="?", help=f"Milliseconds between turns (default {DEFAULT_WAIT_MS}).")
    p.add_argument("--config", type=pathlib.Path, help="YAML file with game settings.")
    p.add_argument("--turns", type=int, help="Stop the run loop after this many generations.")
    p.add_argument("--random", action="store_true", help="Fill the board at random before the menu.")
    p.add_argument("--density", type=float, help="Probability a cell starts live with --random.")
    p.add_argument("--seed", type=int, help="RNG seed for --random.")
    p.add_argument(
        "--pattern", type=parse_pattern, action="append", default=[],
        metavar="NAME@X,Y", help=f"Place a named pattern ({', '.join(sorted(PATTERNS))}). Repeatable.",
    )
    p.add_argument("--log", type=pathlib.Path, help="Append one JSON line per generation to this file.")
    return p


def _parses_to(raw: str, value: int) -> bool:
    try:
        return int(raw) == value
    except ValueError:
        return False


def resolve_config(args: argparse.Namespace) -> GameConfig:
    '''
    Merge the optional YAML file with command-line values; the command line wins.
    '''
    cfg = load_config(args.config) if args.config is not None else GameConfig()

    if args.dimension is not None:
        dimension = parse_dimension(args.dimension)
        if not _parses_to(args.dimension, dimension):
            print(f"[warn] invalid dimension {args.dimension!r}; using {dimension}", file=sys.stderr)
        cfg.dimension = dimension
    if args.wait_ms is not None:
        wait_ms = parse_wait_ms(args.wait_ms)
        if not _parses_to(args.wait_ms, wait_ms):
            print(f"[warn] invalid wait time {args.wait_ms!r}; using {wait_ms}", file=sys.stderr)
        cfg.wait_ms = wait_ms

    if args.turns is not None:
        cfg.turns = args.turns
    if args.seed is not None:
        cfg.seed = args.seed
    if args.density is not None:
        cfg.density = args.density
    elif args.random and cfg.density is None:
        cfg.density = 0.5
    for name, x, y in args.pattern:
        cfg.patterns.append({"name": name, "x": x, "y": y})
    if args.log is not None:
        cfg.log = args.log
    return cfg


def build_board(cfg: GameConfig) -> Board:
    """Starting board: random fill (if asked), then patterns, then single cells."""
    if cfg.density is not None:
        board = BoardGenerator(cfg.dimension, seed=cfg.seed, density=cfg.density).random_board()
    else:
        board = Board(cfg.dimension)
    for pat in cfg.patterns:
        place_pattern(board, pat["name"], int(pat["x"]), int(pat["y"]))
    for x, y in cfg.cells:
        board.set_cell(int(x), int(y), True)
    return board


def _prompt(question: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    print(question, file=stdout)
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def input_cell(board: Board, stdin: TextIO, stdout: TextIO) -> bool:
    '''
    Ask for one (x, y) pair and set that cell live. Returns False on EOF.
    '''
    raw_x = _prompt("Enter x coordinate: ", stdin, stdout)
    if raw_x is None:
        return False
    raw_y = _prompt("Enter y coordinate: ", stdin, stdout)
    if raw_y is None:
        return False
    try:
        board.set_cell(int(raw_x), int(raw_y), True)
    except ValueError:
        print(f"[error] coordinates must be integers, got ({raw_x!r}, {raw_y!r})", file=stdout)
        return True
    except OutOfBounds as exc:
        print(f"[error] {exc}", file=stdout)
        return True
    print(draw_grid_board(board), file=stdout)
    return True


def main(argv: List[str] | None = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = resolve_config(args)
        board = build_board(cfg)
    except (FileNotFoundError, KeyError, TypeError, ValueError, OutOfBounds) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    print("Welcome to Conway's Game of Life!", file=stdout)
    turn = 0
    while True:
        print(MENU, file=stdout)
        cmd = stdin.readline()
        if not cmd:
            return 0
        cmd = cmd.strip()

        if cmd == "1":
            if not input_cell(board, stdin, stdout):
                return 0
        elif cmd == "2":
            try:
                turn += run(board, cfg.wait_ms, cfg.turns, out=stdout, log_file=cfg.log, start_turn=turn)
            except KeyboardInterrupt:
                print("\nStopped.", file=stdout)
        elif cmd == "q":
            return 0
        else:
            print("Please select one of the menu options!", file=stdout)


if __name__ == "__main__":
    sys.exit(main())
