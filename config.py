"""
config.py

Optional YAML configuration for a game. Example ``life.yaml``:

    dimension: 12
    wait_ms: 200
    turns: 50
    cells:
      - [1, 2]
      - [2, 2]
    patterns:
      - {name: glider, x: 0, y: 0}
    log: logs/generations.log
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_DIMENSION = 20
DEFAULT_WAIT_MS = 500


@dataclass
class GameConfig:
    dimension: int = DEFAULT_DIMENSION
    wait_ms: int = DEFAULT_WAIT_MS
    turns: Optional[int] = None
    density: Optional[float] = None  # random fill when set
    seed: int = 42
    cells: List[List[int]] = field(default_factory=list)
    patterns: List[Dict[str, Any]] = field(default_factory=list)
    log: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.log is not None:
            self.log = Path(self.log)


def load_config(path: Path) -> GameConfig:
    """
    Read a YAML config file into a GameConfig. Keys that are not present keep
    their defaults; unknown keys are rejected.
    """
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    if doc is None:
        return GameConfig()
    if not isinstance(doc, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(doc) - known)
    if unknown:
        raise ValueError(f"{path}: unknown config keys {unknown}")
    return GameConfig(**doc)
