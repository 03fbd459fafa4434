"""Gameplay constants for a session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# Dimensions of the standard playfield.
ROWS = 20
COLS = 10

BASE_DROP_INTERVAL_MS = 1000
MIN_DROP_INTERVAL_MS = 100
DROP_INTERVAL_STEP_MS = 100
LINES_PER_LEVEL = 10

# Points for clearing 0..4 rows at once, multiplied by the current level.
POINTS_TABLE: Tuple[int, ...] = (0, 100, 300, 500, 800)

SOFT_DROP_POINTS = 1
HARD_DROP_POINTS = 2


@dataclass(frozen=True)
class GameConfig:
    """Tunable numbers for a :class:`~stacker.game_state.GameSession`.

    The defaults reproduce the classic browser game: a 20x10 board, one second
    gravity at level one that speeds up by 100 ms per level down to a 100 ms
    floor, and a level every ten cleared lines.
    """

    rows: int = ROWS
    cols: int = COLS
    base_drop_interval_ms: int = BASE_DROP_INTERVAL_MS
    min_drop_interval_ms: int = MIN_DROP_INTERVAL_MS
    drop_interval_step_ms: int = DROP_INTERVAL_STEP_MS
    lines_per_level: int = LINES_PER_LEVEL
    points_table: Tuple[int, ...] = POINTS_TABLE
    soft_drop_points: int = SOFT_DROP_POINTS
    hard_drop_points: int = HARD_DROP_POINTS

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")
        if self.min_drop_interval_ms <= 0:
            raise ValueError("min_drop_interval_ms must be positive")
        if self.base_drop_interval_ms < self.min_drop_interval_ms:
            raise ValueError("base_drop_interval_ms must not be below min_drop_interval_ms")
        if self.drop_interval_step_ms < 0:
            raise ValueError("drop_interval_step_ms must not be negative")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        # A single lock can clear at most four rows.
        if len(self.points_table) < 5:
            raise ValueError("points_table needs entries for 0 to 4 cleared rows")
