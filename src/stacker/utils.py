"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .board import Board
from .config import BASE_DROP_INTERVAL_MS, DROP_INTERVAL_STEP_MS, MIN_DROP_INTERVAL_MS, POINTS_TABLE
from .piece import Piece


def drop_interval_ms(
    level: int,
    *,
    base: int = BASE_DROP_INTERVAL_MS,
    step: int = DROP_INTERVAL_STEP_MS,
    floor: int = MIN_DROP_INTERVAL_MS,
) -> int:
    """Return the gravity interval in milliseconds for ``level``.

    The interval shrinks by ``step`` per level above one and never drops below
    ``floor``.
    """

    return max(floor, base - (level - 1) * step)


def line_clear_points(count: int, level: int, table: Sequence[int] = POINTS_TABLE) -> int:
    """Return the score for clearing ``count`` rows at ``level``."""

    return table[count] * level


def is_valid_move(board: Board, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    """Return ``True`` if ``piece`` can sit at its anchor shifted by ``dx``/``dy``.

    Every filled cell must stay within the board's columns and above its floor
    and must not overlap a locked cell.  Cells above the top of the board are
    always accepted so freshly spawned pieces may poke out.  The check is used
    to validate movement, rotation and spawning before anything is committed.
    """

    for x, y in piece.cells(dx, dy):
        if board.is_occupied(x, y):
            return False
    return True


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells occupied by the active piece receive the piece's grid value.
    """

    grid = [[int(cell) for cell in row] for row in board.grid]
    if active is not None:
        for x, y in active.cells():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = active.value
    return grid


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Return ``grid`` as text, ``#`` for filled cells and ``.`` for empty ones."""

    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)
