"""Game session state machine.

A :class:`GameSession` owns everything that changes while playing: the board,
the falling and queued pieces, score, level and the gravity timer.  It never
schedules anything by itself; a driver feeds it elapsed time through
:meth:`GameSession.tick` and player commands through the movement methods.

Lifecycle::

    IDLE -> RUNNING <-> PAUSED
              |
              v
          GAME_OVER -> RUNNING (restart)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging
import random

from .board import Board, Grid
from .config import GameConfig
from .piece import Piece
from .shapes import PieceType
from .storage import HighScoreStore, MemoryHighScoreStore
from .utils import drop_interval_ms, is_valid_move, line_clear_points


LOGGER = logging.getLogger(__name__)

# Horizontal offsets tried, in order, when a rotation collides.
WALL_KICKS = (1, -1, 2, -2)


class GameStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of a session handed to renderers.

    Snapshots compare and hash by identity since they hold a numpy grid.
    """

    grid: Grid
    current: Optional[Piece]
    upcoming: Optional[Piece]
    score: int
    level: int
    lines_cleared: int
    high_score: int
    status: GameStatus

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER


@dataclass
class GameSession:
    """Mutable state for one player's game, plus the rules that change it."""

    config: GameConfig = field(default_factory=GameConfig)
    store: HighScoreStore = field(default_factory=MemoryHighScoreStore)
    rng: random.Random = field(default_factory=random.Random)
    board: Board = field(init=False)
    current: Optional[Piece] = field(default=None, init=False)
    upcoming: Optional[Piece] = field(default=None, init=False)
    score: int = field(default=0, init=False)
    level: int = field(default=1, init=False)
    lines_cleared: int = field(default=0, init=False)
    drop_interval_ms: int = field(init=False)
    drop_accum: float = field(default=0.0, init=False)
    status: GameStatus = field(default=GameStatus.IDLE, init=False)
    high_score: int = field(init=False)

    def __post_init__(self) -> None:
        self.board = Board(self.config.rows, self.config.cols)
        self.drop_interval_ms = self.config.base_drop_interval_ms
        self.high_score = self.store.get_high_score()

    @property
    def running(self) -> bool:
        """``True`` while a game is in progress, paused or not."""

        return self.status in (GameStatus.RUNNING, GameStatus.PAUSED)

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    # Lifecycle ---------------------------------------------------------
    def start(self) -> None:
        """Reset every counter and the board, then spawn the first piece."""

        self.board = Board(self.config.rows, self.config.cols)
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.drop_interval_ms = self.config.base_drop_interval_ms
        self.drop_accum = 0.0
        self.current = None
        self.upcoming = None
        self.status = GameStatus.RUNNING
        LOGGER.info("Game started (high score %d)", self.high_score)
        self.spawn()

    def restart(self) -> None:
        self.start()

    def toggle_pause(self) -> bool:
        """Pause or resume a running game.

        Resuming clears the gravity accumulator so the piece does not drop
        immediately to make up for the paused time.
        """

        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
            LOGGER.info("Paused")
            return True
        if self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
            self.drop_accum = 0.0
            LOGGER.info("Resumed")
            return True
        return False

    def _random_piece(self) -> Piece:
        """Return a new piece; each type is equally likely on every draw."""

        return Piece.spawn(self.rng.choice(list(PieceType)), self.board.width)

    def spawn(self) -> bool:
        """Promote the queued piece and queue a fresh one.

        Returns ``False`` and ends the game when the new piece cannot be placed
        at its spawn position.
        """

        self.current = self.upcoming or self._random_piece()
        self.upcoming = self._random_piece()
        if not is_valid_move(self.board, self.current):
            self._game_over()
            return False
        return True

    def _game_over(self) -> None:
        self.status = GameStatus.GAME_OVER
        self.drop_accum = 0.0
        LOGGER.info("Game over. Score: %d, lines: %d, level: %d", self.score, self.lines_cleared, self.level)
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.set_high_score(self.score)
            LOGGER.info("New high score: %d", self.score)

    # Gravity -----------------------------------------------------------
    def tick(self, elapsed_ms: float) -> bool:
        """Advance the gravity timer by ``elapsed_ms``.

        Returns ``True`` if a gravity step ran.  At most one step runs per
        call and leftover time is discarded.
        """

        if self.status is not GameStatus.RUNNING:
            return False
        self.drop_accum += elapsed_ms
        if self.drop_accum < self.drop_interval_ms:
            return False
        self.drop_accum = 0.0
        self.step_down()
        return True

    def step_down(self) -> bool:
        """Move the current piece one row down, locking it if it cannot move.

        Returns ``True`` if the piece moved.
        """

        if self.current is None:
            return False
        if is_valid_move(self.board, self.current, 0, 1):
            self.current = self.current.translated(0, 1)
            return True
        self.lock()
        return False

    def lock(self) -> None:
        """Write the current piece into the board, clear rows and spawn."""

        if self.current is None:
            return
        for x, y in self.current.cells():
            self.board.lock_cell(x, y, self.current.value)
        LOGGER.debug("Locked %s at (%d, %d)", self.current.type.value, self.current.x, self.current.y)
        self.clear_lines()
        self.spawn()

    def clear_lines(self) -> int:
        """Remove full rows and apply scoring and level progression."""

        count = self.board.clear_full_rows()
        if not count:
            return 0
        self.lines_cleared += count
        self.score += line_clear_points(count, self.level, self.config.points_table)
        LOGGER.debug("Cleared %d row(s). Score: %d", count, self.score)
        new_level = self.lines_cleared // self.config.lines_per_level + 1
        if new_level > self.level:
            self.level = new_level
            self.drop_interval_ms = drop_interval_ms(
                self.level,
                base=self.config.base_drop_interval_ms,
                step=self.config.drop_interval_step_ms,
                floor=self.config.min_drop_interval_ms,
            )
            LOGGER.info("Level %d, drop interval %d ms", self.level, self.drop_interval_ms)
        return count

    # Player commands ---------------------------------------------------
    def _accepts_input(self) -> bool:
        return self.status is GameStatus.RUNNING and self.current is not None

    def _shift(self, dx: int) -> bool:
        if not self._accepts_input() or not is_valid_move(self.board, self.current, dx, 0):
            return False
        self.current = self.current.translated(dx, 0)
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def soft_drop(self) -> bool:
        """Step down once on request, scoring a point if the piece moved."""

        if not self._accepts_input():
            return False
        if self.step_down():
            self.score += self.config.soft_drop_points
        return True

    def hard_drop(self) -> bool:
        """Drop the piece to its resting row, scoring per row, and lock it."""

        if not self._accepts_input():
            return False
        while is_valid_move(self.board, self.current, 0, 1):
            self.current = self.current.translated(0, 1)
            self.score += self.config.hard_drop_points
        self.lock()
        return True

    def rotate(self) -> bool:
        """Rotate clockwise, shifting sideways if the rotation collides.

        The offsets in ``WALL_KICKS`` are tried in order and the first that
        fits is kept.  If none fits the piece is left untouched.
        """

        if not self._accepts_input():
            return False
        rotated = self.current.rotated()
        for dx in (0,) + WALL_KICKS:
            if is_valid_move(self.board, rotated, dx, 0):
                self.current = rotated.translated(dx, 0)
                return True
        return False

    def snapshot(self) -> GameSnapshot:
        grid = self.board.copy().grid
        grid.setflags(write=False)
        return GameSnapshot(
            grid=grid,
            current=self.current,
            upcoming=self.upcoming,
            score=self.score,
            level=self.level,
            lines_cleared=self.lines_cleared,
            high_score=self.high_score,
            status=self.status,
        )
