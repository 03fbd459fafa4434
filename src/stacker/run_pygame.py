"""pygame front-end for the game engine.

This module glues a :class:`~stacker.game_state.GameSession` to ``pygame`` for
rendering and input.  The game logic lives entirely in the engine; this file
only converts pygame key codes to key names, feeds the frame time to a
:class:`~stacker.driver.GameDriver` and draws snapshots.
"""

from __future__ import annotations

import asyncio
import logging
import os
import random
from typing import Dict, Optional

import pygame

from .config import GameConfig
from .driver import GameDriver
from .game_state import GameSession, GameSnapshot
from .piece import Piece
from .shapes import COLORS, VALUE_TYPES
from .storage import HighScoreStore


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60
# Width of the side panel holding the preview and counters
PANEL_WIDTH = 180

BACKGROUND = pygame.Color("#0a0a1a")
GRID_LINE = pygame.Color(40, 40, 58)
TEXT = pygame.Color(230, 230, 230)
OVERLAY = (0, 0, 0, 170)

# pygame key codes translated into the key names used by the bindings
PYGAME_KEYS: Dict[int, str] = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_UP: "ArrowUp",
    pygame.K_SPACE: " ",
    pygame.K_p: "p",
}


def key_name(event: pygame.event.Event) -> Optional[str]:
    """Return the binding name for a ``KEYDOWN`` event, if there is one."""

    return PYGAME_KEYS.get(event.key)


def draw_block(screen: pygame.Surface, x: float, y: float, color: pygame.Color, size: int = CELL_SIZE) -> None:
    """Draw one cell with a light top-left edge and a dark bottom-right edge."""

    padding = 1
    inner = 3
    left = x * size + padding
    top = y * size + padding
    span = size - padding * 2
    half = span // 2
    pygame.draw.rect(screen, color, pygame.Rect(left, top, span, span))
    highlight = color.lerp(pygame.Color("white"), 0.3)
    pygame.draw.rect(screen, highlight, pygame.Rect(left + inner, top + inner, half, inner))
    pygame.draw.rect(screen, highlight, pygame.Rect(left + inner, top + inner, inner, half))
    shadow = color.lerp(pygame.Color("black"), 0.3)
    pygame.draw.rect(screen, shadow, pygame.Rect(left + inner, top + span - inner * 2, half, inner))
    pygame.draw.rect(screen, shadow, pygame.Rect(left + span - inner * 2, top + inner, inner, half))


class PygameRenderer:
    """Draw :class:`GameSnapshot` frames onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, rows: int, cols: int, cell_size: int = CELL_SIZE) -> None:
        self.screen = screen
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.font = pygame.font.Font(None, 28)
        self.big_font = pygame.font.Font(None, 48)

    @property
    def board_px(self) -> int:
        return self.cols * self.cell_size

    def render(self, snapshot: GameSnapshot) -> None:
        self.screen.fill(BACKGROUND)
        self._draw_grid_lines()
        self._draw_board(snapshot)
        if snapshot.current is not None:
            self._draw_piece(snapshot.current)
        self._draw_panel(snapshot)
        if snapshot.paused:
            self._draw_overlay("PAUSED", "Press P to resume")
        elif snapshot.game_over:
            self._draw_overlay("GAME OVER", f"Score {snapshot.score} - Enter to restart")
        pygame.display.flip()

    def _draw_grid_lines(self) -> None:
        height = self.rows * self.cell_size
        for c in range(self.cols + 1):
            pygame.draw.line(self.screen, GRID_LINE, (c * self.cell_size, 0), (c * self.cell_size, height))
        for r in range(self.rows + 1):
            pygame.draw.line(self.screen, GRID_LINE, (0, r * self.cell_size), (self.board_px, r * self.cell_size))

    def _draw_board(self, snapshot: GameSnapshot) -> None:
        for r, row in enumerate(snapshot.grid):
            for c, value in enumerate(row):
                if value:
                    color = pygame.Color(COLORS[VALUE_TYPES[int(value)]])
                    draw_block(self.screen, c, r, color, self.cell_size)

    def _draw_piece(self, piece: Piece) -> None:
        color = pygame.Color(piece.color)
        for x, y in piece.cells():
            if y >= 0:
                draw_block(self.screen, x, y, color, self.cell_size)

    def _draw_panel(self, snapshot: GameSnapshot) -> None:
        left = self.board_px + 20
        self.screen.blit(self.font.render("Next", True, TEXT), (left, 10))
        if snapshot.upcoming is not None:
            preview = snapshot.upcoming
            box = 4 * self.cell_size
            offset_x = (box - preview.width * self.cell_size) / 2 / self.cell_size
            offset_y = (box - preview.height * self.cell_size) / 2 / self.cell_size
            color = pygame.Color(preview.color)
            base_x = left / self.cell_size
            base_y = 40 / self.cell_size
            for row, line in enumerate(preview.shape):
                for col, filled in enumerate(line):
                    if filled:
                        draw_block(
                            self.screen,
                            base_x + offset_x + col,
                            base_y + offset_y + row,
                            color,
                            self.cell_size,
                        )
        stats = (
            ("Score", snapshot.score),
            ("Level", snapshot.level),
            ("Lines", snapshot.lines_cleared),
            ("High", snapshot.high_score),
        )
        top = 40 + 4 * self.cell_size + 20
        for label, value in stats:
            self.screen.blit(self.font.render(f"{label}: {value}", True, TEXT), (left, top))
            top += 32

    def _draw_overlay(self, title: str, subtitle: str) -> None:
        shade = pygame.Surface((self.board_px, self.rows * self.cell_size), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        self.screen.blit(shade, (0, 0))
        centre = self.board_px // 2
        middle = self.rows * self.cell_size // 2
        title_img = self.big_font.render(title, True, TEXT)
        self.screen.blit(title_img, title_img.get_rect(center=(centre, middle - 20)))
        sub_img = self.font.render(subtitle, True, TEXT)
        self.screen.blit(sub_img, sub_img.get_rect(center=(centre, middle + 20)))


class GameRunner:
    """Own the pygame window and pump events into a :class:`GameDriver`."""

    def __init__(
        self,
        *,
        config: Optional[GameConfig] = None,
        store: Optional[HighScoreStore] = None,
        seed: Optional[int] = None,
        cell_size: int = CELL_SIZE,
    ) -> None:
        self.config = config or GameConfig()
        self.store = store
        self.seed = seed
        self.cell_size = cell_size
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def _create_session(self) -> GameSession:
        kwargs = {"config": self.config, "rng": random.Random(self.seed)}
        if self.store is not None:
            kwargs["store"] = self.store
        return GameSession(**kwargs)

    async def run(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        try:
            width = self.config.cols * self.cell_size + PANEL_WIDTH
            height = self.config.rows * self.cell_size
            screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption("Stacker")
            clock = pygame.time.Clock()

            renderer = PygameRenderer(screen, self.config.rows, self.config.cols, self.cell_size)
            driver = GameDriver(self._create_session(), renderer)
            driver.start()

            self._running = True
            while self._running:
                dt = clock.tick(FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            self._running = False
                        elif event.key == pygame.K_RETURN:
                            driver.start()
                        else:
                            name = key_name(event)
                            if name is not None:
                                driver.handle_key(name)
                driver.advance(dt)
                # Yield to the browser/host event loop to keep UI responsive
                await asyncio.sleep(0)
        finally:
            pygame.quit()
            LOGGER.info("Window closed")

    def stop(self) -> None:
        self._running = False


def main(
    *,
    config: Optional[GameConfig] = None,
    store: Optional[HighScoreStore] = None,
    seed: Optional[int] = None,
    cell_size: int = CELL_SIZE,
) -> None:
    """Open a window and play until it is closed."""

    runner = GameRunner(config=config, store=store, seed=seed, cell_size=cell_size)
    asyncio.run(runner.run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
