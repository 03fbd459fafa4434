"""Glue between a session, a renderer and raw key input.

:class:`GameDriver` is the explicit scheduler for a :class:`GameSession`.  The
host (a pygame loop, a test, a browser animation frame) calls
:meth:`GameDriver.advance` with the elapsed milliseconds and forwards key
presses to :meth:`GameDriver.handle_key`; the driver decides when the renderer
sees a new frame.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol, runtime_checkable
import logging

from .controls import Command, command_for_key, dispatch
from .game_state import GameSession, GameSnapshot, GameStatus


LOGGER = logging.getLogger(__name__)


@runtime_checkable
class Renderer(Protocol):
    """Draws a frame from a snapshot without touching game state."""

    def render(self, snapshot: GameSnapshot) -> None: ...


class GameDriver:
    """Advance ``session`` in time and redraw through ``renderer``."""

    def __init__(
        self,
        session: GameSession,
        renderer: Renderer,
        *,
        bindings: Optional[Dict[str, Command]] = None,
    ) -> None:
        if not isinstance(session, GameSession):
            raise TypeError(f"GameDriver needs a GameSession, got {type(session).__name__}")
        if renderer is None or not isinstance(renderer, Renderer):
            raise TypeError("GameDriver needs a renderer with a render(snapshot) method")
        self.session = session
        self.renderer = renderer
        self.bindings = bindings

    def _draw(self) -> None:
        self.renderer.render(self.session.snapshot())

    def start(self) -> None:
        """Start (or restart) the game and draw the first frame."""

        self.session.start()
        self._draw()

    def advance(self, elapsed_ms: float) -> None:
        """Run gravity for ``elapsed_ms`` and draw if the game is live."""

        if self.session.status is not GameStatus.RUNNING:
            return
        self.session.tick(elapsed_ms)
        self._draw()

    def handle_key(self, key: str) -> bool:
        """Translate ``key`` into a command and redraw if it changed anything."""

        command = command_for_key(key, self.bindings)
        if command is None:
            return False
        changed = dispatch(self.session, command)
        if changed:
            self._draw()
        return changed
