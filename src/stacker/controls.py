"""Player commands and the default key bindings."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional
import logging

from .game_state import GameSession


LOGGER = logging.getLogger(__name__)


class Command(str, Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"


# Key identifiers follow the DOM ``KeyboardEvent.key`` names; front-ends
# translate their own key codes into these strings.
KEY_BINDINGS: Dict[str, Command] = {
    "ArrowLeft": Command.MOVE_LEFT,
    "ArrowRight": Command.MOVE_RIGHT,
    "ArrowDown": Command.SOFT_DROP,
    "ArrowUp": Command.ROTATE,
    " ": Command.HARD_DROP,
    "p": Command.TOGGLE_PAUSE,
    "P": Command.TOGGLE_PAUSE,
}


def command_for_key(key: str, bindings: Optional[Dict[str, Command]] = None) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` if it is unbound."""

    return (bindings or KEY_BINDINGS).get(key)


def dispatch(session: GameSession, command: Command) -> bool:
    """Apply ``command`` to ``session`` and return ``True`` if state changed.

    Every command is ignored unless a game is running, and everything but
    ``TOGGLE_PAUSE`` is ignored while paused.
    """

    if not session.running:
        return False
    if command is Command.TOGGLE_PAUSE:
        return session.toggle_pause()
    if session.paused:
        LOGGER.debug("Ignoring %s while paused", command.value)
        return False
    if command is Command.MOVE_LEFT:
        return session.move_left()
    if command is Command.MOVE_RIGHT:
        return session.move_right()
    if command is Command.SOFT_DROP:
        return session.soft_drop()
    if command is Command.ROTATE:
        return session.rotate()
    if command is Command.HARD_DROP:
        return session.hard_drop()
    raise ValueError(f"Unknown command: {command!r}")
