"""Falling-block puzzle engine with a pygame front-end."""

from .board import Board
from .config import GameConfig
from .controls import Command, KEY_BINDINGS, command_for_key, dispatch
from .driver import GameDriver, Renderer
from .game_state import GameSession, GameSnapshot, GameStatus
from .piece import Piece, rotate_matrix
from .shapes import PieceType, spawn_position
from .storage import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from .utils import format_grid, is_valid_move, render_grid

__all__ = [
    "Board",
    "Command",
    "GameConfig",
    "GameDriver",
    "GameSession",
    "GameSnapshot",
    "GameStatus",
    "HighScoreStore",
    "JsonHighScoreStore",
    "KEY_BINDINGS",
    "MemoryHighScoreStore",
    "Piece",
    "PieceType",
    "Renderer",
    "command_for_key",
    "dispatch",
    "format_grid",
    "is_valid_move",
    "render_grid",
    "rotate_matrix",
    "spawn_position",
]
