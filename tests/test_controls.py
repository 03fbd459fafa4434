from __future__ import annotations

import random

import pytest

from stacker.controls import Command, command_for_key, dispatch
from stacker.game_state import GameSession, GameStatus
from stacker.piece import Piece
from stacker.shapes import SHAPES, PieceType


@pytest.fixture
def session() -> GameSession:
    s = GameSession(rng=random.Random(5))
    s.start()
    s.current = Piece(PieceType.T, SHAPES[PieceType.T], x=4, y=5)
    return s


def test_default_key_bindings():
    assert command_for_key("ArrowLeft") is Command.MOVE_LEFT
    assert command_for_key("ArrowRight") is Command.MOVE_RIGHT
    assert command_for_key("ArrowDown") is Command.SOFT_DROP
    assert command_for_key("ArrowUp") is Command.ROTATE
    assert command_for_key(" ") is Command.HARD_DROP
    assert command_for_key("p") is Command.TOGGLE_PAUSE
    assert command_for_key("P") is Command.TOGGLE_PAUSE
    assert command_for_key("q") is None


def test_custom_bindings_replace_defaults():
    bindings = {"a": Command.MOVE_LEFT}
    assert command_for_key("a", bindings) is Command.MOVE_LEFT
    assert command_for_key("ArrowLeft", bindings) is None


@pytest.mark.parametrize("command", list(Command))
def test_every_command_rejected_before_start(command):
    s = GameSession()
    assert dispatch(s, command) is False
    assert s.status is GameStatus.IDLE


def test_commands_move_the_piece(session):
    assert dispatch(session, Command.MOVE_LEFT)
    assert session.current.x == 3
    assert dispatch(session, Command.MOVE_RIGHT)
    assert session.current.x == 4
    assert dispatch(session, Command.SOFT_DROP)
    assert session.current.y == 6
    assert session.score == 1
    assert dispatch(session, Command.ROTATE)
    assert session.current.shape != SHAPES[PieceType.T]


def test_only_pause_toggle_accepted_while_paused(session):
    assert dispatch(session, Command.TOGGLE_PAUSE)
    before = session.current
    for command in (Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.SOFT_DROP, Command.ROTATE, Command.HARD_DROP):
        assert dispatch(session, command) is False
    assert session.current is before
    assert dispatch(session, Command.TOGGLE_PAUSE)
    assert session.status is GameStatus.RUNNING


def test_hard_drop_command_locks_piece(session):
    assert dispatch(session, Command.HARD_DROP)
    assert session.board.grid[19].any()
    assert session.score > 0
