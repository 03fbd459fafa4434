from __future__ import annotations

import random

import pytest

from stacker.driver import GameDriver
from stacker.game_state import GameSession, GameSnapshot, GameStatus
from stacker.piece import Piece
from stacker.shapes import SHAPES, PieceType


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: list[GameSnapshot] = []

    def render(self, snapshot: GameSnapshot) -> None:
        self.frames.append(snapshot)


@pytest.fixture
def driver() -> GameDriver:
    d = GameDriver(GameSession(rng=random.Random(9)), RecordingRenderer())
    d.start()
    return d


def test_missing_collaborators_fail_at_construction():
    with pytest.raises(TypeError):
        GameDriver(None, RecordingRenderer())
    with pytest.raises(TypeError):
        GameDriver(GameSession(), None)
    with pytest.raises(TypeError):
        GameDriver(GameSession(), object())


def test_start_draws_first_frame(driver):
    assert len(driver.renderer.frames) == 1
    assert driver.renderer.frames[0].status is GameStatus.RUNNING


def test_advance_draws_each_frame_while_running(driver):
    driver.advance(16)
    driver.advance(16)
    assert len(driver.renderer.frames) == 3


def test_advance_applies_gravity(driver):
    y = driver.session.current.y
    driver.advance(1000)
    assert driver.session.current.y == y + 1
    assert driver.renderer.frames[-1].current.y == y + 1


def test_paused_game_is_not_redrawn_or_advanced(driver):
    assert driver.handle_key("p")
    frames = len(driver.renderer.frames)
    assert driver.renderer.frames[-1].paused
    y = driver.session.current.y
    driver.advance(5000)
    assert len(driver.renderer.frames) == frames
    assert driver.session.current.y == y


def test_keys_redraw_only_on_change(driver):
    driver.session.current = Piece(PieceType.O, SHAPES[PieceType.O], x=0, y=5)
    frames = len(driver.renderer.frames)
    assert driver.handle_key("ArrowLeft") is False
    assert driver.handle_key("Escape") is False
    assert len(driver.renderer.frames) == frames
    assert driver.handle_key("ArrowRight") is True
    assert len(driver.renderer.frames) == frames + 1
    assert driver.renderer.frames[-1].current.x == 1


def test_game_over_stops_redraws(driver):
    session = driver.session
    session.board.grid[0, 4] = 1
    session.current = Piece(PieceType.O, SHAPES[PieceType.O], x=0, y=18)
    session.upcoming = Piece.spawn(PieceType.O)
    driver.advance(1000)
    assert driver.renderer.frames[-1].game_over
    frames = len(driver.renderer.frames)
    driver.advance(1000)
    assert driver.handle_key(" ") is False
    assert len(driver.renderer.frames) == frames
