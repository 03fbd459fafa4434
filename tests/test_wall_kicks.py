from __future__ import annotations

import random

import pytest

from stacker.game_state import GameSession
from stacker.piece import Piece, rotate_matrix
from stacker.shapes import SHAPES, PieceType


T0 = SHAPES[PieceType.T]
T1 = rotate_matrix(T0)
T2 = rotate_matrix(T1)
T3 = rotate_matrix(T2)
I0 = SHAPES[PieceType.I]
I1 = rotate_matrix(I0)
I3 = rotate_matrix(rotate_matrix(I1))


@pytest.fixture
def session() -> GameSession:
    s = GameSession(rng=random.Random(0))
    s.start()
    return s


def test_rotation_in_open_space_keeps_anchor(session):
    session.current = Piece(PieceType.T, T0, x=4, y=5)
    assert session.rotate()
    assert session.current.shape == T1
    assert (session.current.x, session.current.y) == (4, 5)


def test_left_wall_kicks_right_by_one(session):
    session.current = Piece(PieceType.T, T1, x=-1, y=5)
    assert session.rotate()
    assert session.current.shape == T2
    assert session.current.x == 0


def test_right_wall_kicks_left_by_one(session):
    session.current = Piece(PieceType.T, T3, x=8, y=5)
    assert session.rotate()
    assert session.current.shape == T0
    assert session.current.x == 7


def test_i_piece_kicks_right_by_two(session):
    session.current = Piece(PieceType.I, I1, x=-2, y=5)
    assert session.rotate()
    assert session.current.shape == rotate_matrix(I1)
    assert session.current.x == 0


def test_i_piece_kicks_left_by_two(session):
    session.current = Piece(PieceType.I, I3, x=8, y=5)
    assert session.rotate()
    assert session.current.shape == I0
    assert session.current.x == 6


def test_rotation_reverted_when_no_kick_fits(session):
    board = session.board
    board.grid[10:13, :] = 1
    # Carve out exactly the cells the vertical T occupies.
    board.grid[10:13, 0] = 0
    board.grid[11, 1] = 0
    piece = Piece(PieceType.T, T1, x=-1, y=10)
    session.current = piece

    assert not session.rotate()
    assert session.current is piece
    assert session.current.shape == T1
    assert session.current.x == -1


def test_right_kick_preferred_over_left(session):
    # Only the unkicked position collides; both +1 and -1 would fit.
    session.board.grid[7, 5] = 1
    session.current = Piece(PieceType.T, T0, x=4, y=5)
    assert session.rotate()
    assert session.current.shape == T1
    assert session.current.x == 5


def test_kick_by_two_right_preferred_over_two_left(session):
    # The vertical I collides at columns 4..6 and fits at columns 3 and 7.
    session.board.grid[8, 4:7] = 1
    session.current = Piece(PieceType.I, I0, x=3, y=5)
    assert session.rotate()
    assert session.current.shape == I1
    assert session.current.x == 5
