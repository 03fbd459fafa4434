from __future__ import annotations

import json
import logging
import random

from stacker.game_state import GameSession, GameStatus
from stacker.piece import Piece
from stacker.shapes import SHAPES, PieceType
from stacker.storage import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore


def test_stores_satisfy_protocol(tmp_path):
    assert isinstance(MemoryHighScoreStore(), HighScoreStore)
    assert isinstance(JsonHighScoreStore(tmp_path / "scores.json"), HighScoreStore)


def test_memory_store_defaults_to_zero():
    store = MemoryHighScoreStore()
    assert store.get_high_score() == 0
    store.set_high_score(1200)
    assert store.get_high_score() == 1200


def test_json_store_missing_file_is_zero(tmp_path):
    assert JsonHighScoreStore(tmp_path / "missing.json").get_high_score() == 0


def test_json_store_writes_document(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    JsonHighScoreStore(path).set_high_score(4200)
    assert json.loads(path.read_text()) == {"high_score": 4200}
    assert JsonHighScoreStore(path).get_high_score() == 4200


def test_json_store_ignores_corrupt_file(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="stacker.storage"):
        assert JsonHighScoreStore(path).get_high_score() == 0
    assert "unreadable" in caplog.text

    path.write_text(json.dumps({"best": 10}))
    assert JsonHighScoreStore(path).get_high_score() == 0


def test_high_score_survives_new_session(tmp_path):
    store = JsonHighScoreStore(tmp_path / "scores.json")
    first = GameSession(store=store, rng=random.Random(4))
    first.start()
    first.board.grid[0, 4] = 1
    first.current = Piece(PieceType.O, SHAPES[PieceType.O], x=0, y=18)
    first.upcoming = Piece.spawn(PieceType.O)
    first.score = 900
    first.hard_drop()
    assert first.status is GameStatus.GAME_OVER

    second = GameSession(store=JsonHighScoreStore(tmp_path / "scores.json"))
    assert second.high_score == 900
