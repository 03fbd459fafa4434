"""High-score persistence.

The engine only ever stores one number.  :class:`MemoryHighScoreStore` keeps
it for the lifetime of the process and :class:`JsonHighScoreStore` writes it
to a small JSON document so it survives restarts of the program.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union, runtime_checkable


LOGGER = logging.getLogger(__name__)

HIGH_SCORE_KEY = "high_score"


@runtime_checkable
class HighScoreStore(Protocol):
    """Key-value store holding the best score seen so far."""

    def get_high_score(self) -> int: ...

    def set_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Process-local store, shared by every session that is handed it."""

    def __init__(self, initial: int = 0) -> None:
        self._score = int(initial)

    def get_high_score(self) -> int:
        return self._score

    def set_high_score(self, score: int) -> None:
        self._score = int(score)


class JsonHighScoreStore:
    """Store the high score as ``{"high_score": <int>}`` in ``path``."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get_high_score(self) -> int:
        """Return the stored score, or ``0`` if the file is missing or unreadable."""

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return 0
        try:
            return max(0, int(data[HIGH_SCORE_KEY]))
        except (KeyError, TypeError, ValueError):
            LOGGER.warning("Ignoring malformed high score file %s", self.path)
            return 0

    def set_high_score(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({HIGH_SCORE_KEY: int(score)}), encoding="utf-8")
        LOGGER.debug("Wrote high score %d to %s", score, self.path)
