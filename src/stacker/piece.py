"""The movable piece and its geometric transforms.

A :class:`Piece` is an immutable value: moving or rotating returns a new
candidate which the session only commits once it has been validated against
the board.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from .config import COLS
from .shapes import PIECE_VALUES, PieceType, Shape, color_for, shape_for, spawn_position


def rotate_matrix(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    For an ``R x C`` source the result is ``C x R`` with
    ``result[x][R - 1 - y] == shape[y][x]``: reverse the rows, then transpose.
    """

    return tuple(tuple(column) for column in zip(*shape[::-1]))


@dataclass(frozen=True)
class Piece:
    """Active or queued piece in the game."""

    type: PieceType
    shape: Shape
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, piece_type: PieceType, cols: int = COLS) -> "Piece":
        """Create ``piece_type`` at its centred spawn position."""

        x, y = spawn_position(piece_type, cols)
        return cls(piece_type, shape_for(piece_type), x, y)

    @property
    def color(self) -> str:
        return color_for(self.type)

    @property
    def value(self) -> int:
        """Integer written into the board grid when this piece locks."""

        return PIECE_VALUES[self.type]

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def translated(self, dx: int, dy: int) -> "Piece":
        """Return a copy moved by ``dx`` columns and ``dy`` rows."""

        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "Piece":
        """Return a copy rotated clockwise about the same anchor."""

        return replace(self, shape=rotate_matrix(self.shape))

    def cells(self, dx: int = 0, dy: int = 0) -> Iterator[Tuple[int, int]]:
        """Yield the ``(x, y)`` board coordinates of every filled cell.

        ``dx`` and ``dy`` offset the anchor without creating a new piece.
        """

        for row, line in enumerate(self.shape):
            for col, filled in enumerate(line):
                if filled:
                    yield self.x + col + dx, self.y + row + dy
