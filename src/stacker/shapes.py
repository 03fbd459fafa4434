"""Static catalogue of the seven piece types.

Each :class:`PieceType` owns a spawn-orientation shape matrix, a display
colour and the integer written into the board grid when the piece locks.
Matrices are stored as tuples of tuples so catalogue entries can never be
mutated by a moving piece.  The ``I`` piece is padded to a 4x4 box and the
other pieces (except ``O``) to 3x3 so rotations keep their bounding box.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict, Tuple

Shape = Tuple[Tuple[int, ...], ...]


class PieceType(str, Enum):
    """Enumeration of the seven standard piece shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


SHAPES: Dict[PieceType, Shape] = {
    PieceType.I: ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),
    PieceType.J: ((1, 0, 0), (1, 1, 1), (0, 0, 0)),
    PieceType.L: ((0, 0, 1), (1, 1, 1), (0, 0, 0)),
    PieceType.O: ((1, 1), (1, 1)),
    PieceType.S: ((0, 1, 1), (1, 1, 0), (0, 0, 0)),
    PieceType.T: ((0, 1, 0), (1, 1, 1), (0, 0, 0)),
    PieceType.Z: ((1, 1, 0), (0, 1, 1), (0, 0, 0)),
}

COLORS: Dict[PieceType, str] = {
    PieceType.I: "#00f5ff",
    PieceType.J: "#0066ff",
    PieceType.L: "#ff9900",
    PieceType.O: "#ffff00",
    PieceType.S: "#00ff66",
    PieceType.T: "#cc00ff",
    PieceType.Z: "#ff0033",
}

# Mapping from ``PieceType`` to the integer stored in the grid.  ``0`` is
# reserved for empty cells.
PIECE_VALUES: Dict[PieceType, int] = {t: i + 1 for i, t in enumerate(PieceType)}
VALUE_TYPES: Dict[int, PieceType] = {v: t for t, v in PIECE_VALUES.items()}


def shape_for(piece_type: PieceType) -> Shape:
    """Return the spawn-orientation matrix for ``piece_type``."""

    return SHAPES[piece_type]


def color_for(piece_type: PieceType) -> str:
    """Return the hex colour for ``piece_type``."""

    return COLORS[piece_type]


def spawn_position(piece_type: PieceType, cols: int) -> Tuple[int, int]:
    """Return the ``(x, y)`` anchor centring ``piece_type`` on a board of ``cols``.

    The anchor is the top-left corner of the shape's bounding box.
    """

    width = len(SHAPES[piece_type][0])
    return cols // 2 - math.ceil(width / 2), 0
