"""Board representation for the playfield."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .config import COLS, ROWS


Grid = NDArray[np.uint8]


def create_empty_grid(height: int = ROWS, width: int = COLS) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size grid holding the locked cells.

    Row ``0`` is the topmost visible row.  Grid accessors take ``(row, col)``
    while the collision helpers take ``(x, y)`` board coordinates, matching
    how pieces store their anchor.
    """

    def __init__(self, height: int = ROWS, width: int = COLS) -> None:
        self.height = height
        self.width = width
        self.grid: Grid = create_empty_grid(height, width)

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at column ``x``, row ``y`` blocks a piece.

        Columns outside the board and rows at or below the floor count as
        occupied so off-board positions are automatically rejected.  Rows above
        the top (``y < 0``) are free: pieces spawn partly above the board.
        """

        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return bool(self.grid[y, x] != 0)

    def lock_cell(self, x: int, y: int, value: int) -> None:
        """Write ``value`` into column ``x``, row ``y``.

        Cells above the board are skipped silently.

        Raises:
            IndexError: If ``x`` is outside the board or ``y`` is below it.
        """

        if y < 0:
            return
        self.set_cell(y, x, value)

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Every row is tested once against the current grid, so several full
        rows, contiguous or not, disappear in one call.  The remaining rows
        keep their relative order and empty rows are inserted at the top.
        """

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def copy(self) -> "Board":
        """Return an independent copy of this board."""

        clone = Board(self.height, self.width)
        clone.grid = self.grid.copy()
        return clone
