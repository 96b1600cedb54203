"""Accumulation grid holding every placed bar plus the moving one."""

from __future__ import annotations

from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from .config import GameConfig
from .track import EMPTY, FILLED, Row


Cells = NDArray[np.uint8]


def create_empty_cells(height: int, width: int) -> Cells:
    """Return a new ``(height, width)`` array filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Grid:
    """Stack of track rows indexed from ``0`` (top) to ``height - 1`` (bottom)."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: Cells = create_empty_cells(height, width)

    @property
    def bottom(self) -> int:
        """Index of the bottom row."""

        return self.height - 1

    def row(self, index: int) -> Row:
        """Return row ``index`` as a view; writes go straight into the grid.

        Raises:
            IndexError: If ``index`` is not a row of the grid.
        """
        if 0 <= index < self.height:
            return self.cells[index]
        raise IndexError("Row out of bounds")

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.cells[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.cells[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def fill_bar(self, index: int, size: int) -> None:
        """Fill the first ``size`` columns of row ``index``, leaving the rest empty."""

        if not 0 <= size <= self.width:
            raise ValueError(f"Bar of size {size} does not fit width {self.width}")
        row = self.row(index)
        row[:] = EMPTY
        row[:size] = FILLED

    def filled_count(self, index: Optional[int] = None) -> int:
        """Return the number of filled cells in row ``index`` or in the whole grid."""

        cells = self.cells if index is None else self.row(index)
        return int(np.count_nonzero(cells))

    def snapshot(self) -> List[List[int]]:
        """Return a plain nested-list copy safe to hand to renderers."""

        return self.cells.tolist()


def create_grid(config: GameConfig) -> Grid:
    """Return the starting grid: an empty board with the bar on the bottom row."""

    grid = Grid(config.width, config.height)
    grid.fill_bar(grid.bottom, config.bar_size)
    return grid


__all__ = ["Cells", "Grid", "create_empty_cells", "create_grid"]
