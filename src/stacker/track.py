"""Operations on a single track row.

A row is a one dimensional ``numpy`` array of ``0`` (empty) and ``1``
(filled) cells.  All shifts mutate the row in place; nothing wraps around, the
cell pushed off one end is discarded and the vacated end becomes empty.
"""

from __future__ import annotations

from typing import List

import numpy as np
from numpy.typing import NDArray


Row = NDArray[np.uint8]

EMPTY = 0
FILLED = 1


def shift_right(row: Row) -> None:
    """Drop the last cell and insert an empty cell at the front."""

    row[1:] = row[:-1].copy()
    row[0] = EMPTY


def shift_left(row: Row) -> None:
    """Drop the first cell and append an empty cell at the back."""

    row[:-1] = row[1:].copy()
    row[-1] = EMPTY


def is_at_right_edge(row: Row) -> bool:
    return bool(row[-1] == FILLED)


def is_at_left_edge(row: Row) -> bool:
    return bool(row[0] == FILLED)


def filled_columns(row: Row) -> List[int]:
    """Return the indices of the filled cells in ``row`` in ascending order."""

    return [int(c) for c in np.flatnonzero(row)]


__all__ = [
    "EMPTY",
    "FILLED",
    "Row",
    "filled_columns",
    "is_at_left_edge",
    "is_at_right_edge",
    "shift_left",
    "shift_right",
]
