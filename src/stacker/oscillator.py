"""The bar oscillator sweeping the active row back and forth."""

from __future__ import annotations

from enum import Enum

from .track import Row, is_at_left_edge, is_at_right_edge, shift_left, shift_right


class Direction(str, Enum):
    """Direction the bar is currently moving in."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def reversed(self) -> "Direction":
        return Direction.LEFT if self is Direction.RIGHT else Direction.RIGHT


def advance(row: Row, direction: Direction) -> Direction:
    """Move the bar in ``row`` one cell and return the direction for the next tick.

    The edge check runs on the shifted row so the bar bounces exactly when it
    touches an edge and never overshoots.  A bar already touching the edge it
    is heading for (only possible when it spans the whole track) turns around
    in place instead of losing a cell off the end.
    """

    if direction is Direction.RIGHT:
        if is_at_right_edge(row):
            return Direction.LEFT
        shift_right(row)
        if is_at_right_edge(row):
            return Direction.LEFT
    else:
        if is_at_left_edge(row):
            return Direction.RIGHT
        shift_left(row)
        if is_at_left_edge(row):
            return Direction.RIGHT
    return direction


class BarOscillator:
    """Bind a row and a direction so :func:`advance` can be stepped repeatedly."""

    def __init__(self, row: Row, direction: Direction = Direction.RIGHT) -> None:
        self.row = row
        self.direction = direction

    def advance(self) -> Direction:
        self.direction = advance(self.row, self.direction)
        return self.direction


__all__ = ["BarOscillator", "Direction", "advance"]
