"""Utility helpers for renderers."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .config import SCORE_DIGITS
from .game_state import GameState


def render_grid(state: GameState) -> List[List[int]]:
    """Return a copy of the grid cells including the moving bar.

    Renderers get a plain nested list they may keep or modify without touching
    the game state.
    """

    return state.grid.snapshot()


def format_score(score: int, digits: int = SCORE_DIGITS) -> str:
    """Return ``score`` zero-padded to ``digits`` characters, e.g. ``00012``."""

    return str(score).zfill(digits)


def render_ascii(grid: Sequence[Sequence[int]], active_row: Optional[int] = None) -> str:
    """Return ``grid`` as text, ``#`` for filled and ``.`` for empty cells.

    When ``active_row`` is given that line is marked with a ``<`` so the moving
    bar can be told apart from the placed ones.
    """

    lines = []
    for index, row in enumerate(grid):
        line = "".join("#" if cell else "." for cell in row)
        if index == active_row:
            line += " <"
        lines.append(line)
    return "\n".join(lines)


__all__ = ["format_score", "render_ascii", "render_grid"]
