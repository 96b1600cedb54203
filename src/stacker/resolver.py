"""Resolution of the player's stack action.

When the player stacks, the moving bar freezes where it is.  Every bar cell
without a filled cell directly beneath it is trimmed away and the bar shrinks
accordingly.  What is left decides the outcome:

* no cells left: the game is lost and the stack scores nothing;
* the bar was on the top row: the game is won and the stack scores;
* otherwise the stack scores and a new bar of the surviving width appears on
  the row above, flush against the left edge and moving right.

The bottom row has nothing beneath it, so the first stack never trims.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .grid import Grid
from .track import EMPTY, FILLED


class StackResult(str, Enum):
    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class StackOutcome:
    """Everything a single stack action changed."""

    result: StackResult
    bar_size: int
    trimmed: Tuple[int, ...] = ()
    score_delta: int = 0
    next_row_index: Optional[int] = None

    @property
    def terminal(self) -> bool:
        return self.result is not StackResult.CONTINUE


def trim_unsupported(grid: Grid, row_index: int) -> Tuple[int, ...]:
    """Clear cells of row ``row_index`` with nothing beneath them.

    Returns the trimmed columns.  The bottom row is always fully supported.
    """

    if row_index >= grid.bottom:
        return ()
    active = grid.row(row_index)
    below = grid.row(row_index + 1)
    trimmed = []
    for col in range(grid.width):
        if active[col] == FILLED and below[col] == EMPTY:
            active[col] = EMPTY
            trimmed.append(col)
    return tuple(trimmed)


def resolve_stack(grid: Grid, active_row_index: int, bar_size: int) -> StackOutcome:
    """Freeze the bar on ``active_row_index`` and work out what happens next.

    ``grid`` is mutated in place: unsupported cells are cleared and, when play
    continues, the next bar is placed on the row above.

    Raises:
        ValueError: If ``bar_size`` is not positive; a lost game must not be
            stacked again.
    """

    if bar_size <= 0:
        raise ValueError("Cannot stack a bar with no cells left")

    trimmed = trim_unsupported(grid, active_row_index)
    bar_size -= len(trimmed)

    if bar_size <= 0:
        return StackOutcome(StackResult.LOST, bar_size=0, trimmed=trimmed)

    if active_row_index == 0:
        return StackOutcome(
            StackResult.WON, bar_size=bar_size, trimmed=trimmed, score_delta=bar_size
        )

    next_index = active_row_index - 1
    grid.fill_bar(next_index, bar_size)
    return StackOutcome(
        StackResult.CONTINUE,
        bar_size=bar_size,
        trimmed=trimmed,
        score_delta=bar_size,
        next_row_index=next_index,
    )


__all__ = ["StackOutcome", "StackResult", "resolve_stack", "trim_unsupported"]
