"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import GameConfig
from .grid import Grid, create_grid
from .oscillator import Direction
from .score import ScoreTracker
from .track import Row


class GameStatus(str, Enum):
    RUNNING = "running"
    WON = "won"
    LOST = "lost"

    @property
    def terminal(self) -> bool:
        return self is not GameStatus.RUNNING


@dataclass
class GameState:
    """Mutable state for a single stacker game.

    Only :class:`~stacker.controller.GameController` should mutate an instance;
    everything else reads it.
    """

    config: GameConfig = field(default_factory=GameConfig)
    grid: Grid = field(init=False)
    active_row_index: int = field(init=False)
    direction: Direction = field(init=False)
    bar_size: int = field(init=False)
    score: ScoreTracker = field(init=False)
    status: GameStatus = field(init=False)

    def __post_init__(self) -> None:
        self.reset_game()

    @property
    def active_row(self) -> Row:
        """The row the bar is currently sweeping."""

        return self.grid.row(self.active_row_index)

    @property
    def level(self) -> int:
        """Number of successful stacks so far (rows climbed)."""

        return self.grid.bottom - self.active_row_index

    def reset_game(self) -> None:
        """Reset the entire game state for a new game."""

        self.grid = create_grid(self.config)
        self.active_row_index = self.grid.bottom
        self.direction = Direction.RIGHT
        self.bar_size = self.config.bar_size
        self.score = ScoreTracker()
        self.status = GameStatus.RUNNING


__all__ = ["GameState", "GameStatus"]
