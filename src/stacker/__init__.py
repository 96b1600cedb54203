"""Tower stacking game engine: a sweeping bar, a grid and the stacking rules."""

from .config import ConfigurationError, GameConfig
from .track import filled_columns, is_at_left_edge, is_at_right_edge, shift_left, shift_right
from .grid import Grid, create_grid
from .oscillator import BarOscillator, Direction, advance
from .resolver import StackOutcome, StackResult, resolve_stack
from .score import ScoreTracker
from .game_state import GameState, GameStatus
from .clock import TickClock
from .controller import GameController
from .utils import format_score, render_ascii, render_grid

__all__ = [
    "BarOscillator",
    "ConfigurationError",
    "Direction",
    "GameConfig",
    "GameController",
    "GameState",
    "GameStatus",
    "Grid",
    "ScoreTracker",
    "StackOutcome",
    "StackResult",
    "TickClock",
    "advance",
    "create_grid",
    "filled_columns",
    "format_score",
    "is_at_left_edge",
    "is_at_right_edge",
    "render_ascii",
    "render_grid",
    "resolve_stack",
    "shift_left",
    "shift_right",
]
