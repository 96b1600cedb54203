"""Simple ASCII demo for the stacker engine.

Run with: `python -m stacker`

The demo plays a scripted game: the bar sweeps for a few ticks between every
stack and each frame is printed, ending with the win or loss message.  It is a
minimal smoke test that the engine runs end to end without any display.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from . import GameController, render_ascii
from .config import ConfigurationError, GameConfig


LOGGER = logging.getLogger(__name__)

# Ticks to wait before each stack in the scripted game.
DEFAULT_PATTERN = (0, 1, 2, 3, 1)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a scripted stacker game in the terminal.")
    parser.add_argument("--width", type=int, help="Number of columns on the board.")
    parser.add_argument("--height", type=int, help="Number of rows on the board.")
    parser.add_argument("--bar-size", dest="bar_size", type=int, help="Starting bar width.")
    parser.add_argument("--tick-ms", dest="tick_ms", type=float, help="Milliseconds per bar move.")
    parser.add_argument(
        "--pattern",
        type=int,
        nargs="+",
        default=list(DEFAULT_PATTERN),
        help="Ticks to wait before each stack; the list repeats until the game ends.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def play(controller: GameController, pattern: Sequence[int]) -> List[str]:
    """Play ``controller`` following ``pattern`` and return the printed frames.

    Every stack either ends the game or climbs one row, so the loop finishes
    after at most ``height`` stacks.
    """

    frames: List[str] = []
    if not pattern:
        pattern = DEFAULT_PATTERN
    stacks = 0
    while controller.running:
        for _ in range(max(0, pattern[stacks % len(pattern)])):
            controller.tick()
        controller.on_player_stack()
        stacks += 1
        active = controller.state.active_row_index if controller.running else None
        frames.append(render_ascii(controller.grid, active) + f"\nScore: {controller.score_text}")
    return frames


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s"
    )
    try:
        config = GameConfig.from_mapping(
            {
                "width": args.width,
                "height": args.height,
                "bar_size": args.bar_size,
                "tick_ms": args.tick_ms,
            }
        )
    except ConfigurationError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    outcome: List[bool] = []
    controller = GameController(config, on_game_end=outcome.append)
    for frame in play(controller, args.pattern):
        print(frame)
        print()
    if outcome:
        print("YOU WON" if outcome[0] else "GAME OVER")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
