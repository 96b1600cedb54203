"""Game controller tying the oscillator, resolver and score together.

The controller is the single owner of a :class:`~stacker.game_state.GameState`.
Timer ticks and player stack actions are both turned into events on one queue
and applied strictly one after the other, so a stack is never interleaved with
a half-finished tick.  Front-ends only call the public methods and read the
accessors; they never touch the state directly.

Example usage
-------------

>>> from stacker.controller import GameController
>>> game = GameController()
>>> outcome = game.on_player_stack()
>>> game.score
3
>>> game.state.active_row_index
6
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Optional

from .clock import TickClock
from .config import GameConfig
from .game_state import GameState, GameStatus
from .oscillator import Direction, advance
from .resolver import StackOutcome, StackResult, resolve_stack
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

RenderListener = Callable[[GameState], None]
EndListener = Callable[[bool], None]


class EventType(str, Enum):
    TICK = "tick"
    STACK = "stack"


@dataclass(eq=False)
class _Event:
    kind: EventType
    outcome: Optional[StackOutcome] = None


class GameController:
    """Run one stacker game at a time and notify listeners of changes."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        on_render: Optional[RenderListener] = None,
        on_game_end: Optional[EndListener] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.clock = TickClock(self.config.tick_ms)
        self._render_listeners: List[RenderListener] = []
        self._end_listeners: List[EndListener] = []
        if on_render is not None:
            self._render_listeners.append(on_render)
        if on_game_end is not None:
            self._end_listeners.append(on_game_end)
        self._queue: Deque[_Event] = deque()
        self._draining = False
        self._end_notified = False
        self._state = GameState(self.config)
        self.clock.start()
        LOGGER.info(
            "Game started (%dx%d board, bar size %d)",
            self.config.width,
            self.config.height,
            self.config.bar_size,
        )

    # Accessors --------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def running(self) -> bool:
        return self._state.status is GameStatus.RUNNING

    @property
    def grid(self) -> List[List[int]]:
        """Copy of the grid cells for redrawing."""

        return render_grid(self._state)

    @property
    def score(self) -> int:
        return self._state.score.value

    @property
    def score_text(self) -> str:
        return self._state.score.format(self.config.score_digits)

    # Listeners --------------------------------------------------------
    def add_render_listener(self, listener: RenderListener) -> None:
        self._render_listeners.append(listener)

    def add_end_listener(self, listener: EndListener) -> None:
        """Subscribe ``listener`` to the end of game; it receives ``victory``."""

        self._end_listeners.append(listener)

    # Inbound events ---------------------------------------------------
    def tick(self) -> None:
        """Move the bar one cell, unless the game is over."""

        self._post([_Event(EventType.TICK)])

    def update(self, elapsed_ms: float) -> int:
        """Feed frame time to the periodic driver and run any ticks now due.

        Returns the number of ticks that were queued.
        """

        due = self.clock.advance(elapsed_ms)
        if due:
            self._post([_Event(EventType.TICK) for _ in range(due)])
        return due

    def on_player_stack(self) -> Optional[StackOutcome]:
        """Freeze the bar where it is and resolve the stack.

        Returns the outcome, or ``None`` when the action was ignored because
        the game is over or when it was queued behind the event currently
        being processed.
        """

        event = _Event(EventType.STACK)
        self._post([event])
        return event.outcome

    def restart(self) -> None:
        """Throw the current game away and start a fresh one."""

        self._queue.clear()
        self._state = GameState(self.config)
        self._end_notified = False
        self.clock.start()
        LOGGER.info("Game restarted")
        self._render()

    # Event processing -------------------------------------------------
    def _post(self, events: List[_Event]) -> None:
        self._queue.extend(events)
        if self._draining:
            # Called from a listener; the outer loop picks these up.
            return
        self._draining = True
        try:
            while self._queue:
                self._dispatch(self._queue.popleft())
        finally:
            self._draining = False

    def _dispatch(self, event: _Event) -> None:
        if not self.running:
            LOGGER.debug("Ignoring %s event: game is %s", event.kind.value, self.status.value)
            return
        if event.kind is EventType.TICK:
            self._advance_bar()
        else:
            event.outcome = self._stack()

    def _advance_bar(self) -> None:
        state = self._state
        state.direction = advance(state.active_row, state.direction)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "Tick: row %d now %s, heading %s",
                state.active_row_index,
                state.active_row.tolist(),
                state.direction.value,
            )
        self._render()

    def _stack(self) -> StackOutcome:
        state = self._state
        outcome = resolve_stack(state.grid, state.active_row_index, state.bar_size)
        state.bar_size = outcome.bar_size
        if outcome.result is not StackResult.LOST:
            state.score.add(outcome.score_delta)

        if outcome.result is StackResult.CONTINUE:
            assert outcome.next_row_index is not None
            state.active_row_index = outcome.next_row_index
            state.direction = Direction.RIGHT
            LOGGER.info(
                "Stacked on row %d: trimmed %s, bar size %d, score %d",
                outcome.next_row_index + 1,
                list(outcome.trimmed),
                state.bar_size,
                state.score.value,
            )
            self._render()
            return outcome

        won = outcome.result is StackResult.WON
        self._finish(GameStatus.WON if won else GameStatus.LOST)
        try:
            self._render()
        finally:
            # Later events are ignored, so this is the only chance to notify.
            self._notify_end(won)
        return outcome

    def _finish(self, status: GameStatus) -> None:
        self._state.status = status
        self.clock.stop()
        # Ticks queued before the game ended must not move anything.
        self._queue = deque(e for e in self._queue if e.kind is not EventType.TICK)
        LOGGER.info("Game %s with score %d", status.value, self._state.score.value)

    def _render(self) -> None:
        for listener in list(self._render_listeners):
            listener(self._state)

    def _notify_end(self, victory: bool) -> None:
        if self._end_notified:
            return
        self._end_notified = True
        for listener in list(self._end_listeners):
            listener(victory)


__all__ = ["EndListener", "EventType", "GameController", "RenderListener"]
