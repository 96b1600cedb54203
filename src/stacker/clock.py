"""Fixed-period tick source driven by elapsed frame time."""

from __future__ import annotations

from .config import TICK_MS


class TickClock:
    """Convert elapsed milliseconds into a count of whole ticks.

    Front-ends feed the time since their last frame into :meth:`advance`; any
    remainder below one interval is carried over to the next call.  A stopped
    clock never reports ticks and drops its accumulated time.
    """

    def __init__(self, interval_ms: float = TICK_MS) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.interval_ms = float(interval_ms)
        self._accum = 0.0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending_ms(self) -> float:
        return self._accum

    def start(self) -> None:
        self._accum = 0.0
        self._running = True

    def stop(self) -> None:
        self._running = False
        self._accum = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Add ``elapsed_ms`` and return how many ticks are now due."""

        if not self._running or elapsed_ms <= 0:
            return 0
        self._accum += elapsed_ms
        due = int(self._accum // self.interval_ms)
        self._accum -= due * self.interval_ms
        return due


__all__ = ["TickClock"]
