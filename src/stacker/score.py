"""Running score for a game."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCORE_DIGITS


@dataclass
class ScoreTracker:
    """Accumulate the bar width kept at each successful stack."""

    value: int = 0

    def add(self, amount: int) -> int:
        """Add ``amount`` to the score and return the new total.

        The score only ever grows, so negative amounts raise ``ValueError``.
        """

        if amount < 0:
            raise ValueError(f"Score cannot decrease (got {amount})")
        self.value += amount
        return self.value

    def format(self, digits: int = SCORE_DIGITS) -> str:
        """Return the score zero-padded to ``digits`` characters."""

        return str(self.value).zfill(digits)


__all__ = ["ScoreTracker"]
