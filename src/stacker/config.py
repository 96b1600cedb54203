"""Game configuration and validation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


# Dimensions of the standard stacker board.
WIDTH = 6
HEIGHT = 8

# Width of the bar placed on the bottom row when a game starts.
INITIAL_BAR_SIZE = 3

# Milliseconds between automatic bar moves
TICK_MS = 600

# Digits used when displaying the score, e.g. ``00012``.
SCORE_DIGITS = 5


class ConfigurationError(ValueError):
    """Raised when a configuration makes play impossible."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for a single game."""

    width: int = WIDTH
    height: int = HEIGHT
    bar_size: int = INITIAL_BAR_SIZE
    tick_ms: float = TICK_MS
    score_digits: int = SCORE_DIGITS

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the settings and raise :class:`ConfigurationError` if invalid.

        A board needs at least one row and one column, and the starting bar
        must contain at least one cell and fit on the track.
        """

        if self.width < 1:
            raise ConfigurationError(f"width must be at least 1, got {self.width}")
        if self.height < 1:
            raise ConfigurationError(f"height must be at least 1, got {self.height}")
        if self.bar_size < 1:
            raise ConfigurationError(f"bar_size must be at least 1, got {self.bar_size}")
        if self.bar_size > self.width:
            raise ConfigurationError(
                f"bar_size ({self.bar_size}) does not fit a track of width {self.width}"
            )
        if self.tick_ms <= 0:
            raise ConfigurationError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.score_digits < 1:
            raise ConfigurationError(
                f"score_digits must be at least 1, got {self.score_digits}"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "GameConfig":
        """Build a config from ``values``, ignoring keys mapped to ``None``.

        Unknown keys are rejected so that typos in command line flags or
        settings files do not silently fall back to defaults.
        """

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown setting(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in values.items() if v is not None})


__all__ = [
    "ConfigurationError",
    "GameConfig",
    "HEIGHT",
    "INITIAL_BAR_SIZE",
    "SCORE_DIGITS",
    "TICK_MS",
    "WIDTH",
]
