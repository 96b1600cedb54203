"""Gymnasium-compatible wrapper for the stacker game.

Each step is one tick of the game clock.  The agent chooses whether to stack
before the bar moves:

  - ``0``: wait, the bar moves one cell
  - ``1``: stack, then the new bar (if any) moves one cell

Observation is a flat vector suitable for SB3 MlpPolicy:
  - grid occupancy (height x width)
  - bar size as a fraction of the track width
  - active row height as a fraction of the board height

Reward is the score gained by the step; the episode terminates when the game
is won or lost.
"""

from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GameConfig
from .controller import GameController
from .utils import render_ascii

WAIT = 0
STACK = 1


class StackerGymEnv(gym.Env):
    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        max_steps: Optional[int] = None,
        loss_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.loss_penalty = loss_penalty
        self._game = GameController(self.config)
        self.action_space = spaces.Discrete(2)
        self._obs_size = self.config.height * self.config.width + 2
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(self._obs_size,), dtype=np.float32
        )
        self._steps = 0
        self._max_steps = max_steps

    @property
    def game(self) -> GameController:
        return self._game

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._game.restart()
        self._steps = 0
        return self._observation(), self._info()

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")
        before = self._game.score
        if action == STACK:
            self._game.on_player_stack()
        self._game.tick()
        self._steps += 1

        reward = float(self._game.score - before)
        terminated = not self._game.running
        if terminated and self._game.state.bar_size == 0:
            reward += self.loss_penalty
        truncated = False
        if self._max_steps is not None and self._steps >= self._max_steps:
            truncated = True
        return self._observation(), reward, terminated, truncated, self._info()

    def render(self):
        return render_ascii(self._game.grid)

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _observation(self) -> np.ndarray:
        state = self._game.state
        cells = state.grid.cells.astype(np.float32).reshape(-1)
        extras = np.array(
            [
                state.bar_size / self.config.width,
                state.level / max(1, self.config.height - 1),
            ],
            dtype=np.float32,
        )
        return np.concatenate([cells, extras], dtype=np.float32)

    def _info(self) -> Dict:
        state = self._game.state
        return {
            "score": state.score.value,
            "bar_size": state.bar_size,
            "status": state.status.value,
        }


__all__ = ["STACK", "StackerGymEnv", "WAIT"]
