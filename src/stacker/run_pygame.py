"""Simple pygame front-end for the stacker engine.

This module provides a minimal playable version of the game using the engine
implemented in the surrounding modules.  It is intentionally lightweight and
only glues the controller to ``pygame`` for rendering and input: space, enter
or a left click stacks, ``R`` restarts and closing the window quits.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

import pygame

from .config import GameConfig
from .controller import GameController
from .game_state import GameState


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 60
# Gap between cells in pixels
CELL_GAP = 4
# Height of the score panel above the board
PANEL_HEIGHT = 60
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (18, 18, 32)
EMPTY_COLOR = (40, 40, 60)
BAR_COLOR = (255, 196, 0)
PLACED_COLOR = (0, 170, 255)
TEXT_COLOR = (240, 240, 240)
WIN_COLOR = (40, 200, 90)
LOSE_COLOR = (220, 50, 50)

STACK_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


def board_size(config: GameConfig) -> tuple[int, int]:
    """Return the window size in pixels for ``config``."""

    width = config.width * (CELL_SIZE + CELL_GAP) + CELL_GAP
    height = config.height * (CELL_SIZE + CELL_GAP) + CELL_GAP + PANEL_HEIGHT
    return width, height


def handle_event(event: pygame.event.Event, controller: GameController) -> bool:
    """Apply a pygame input event to ``controller``.

    Returns ``False`` when the event asks the game to quit.
    """

    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key in STACK_KEYS:
            controller.on_player_stack()
        elif event.key == pygame.K_r:
            controller.restart()
        elif event.key == pygame.K_ESCAPE:
            return False
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if controller.running:
            controller.on_player_stack()
        else:
            # Clicking the end-of-game overlay plays again.
            controller.restart()
    return True


def draw_board(screen: pygame.Surface, state: GameState) -> None:
    """Render every cell, highlighting the row the bar is moving on."""

    for r in range(state.grid.height):
        moving = not state.status.terminal and r == state.active_row_index
        for c in range(state.grid.width):
            filled = state.grid.get_cell(r, c)
            if filled:
                color = BAR_COLOR if moving else PLACED_COLOR
            else:
                color = EMPTY_COLOR
            rect = pygame.Rect(
                CELL_GAP + c * (CELL_SIZE + CELL_GAP),
                PANEL_HEIGHT + CELL_GAP + r * (CELL_SIZE + CELL_GAP),
                CELL_SIZE,
                CELL_SIZE,
            )
            pygame.draw.rect(screen, color, rect, border_radius=6)


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, victory: bool) -> None:
    """Dim the board and show the end-of-game text."""

    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 170))
    screen.blit(shade, (0, 0))
    text = "YOU WON" if victory else "GAME OVER"
    label = font.render(text, True, WIN_COLOR if victory else LOSE_COLOR)
    hint = font.render("Click or R to play again", True, TEXT_COLOR)
    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    screen.blit(label, label.get_rect(center=(cx, cy - 20)))
    screen.blit(hint, hint.get_rect(center=(cx, cy + 20)))


class GameRunner:
    """Manage the pygame loop around a :class:`GameController`."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._running = False
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._victory: Optional[bool] = None
        self.controller = GameController(self.config, on_game_end=self._on_game_end)
        self.controller.add_render_listener(self._on_render)
        self._dirty = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def victory(self) -> Optional[bool]:
        """``True``/``False`` once the game has ended, ``None`` while playing."""

        return self._victory

    def _on_game_end(self, victory: bool) -> None:
        self._victory = victory
        LOGGER.info("YOU WON" if victory else "GAME OVER")

    def _on_render(self, state: GameState) -> None:
        if not state.status.terminal:
            self._victory = None
        self._dirty = True

    def _draw(self) -> None:
        if not self._screen or not self._font:
            return
        state = self.controller.state
        self._screen.fill(BACKGROUND)
        score = self._font.render(f"SCORE {self.controller.score_text}", True, TEXT_COLOR)
        self._screen.blit(score, (CELL_GAP * 2, (PANEL_HEIGHT - score.get_height()) // 2))
        draw_board(self._screen, state)
        if self._victory is not None:
            draw_overlay(self._screen, self._font, self._victory)
        pygame.display.flip()
        self._dirty = False

    async def _run_loop(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        self._screen = pygame.display.set_mode(board_size(self.config))
        pygame.display.set_caption("Stacker")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 36)

        self.controller.restart()
        self._running = True
        while self._running:
            dt = self._clock.tick(FPS) if self._clock else 0
            for event in pygame.event.get():
                if not handle_event(event, self.controller):
                    self._running = False
            self.controller.update(dt)
            if self._dirty:
                self._draw()
            # Yield to the browser/host event loop to keep UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (e.g., plain Python); run synchronously
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


def main() -> None:
    """Open a window and play until it is closed."""

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    GameRunner().start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
