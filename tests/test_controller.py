import logging

import pytest

from stacker.config import GameConfig
from stacker.controller import GameController
from stacker.game_state import GameStatus
from stacker.oscillator import Direction
from stacker.resolver import StackResult


def test_new_game_starts_on_bottom_row():
    game = GameController()
    assert game.status is GameStatus.RUNNING
    assert game.state.active_row_index == 7
    assert game.state.direction is Direction.RIGHT
    assert game.state.bar_size == 3
    assert game.score == 0
    assert game.score_text == "00000"
    assert game.grid[-1] == [1, 1, 1, 0, 0, 0]
    assert game.clock.running


def test_first_stack_succeeds_and_moves_up():
    game = GameController()
    outcome = game.on_player_stack()

    assert outcome is not None
    assert outcome.result is StackResult.CONTINUE
    assert game.score == 3
    assert game.state.active_row_index == 6
    assert game.grid[6] == [1, 1, 1, 0, 0, 0]
    assert game.grid[7] == [1, 1, 1, 0, 0, 0]


def test_overhang_is_trimmed_and_scored_at_new_width():
    game = GameController()
    game.tick()
    assert game.grid[7] == [0, 1, 1, 1, 0, 0]
    game.on_player_stack()
    assert game.score == 3

    game.on_player_stack()

    assert game.state.bar_size == 2
    assert game.score == 5
    assert game.grid[6] == [0, 1, 1, 0, 0, 0]
    assert game.grid[5] == [1, 1, 0, 0, 0, 0]
    assert game.state.direction is Direction.RIGHT


def test_stack_resets_direction_to_right():
    game = GameController()
    for _ in range(4):
        game.tick()
    assert game.state.direction is Direction.LEFT
    game.on_player_stack()
    assert game.state.direction is Direction.RIGHT


def test_losing_last_cell_ends_game_in_defeat():
    results: list[bool] = []
    game = GameController(GameConfig(bar_size=1), on_game_end=results.append)
    game.on_player_stack()
    game.tick()
    assert game.grid[6] == [0, 1, 0, 0, 0, 0]

    outcome = game.on_player_stack()

    assert outcome is not None and outcome.result is StackResult.LOST
    assert game.status is GameStatus.LOST
    assert game.state.bar_size == 0
    assert game.score == 1
    assert results == [False]
    assert not game.clock.running


def test_reaching_the_top_wins():
    results: list[bool] = []
    game = GameController(GameConfig(height=2), on_game_end=results.append)
    game.on_player_stack()
    assert game.state.active_row_index == 0

    game.on_player_stack()

    assert game.status is GameStatus.WON
    assert game.score == 6
    assert results == [True]


def test_perfect_play_on_default_board_wins_with_full_score():
    game = GameController()
    for _ in range(8):
        game.on_player_stack()
    assert game.status is GameStatus.WON
    assert game.score == 24
    assert game.score_text == "00024"


def test_nothing_changes_after_game_over():
    results: list[bool] = []
    game = GameController(GameConfig(height=1), on_game_end=results.append)
    game.on_player_stack()
    assert game.status is GameStatus.WON
    grid, score, size = game.grid, game.score, game.state.bar_size

    game.tick()
    assert game.on_player_stack() is None
    assert game.update(10_000) == 0

    assert game.grid == grid
    assert game.score == score
    assert game.state.bar_size == size
    assert game.status is GameStatus.WON
    assert results == [True]


def test_tick_queued_by_listener_after_game_end_is_ignored(caplog):
    game = GameController(GameConfig(height=1))
    game.add_render_listener(lambda _state: game.tick())

    with caplog.at_level(logging.DEBUG, logger="stacker.controller"):
        game.on_player_stack()

    assert game.grid[0] == [1, 1, 1, 0, 0, 0]
    assert any("Ignoring tick" in message for message in caplog.messages)


def test_action_from_listener_runs_after_current_event():
    game = GameController()
    seen: list[int] = []

    def on_render(state):
        seen.append(state.active_row_index)
        if len(seen) == 1:
            # Posted while the tick is still being processed.
            assert game.on_player_stack() is None

    game.add_render_listener(on_render)
    game.tick()

    assert seen == [7, 6]
    assert game.score == 3
    assert game.grid[7] == [0, 1, 1, 1, 0, 0]


def test_update_runs_due_ticks():
    game = GameController()
    assert game.update(599) == 0
    assert game.grid[7] == [1, 1, 1, 0, 0, 0]
    assert game.update(1) == 1
    assert game.grid[7] == [0, 1, 1, 1, 0, 0]
    assert game.update(1200) == 2
    assert game.grid[7] == [0, 0, 0, 1, 1, 1]


def test_render_listener_called_after_each_change():
    renders: list[GameStatus] = []
    game = GameController(on_render=lambda state: renders.append(state.status))
    game.tick()
    game.on_player_stack()
    assert renders == [GameStatus.RUNNING, GameStatus.RUNNING]


def test_restart_discards_previous_game():
    results: list[bool] = []
    game = GameController(GameConfig(height=1), on_game_end=results.append)
    game.on_player_stack()
    assert game.status is GameStatus.WON

    game.restart()

    assert game.status is GameStatus.RUNNING
    assert game.score == 0
    assert game.state.bar_size == 3
    assert game.grid == [[1, 1, 1, 0, 0, 0]]
    assert game.clock.running

    game.on_player_stack()
    assert results == [True, True]


def test_games_are_independent():
    first = GameController()
    second = GameController()
    first.on_player_stack()
    assert second.score == 0
    assert second.state.active_row_index == 7


def test_outcomes_are_logged(caplog):
    game = GameController(GameConfig(height=1))
    with caplog.at_level(logging.INFO, logger="stacker.controller"):
        game.on_player_stack()
    assert "Game won with score 3" in caplog.messages


def test_nothing_changes_after_defeat():
    results: list[bool] = []
    game = GameController(GameConfig(bar_size=1), on_game_end=results.append)
    game.on_player_stack()
    game.tick()
    game.on_player_stack()
    assert game.status is GameStatus.LOST
    grid, score = game.grid, game.score

    game.tick()
    assert game.on_player_stack() is None
    assert game.update(10_000) == 0

    assert game.grid == grid
    assert game.score == score
    assert game.state.bar_size == 0
    assert game.status is GameStatus.LOST
    assert results == [False]


def test_end_listener_runs_when_render_listener_fails():
    results: list[bool] = []
    game = GameController(GameConfig(height=1), on_game_end=results.append)

    def broken_render(_state):
        raise RuntimeError("display gone")

    game.add_render_listener(broken_render)

    with pytest.raises(RuntimeError):
        game.on_player_stack()

    assert game.status is GameStatus.WON
    assert results == [True]
    game.on_player_stack()
    assert results == [True]
