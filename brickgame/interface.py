"""Boundary between a front end and the game: actions in, snapshots out."""

from __future__ import annotations

import dataclasses
import enum

from brickgame.tetris import HEIGHT, WIDTH, GameState, get_game_instance


class UserAction(enum.IntEnum):
    START = 0
    PAUSE = 1
    TERMINATE = 2
    LEFT = 3
    RIGHT = 4
    UP = 5
    DOWN = 6
    ACTION = 7


@dataclasses.dataclass
class GameInfo:
    """Snapshot of the game for drawing; pause is 0 running, 1 paused, 2 over."""

    field: list[list[int]]
    next: list[list[int]]
    score: int
    high_score: int
    level: int
    speed: int
    pause: int


def user_input(action: UserAction, hold: bool = False) -> None:
    """Apply a player's action to the shared game."""
    del hold
    game = get_game_instance()
    if action is UserAction.START:
        game.start()
    elif action is UserAction.TERMINATE:
        game.state = GameState.GAME_OVER
    elif action is UserAction.PAUSE:
        game.paused = not game.paused

    if game.state is GameState.GAME_OVER or game.paused:
        return
    if action is UserAction.LEFT:
        game.move_figure(-1)
    elif action is UserAction.RIGHT:
        game.move_figure(1)
    elif action is UserAction.DOWN:
        game.hard_drop()
    elif action is UserAction.ACTION:
        game.rotate_figure()
    elif action is UserAction.UP:
        game.drop_figure()


def update_current_state() -> GameInfo:
    """Advance the game clock and return a snapshot with the falling piece drawn in."""
    game = get_game_instance()
    game.tick()
    if not game.paused and game.state is not GameState.GAME_OVER:
        game.tick()

    field = [list(row) for row in game.field]
    for x, y in game.current.cells():
        if 0 <= y < HEIGHT and 0 <= x < WIDTH:
            field[y][x] = 1

    if game.paused:
        pause = 1
    elif game.state is GameState.GAME_OVER:
        pause = 2
    else:
        pause = 0

    return GameInfo(
        field=field,
        next=[list(row) for row in game.next.shape],
        score=game.score,
        high_score=game.high_score,
        level=game.level,
        speed=game.speed,
        pause=pause,
    )