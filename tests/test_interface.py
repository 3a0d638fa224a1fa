import pytest

from brickgame.interface import UserAction, update_current_state, user_input
from brickgame.tetris import HEIGHT, WIDTH, Figure, GameState, get_game_instance, get_shape


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    g = get_game_instance()
    g.start()
    return g


def test_update_current_state_adds_current_figure(game):
    info = update_current_state()
    assert any(any(row) for row in info.field)
    assert len(info.field) == HEIGHT
    assert all(len(row) == WIDTH for row in info.field)


def test_snapshot_does_not_change_game_field(game):
    game.current = Figure(shape=get_shape(0), x=3, y=5, kind=0)
    info = update_current_state()
    assert info.field[6][3:7] == [1, 1, 1, 1]
    assert not any(any(row) for row in game.field)


def test_snapshot_carries_next_and_counters(game):
    info = update_current_state()
    assert info.next == [list(row) for row in get_shape(game.next.kind)]
    assert info.score == 0
    assert info.level == 1
    assert info.speed == 500
    assert info.pause == 0


def test_user_input_pause_toggle(game):
    user_input(UserAction.PAUSE, False)
    assert game.paused is True
    assert update_current_state().pause == 1
    user_input(UserAction.PAUSE, False)
    assert game.paused is False


def test_user_input_start_resets_game(game):
    game.score = 999
    user_input(UserAction.START, False)
    assert game.score == 0
    assert game.state is GameState.MOVE


def test_terminate_ends_game(game):
    user_input(UserAction.TERMINATE, False)
    assert game.state is GameState.GAME_OVER
    assert update_current_state().pause == 2


def test_moves_ignored_while_paused(game):
    game.current = Figure(shape=get_shape(0), x=3, y=0, kind=0)
    user_input(UserAction.PAUSE, False)
    user_input(UserAction.LEFT, False)
    assert game.current.x == 3


def test_left_and_right(game):
    game.current = Figure(shape=get_shape(0), x=3, y=0, kind=0)
    user_input(UserAction.LEFT, False)
    assert game.current.x == 2
    user_input(UserAction.RIGHT, False)
    user_input(UserAction.RIGHT, False)
    assert game.current.x == 4


def test_up_drops_one_row(game):
    game.current = Figure(shape=get_shape(0), x=3, y=0, kind=0)
    user_input(UserAction.UP, False)
    assert game.current.y == 1


def test_down_hard_drops(game):
    game.current = Figure(shape=get_shape(0), x=3, y=0, kind=0)
    user_input(UserAction.DOWN, False)
    assert game.field[HEIGHT - 1][3:7] == [1, 1, 1, 1]