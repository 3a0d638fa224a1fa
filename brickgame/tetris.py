"""Falling-block game rules: pieces, the playing field, collisions and scoring."""

from __future__ import annotations

import dataclasses
import enum
import functools
import random
import time
from collections.abc import Iterator
from pathlib import Path

WIDTH = 10
HEIGHT = 20
FIGURE_SIZE = 4

INITIAL_SPEED = 500
MIN_SPEED = 100
SPEED_STEP = 45
POINTS_PER_LEVEL = 600
MAX_LEVEL = 10
LINE_POINTS = (0, 100, 300, 700, 1500)

Shape = tuple[tuple[int, ...], ...]

_SHAPES: tuple[Shape, ...] = (
    ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),
    ((0, 0, 0, 0), (1, 1, 0, 0), (0, 1, 1, 0), (0, 0, 0, 0)),
    ((0, 0, 0, 0), (0, 1, 1, 0), (1, 1, 0, 0), (0, 0, 0, 0)),
    ((0, 0, 0, 0), (1, 0, 0, 0), (1, 1, 1, 0), (0, 0, 0, 0)),
    ((0, 0, 0, 0), (0, 0, 1, 0), (1, 1, 1, 0), (0, 0, 0, 0)),
    ((0, 0, 0, 0), (0, 1, 0, 0), (1, 1, 1, 0), (0, 0, 0, 0)),
    ((0, 0, 0, 0), (0, 1, 1, 0), (0, 1, 1, 0), (0, 0, 0, 0)),
)

_EMPTY_SHAPE: Shape = tuple((0,) * FIGURE_SIZE for _ in range(FIGURE_SIZE))


def get_shape(kind: int) -> Shape:
    """Return the 4x4 matrix of the piece of the given kind (0-6)."""
    if not 0 <= kind < len(_SHAPES):
        raise ValueError(f"unknown piece kind: {kind}")
    return _SHAPES[kind]


class GameState(enum.Enum):
    START = 0
    SPAWN = 1
    MOVE = 2
    GAME_OVER = 3


@dataclasses.dataclass(frozen=True)
class Figure:
    """A piece: its 4x4 shape and the field position of its top-left corner."""

    shape: Shape = _EMPTY_SHAPE
    x: int = 0
    y: int = 0
    kind: int = 0
    rotation: int = 0

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the field coordinates (x, y) of every filled cell."""
        for dy, row in enumerate(self.shape):
            for dx, filled in enumerate(row):
                if filled:
                    yield self.x + dx, self.y + dy

    def rotated(self) -> Figure:
        """Return the piece turned a quarter clockwise within its 4x4 box."""
        shape = tuple(tuple(col) for col in zip(*reversed(self.shape)))
        return dataclasses.replace(self, shape=shape)

    def moved(self, dx: int = 0, dy: int = 0) -> Figure:
        return dataclasses.replace(self, x=self.x + dx, y=self.y + dy)


def _empty_field() -> list[list[int]]:
    return [[0] * WIDTH for _ in range(HEIGHT)]


class TetrisGame:
    """State and rules of one game."""

    def __init__(self, high_score_path: str | Path = "high_score.txt") -> None:
        self.high_score_path = Path(high_score_path)
        self.field: list[list[int]] = _empty_field()
        self.current = Figure()
        self.next = Figure()
        self.score = 0
        self.level = 0
        self.high_score = 0
        self.speed = 0
        self.paused = False
        self.state = GameState.START
        self.last_tick = time.monotonic()
        self._rng = random.Random()

    def _random_figure(self) -> Figure:
        kind = self._rng.randrange(len(_SHAPES))
        return Figure(shape=get_shape(kind), x=WIDTH // 2 - 2, y=0, kind=kind)

    def _load_high_score(self) -> None:
        try:
            text = self.high_score_path.read_text()
        except OSError:
            self.high_score = 0
            return
        tokens = text.split()
        if tokens:
            try:
                self.high_score = int(tokens[0])
            except ValueError:
                pass

    def _save_high_score(self) -> None:
        try:
            self.high_score_path.write_text(str(self.high_score))
        except OSError:
            pass

    def start(self) -> None:
        """Begin a new game: clear the field, load the record, deal pieces."""
        self.field = _empty_field()
        self.score = 0
        self.level = 1
        self.speed = INITIAL_SPEED
        self.paused = False
        self.state = GameState.START
        self.next = self._random_figure()
        self._load_high_score()
        self.spawn_figure()
        self.state = GameState.MOVE
        self.last_tick = time.monotonic()

    def spawn_figure(self) -> None:
        """Bring the next piece into play; end the game if it does not fit."""
        self.current = self.next
        self.next = self._random_figure()
        if self.check_collision(self.current):
            self.state = GameState.GAME_OVER
        self.last_tick = time.monotonic()

    def rotate_figure(self) -> None:
        """Rotate the current piece if the rotated piece fits."""
        candidate = self.current.rotated()
        if not self.check_collision(candidate):
            self.current = candidate

    def move_figure(self, dx: int) -> None:
        """Shift the current piece horizontally if it fits there."""
        candidate = self.current.moved(dx=dx)
        if not self.check_collision(candidate):
            self.current = candidate

    def drop_figure(self) -> None:
        """Move the current piece one row down, or lock it if it cannot move."""
        candidate = self.current.moved(dy=1)
        if self.check_collision(candidate):
            self.fix_figure()
        else:
            self.current = candidate

    def check_collision(self, figure: Figure) -> bool:
        """Tell whether the piece leaves the field or overlaps settled cells."""
        return any(
            x < 0 or x >= WIDTH or y >= HEIGHT or (y >= 0 and self.field[y][x])
            for x, y in figure.cells()
        )

    def fix_figure(self) -> None:
        """Settle the current piece into the field and spawn the next one."""
        for x, y in self.current.cells():
            if 0 <= y < HEIGHT and 0 <= x < WIDTH:
                self.field[y][x] = 1
        self.clear_lines()
        self.spawn_figure()

    def clear_lines(self) -> int:
        """Remove full rows, score them, and return how many were removed."""
        remaining = [row for row in self.field if not all(row)]
        cleared = HEIGHT - len(remaining)
        if cleared:
            self.field = [[0] * WIDTH for _ in range(cleared)] + remaining
            self.score += LINE_POINTS[min(cleared, len(LINE_POINTS) - 1)]
            self.update_level_speed()
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()
        return cleared

    def update_level_speed(self) -> None:
        """Derive the level from the score and the fall delay from the level."""
        if self.level < MAX_LEVEL:
            self.level = self.score // POINTS_PER_LEVEL + 1
        self.speed = max(MIN_SPEED, INITIAL_SPEED - (self.level - 1) * SPEED_STEP)

    def tick(self) -> None:
        """Drop the piece one row once the fall delay has passed."""
        if self.paused or self.state is not GameState.MOVE:
            return
        now = time.monotonic()
        if (now - self.last_tick) * 1000 >= self.speed:
            self.drop_figure()
            self.last_tick = now

    def hard_drop(self) -> None:
        """Drop the current piece as far as it goes and lock it."""
        while not self.check_collision(self.current):
            self.current = self.current.moved(dy=1)
        self.current = self.current.moved(dy=-1)
        self.fix_figure()


@functools.lru_cache(maxsize=None)
def get_game_instance() -> TetrisGame:
    """Return the game shared by the whole program."""
    return TetrisGame()