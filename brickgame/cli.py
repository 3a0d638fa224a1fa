"""Terminal front end: draws the field and side panel and feeds keys to the game."""

from __future__ import annotations

import argparse
import curses
import dataclasses
import locale
from collections.abc import Sequence

from brickgame.interface import (
    GameInfo,
    UserAction,
    update_current_state,
    user_input,
)
from brickgame.tetris import FIGURE_SIZE, HEIGHT, WIDTH

CELL_TEXT = "  "
FRAME_DELAY_MS = 50
INFO_WIDTH = 20
ESCAPE = 27

_KEYMAP: dict[int, UserAction] = {
    ord(" "): UserAction.START,
    ord("\n"): UserAction.START,
    curses.KEY_ENTER: UserAction.START,
    curses.KEY_LEFT: UserAction.LEFT,
    curses.KEY_RIGHT: UserAction.RIGHT,
    curses.KEY_DOWN: UserAction.DOWN,
    ord("z"): UserAction.ACTION,
    ord("Z"): UserAction.ACTION,
    ord("p"): UserAction.PAUSE,
    ord("P"): UserAction.PAUSE,
    ESCAPE: UserAction.TERMINATE,
}


def decode_key(key: int) -> UserAction:
    """Map a key code to a player action; anything unbound means UP (a tick)."""
    return _KEYMAP.get(key, UserAction.UP)


@dataclasses.dataclass(frozen=True)
class _Palette:
    block: int
    frame: int
    text: int
    bold: int


def _make_palette() -> _Palette:
    if not curses.has_colors():
        return _Palette(curses.A_REVERSE, curses.A_NORMAL, curses.A_NORMAL, curses.A_BOLD)
    curses.start_color()
    curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_GREEN)
    curses.init_pair(2, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(3, curses.COLOR_WHITE, curses.COLOR_BLACK)
    return _Palette(
        block=curses.color_pair(1),
        frame=curses.color_pair(2),
        text=curses.color_pair(3),
        bold=curses.A_BOLD,
    )


def _status_banner(pause: int) -> tuple[int, int, str] | None:
    """Return (row, column, text) of the overlay for the pause code, if any."""
    if pause == 1:
        text = "PAUSE"
    elif pause == 2:
        text = "GAME OVER"
    else:
        return None
    return HEIGHT // 2 + 1, (WIDTH * 2 - len(text)) // 2 + 1, text


def _stats_lines(info: GameInfo) -> list[tuple[int, str]]:
    """Return the (row, text) lines of the score panel."""
    return [
        (8, f"Score:      {info.score:4d}"),
        (9, f"High Score: {info.high_score:4d}"),
        (11, f"Level:      {info.level:2d}"),
    ]


def _paint_blocks(win, info: GameInfo, palette: _Palette) -> None:
    win.attron(palette.block)
    for y, row in enumerate(info.field[:HEIGHT]):
        for x, filled in enumerate(row[:WIDTH]):
            if filled:
                win.addstr(y + 1, x * 2 + 1, CELL_TEXT)
    win.attroff(palette.block)


def _paint_sidebar(win, info: GameInfo, palette: _Palette) -> None:
    win.attron(palette.text)
    win.addstr(2, 2, "Next:")
    win.attroff(palette.text)

    for i, row in enumerate(info.next[:FIGURE_SIZE]):
        for j, filled in enumerate(row[:FIGURE_SIZE]):
            if filled:
                win.attron(palette.block)
                win.addstr(3 + i, 2 + j * 2, CELL_TEXT)
                win.attroff(palette.block)

    for row, text in _stats_lines(info):
        win.addstr(row, 2, text)


def _refresh_screen(play, side, info: GameInfo, palette: _Palette) -> None:
    play.erase()
    play.attron(palette.frame)
    play.box()
    play.attroff(palette.frame)

    _paint_blocks(play, info, palette)

    banner = _status_banner(info.pause)
    if banner is not None:
        row, col, text = banner
        play.attron(palette.bold | palette.frame)
        play.addstr(row, col, text)
        play.attroff(palette.bold | palette.frame)
    play.refresh()

    side.erase()
    side.attron(palette.frame)
    side.box()
    side.addstr(0, 2, " INFO ")
    side.attroff(palette.frame)
    _paint_sidebar(side, info, palette)
    side.refresh()


def _build_windows(palette: _Palette):
    play = curses.newwin(HEIGHT + 2, WIDTH * 2 + 2, 0, 0)
    play.bkgd(" ", palette.text)
    play.attron(palette.frame)
    play.box()
    play.attroff(palette.frame)
    play.refresh()

    side = curses.newwin(HEIGHT + 2, INFO_WIDTH, 0, WIDTH * 2 + 3)
    side.bkgd(" ", palette.text)
    side.attron(palette.text)
    side.box()
    side.addstr(0, 2, " INFO ")
    side.attroff(palette.text)
    side.refresh()
    return play, side


def _play_cycle(stdscr, play, side, palette: _Palette) -> None:
    user_input(UserAction.START, False)
    state = update_current_state()
    timer = 0
    running = True
    while running:
        action = decode_key(stdscr.getch())
        if action is not UserAction.UP:
            user_input(action, False)
        if action is UserAction.TERMINATE:
            running = False

        timer += FRAME_DELAY_MS
        if timer >= state.speed:
            user_input(UserAction.UP, False)
            timer = 0

        state = update_current_state()
        _refresh_screen(play, side, state, palette)
        curses.napms(FRAME_DELAY_MS)


def _run(stdscr) -> None:
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.nodelay(True)
    palette = _make_palette()
    play, side = _build_windows(palette)
    _play_cycle(stdscr, play, side, palette)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in the terminal until the player presses Escape."""
    parser = argparse.ArgumentParser(
        prog="brickgame",
        description="Falling-block puzzle game for the terminal. "
        "Arrows move, z rotates, p pauses, space restarts, Esc quits.",
    )
    parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    curses.wrapper(_run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())