# main_window.py
from __future__ import annotations

import curses
import time
from typing import Optional

import theme
from app_config import AUTO_REFRESH_INTERVAL, TICK_INTERVAL
from mixer_state import (
    DecreaseVolume,
    Event,
    IncreaseVolume,
    MixerState,
    MoveDown,
    MoveUp,
    Quit,
    Refresh,
    Resize,
    SyncVolumes,
    Tick,
    VolumeBackend,
    initial_state,
    update,
)
from models import Viewport
from pa_events import REFRESH, SYNC
from view import frame_lines

KEY_CTRL_C = 3

KEYMAP = {
    curses.KEY_UP: MoveUp(),
    ord("k"): MoveUp(),
    curses.KEY_DOWN: MoveDown(),
    ord("j"): MoveDown(),
    curses.KEY_RIGHT: IncreaseVolume(),
    ord("l"): IncreaseVolume(),
    ord("+"): IncreaseVolume(),
    curses.KEY_LEFT: DecreaseVolume(),
    ord("h"): DecreaseVolume(),
    ord("-"): DecreaseVolume(),
    ord("r"): Refresh(),
    ord("R"): Refresh(),
    ord("q"): Quit(),
    ord("Q"): Quit(),
    KEY_CTRL_C: Quit(),
}


def translate_key(key: int) -> Optional[Event]:
    return KEYMAP.get(key)


class MainWindow:
    def __init__(self, stdscr, backend: VolumeBackend, watcher=None) -> None:
        self.stdscr = stdscr
        self.backend = backend
        self.watcher = watcher

        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        theme.apply_theme()

        h, w = self.stdscr.getmaxyx()
        self.state: MixerState = initial_state(self.backend.list_streams(), Viewport(width=w, height=h))
        self._last_refresh = time.monotonic()

    def dispatch(self, event: Event) -> bool:
        """Returns False once the loop should stop."""
        if isinstance(event, Quit):
            return False
        self.state = update(self.state, event, self.backend)
        if isinstance(event, Refresh):
            self._last_refresh = time.monotonic()
        return True

    def poll_daemon(self) -> None:
        if self.watcher is not None and self.watcher.active:
            what = self.watcher.poll()
            if what == REFRESH:
                self.dispatch(Refresh())
            elif what == SYNC:
                self.dispatch(SyncVolumes())
            return

        if time.monotonic() - self._last_refresh >= AUTO_REFRESH_INTERVAL:
            self.dispatch(Refresh())

    def handle_input(self) -> bool:
        while True:
            key = self.stdscr.getch()
            if key == -1:
                return True
            if key == curses.KEY_RESIZE:
                h, w = self.stdscr.getmaxyx()
                self.dispatch(Resize(width=w, height=h))
                self.stdscr.clear()
                continue
            event = translate_key(key)
            if event is None:
                continue
            if not self.dispatch(event):
                return False

    def safe_addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        h, w = self.stdscr.getmaxyx()
        try:
            if 0 <= y < h and 0 <= x < w:
                self.stdscr.addstr(y, x, text[: w - x - 1], attr)
        except curses.error:
            pass

    def draw(self) -> None:
        self.stdscr.erase()
        for y, (text, role) in enumerate(frame_lines(self.state)):
            self.safe_addstr(y, 0, text, theme.attr_for(role))
        self.stdscr.refresh()

    def run(self) -> int:
        self.draw()
        while True:
            start = time.perf_counter()

            if not self.handle_input():
                return 0
            self.poll_daemon()
            self.dispatch(Tick())
            self.draw()

            elapsed = time.perf_counter() - start
            time.sleep(max(0.0, TICK_INTERVAL - elapsed))
