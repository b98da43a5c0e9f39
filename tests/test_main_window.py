"""Tests for the curses shell."""

import curses
from unittest.mock import MagicMock, patch

import pytest

import main_window
from main_window import MainWindow, translate_key
from mixer_state import DecreaseVolume, IncreaseVolume, MoveDown, MoveUp, Quit, Refresh
from models import Stream
from pa_events import REFRESH, SYNC


class FakeScreen:
    """Minimal stdscr: replays keys, records text."""

    def __init__(self, keys=(), size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.lines = {}

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text, attr=0):
        self.lines[y] = text

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass

    def erase(self):
        self.lines = {}

    def clear(self):
        self.lines = {}

    def refresh(self):
        pass


class FakeBackend:
    def __init__(self, streams):
        self.streams = list(streams)
        self.adjusted = []

    def list_streams(self):
        return list(self.streams)

    def adjust(self, stream_id, delta):
        self.adjusted.append((stream_id, delta))
        self.streams = [
            Stream(id=s.id, name=s.name, volume=max(0, min(100, s.volume + delta))) if s.id == stream_id else s
            for s in self.streams
        ]


@pytest.fixture(autouse=True)
def no_terminal():
    """Keep curses calls that need a real terminal out of the tests."""
    with patch("main_window.curses.curs_set"), patch("main_window.theme.apply_theme"), patch(
        "main_window.theme.attr_for", return_value=0
    ), patch("main_window.time.sleep"):
        yield


def make_window(keys=(), streams=None, watcher=None):
    backend = FakeBackend(streams if streams is not None else [Stream(id="5", name="Firefox", volume=40)])
    screen = FakeScreen(keys)
    return MainWindow(screen, backend, watcher), screen, backend


class TestTranslateKey:
    """Test key translation."""

    def test_arrows(self):
        """Test that arrow keys map to navigation and volume events."""
        assert translate_key(curses.KEY_UP) == MoveUp()
        assert translate_key(curses.KEY_DOWN) == MoveDown()
        assert translate_key(curses.KEY_RIGHT) == IncreaseVolume()
        assert translate_key(curses.KEY_LEFT) == DecreaseVolume()

    def test_quit_keys(self):
        """Test q, Q and Ctrl+C."""
        for key in (ord("q"), ord("Q"), 3):
            assert translate_key(key) == Quit()

    def test_refresh_and_unknown(self):
        """Test the refresh key and that unknown keys are ignored."""
        assert translate_key(ord("r")) == Refresh()
        assert translate_key(ord("z")) is None


class TestMainWindow:
    """Test the MainWindow loop pieces."""

    def test_initial_state_uses_screen_size(self):
        """Test that the viewport comes from the terminal."""
        window, _screen, _backend = make_window()

        assert window.state.viewport.width == 80
        assert window.state.viewport.height == 24
        assert window.state.selected == 0

    def test_run_quits_with_zero(self):
        """Test that q ends the loop with status 0."""
        window, _screen, backend = make_window(keys=[curses.KEY_RIGHT, ord("q")])

        assert window.run() == 0
        assert backend.adjusted == [("5", 2)]
        assert window.state.streams[0].volume == 42

    def test_draw_writes_frame(self):
        """Test that the frame lands on the screen."""
        window, screen, _backend = make_window()
        window.draw()

        assert screen.lines[1] == " Volume Mixer "
        assert screen.lines[3].startswith("> Firefox")

    def test_draw_empty(self):
        """Test the empty message on screen."""
        window, screen, _backend = make_window(streams=[])
        window.draw()

        assert screen.lines[0] == "No active audio streams found."

    def test_resize_key(self):
        """Test that KEY_RESIZE updates the viewport."""
        window, screen, _backend = make_window(keys=[curses.KEY_RESIZE])
        screen.size = (10, 120)

        assert window.handle_input() is True
        assert window.state.viewport.width == 120

    def test_watcher_refresh(self):
        """Test that a watcher refresh replaces the list."""
        watcher = MagicMock(active=True)
        watcher.poll.return_value = REFRESH
        window, _screen, backend = make_window(watcher=watcher)
        backend.streams.append(Stream(id="9", name="mpv", volume=10))

        window.poll_daemon()

        assert [s.id for s in window.state.streams] == ["5", "9"]

    def test_watcher_sync(self):
        """Test that a watcher sync merges volumes without new rows."""
        watcher = MagicMock(active=True)
        watcher.poll.return_value = SYNC
        window, _screen, backend = make_window(watcher=watcher)
        backend.streams = [Stream(id="5", name="Firefox", volume=70), Stream(id="9", name="mpv", volume=10)]

        window.poll_daemon()

        assert [(s.id, s.volume) for s in window.state.streams] == [("5", 70)]

    def test_polling_fallback(self):
        """Test that without a watcher the list is re-read on a timer."""
        window, _screen, backend = make_window()
        backend.streams = []

        window.poll_daemon()
        assert len(window.state.streams) == 1

        window._last_refresh -= main_window.AUTO_REFRESH_INTERVAL
        window.poll_daemon()
        assert window.state.is_empty
