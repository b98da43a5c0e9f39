# main.py
from __future__ import annotations

import curses
import logging
import logging.handlers
import sys

from app_config import LOG_BUFFER_CAPACITY, LOG_FORMAT, LOG_LEVEL
from backend import PulseMixerBackend
from main_window import MainWindow
from pa_events import SinkInputWatcher


class RepeatFilter(logging.Filter):
    """Drops a record identical to the one just before it."""

    def __init__(self) -> None:
        super().__init__()
        self._last = None

    def filter(self, record: logging.LogRecord) -> bool:
        key = (record.name, record.levelno, record.getMessage())
        if key == self._last:
            return False
        self._last = key
        return True


def setup_logging() -> logging.handlers.MemoryHandler:
    """
    curses owns the terminal while the mixer runs, so records are held in
    memory and written to stderr when the handler is flushed on exit.
    """
    target = logging.StreamHandler(sys.stderr)
    target.setFormatter(logging.Formatter(LOG_FORMAT))
    handler = logging.handlers.MemoryHandler(
        capacity=LOG_BUFFER_CAPACITY,
        flushLevel=logging.ERROR,
        target=target,
        flushOnClose=True,
    )
    handler.addFilter(RepeatFilter())
    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    root.addHandler(handler)
    return handler


def main() -> int:
    handler = setup_logging()
    backend = PulseMixerBackend()
    watcher = SinkInputWatcher()
    watcher.start()

    try:
        return curses.wrapper(lambda stdscr: MainWindow(stdscr, backend, watcher).run())
    except KeyboardInterrupt:
        return 0
    except curses.error as e:
        print(f"Error: {e}")
        return 1
    finally:
        watcher.close()
        handler.close()
        logging.getLogger().removeHandler(handler)


if __name__ == "__main__":
    sys.exit(main())
