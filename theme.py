# theme.py
from __future__ import annotations

import curses

import view

PAIR_TITLE = 1
PAIR_ROW = 2
PAIR_SELECTED = 3
PAIR_MUTED = 4


def apply_theme() -> None:
    try:
        curses.start_color()
        curses.use_default_colors()
    except curses.error:
        return

    if curses.COLORS >= 256:
        curses.init_pair(PAIR_TITLE, 75, -1)      # soft blue
        curses.init_pair(PAIR_ROW, 252, -1)       # light gray
        curses.init_pair(PAIR_SELECTED, 16, 117)  # dark on pastel blue
        curses.init_pair(PAIR_MUTED, 245, -1)     # gray
    else:
        curses.init_pair(PAIR_TITLE, curses.COLOR_CYAN, -1)
        curses.init_pair(PAIR_ROW, curses.COLOR_WHITE, -1)
        curses.init_pair(PAIR_SELECTED, curses.COLOR_BLACK, curses.COLOR_CYAN)
        curses.init_pair(PAIR_MUTED, curses.COLOR_WHITE, -1)


def attr_for(role: str) -> int:
    if not curses.has_colors():
        if role == view.ROLE_SELECTED:
            return curses.A_REVERSE
        if role == view.ROLE_TITLE:
            return curses.A_BOLD
        return curses.A_NORMAL

    if role == view.ROLE_TITLE:
        return curses.color_pair(PAIR_TITLE) | curses.A_BOLD
    if role == view.ROLE_SELECTED:
        return curses.color_pair(PAIR_SELECTED) | curses.A_BOLD
    if role in (view.ROLE_FOOTER, view.ROLE_EMPTY):
        return curses.color_pair(PAIR_MUTED)
    return curses.color_pair(PAIR_ROW)
