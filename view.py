# view.py
from __future__ import annotations

from typing import List, Tuple

from mixer_state import MixerState
from models import Stream
from widgets import elide, percent_label, volume_bar

EMPTY_MESSAGE = "No active audio streams found."
TITLE = " Volume Mixer "
FOOTER = " q to quit"

# Frame line roles, mapped to colours by theme.attr_for
ROLE_EMPTY = "empty"
ROLE_BLANK = "blank"
ROLE_TITLE = "title"
ROLE_ROW = "row"
ROLE_SELECTED = "selected"
ROLE_FOOTER = "footer"

FrameLine = Tuple[str, str]


def stream_row(s: Stream, total_width: int, selected: bool) -> str:
    line = f"{elide(s.name)} {volume_bar(s.display_volume, total_width)} {percent_label(s.volume)}"
    if selected:
        return f"> {line} <"
    return f"  {line}"


def frame_lines(state: MixerState) -> List[FrameLine]:
    if state.is_empty:
        return [(EMPTY_MESSAGE, ROLE_EMPTY)]

    lines: List[FrameLine] = [
        ("", ROLE_BLANK),
        (TITLE, ROLE_TITLE),
        ("", ROLE_BLANK),
    ]
    for i, s in enumerate(state.streams):
        is_sel = i == state.selected
        lines.append((stream_row(s, state.viewport.width, is_sel), ROLE_SELECTED if is_sel else ROLE_ROW))
    lines.append(("", ROLE_BLANK))
    lines.append((FOOTER, ROLE_FOOTER))
    return lines


def render(state: MixerState) -> str:
    return "".join(text + "\n" for text, _role in frame_lines(state))
