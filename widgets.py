# widgets.py
from __future__ import annotations

from app_config import (
    BAR_EMPTY_CHAR,
    BAR_FILL_CHAR,
    BAR_MIN_WIDTH,
    BAR_PADDING,
    ELLIPSIS,
    NAME_WIDTH,
)


def elide(text: str, width: int = NAME_WIDTH) -> str:
    """
    Fixed-width name cell.
    - fits: padded with spaces to `width`
    - too long: first width-1 chars + ellipsis
    """
    if len(text) > width:
        text = text[: width - 1] + ELLIPSIS
    return f"{text:<{width}}"


def bar_width(total_width: int) -> int:
    return max(BAR_MIN_WIDTH, total_width - BAR_PADDING)


def volume_bar(value: int, total_width: int) -> str:
    n = bar_width(total_width)
    filled = value * n // 100
    return "[" + BAR_FILL_CHAR * filled + BAR_EMPTY_CHAR * (n - filled) + "]"


def percent_label(value: int) -> str:
    return f"{value:3d}%"
