# models.py
from __future__ import annotations

from dataclasses import dataclass

from app_config import VOLUME_MAX, VOLUME_MIN


def clamp_percent(v: int) -> int:
    if v < VOLUME_MIN:
        return VOLUME_MIN
    if v > VOLUME_MAX:
        return VOLUME_MAX
    return v


@dataclass(frozen=True)
class Stream:
    id: str               # "Sink Input #<id>", only valid for the current daemon session
    name: str = ""        # application.name, else media.name
    volume: int = 0       # percent, 0..100
    display_volume: int = 0  # animated bar value, never sent to the daemon


@dataclass(frozen=True)
class Viewport:
    width: int = 0
    height: int = 0
