# pa_status.py
from __future__ import annotations

import logging
from typing import List, Optional

from models import Stream, clamp_percent
from pa_cli import pactl_list_sink_inputs

logger = logging.getLogger(__name__)

BLOCK_MARKER = "Sink Input #"

KEY_APP_NAME = "application.name"
KEY_MEDIA_NAME = "media.name"
KEY_VOLUME = "Volume"


def attribute_key(line: str) -> str:
    """
    'application.name = "Firefox"' -> "application.name"
    'Volume: front-left: 65536 / 100% / ...' -> "Volume"
    """
    eq = line.find("=")
    colon = line.find(":")
    if eq == -1 and colon == -1:
        return ""
    if eq == -1 or (colon != -1 and colon < eq):
        return line[:colon].strip()
    return line[:eq].strip()


def extract_value(line: str) -> str:
    idx = line.find("=")
    if idx == -1:
        idx = line.find(":")
        if idx == -1:
            return ""
    return line[idx + 1:].strip().strip('"').strip()


def extract_volume(line: str) -> Optional[int]:
    for tok in line.split():
        if not tok.endswith("%"):
            continue
        try:
            v = int(tok[:-1])
        except ValueError:
            continue
        return clamp_percent(v)
    return None


def block_id(line: str) -> str:
    return line[len(BLOCK_MARKER):].strip()


def parse_sink_inputs(text: str) -> List[Stream]:
    """
    Parse `pactl list sink-inputs` output into streams, in daemon order.

    Unrecognised or malformed lines are skipped.
    """
    out: List[Stream] = []

    sid = ""
    name = ""
    volume = 0

    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            continue

        if line.startswith(BLOCK_MARKER):
            if sid:
                out.append(Stream(id=sid, name=name, volume=volume))
            sid = block_id(line)
            name = ""
            volume = 0
            continue

        key = attribute_key(line)
        if key == KEY_APP_NAME:
            name = extract_value(line)
        elif key == KEY_MEDIA_NAME:
            if not name:
                name = extract_value(line)
        elif key == KEY_VOLUME:
            v = extract_volume(line)
            if v is not None:
                volume = v

    if sid:
        out.append(Stream(id=sid, name=name, volume=volume))

    return out


def read_streams() -> List[Stream]:
    try:
        text = pactl_list_sink_inputs()
    except RuntimeError as e:
        logger.warning("Could not list sink inputs: %s", e)
        return []
    return parse_sink_inputs(text)
