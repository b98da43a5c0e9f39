# pa_cli.py
from __future__ import annotations

import subprocess
from typing import Sequence


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(list(cmd), capture_output=True, text=True)
    except OSError as e:
        raise RuntimeError(f"{cmd[0]} could not be started: {e}") from e


def pactl_list_sink_inputs() -> str:
    p = _run(["pactl", "list", "sink-inputs"])
    if p.returncode != 0:
        msg = (p.stderr or p.stdout).strip()
        raise RuntimeError(f"pactl list sink-inputs failed: {msg}")
    return p.stdout


def pactl_set_sink_input_volume(sink_input_id: str, delta: int) -> None:
    """
    Relative change, e.g. delta=-2 -> "-2%".
    "--" stops pactl from reading a negative step as an option.
    """
    if not sink_input_id:
        raise RuntimeError("Invalid sink input id for volume change.")
    op = f"{delta:+d}%"
    p = _run(["pactl", "--", "set-sink-input-volume", sink_input_id, op])
    if p.returncode == 0:
        return

    msg = (p.stderr or p.stdout).strip()
    raise RuntimeError(f"pactl set-sink-input-volume failed ({sink_input_id} {op}): {msg}")
