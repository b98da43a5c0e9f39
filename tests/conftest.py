"""Shared fixtures: a fake pactl that keeps sink input volumes in memory."""

import subprocess
from unittest.mock import patch

import pytest

from models import clamp_percent


class FakePactl:
    """Answers `pactl list sink-inputs` and `pactl -- set-sink-input-volume`."""

    def __init__(self):
        self.inputs = []  # [sink_input_id, app_name, volume]
        self.calls = []
        self.fail_list = False
        self.fail_set = False

    def add(self, sink_input_id, name, volume):
        self.inputs.append([sink_input_id, name, volume])

    def remove(self, sink_input_id):
        self.inputs = [i for i in self.inputs if i[0] != sink_input_id]

    def volume_of(self, sink_input_id):
        for sid, _name, vol in self.inputs:
            if sid == sink_input_id:
                return vol
        return None

    def set_commands(self):
        return [c for c in self.calls if "set-sink-input-volume" in c]

    def listing(self):
        blocks = []
        for sid, name, vol in self.inputs:
            raw = vol * 65536 // 100
            blocks.append(
                f"Sink Input #{sid}\n"
                f"\tDriver: protocol-native.c\n"
                f"\tOwner Module: 10\n"
                f"\tClient: 50\n"
                f"\tSink: 0\n"
                f"\tSample Specification: s16le 2ch 44100Hz\n"
                f"\tChannel Map: front-left,front-right\n"
                f"\tFormat: pcm, format.sample_format = \"\\\"s16le\\\"\"\n"
                f"\tCorked: no\n"
                f"\tMute: no\n"
                f"\tVolume: front-left: {raw} / {vol:3d}% / -0.00 dB,   front-right: {raw} / {vol:3d}% / -0.00 dB\n"
                f"\t        balance 0.00\n"
                f"\tBuffer Latency: 120000 usec\n"
                f"\tProperties:\n"
                f"\t\tmedia.name = \"Playback\"\n"
                f"\t\tapplication.name = \"{name}\"\n"
                f"\t\tapplication.process.id = \"4242\"\n"
            )
        return "\n".join(blocks)

    def __call__(self, cmd):
        cmd = list(cmd)
        self.calls.append(cmd)
        if cmd[1:] == ["list", "sink-inputs"]:
            if self.fail_list:
                return subprocess.CompletedProcess(cmd, 1, "", "Connection failure: Connection refused\n")
            return subprocess.CompletedProcess(cmd, 0, self.listing(), "")

        if cmd[1:3] == ["--", "set-sink-input-volume"]:
            sid, op = cmd[3], cmd[4]
            if self.fail_set:
                return subprocess.CompletedProcess(cmd, 1, "", "Failure: No such entity\n")
            for entry in self.inputs:
                if entry[0] == sid:
                    entry[2] = clamp_percent(entry[2] + int(op.rstrip("%")))
                    return subprocess.CompletedProcess(cmd, 0, "", "")
            return subprocess.CompletedProcess(cmd, 1, "", "Failure: No such entity\n")

        return subprocess.CompletedProcess(cmd, 1, "", "unknown command\n")


@pytest.fixture
def fake_pactl():
    """Patch pa_cli._run with an in-memory pactl."""
    fake = FakePactl()
    with patch("pa_cli._run", side_effect=fake):
        yield fake
