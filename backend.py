# backend.py
from __future__ import annotations

import logging
from typing import List

from models import Stream, clamp_percent
from pa_cli import pactl_set_sink_input_volume
from pa_status import read_streams

logger = logging.getLogger(__name__)


class PulseMixerBackend:
    """
    Volume control for sink inputs through pactl.

    Every read goes back to the daemon; nothing is cached between calls.
    """

    def list_streams(self) -> List[Stream]:
        return read_streams()

    def current_volume(self, stream_id: str) -> int:
        for s in read_streams():
            if s.id == stream_id:
                return clamp_percent(s.volume)
        return 0

    def adjust(self, stream_id: str, delta: int) -> None:
        """
        Move a stream by `delta` percent, clamped to 0..100.

        The step sent to pactl is recomputed from the fresh volume, so a
        stream at 99 gets +1%, and one already at the limit gets nothing.
        """
        current = self.current_volume(stream_id)
        target = clamp_percent(current + delta)
        effective = target - current
        if effective == 0:
            return

        try:
            pactl_set_sink_input_volume(stream_id, effective)
        except RuntimeError as e:
            logger.warning("Volume change for sink input %s failed: %s", stream_id, e)
