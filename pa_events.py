# pa_events.py
from __future__ import annotations

import logging
from typing import Optional, Set

import pulsectl

from app_config import EVENT_LISTEN_TIMEOUT, PULSE_CLIENT_NAME

logger = logging.getLogger(__name__)

REFRESH = "refresh"
SYNC = "sync"


class SinkInputWatcher:
    """
    Sink-input event subscription, polled from the UI loop.

    new/remove events ask for a full refresh of the stream list; change
    events (volume set elsewhere) only need the volumes merged back in.
    """

    def __init__(self, client_name: str = PULSE_CLIENT_NAME, listen_timeout: float = EVENT_LISTEN_TIMEOUT) -> None:
        self._client_name = client_name
        self._listen_timeout = listen_timeout
        self._pulse: Optional[pulsectl.Pulse] = None
        self._pending: Set[str] = set()

    @property
    def active(self) -> bool:
        return self._pulse is not None

    def start(self) -> bool:
        if self._pulse is not None:
            return True
        try:
            pulse = pulsectl.Pulse(self._client_name)
        except (pulsectl.PulseError, pulsectl.PulseDisconnected) as e:
            logger.warning("Event subscription unavailable, falling back to polling: %s", e)
            return False

        try:
            pulse.event_mask_set("sink_input")
            pulse.event_callback_set(self._on_event)
        except (pulsectl.PulseError, pulsectl.PulseDisconnected) as e:
            logger.warning("Could not subscribe to sink input events: %s", e)
            pulse.close()
            return False

        self._pulse = pulse
        return True

    def _on_event(self, ev) -> None:
        if ev.t == pulsectl.PulseEventTypeEnum.change:
            self._pending.add(SYNC)
        else:
            self._pending.add(REFRESH)

    def poll(self) -> Optional[str]:
        """
        Returns REFRESH, SYNC or None. REFRESH wins when both kinds arrived.
        """
        if self._pulse is None:
            return None

        try:
            self._pulse.event_listen(timeout=self._listen_timeout)
        except (pulsectl.PulseError, pulsectl.PulseDisconnected) as e:
            logger.warning("Lost event subscription, falling back to polling: %s", e)
            self.close()
            # whatever happened while disconnected is unknown
            return REFRESH

        pending = self._pending
        self._pending = set()
        if REFRESH in pending:
            return REFRESH
        if SYNC in pending:
            return SYNC
        return None

    def close(self) -> None:
        if self._pulse is not None:
            try:
                self._pulse.close()
            except Exception:
                pass
        self._pulse = None
        self._pending = set()
