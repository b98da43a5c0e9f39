# mixer_state.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Protocol, Tuple, Union

from app_config import VOLUME_STEP
from models import Stream, Viewport, clamp_percent


class VolumeBackend(Protocol):
    def list_streams(self) -> List[Stream]: ...

    def adjust(self, stream_id: str, delta: int) -> None: ...


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class IncreaseVolume:
    pass


@dataclass(frozen=True)
class DecreaseVolume:
    pass


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class SyncVolumes:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[Resize, MoveUp, MoveDown, IncreaseVolume, DecreaseVolume, Tick, Refresh, SyncVolumes, Quit]


@dataclass(frozen=True)
class MixerState:
    streams: Tuple[Stream, ...] = ()
    selected: Optional[int] = None  # None iff streams is empty
    viewport: Viewport = field(default_factory=Viewport)

    @property
    def is_empty(self) -> bool:
        return not self.streams

    @property
    def selected_stream(self) -> Optional[Stream]:
        if self.selected is None or not self.streams:
            return None
        return self.streams[self.selected]


def initial_state(streams: Iterable[Stream], viewport: Optional[Viewport] = None) -> MixerState:
    items = []
    for s in streams:
        v = clamp_percent(s.volume)
        items.append(replace(s, volume=v, display_volume=v))
    return MixerState(
        streams=tuple(items),
        selected=0 if items else None,
        viewport=viewport or Viewport(),
    )


def merge_volumes(streams: Tuple[Stream, ...], reported: Iterable[Stream]) -> Tuple[Stream, ...]:
    """
    Copy reported volumes onto existing entries by id.

    Position and display_volume are kept. Entries the daemon no longer
    reports stay as they are, and newly reported streams are not added;
    only a full refresh changes the list itself.
    """
    by_id: Dict[str, Stream] = {s.id: s for s in reported}
    out: List[Stream] = []
    for s in streams:
        r = by_id.get(s.id)
        if r is None:
            out.append(s)
        else:
            out.append(replace(s, volume=clamp_percent(r.volume)))
    return tuple(out)


def replace_streams(state: MixerState, reported: Iterable[Stream]) -> MixerState:
    """
    Full refresh: the daemon's list becomes the list.

    Known ids keep their animated value, new ids start at their volume.
    The selection follows the selected id; if it is gone the old index is
    clamped into the new list.
    """
    previous: Dict[str, Stream] = {s.id: s for s in state.streams}
    items: List[Stream] = []
    for r in reported:
        v = clamp_percent(r.volume)
        old = previous.get(r.id)
        shown = clamp_percent(old.display_volume) if old is not None else v
        items.append(replace(r, volume=v, display_volume=shown))

    selected: Optional[int] = None
    if items:
        current = state.selected_stream
        if current is not None:
            for i, s in enumerate(items):
                if s.id == current.id:
                    selected = i
                    break
        if selected is None:
            selected = min(state.selected or 0, len(items) - 1)

    return replace(state, streams=tuple(items), selected=selected)


def step_toward(shown: int, target: int) -> int:
    if shown < target:
        return shown + 1
    if shown > target:
        return shown - 1
    return shown


def tick_streams(streams: Tuple[Stream, ...]) -> Tuple[Stream, ...]:
    return tuple(
        s if s.display_volume == s.volume else replace(s, display_volume=step_toward(s.display_volume, s.volume))
        for s in streams
    )


def _adjust_selected(state: MixerState, delta: int, backend: VolumeBackend) -> MixerState:
    target = state.selected_stream
    if target is None:
        return state
    backend.adjust(target.id, delta)
    return replace(state, streams=merge_volumes(state.streams, backend.list_streams()))


def update(state: MixerState, event: Event, backend: VolumeBackend) -> MixerState:
    """Apply one event and return the next state."""
    if isinstance(event, Resize):
        return replace(state, viewport=Viewport(width=event.width, height=event.height))

    if isinstance(event, MoveUp):
        if state.selected is None:
            return state
        return replace(state, selected=max(state.selected - 1, 0))

    if isinstance(event, MoveDown):
        if state.selected is None:
            return state
        return replace(state, selected=min(state.selected + 1, len(state.streams) - 1))

    if isinstance(event, IncreaseVolume):
        return _adjust_selected(state, +VOLUME_STEP, backend)

    if isinstance(event, DecreaseVolume):
        return _adjust_selected(state, -VOLUME_STEP, backend)

    if isinstance(event, Tick):
        return replace(state, streams=tick_streams(state.streams))

    if isinstance(event, Refresh):
        return replace_streams(state, backend.list_streams())

    if isinstance(event, SyncVolumes):
        if state.is_empty:
            return state
        return replace(state, streams=merge_volumes(state.streams, backend.list_streams()))

    return state
