"""Saved driving state of vehicles while the game is paused."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from .constants import DriveState
from .shared_list import VehicleRecord


@dataclass(frozen=True)
class SupportInfo:
    """What a vehicle was doing when it was paused."""

    vid: int
    state: DriveState
    acceleration: float
    speed: float


class SupportList:
    """Append-only store of pause snapshots; lookups return the oldest match."""

    def __init__(self) -> None:
        self._entries: list[SupportInfo] = []
        self._lock = threading.Lock()

    def add(self, vid: int, state: VehicleRecord) -> None:
        """Record the state, acceleration and speed of a vehicle."""
        info = SupportInfo(vid, state.state, state.acceleration, state.speed)
        with self._lock:
            self._entries.append(info)

    def get(self, vid: int) -> SupportInfo:
        """First snapshot stored for ``vid``; raises KeyError if none."""
        with self._lock:
            found = next((e for e in self._entries if e.vid == vid), None)
        if found is None:
            raise KeyError(vid)
        return found

    def clear(self) -> None:
        """Forget every snapshot."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)