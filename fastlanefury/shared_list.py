"""Thread-safe registry of the vehicles currently on the road."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace

from .constants import DriveState


@dataclass
class Position:
    """Position on the highway in metres."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class VehicleRecord:
    """Kinematic and logical state of one vehicle."""

    speed: float = 0.0  # m/s
    steering_angle: float = 0.0  # degrees
    acceleration: float = 0.0  # m/s^2
    state: DriveState = DriveState.IDLE
    pos: Position = field(default_factory=Position)
    vehicle: int = 0  # sprite index
    lane: int = 0


def _snapshot(record: VehicleRecord) -> VehicleRecord:
    return replace(record, pos=replace(record.pos))


class SharedList:
    """Vehicle states keyed by task id, kept in insertion order."""

    def __init__(self) -> None:
        self._records: dict[int, VehicleRecord] = {}
        self._lock = threading.Lock()

    def add(self, vid: int, state: VehicleRecord) -> None:
        """Register a vehicle at the end of the list."""
        with self._lock:
            self._records[vid] = _snapshot(state)

    def remove(self, vid: int) -> None:
        """Drop a vehicle; raises KeyError if it is not registered."""
        with self._lock:
            try:
                del self._records[vid]
            except KeyError:
                raise KeyError(vid) from None

    def set_state(self, vid: int, state: VehicleRecord) -> None:
        """Replace a registered vehicle's state."""
        with self._lock:
            if vid not in self._records:
                raise KeyError(vid)
            self._records[vid] = _snapshot(state)

    def get_state(self, vid: int) -> VehicleRecord:
        """Return a copy of a registered vehicle's state."""
        with self._lock:
            try:
                return _snapshot(self._records[vid])
            except KeyError:
                raise KeyError(vid) from None

    def items(self) -> list[tuple[int, VehicleRecord]]:
        """Snapshot of all (id, state) pairs in insertion order."""
        with self._lock:
            return [(vid, _snapshot(rec)) for vid, rec in self._records.items()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)