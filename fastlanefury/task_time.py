"""Monotonic timestamps with millisecond arithmetic for periodic tasks."""

from __future__ import annotations

import time
from dataclasses import dataclass

NSEC_PER_SEC = 1_000_000_000
NSEC_PER_MSEC = 1_000_000


@dataclass(frozen=True, order=True)
class Timespec:
    """A point in time as whole seconds plus nanoseconds."""

    sec: int = 0
    nsec: int = 0

    @classmethod
    def now(cls) -> Timespec:
        """Current reading of the monotonic clock."""
        sec, nsec = divmod(time.monotonic_ns(), NSEC_PER_SEC)
        return cls(sec, nsec)

    def add_ms(self, ms: int) -> Timespec:
        """Return this time advanced by ``ms`` milliseconds."""
        whole, rest = divmod(abs(ms), 1000)
        if ms < 0:
            whole, rest = -whole, -rest
        sec = self.sec + whole
        nsec = self.nsec + rest * NSEC_PER_MSEC
        if nsec > NSEC_PER_SEC:
            nsec -= NSEC_PER_SEC
            sec += 1
        return Timespec(sec, nsec)

    def to_ns(self) -> int:
        """Total nanoseconds represented."""
        return self.sec * NSEC_PER_SEC + self.nsec


def time_cmp(a: Timespec, b: Timespec) -> int:
    """Return 1 if ``a`` is later than ``b``, -1 if earlier, 0 if equal."""
    return (a > b) - (a < b)