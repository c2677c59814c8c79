"""Per-kind vehicle performance tables read from text files."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .constants import VehicleKind

STATISTICS_FILES = {
    VehicleKind.CAR: "Car.txt",
    VehicleKind.TRUCK: "Truck.txt",
    VehicleKind.MOTORCYCLE: "Motorcycle.txt",
    VehicleKind.SUPERCAR: "Supercar.txt",
}

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_LINE = re.compile(rf"\s*({_NUMBER})-\s*({_NUMBER})-\s*({_NUMBER})-\s*({_NUMBER})")


@dataclass(frozen=True)
class VehicleStatistics:
    """Performance limits of one vehicle."""

    max_speed: float  # m/s
    max_acceleration: float  # m/s^2
    max_deceleration: float  # m/s^2
    min_distance: float  # m


def parse_statistics_line(line: str) -> VehicleStatistics:
    """Parse ``speed-acc-dec-dist``; negative values keep their sign."""
    match = _LINE.match(line)
    if match is None:
        raise ValueError(f"malformed statistics line: {line!r}")
    return VehicleStatistics(*(float(value) for value in match.groups()))


def _file_lines(text: str) -> tuple[str, ...]:
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    return tuple(pieces)


@dataclass(frozen=True)
class StatisticsStore:
    """Lines of every statistics file and their newline counts."""

    lines: dict[VehicleKind, tuple[str, ...]]
    rows: dict[VehicleKind, int]

    @classmethod
    def load(cls, directory: str | PathLike[str]) -> StatisticsStore:
        """Read the four statistics files found in ``directory``."""
        base = Path(directory)
        lines: dict[VehicleKind, tuple[str, ...]] = {}
        rows: dict[VehicleKind, int] = {}
        for kind, name in STATISTICS_FILES.items():
            try:
                text = (base / name).read_text(encoding="utf-8")
            except FileNotFoundError as exc:
                raise FileNotFoundError(f"Error opening file {name}") from exc
            lines[kind] = _file_lines(text)
            rows[kind] = text.count("\n")
        return cls(lines, rows)

    def row_count(self, kind: VehicleKind) -> int:
        """Number of newline characters in the file for ``kind``."""
        return self.rows[VehicleKind(kind)]

    def pick(self, kind: VehicleKind, rng: random.Random) -> VehicleStatistics:
        """Statistics from a random row after the header line.

        Rows past the end of the file fall back to its last line.
        """
        kind = VehicleKind(kind)
        count = self.rows[kind]
        lines = self.lines[kind]
        if count == 0 or not lines:
            raise ValueError(f"no statistics rows for {kind.name}")
        row = rng.randrange(count) + 1
        return parse_statistics_line(lines[min(row, len(lines) - 1)])