"""Vehicle sprite loading and lookup."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import pygame

from .constants import VEHICLE_SCALE_FACTOR, VehicleKind

log = logging.getLogger(__name__)

_SPRITE_FILES = {
    VehicleKind.CAR: ("Car", "C_bitmap"),
    VehicleKind.TRUCK: ("Truck", "T_bitmap"),
    VehicleKind.MOTORCYCLE: ("Motorcycle", "M_bitmap"),
    VehicleKind.SUPERCAR: ("SuperCar", "SC_bitmap"),
}


def sprite_paths(directory: str | PathLike[str]) -> list[Path]:
    """Paths of every vehicle bitmap, in global sprite-table order."""
    base = Path(directory)
    paths: list[Path] = []
    for kind in VehicleKind:
        folder, prefix = _SPRITE_FILES[kind]
        paths.extend(base / folder / f"{prefix}{i}.bmp" for i in range(kind.sprite_count))
    return paths


def load_scaled_bitmap(path: str | PathLike[str], factor: float) -> pygame.Surface:
    """Load an image and stretch it by ``factor`` in both directions."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"failed to load bitmap {path}")
    original = pygame.image.load(str(path))
    width, height = original.get_size()
    size = (int(width * factor), int(height * factor))
    return pygame.transform.scale(original, size)


@dataclass(frozen=True)
class VehicleSprites:
    """The table of scaled vehicle sprites, indexed by vehicle type."""

    sprites: tuple[pygame.Surface, ...]

    def __init__(self, sprites: Sequence[pygame.Surface]) -> None:
        object.__setattr__(self, "sprites", tuple(sprites))

    @classmethod
    def load(cls, directory: str | PathLike[str]) -> VehicleSprites:
        """Load every vehicle bitmap under ``directory``, scaled for the road."""
        loaded = []
        for path in sprite_paths(directory):
            loaded.append(load_scaled_bitmap(path, VEHICLE_SCALE_FACTOR))
        log.info("Loaded %d vehicle bitmaps", len(loaded))
        return cls(loaded)

    def __len__(self) -> int:
        return len(self.sprites)

    def bitmap(self, vtype: int) -> pygame.Surface:
        """Sprite for vehicle type ``vtype``."""
        if vtype < 0:
            raise IndexError(f"vehicle type {vtype} out of range")
        return self.sprites[vtype]

    def width(self, vtype: int) -> int:
        """Sprite width in pixels."""
        return self.bitmap(vtype).get_width()

    def height(self, vtype: int) -> int:
        """Sprite height in pixels."""
        return self.bitmap(vtype).get_height()