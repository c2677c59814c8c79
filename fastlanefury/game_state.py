"""State shared between the user, graphics and vehicle tasks."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from typing import Any

from .constants import (
    AS_T1,
    Z1_FACTOR,
    Z2_FACTOR,
    Z3_FACTOR,
    BufferId,
    GameMode,
    Selection,
    VehicleKind,
)
from .shared_list import SharedList
from .support_list import SupportList

_ZOOM_CYCLE = {Z1_FACTOR: Z2_FACTOR, Z2_FACTOR: Z3_FACTOR, Z3_FACTOR: Z1_FACTOR}


@dataclass
class ScreenPosition:
    """A pixel position on the screen."""

    x: int = 0
    y: int = 0


@dataclass
class Config:
    """User-adjustable settings."""

    auto_spawn: bool = True
    auto_spawn_time: int = AS_T1  # seconds
    zv_scale_factor: int = Z1_FACTOR

    def next_zoom(self) -> int:
        """Advance to the next zoom factor in the cycle and return it."""
        self.zv_scale_factor = _ZOOM_CYCLE.get(self.zv_scale_factor, self.zv_scale_factor)
        return self.zv_scale_factor

    def toggle_auto_spawn(self) -> bool:
        """Switch between automatic and manual spawning; return the new mode."""
        self.auto_spawn = not self.auto_spawn
        return self.auto_spawn


@dataclass
class SharedState:
    """Selection, view and mode flags shared across tasks."""

    game_state: GameMode = GameMode.PLAY
    selection: Selection = Selection.NONE
    selected_vehicle: int | None = None
    buffer_id: BufferId = BufferId.MAIN_SCENE
    mouse_pos: ScreenPosition = field(default_factory=ScreenPosition)


@dataclass
class GameContext:
    """Everything a task needs to reach the shared game world."""

    shared_list: SharedList = field(default_factory=SharedList)
    support_list: SupportList = field(default_factory=SupportList)
    shared: SharedState = field(default_factory=SharedState)
    config: Config = field(default_factory=Config)
    state_lock: threading.Lock = field(default_factory=threading.Lock)
    scene_lock: threading.Lock = field(default_factory=threading.Lock)
    scene: Any = None
    sim_speed: float = 1.0
    vehicle_types: dict[int, VehicleKind | None] = field(default_factory=dict)
    last_lane: int | None = None
    scheduler: Any = None
    sprites: Any = None
    statistics: Any = None
    rng: random.Random = field(default_factory=random.Random)