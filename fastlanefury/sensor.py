"""Ray-cast proximity sensor over the rendered scene."""

from __future__ import annotations

import math
from typing import Any

from .constants import (
    BG_COLOR,
    CONFIG_MENU_COLOR,
    CURSOR_COLOR,
    FOV_COLOR,
    LANE_COLOR,
    LINE_COLOR,
    SCALE_FACTOR,
    SENSOR_COLOR,
    SMAX,
    SMIN,
    SSTEP,
)

_IGNORED_COLORS = frozenset(
    {
        BG_COLOR,
        FOV_COLOR,
        CURSOR_COLOR,
        LINE_COLOR,
        LANE_COLOR,
        SENSOR_COLOR,
        CONFIG_MENU_COLOR,
    }
)


def is_obstacle_color(color: Any) -> bool:
    """Whether a pixel colour belongs to a vehicle rather than road or overlay.

    ``None`` stands for a pixel outside the scene.
    """
    if color is None:
        return False
    return tuple(color)[:3] not in _IGNORED_COLORS


def _pixel(scene: Any, x: float, y: float) -> Any:
    try:
        return scene.get_at((int(x), int(y)))
    except IndexError:
        return None


def proximity_sensor(x: float, y: float, reach: int, alpha: float, scene: Any) -> float | None:
    """Distance in metres to the first vehicle along a ray, or None.

    The ray starts at pixel ``(x, y)`` at angle ``alpha`` degrees and is
    at most ``reach`` pixels long, capped at ``SMAX``.
    """
    angle = math.radians(alpha)
    dx, dy = math.cos(angle), math.sin(angle)
    for step in range(SMIN, min(reach, SMAX), SSTEP):
        if is_obstacle_color(_pixel(scene, x + step * dx, y + step * dy)):
            return step / SCALE_FACTOR
    return None