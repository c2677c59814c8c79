"""Resolving what a mouse click on the screen selects."""

from __future__ import annotations

import math
import threading
from typing import Any

from .constants import SCALE_FACTOR, SCREEN_H, SCREEN_W, Selection
from .game_state import ScreenPosition, SharedState
from .shared_list import SharedList


def _c_round(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def set_selection(
    x: int,
    y: int,
    shared_list: SharedList,
    sprites: Any,
    shared_state: SharedState,
    lock: threading.Lock,
) -> Selection:
    """Record what lies under ``(x, y)`` in ``shared_state`` and return it.

    A vehicle under the point is selected; any other point on the screen
    selects the road and remembers the position; a point off the screen
    selects nothing and leaves the selected vehicle as it was.
    """
    with lock:
        if not (0 < x < SCREEN_W and 0 < y < SCREEN_H):
            shared_state.selection = Selection.NONE
            return Selection.NONE

        for vid, record in shared_list.items():
            xg = _c_round(record.pos.x * SCALE_FACTOR)
            yg = _c_round(record.pos.y * SCALE_FACTOR)
            width = sprites.width(record.vehicle)
            height = sprites.height(record.vehicle)
            if xg < x < xg + width and yg < y < yg + height:
                shared_state.selection = Selection.VEHICLE
                shared_state.selected_vehicle = vid
                return Selection.VEHICLE

        shared_state.selection = Selection.ROAD
        shared_state.selected_vehicle = None
        shared_state.mouse_pos = ScreenPosition(x, y)
        return Selection.ROAD