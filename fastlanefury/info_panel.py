"""The information panel below the scene and the overlays of a selected vehicle."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

import pygame

from .constants import (
    FOV_COLOR,
    INFO_H,
    LANE_NUMBER,
    RANGE_BACK,
    RANGE_FRONT,
    RANGE_SIDE,
    SCALE_FACTOR,
    SCREEN_H,
    SENSOR_COLOR,
    DriveState,
)
from .draw_primitives import draw_arch, draw_line, draw_point
from .shared_list import SharedList, VehicleRecord
from .support_list import SupportList

_TEXT_COLOR = (255, 255, 255)
_BLACK = (0, 0, 0)
_MOUSE_COLOR = (255, 0, 0)
_FONT_SIZE = 14
_ROW_STEP = 20
_COLUMNS = (250, 450, 620)

_STATE_LABELS = {
    DriveState.SLOWDOWN: "State: SLOW_DOWN",
    DriveState.ACCELERATE: "State: ACCELERATE",
    DriveState.PAUSE: "State: PAUSE",
    DriveState.OVERTAKE: "State: OVERTAKE",
    DriveState.IDLE: "State: IDLE",
    DriveState.ABORT_OVERTAKE: "State: ABORT_OVERTAKE",
}


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _FONT_SIZE)


def _draw_text(dest: pygame.Surface, text: str, x: int, y: int) -> None:
    dest.blit(_font().render(text, False, _TEXT_COLOR), (x, y))


def _c_round(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def state_label(state: DriveState) -> str | None:
    """Text shown for a driving state, or None for states without one."""
    return _STATE_LABELS.get(state)


def vehicle_info_lines(
    vid: int,
    current: VehicleRecord,
    support: SupportList,
    scheduler: Any,
) -> list[tuple[int, int, str]]:
    """Task and vehicle details as ``(column, row, text)`` triples.

    Column 0 holds task timing, column 1 the vehicle's kinematics and
    column 2 its steering and state. A paused vehicle shows the speed,
    acceleration and state saved when it was paused.
    """
    if current.state != DriveState.PAUSE:
        speed, acceleration, state = current.speed, current.acceleration, current.state
    else:
        saved = support.get(vid)
        speed, acceleration, state = saved.speed, saved.acceleration, saved.state

    task_column = [
        f"Task: {vid}",
        f"Period: {scheduler.period(vid)}",
        f"Deadline: {scheduler.deadline(vid)}",
        f"Priority: {scheduler.priority(vid)}",
    ]
    vehicle_column = [
        f"Veicle: {vid}",
        f"Type: {current.vehicle}",
        f"Lane: {current.lane}",
        f"Speed: {float(_c_round(speed * 3.6)):.2f}",
        f"Acceleration: {acceleration:.2f}",
        f"Position: ({current.pos.x:.2f}, {current.pos.y:.2f})",
    ]
    extra_column = [f"Steering Angle: {current.steering_angle:.2f}"]
    label = state_label(state)
    if label is not None:
        extra_column.append(label)

    return [
        (column, row, text)
        for column, texts in enumerate((task_column, vehicle_column, extra_column))
        for row, text in enumerate(texts)
    ]


def _render_sensors(dest: pygame.Surface, current: VehicleRecord, sprites: Any) -> None:
    width = sprites.width(current.vehicle)
    height = sprites.height(current.vehicle)
    px = current.pos.x * SCALE_FACTOR
    py = current.pos.y * SCALE_FACTOR

    x, y = int(px - 10), int(py + height // 2)
    draw_line(x, y, x - RANGE_FRONT, y, FOV_COLOR, dest)
    draw_point(x, y, SENSOR_COLOR, dest)

    if current.lane != 0:
        x, y = int(px + width // 2), int(py - 10)
        draw_arch(x, y, RANGE_SIDE, 190.0, 350.0, FOV_COLOR, dest)
        draw_point(x, y, SENSOR_COLOR, dest)

    if current.lane != LANE_NUMBER - 1:
        x, y = int(px + width // 2), int(py + height + 10)
        draw_arch(x, y, RANGE_SIDE, 10.0, 170.0, FOV_COLOR, dest)
        draw_point(x, y, SENSOR_COLOR, dest)

    x, y = int(px + width + 10), int(py + height // 2)
    draw_line(x, y, x + RANGE_BACK, y, FOV_COLOR, dest)
    draw_point(x, y, SENSOR_COLOR, dest)


def render_info(
    dest: pygame.Surface,
    shared: SharedList,
    support: SupportList,
    scheduler: Any,
    sprites: Any,
    selected: int | None,
) -> list[str]:
    """Draw the info panel and the selected vehicle's sensors; return the text drawn."""
    drawn = [
        f"Active Veicles: {len(shared)}",
        f"Total Deadline Missed: {scheduler.total_deadline_misses()}",
    ]
    for row, text in enumerate(drawn):
        _draw_text(dest, text, 6, INFO_H + _ROW_STEP * (row + 1))

    if selected is None:
        return drawn
    try:
        current = shared.get_state(selected)
    except KeyError:
        return drawn  # the vehicle left the road since it was selected

    for column, row, text in vehicle_info_lines(selected, current, support, scheduler):
        _draw_text(dest, text, _COLUMNS[column], INFO_H + _ROW_STEP * (row + 1))
        drawn.append(text)

    _render_sensors(dest, current, sprites)
    return drawn


def render_pause_symbol(dest: pygame.Surface) -> None:
    """Draw the pause button in the bottom-left corner."""
    pygame.draw.circle(dest, _TEXT_COLOR, (40, SCREEN_H - 40), 30)
    dest.fill(_BLACK, pygame.Rect(30, SCREEN_H - 60, 6, 41))
    dest.fill(_BLACK, pygame.Rect(45, SCREEN_H - 60, 6, 41))


def render_mouse(dest: pygame.Surface, pos: tuple[int, int]) -> None:
    """Draw the mouse cursor as a small red dot."""
    x, y = pos
    pygame.draw.circle(dest, _MOUSE_COLOR, (x, y), 5)