"""Magnified view of the selected vehicle and its details."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import pygame

from .constants import LANE_HEIGHT, SCALE_FACTOR, SCENE_W
from .game_state import Config
from .info_panel import vehicle_info_lines
from .shared_list import SharedList
from .support_list import SupportList
from .zoom_road import zoom_window

_TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 14
_ROW_STEP = 20
_COLUMNS = (450, 650, 800)


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _FONT_SIZE)


def _draw_text(dest: pygame.Surface, text: str, x: int, y: int) -> None:
    dest.blit(_font().render(text, False, _TEXT_COLOR), (x, y))


def render_zoom_vehicle(
    dest: pygame.Surface,
    scene: pygame.Surface,
    selected: int,
    shared: SharedList,
    sprites: Any,
    config: Config,
) -> pygame.Rect:
    """Draw the magnified surroundings of a vehicle; return the covered area.

    Raises KeyError if the vehicle is not on the road.
    """
    current = shared.get_state(selected)
    x = int(current.pos.x * SCALE_FACTOR)
    y = int(current.pos.y * SCALE_FACTOR)
    source, target = zoom_window(
        x,
        y,
        sprites.width(current.vehicle),
        sprites.height(current.vehicle),
        config.zv_scale_factor * 100,
    )
    cut = pygame.Surface(source.size)
    cut.fill((0, 0, 0))
    cut.blit(scene, (0, 0), source)
    zoomed = pygame.transform.scale(cut, target)
    return dest.blit(zoomed, (SCENE_W // 2 - target[0] // 2, 0))


def render_info_zoom(
    dest: pygame.Surface,
    shared: SharedList,
    support: SupportList,
    scheduler: Any,
    selected: int,
) -> list[str]:
    """Write the counters and the selected vehicle's details; return the text."""
    base = LANE_HEIGHT * 4
    drawn = [
        f"Active Veicles: {len(shared)}",
        f"Total Deadline Miss: {scheduler.total_deadline_misses()}",
    ]
    for row, text in enumerate(drawn):
        _draw_text(dest, text, 20, base + _ROW_STEP * (row + 1))

    current = shared.get_state(selected)
    for column, row, text in vehicle_info_lines(selected, current, support, scheduler):
        _draw_text(dest, text, _COLUMNS[column], base + _ROW_STEP * (row + 1))
        drawn.append(text)
    return drawn