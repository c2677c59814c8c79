"""Magnified view of a part of the road around a clicked point."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

import pygame

from .constants import LANE_HEIGHT, SCENE_H, SCENE_W
from .game_state import Config, ScreenPosition
from .shared_list import SharedList

_BASE_WIDTH = 500
_BASE_HEIGHT = 300
_TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 14


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _FONT_SIZE)


def _c_round(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def zoom_window(
    x: int, y: int, width: int, height: int, scale: int
) -> tuple[pygame.Rect, tuple[int, int]]:
    """Area of the scene to magnify and the size it is stretched to.

    The area grows by ``scale`` pixels in each direction and is shifted
    back by half of that, never past the scene's top-left corner. The
    stretched size fills the scene height at the same aspect ratio.
    """
    width += scale
    height += scale
    half = scale // 2
    left = x - half if x - half > 0 else 0
    top = y - half if y - half > 0 else 0
    target_height = SCENE_H
    target_width = _c_round(width / height * target_height)
    return pygame.Rect(left, top, width, height), (target_width, target_height)


def render_zoom_road(
    dest: pygame.Surface, scene: pygame.Surface, pos: ScreenPosition, config: Config
) -> pygame.Rect:
    """Draw the magnified road centred in the scene area; return the covered area."""
    source, target = zoom_window(
        pos.x, pos.y, _BASE_WIDTH, _BASE_HEIGHT, config.zv_scale_factor * 100
    )
    cut = pygame.Surface(source.size)
    cut.fill((0, 0, 0))
    cut.blit(scene, (0, 0), source)
    zoomed = pygame.transform.scale(cut, target)
    return dest.blit(zoomed, (SCENE_W // 2 - target[0] // 2, 0))


def render_info_zoom_road(dest: pygame.Surface, shared: SharedList, scheduler: Any) -> list[str]:
    """Write the vehicle count and deadline misses under the view; return the text."""
    lines = [
        f"Active Veicles: {len(shared)}",
        f"Total Deadline Miss: {scheduler.total_deadline_misses()}",
    ]
    for row, text in enumerate(lines):
        rendered = _font().render(text, False, _TEXT_COLOR)
        dest.blit(rendered, (20, LANE_HEIGHT * 4 + 20 * (row + 1)))
    return lines