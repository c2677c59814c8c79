"""Drawing of the road scene: background, lane markings, vehicles and spawn marker."""

from __future__ import annotations

import math
from functools import lru_cache

import pygame

from .constants import (
    BG_COLOR,
    FOV_COLOR,
    LANE_COLOR,
    LANE_NUMBER,
    NONE,
    SCALE_FACTOR,
    SCENE_H,
    SCENE_W,
    SCREEN_W,
    lane_top,
)

_SEGMENT_LENGTH = 20
_SPACE_LENGTH = 20
_LANE_TEXT_COLOR = (0, 0, 0)
_MASK_COLOR = (255, 0, 255)  # sprite pixels of this colour are transparent
_SPAWN_MARK_RADIUS = 10
_FONT_SIZE = 14


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _FONT_SIZE)


def _scene_rect() -> pygame.Rect:
    # Filled rectangles include their far corner, hence the extra pixel.
    return pygame.Rect(0, 0, SCENE_W + 1, SCENE_H + 1)


def prerender_background(background: pygame.Surface) -> None:
    """Paint the road surface, dashed lane separators and lane numbers."""
    background.fill(BG_COLOR, _scene_rect())

    x, draw = 0, True
    while x < SCENE_W:
        if draw:
            for separator in range(1, LANE_NUMBER):
                y = lane_top(separator)
                pygame.draw.line(background, LANE_COLOR, (x, y), (x + _SEGMENT_LENGTH, y))
        x += _SEGMENT_LENGTH + _SPACE_LENGTH
        draw = not draw

    for lane in range(LANE_NUMBER):
        text = _font().render(str(lane), False, _LANE_TEXT_COLOR)
        background.blit(text, (30, lane_top(lane) + 25))


def clear_scene(dest: pygame.Surface) -> None:
    """Reset the scene area to the road colour."""
    dest.fill(BG_COLOR, _scene_rect())


def render_background(dest: pygame.Surface, background: pygame.Surface) -> None:
    """Copy the prerendered background over the scene area."""
    dest.blit(background, (0, 0), pygame.Rect(0, 0, SCENE_W, SCENE_H))


def render_vehicle(x: float, y: float, sprite: pygame.Surface, dest: pygame.Surface) -> pygame.Rect:
    """Draw a sprite at a position given in metres; return the covered area."""
    if sprite.get_colorkey() is None:
        sprite.set_colorkey(_MASK_COLOR)
    xg = math.ceil(x * SCALE_FACTOR)
    yg = math.ceil(y * SCALE_FACTOR)
    return dest.blit(sprite, (xg, yg))


def render_spawn_lane(dest: pygame.Surface, lane: int | None) -> None:
    """Mark the lane in which the last vehicle spawned."""
    if lane is None:
        lane = NONE
    center = (SCREEN_W - 20, lane_top(lane) + 10)
    pygame.draw.circle(dest, FOV_COLOR, center, _SPAWN_MARK_RADIUS)