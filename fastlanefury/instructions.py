"""Key-binding hints drawn in the lower right of the screen."""

from __future__ import annotations

import pygame

from .constants import (
    LABEL_HEIGHT,
    LABEL_MARGIN,
    LANE_HEIGHT,
    SCREEN_W,
    Z3_FACTOR,
    GameMode,
)
from .game_state import Config, SharedState
from .label import render_label

_SECTION_W = SCREEN_W // 3


def instruction_labels(shared: SharedState, config: Config) -> list[tuple[int, int, str]]:
    """The hints to show as ``(x, y, text)`` triples, reflecting the current settings."""
    left = _SECTION_W * 2 + LABEL_MARGIN
    right = left + _SECTION_W // 2
    top = LANE_HEIGHT * 4
    rows = [top + LABEL_MARGIN * (n + 1) + LABEL_HEIGHT * n for n in range(3)]

    if shared.game_state == GameMode.PLAY:
        pause = "Press P to pause"
    else:
        pause = "Press P to resume"
    if config.zv_scale_factor != Z3_FACTOR:
        zoom = "Press Z to zoom in"
    else:
        zoom = "Press Z to zoom out"
    if not config.auto_spawn:
        spawn = "Press A to set autospawn"
    else:
        spawn = "Press A to set manual spawn"

    return [
        (left, rows[0], pause),
        (left, rows[1], zoom),
        (left, rows[2], spawn),
        (right, rows[0], "Press SPACE to spawn a veicle"),
        (right, rows[1], "Press ESC to exit"),
    ]


def render_instruction(
    dest: pygame.Surface, shared: SharedState, config: Config
) -> list[pygame.Rect]:
    """Draw every hint as a framed label; return the areas covered."""
    return [render_label(x, y, text, dest) for x, y, text in instruction_labels(shared, config)]