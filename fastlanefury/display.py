"""Opening and closing the game window."""

from __future__ import annotations

import logging

import pygame

from .constants import SCREEN_H, SCREEN_W

log = logging.getLogger(__name__)

WINDOW_TITLE = "FastLaneFury"


def init_display() -> pygame.Surface:
    """Open the game window with keyboard and mouse input; return its surface.

    Raises RuntimeError if the display cannot be set up.
    """
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RuntimeError("Failed to initialize the display!") from exc
    try:
        surface = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    except pygame.error as exc:
        raise RuntimeError("Failed to set graphics mode!") from exc
    pygame.display.set_caption(WINDOW_TITLE)
    if not pygame.font.get_init():
        pygame.font.init()
    log.info("Display initialized")
    return surface


def close_display() -> None:
    """Close the game window and release the video system."""
    pygame.display.quit()