"""Framed text labels for the instruction panel."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .constants import BG_COLOR, LABEL_FRAME_COLOR, LABEL_HEIGHT

_CHAR_WIDTH = 8
_PADDING = 10
_FRAME_THICKNESS = 3
_TEXT_OFFSET = (3, 4)
_TEXT_COLOR = (0, 0, 0)
_FONT_SIZE = 14


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _FONT_SIZE)


def label_size(text: str) -> tuple[int, int]:
    """Width and height in pixels of the label holding ``text``."""
    return len(text) * _CHAR_WIDTH + _PADDING, LABEL_HEIGHT


def render_label(x: int, y: int, text: str, dest: pygame.Surface) -> pygame.Rect:
    """Draw a framed label at ``(x, y)`` and return the area it covers."""
    width, height = label_size(text)
    label = pygame.Surface((width, height))
    label.fill(BG_COLOR)
    for inset in range(_FRAME_THICKNESS):
        frame = pygame.Rect(inset, inset, width - 2 * inset + 1, height - 2 * inset + 1)
        pygame.draw.rect(label, LABEL_FRAME_COLOR, frame, 1)
    if text:
        label.blit(_font().render(text, False, _TEXT_COLOR), _TEXT_OFFSET)
    return dest.blit(label, (x, y))