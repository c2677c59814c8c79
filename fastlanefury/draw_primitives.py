"""Basic shapes used for sensor overlays."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

import pygame

_ARC_STEP = 0.01  # radians
_POINT_RADIUS = 5
_LINE_HALF_WIDTH = 5


def draw_point(x: int, y: int, color: Any, dest: pygame.Surface) -> None:
    """Draw a filled dot centred on ``(x, y)``."""
    pygame.draw.circle(dest, color, (x, y), _POINT_RADIUS)


def _arc_angles(start: float, end: float) -> Iterator[float]:
    angle = start
    while angle <= end:
        yield angle
        angle += _ARC_STEP


def draw_arch(
    x: int,
    y: int,
    radius: int,
    start_angle: float,
    end_angle: float,
    color: Any,
    dest: pygame.Surface,
) -> None:
    """Fill a circular sector between two angles given in degrees."""
    for angle in _arc_angles(math.radians(start_angle), math.radians(end_angle)):
        px = int(x + radius * math.cos(angle))
        py = int(y + radius * math.sin(angle))
        pygame.draw.line(dest, color, (x, y), (px, py))


def draw_line(x1: int, y1: int, x2: int, y2: int, color: Any, dest: pygame.Surface) -> None:
    """Draw a thick line, widened vertically on both sides."""
    for offset in range(_LINE_HALF_WIDTH):
        pygame.draw.line(dest, color, (x1, y1 + offset), (x2, y2 + offset))
        pygame.draw.line(dest, color, (x1, y1 - offset), (x2, y2 - offset))