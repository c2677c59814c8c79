import pygame
import pytest

from fastlanefury.constants import BG_COLOR, LABEL_FRAME_COLOR, LABEL_HEIGHT
from fastlanefury.label import label_size, render_label

BLACK = (0, 0, 0)


@pytest.fixture
def dest():
    surf = pygame.Surface((400, 100))
    surf.fill(BLACK)
    return surf


def rgb(surf, pos):
    return tuple(surf.get_at(pos))[:3]


def test_label_height_is_fixed():
    assert label_size("")[1] == LABEL_HEIGHT
    assert label_size("Press P to pause")[1] == LABEL_HEIGHT


def test_label_width_grows_per_character():
    assert label_size("ab")[0] - label_size("a")[0] == 8
    assert label_size("abcdef")[0] > label_size("abc")[0]


def test_render_returns_covered_area(dest):
    rect = render_label(20, 30, "Press ESC to exit", dest)
    assert rect.topleft == (20, 30)
    assert rect.size == label_size("Press ESC to exit")


def test_frame_and_background(dest):
    rect = render_label(10, 10, "", dest)
    assert rgb(dest, (10, 10)) == LABEL_FRAME_COLOR
    assert rgb(dest, (12, 12)) == LABEL_FRAME_COLOR
    assert rgb(dest, (rect.right - 1, rect.bottom - 1)) == LABEL_FRAME_COLOR
    assert rgb(dest, (15, 17)) == BG_COLOR
    assert rgb(dest, (rect.right + 2, 12)) == BLACK


def test_text_is_drawn_inside_label(dest):
    rect = render_label(0, 0, "WWWW", dest)
    colours = {
        rgb(dest, (px, py))
        for px in range(3, rect.width - 3)
        for py in range(3, rect.height - 3)
    }
    assert BLACK in colours
    assert BG_COLOR in colours