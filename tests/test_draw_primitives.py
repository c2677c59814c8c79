import pygame
import pytest

from fastlanefury.draw_primitives import draw_arch, draw_line, draw_point

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def surface():
    surf = pygame.Surface((200, 200))
    surf.fill(BLACK)
    return surf


def rgb(surf, pos):
    return tuple(surf.get_at(pos))[:3]


def test_point_colours_centre_only_nearby(surface):
    draw_point(50, 50, RED, surface)
    assert rgb(surface, (50, 50)) == RED
    assert rgb(surface, (52, 52)) == RED
    assert rgb(surface, (70, 50)) == BLACK


def test_thick_line_covers_band(surface):
    draw_line(10, 50, 100, 50, RED, surface)
    for y in range(46, 55):
        assert rgb(surface, (50, y)) == RED
    assert rgb(surface, (50, 44)) == BLACK
    assert rgb(surface, (50, 56)) == BLACK
    assert rgb(surface, (150, 50)) == BLACK


def test_arch_fills_sector_only(surface):
    draw_arch(100, 100, 40, 0.0, 90.0, RED, surface)
    assert rgb(surface, (120, 100)) == RED
    assert rgb(surface, (100, 120)) == RED
    assert rgb(surface, (110, 110)) == RED
    assert rgb(surface, (80, 100)) == BLACK
    assert rgb(surface, (100, 80)) == BLACK


def test_empty_arch_range_draws_nothing(surface):
    draw_arch(100, 100, 40, 90.0, 0.0, RED, surface)
    assert rgb(surface, (120, 100)) == BLACK
    assert rgb(surface, (100, 120)) == BLACK