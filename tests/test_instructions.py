import pygame
import pytest

from fastlanefury.constants import (
    LABEL_FRAME_COLOR,
    LABEL_HEIGHT,
    SCENE_H,
    SCREEN_H,
    SCREEN_W,
    Z1_FACTOR,
    Z3_FACTOR,
    GameMode,
)
from fastlanefury.game_state import Config, SharedState
from fastlanefury.instructions import instruction_labels, render_instruction


def _texts(shared, config):
    return [text for _, _, text in instruction_labels(shared, config)]


def test_default_labels():
    texts = _texts(SharedState(), Config())
    assert texts == [
        "Press P to pause",
        "Press Z to zoom in",
        "Press A to set manual spawn",
        "Press SPACE to spawn a veicle",
        "Press ESC to exit",
    ]


def test_paused_shows_resume():
    shared = SharedState(game_state=GameMode.PAUSE)
    assert _texts(shared, Config())[0] == "Press P to resume"


@pytest.mark.parametrize(
    "factor, expected",
    [(Z1_FACTOR, "Press Z to zoom in"), (Z3_FACTOR, "Press Z to zoom out")],
)
def test_zoom_hint(factor, expected):
    assert _texts(SharedState(), Config(zv_scale_factor=factor))[1] == expected


def test_manual_spawn_hint():
    assert _texts(SharedState(), Config(auto_spawn=False))[2] == "Press A to set autospawn"


def test_labels_sit_in_info_area():
    for _, y, _ in instruction_labels(SharedState(), Config()):
        assert SCENE_H <= y
        assert y + LABEL_HEIGHT < SCREEN_H


def test_columns_share_rows():
    labels = instruction_labels(SharedState(), Config())
    assert labels[0][1] == labels[3][1]
    assert labels[1][1] == labels[4][1]
    assert labels[3][0] > labels[0][0]
    assert labels[0][0] == labels[1][0] == labels[2][0]


def test_render_draws_frames():
    dest = pygame.Surface((SCREEN_W, SCREEN_H))
    dest.fill((0, 0, 0))
    rects = render_instruction(dest, SharedState(), Config())
    assert len(rects) == 5
    x, y, _ = instruction_labels(SharedState(), Config())[0]
    assert tuple(dest.get_at((x, y)))[:3] == LABEL_FRAME_COLOR
    assert rects[0].topleft == (x, y)