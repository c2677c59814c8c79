from pathlib import Path

import pygame
import pytest

from fastlanefury.assets import VehicleSprites, load_scaled_bitmap, sprite_paths
from fastlanefury.constants import (
    CAR_NUMBER,
    TOTAL_SPRITES,
    VEHICLE_SCALE_FACTOR,
    VehicleKind,
)


def _save_bmp(path: Path, size, color=(10, 20, 30)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


def test_sprite_paths_cover_the_whole_table(tmp_path):
    paths = sprite_paths(tmp_path)
    assert len(paths) == TOTAL_SPRITES
    assert paths[0] == tmp_path / "Car" / "C_bitmap0.bmp"
    assert paths[CAR_NUMBER] == tmp_path / "Truck" / "T_bitmap0.bmp"
    assert paths[VehicleKind.MOTORCYCLE.first_sprite] == tmp_path / "Motorcycle" / "M_bitmap0.bmp"
    assert paths[-1].parent == tmp_path / "SuperCar"
    assert len(set(paths)) == len(paths)


def test_load_scaled_bitmap_halves_size_and_keeps_colour(tmp_path):
    path = _save_bmp(tmp_path / "img.bmp", (40, 20), (200, 100, 50))
    scaled = load_scaled_bitmap(path, 0.5)
    assert scaled.get_size() == (20, 10)
    assert tuple(scaled.get_at((5, 5)))[:3] == (200, 100, 50)


def test_load_scaled_bitmap_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scaled_bitmap(tmp_path / "absent.bmp", 0.5)


def test_vehicle_sprites_load_all(tmp_path):
    for i, path in enumerate(sprite_paths(tmp_path)):
        _save_bmp(path, (20 + i % 3, 10))
    sprites = VehicleSprites.load(tmp_path)
    assert len(sprites) == TOTAL_SPRITES
    reference = load_scaled_bitmap(sprite_paths(tmp_path)[1], VEHICLE_SCALE_FACTOR)
    assert sprites.width(1) == reference.get_width()
    assert sprites.height(1) == reference.get_height()


def test_vehicle_sprites_load_fails_on_missing_file(tmp_path):
    paths = sprite_paths(tmp_path)
    for path in paths[:-1]:
        _save_bmp(path, (10, 10))
    with pytest.raises(FileNotFoundError):
        VehicleSprites.load(tmp_path)


def test_vehicle_sprites_lookup():
    first = pygame.Surface((30, 12))
    second = pygame.Surface((8, 5))
    sprites = VehicleSprites([first, second])
    assert sprites.bitmap(1) is second
    assert sprites.width(0) == first.get_width()
    assert sprites.height(1) == second.get_height()
    with pytest.raises(IndexError):
        sprites.bitmap(2)
    with pytest.raises(IndexError):
        sprites.width(-1)