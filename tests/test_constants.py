import pytest

from fastlanefury.constants import (
    LANE_HEIGHT,
    LANE_NUMBER,
    SCENE_H,
    TOTAL_SPRITES,
    CAR_NUMBER,
    VehicleKind,
    lane_margin,
    lane_top,
)


def test_first_lane_starts_at_top():
    assert lane_top(0) == 0


def test_lanes_fill_the_scene():
    assert lane_top(LANE_NUMBER) == SCENE_H


def test_lanes_are_evenly_spaced():
    tops = [lane_top(lane) for lane in range(LANE_NUMBER + 1)]
    gaps = {b - a for a, b in zip(tops, tops[1:])}
    assert gaps == {LANE_HEIGHT}


@pytest.mark.parametrize("height", [10, 41, 72, LANE_HEIGHT - 1])
def test_margin_centres_sprite(height):
    margin = lane_margin(height)
    assert LANE_HEIGHT - 1 <= 2 * margin + height <= LANE_HEIGHT


def test_margin_of_full_height_sprite_is_zero():
    assert lane_margin(LANE_HEIGHT) == 0


def test_margin_truncates_toward_zero():
    assert lane_margin(LANE_HEIGHT + 1) == 0


def test_truck_sprites_follow_cars():
    car = VehicleKind(0)
    truck = VehicleKind(1)
    assert car is VehicleKind.CAR
    assert truck is VehicleKind.TRUCK
    assert truck.first_sprite == CAR_NUMBER
    assert car.first_sprite == 0


def test_sprite_ranges_are_contiguous_and_cover_table():
    kinds = [VehicleKind(value) for value in range(4)]
    assert len(set(kinds)) == 4
    for prev, nxt in zip(kinds, kinds[1:]):
        assert prev.first_sprite + prev.sprite_count == nxt.first_sprite
    last = kinds[-1]
    assert last.first_sprite + last.sprite_count == TOTAL_SPRITES
    assert sum(kind.sprite_count for kind in kinds) == TOTAL_SPRITES