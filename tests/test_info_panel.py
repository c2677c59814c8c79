import pygame
import pytest

from fastlanefury.assets import VehicleSprites
from fastlanefury.constants import SCREEN_H, SCREEN_W, SENSOR_COLOR, DriveState
from fastlanefury.info_panel import (
    render_info,
    render_mouse,
    render_pause_symbol,
    state_label,
    vehicle_info_lines,
)
from fastlanefury.ptask import TaskScheduler
from fastlanefury.shared_list import Position, SharedList, VehicleRecord
from fastlanefury.support_list import SupportList


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def screen():
    return pygame.Surface((SCREEN_W, SCREEN_H))


@pytest.fixture
def scheduler():
    sched = TaskScheduler()
    sched.set_period(5, 20)
    sched.set_deadline(5, 20)
    return sched


@pytest.fixture
def sprites():
    return VehicleSprites([pygame.Surface((20, 10)) for _ in range(3)])


def texts(lines):
    return [text for _, _, text in lines]


@pytest.mark.parametrize(
    "state, label",
    [
        (DriveState.SLOWDOWN, "State: SLOW_DOWN"),
        (DriveState.ACCELERATE, "State: ACCELERATE"),
        (DriveState.PAUSE, "State: PAUSE"),
        (DriveState.OVERTAKE, "State: OVERTAKE"),
        (DriveState.IDLE, "State: IDLE"),
        (DriveState.ABORT_OVERTAKE, "State: ABORT_OVERTAKE"),
    ],
)
def test_state_label(state, label):
    assert state_label(state) == label


def test_state_label_crash_has_none():
    assert state_label(DriveState.CRASH) is None


def test_vehicle_info_lines_running(scheduler):
    record = VehicleRecord(speed=10.0, state=DriveState.ACCELERATE, vehicle=2, lane=1)
    lines = vehicle_info_lines(5, record, SupportList(), scheduler)
    shown = texts(lines)
    assert "Task: 5" in shown
    assert "Period: 20" in shown
    assert "Deadline: 20" in shown
    assert "Type: 2" in shown
    assert "Lane: 1" in shown
    assert "Speed: 36.00" in shown
    assert "State: ACCELERATE" in shown
    assert {column for column, _, _ in lines} == {0, 1, 2}


def test_vehicle_info_lines_paused_uses_support(scheduler):
    support = SupportList()
    support.add(5, VehicleRecord(speed=10.0, acceleration=1.5, state=DriveState.SLOWDOWN))
    record = VehicleRecord(state=DriveState.PAUSE, pos=Position(3.0, 4.0))
    shown = texts(vehicle_info_lines(5, record, support, scheduler))
    assert "Speed: 36.00" in shown
    assert "Acceleration: 1.50" in shown
    assert "State: SLOW_DOWN" in shown
    assert "Position: (3.00, 4.00)" in shown


def test_vehicle_info_lines_paused_without_snapshot_raises(scheduler):
    record = VehicleRecord(state=DriveState.PAUSE)
    with pytest.raises(KeyError):
        vehicle_info_lines(5, record, SupportList(), scheduler)


def test_vehicle_info_lines_rows_are_unique_per_column(scheduler):
    record = VehicleRecord()
    lines = vehicle_info_lines(5, record, SupportList(), scheduler)
    keys = [(column, row) for column, row, _ in lines]
    assert len(keys) == len(set(keys))


def test_render_info_without_selection(screen, scheduler, sprites):
    drawn = render_info(screen, SharedList(), SupportList(), scheduler, sprites, None)
    assert drawn == ["Active Veicles: 0", "Total Deadline Missed: 0"]


def test_render_info_with_missing_selection(screen, scheduler, sprites):
    shared = SharedList()
    shared.add(4, VehicleRecord())
    drawn = render_info(screen, shared, SupportList(), scheduler, sprites, 5)
    assert drawn == ["Active Veicles: 1", "Total Deadline Missed: 0"]


def test_render_info_with_selection_draws_sensors(screen, scheduler, sprites):
    shared = SharedList()
    shared.add(5, VehicleRecord(pos=Position(10.0, 10.0), vehicle=0, lane=1))
    drawn = render_info(screen, shared, SupportList(), scheduler, sprites, 5)
    assert "Veicle: 5" in drawn
    assert "Active Veicles: 1" in drawn
    assert rgb(screen, (140, 155)) == SENSOR_COLOR
    assert rgb(screen, (180, 155)) == SENSOR_COLOR


def test_render_pause_symbol(screen):
    render_pause_symbol(screen)
    assert rgb(screen, (32, SCREEN_H - 40)) == (0, 0, 0)
    assert rgb(screen, (47, SCREEN_H - 40)) == (0, 0, 0)
    assert rgb(screen, (40, SCREEN_H - 40)) == (255, 255, 255)


def test_render_mouse(screen):
    render_mouse(screen, (100, 100))
    assert rgb(screen, (100, 100)) == (255, 0, 0)
    assert rgb(screen, (120, 100)) == (0, 0, 0)