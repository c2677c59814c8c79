"""Vehicle spawning, the driving state machine and sensor sweeps."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .constants import (
    CAR_NUMBER,
    LANE_NUMBER,
    MOTORCYCLE_NUMBER,
    RANGE_BACK,
    RANGE_FRONT,
    RANGE_SIDE,
    SCALE_FACTOR,
    SCREEN_W,
    SUPERCAR_NUMBER,
    TOTAL_SPRITES,
    TRUCK_NUMBER,
    DriveState,
    VehicleKind,
    lane_margin,
    lane_top,
)
from .sensor import proximity_sensor
from .shared_list import Position, VehicleRecord
from .stat_file import StatisticsStore, VehicleStatistics

log = logging.getLogger(__name__)

DETECTION_DEGREE = 160  # rays swept on each side

_OVERTAKE_SPEED = 45 * (LANE_NUMBER + 1)  # m/s
_MAX_STEERING = 45.0  # degrees
_SPAWN_X = (SCREEN_W - 2) // SCALE_FACTOR  # metres
_SPAWN_SPEED = 30.0  # m/s
_LEFT_START = 10
_RIGHT_START = 190


@dataclass
class Distances:
    """Latest sensor readings in whole metres; None means nothing detected."""

    front: int | None = None
    left: int | None = None
    back: int | None = None
    right: int | None = None
    lane_margin: int = 0  # pixels centring this vehicle's sprite in a lane


def _reading(value: int | None) -> float:
    # An empty reading takes part in arithmetic and comparisons as -1.
    return -1 if value is None else value


def kind_of_vehicle(vtype: int) -> VehicleKind:
    """Family whose statistics apply to sprite index ``vtype``."""
    if 0 <= vtype <= CAR_NUMBER:
        return VehicleKind.CAR
    if vtype <= CAR_NUMBER + TRUCK_NUMBER:
        return VehicleKind.TRUCK
    if vtype <= CAR_NUMBER + TRUCK_NUMBER + MOTORCYCLE_NUMBER:
        return VehicleKind.MOTORCYCLE
    if vtype <= CAR_NUMBER + TRUCK_NUMBER + MOTORCYCLE_NUMBER + SUPERCAR_NUMBER:
        return VehicleKind.SUPERCAR
    raise ValueError(f"vehicle type {vtype} out of range")


def init_vehicle(
    kind: VehicleKind | None,
    last_lane: int | None,
    sprites: Any,
    statistics: StatisticsStore,
    rng: random.Random,
) -> tuple[VehicleRecord, VehicleStatistics, int | None]:
    """Spawn a vehicle at the right edge of the road.

    Returns its state, its statistics and the updated last-used lane. A
    ``kind`` of None picks any sprite; a ``last_lane`` of None places the
    vehicle in any lane and leaves it unset.
    """
    if kind is not None:
        kind = VehicleKind(kind)
        vtype = rng.randrange(kind.sprite_count) + kind.first_sprite
    else:
        vtype = rng.randrange(TOTAL_SPRITES)

    stats = statistics.pick(kind_of_vehicle(vtype), rng)

    if last_lane is None:
        lane = rng.randrange(LANE_NUMBER)
    else:
        lane = rng.randrange(LANE_NUMBER)
        while lane == last_lane:
            lane = rng.randrange(LANE_NUMBER)
        last_lane = lane

    margin = lane_margin(sprites.height(vtype))
    y = int((lane_top(lane) + margin) / SCALE_FACTOR)
    record = VehicleRecord(
        speed=_SPAWN_SPEED,
        steering_angle=0.0,
        acceleration=0.0,
        state=DriveState.IDLE,
        pos=Position(float(_SPAWN_X), float(y)),
        vehicle=vtype,
        lane=lane,
    )
    return record, stats, last_lane


def _idle(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    if d.front is None and state.acceleration < stats.max_acceleration:
        state.state = DriveState.ACCELERATE
    if d.front is not None:
        state.state = DriveState.SLOWDOWN
    if d.left is None and state.speed > _OVERTAKE_SPEED and state.lane != LANE_NUMBER - 1:
        state.state = DriveState.OVERTAKE


def _accelerate(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    state.acceleration += 0.5
    if state.acceleration > stats.max_acceleration:
        state.acceleration = stats.max_acceleration
        state.state = DriveState.IDLE
    if d.front is not None:
        state.state = DriveState.SLOWDOWN


def _slow_down(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    front = _reading(d.front)
    state.acceleration = front - stats.min_distance
    if state.acceleration < stats.max_deceleration:
        state.acceleration = stats.max_deceleration
    if d.front is None:
        state.state = DriveState.ACCELERATE
    if front <= stats.min_distance and state.lane != LANE_NUMBER - 1:
        state.state = DriveState.OVERTAKE


def _overtake(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    state.acceleration = min(state.acceleration + 0.1, stats.max_acceleration)
    state.steering_angle = max(state.steering_angle - 0.5, -_MAX_STEERING)

    middle_lane = lane_top(state.lane + 1) + d.lane_margin
    if state.pos.y * SCALE_FACTOR >= middle_lane:
        state.lane += 1
        state.steering_angle = 0.0
        state.state = DriveState.IDLE
    if d.left is not None:
        state.steering_angle = 0.0
        state.state = DriveState.ABORT_OVERTAKE


def _abort_overtake(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    state.steering_angle += 0.5
    if d.front is not None:
        state.acceleration = d.front - stats.min_distance
    else:
        state.acceleration = stats.max_acceleration
    if state.acceleration < stats.max_deceleration:
        state.acceleration = stats.max_deceleration
    if state.steering_angle > _MAX_STEERING:
        state.steering_angle = _MAX_STEERING

    middle_lane = lane_top(state.lane) + d.lane_margin
    if state.pos.y * SCALE_FACTOR <= middle_lane:
        log.info("Vehicle %d back in lane %d", state.vehicle, state.lane)
        state.steering_angle = 0.0
        state.state = DriveState.IDLE


def _crash(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    state.speed = 0.0
    state.acceleration = 0.0
    log.warning("CRASH")


def _pause(state: VehicleRecord, stats: VehicleStatistics, d: Distances) -> None:
    state.speed = 0.0
    state.acceleration = 0.0


_HANDLERS: dict[DriveState, Callable[[VehicleRecord, VehicleStatistics, Distances], None]] = {
    DriveState.IDLE: _idle,
    DriveState.ACCELERATE: _accelerate,
    DriveState.SLOWDOWN: _slow_down,
    DriveState.OVERTAKE: _overtake,
    DriveState.ABORT_OVERTAKE: _abort_overtake,
    DriveState.CRASH: _crash,
    DriveState.PAUSE: _pause,
}


def drive(state: VehicleRecord, stats: VehicleStatistics, distances: Distances) -> None:
    """Run one step of the driving state machine, updating ``state`` in place."""
    handler = _HANDLERS.get(state.state)
    if handler is not None:
        handler(state, stats, distances)
    if state.speed < 0:
        state.speed = 0.0
    if state.speed > stats.max_speed:
        state.speed = stats.max_speed


def _first_hit(readings: Iterable[float | None]) -> int | None:
    return next((int(r) for r in readings if r is not None), None)


def measure(state: VehicleRecord, scene: Any, sprites: Any) -> Distances:
    """Sweep the front, side and back sensors over the scene."""
    width = sprites.width(state.vehicle)
    height = sprites.height(state.vehicle)
    px = state.pos.x * SCALE_FACTOR
    py = state.pos.y * SCALE_FACTOR

    front = proximity_sensor(int(px - 10), int(py + height // 2), RANGE_FRONT, 180, scene)

    side_x = int(px + width // 2)
    if state.lane != 0:
        y = int(py + height + 10)
        left_readings = [
            proximity_sensor(side_x, y, RANGE_SIDE, _LEFT_START + i, scene)
            for i in range(1, DETECTION_DEGREE + 1)
        ]
    else:
        left_readings = [None] * DETECTION_DEGREE

    if state.lane != LANE_NUMBER - 1:
        y = int(py - 10)
        right_readings = [
            proximity_sensor(side_x, y, RANGE_SIDE, _RIGHT_START + j, scene)
            for j in range(1, DETECTION_DEGREE + 1)
        ]
    else:
        right_readings = [None] * DETECTION_DEGREE

    back = proximity_sensor(int(px + width + 10), int(py + height // 2), RANGE_BACK, 0, scene)

    return Distances(
        front=None if front is None else int(front),
        left=_first_hit(left_readings),
        # the right sweep also takes in the last ray of the left sweep
        right=_first_hit([left_readings[-1], *right_readings]),
        back=None if back is None else int(back),
        lane_margin=lane_margin(height),
    )