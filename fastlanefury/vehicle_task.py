"""The periodic task that moves one vehicle along the road."""

from __future__ import annotations

import logging
import math
import threading
from typing import Any

from .constants import (
    SCALE_FACTOR,
    VT_DEADLINE,
    VT_PERIOD,
    VT_PRIORITY,
    BufferId,
    DriveState,
    GameMode,
    Selection,
    VehicleKind,
)
from .shared_list import VehicleRecord
from .stat_file import VehicleStatistics
from .vehicle import Distances, drive, init_vehicle, measure

log = logging.getLogger(__name__)

_RANDOM_KINDS = 3  # random spawns pick among the first three kinds only


def step_vehicle(
    ctx: Any,
    index: int,
    state: VehicleRecord,
    stats: VehicleStatistics,
    period_ms: int,
) -> bool:
    """Advance a vehicle by one period, updating ``state`` in place.

    Returns False once the vehicle has left the road, after removing it
    from the shared list and clearing it from the selection.
    """
    dt = period_ms / 1000.0
    state.speed += state.acceleration * dt
    dx = state.speed * dt * ctx.sim_speed
    state.pos.x -= dx
    state.pos.y -= dx * math.tan(math.radians(state.steering_angle))

    ctx.shared_list.set_state(index, state)

    if state.state != DriveState.PAUSE:
        with ctx.scene_lock:
            distances = measure(state, ctx.scene, ctx.sprites)
    else:
        distances = Distances()

    drive(state, stats, distances)

    game_state = ctx.shared.game_state
    if game_state == GameMode.PAUSE and state.state != DriveState.PAUSE:
        ctx.support_list.add(index, state)
        state.state = DriveState.PAUSE
    elif state.state == DriveState.PAUSE and game_state == GameMode.PLAY:
        saved = ctx.support_list.get(index)
        state.acceleration = saved.acceleration
        state.speed = saved.speed
        state.state = saved.state

    if state.pos.x < -(ctx.sprites.width(state.vehicle) // SCALE_FACTOR):
        if index == ctx.shared.selected_vehicle:
            with ctx.state_lock:
                ctx.shared.selection = Selection.NONE
                ctx.shared.selected_vehicle = None
                ctx.shared.buffer_id = BufferId.MAIN_SCENE
            log.info("Selected vehicle %d removed", index)
        ctx.shared_list.remove(index)
        return False
    return True


def vehicle_task(scheduler: Any, index: int, ctx: Any) -> None:
    """Spawn a vehicle and drive it until it leaves the road or is cancelled."""
    if not scheduler.wait_for_activation(index):
        return

    with ctx.state_lock:
        state, stats, ctx.last_lane = init_vehicle(
            ctx.vehicle_types.get(index), ctx.last_lane, ctx.sprites, ctx.statistics, ctx.rng
        )
    ctx.shared_list.add(index, state)
    log.info("Vehicle task activated id: %d", index)

    on_road = True
    while on_road and not scheduler.cancelled(index):
        on_road = step_vehicle(ctx, index, state, stats, scheduler.period(index))
        if scheduler.deadline_miss(index):
            log.error("veicle_task deadline missed")
        scheduler.wait_for_period(index)

    log.info("Vehicle task terminated id: %d", index)
    if not on_road:
        scheduler.clean(index)


def create_vehicle_task(ctx: Any, index: int, predefined: VehicleKind | None) -> threading.Thread:
    """Start a vehicle task in slot ``index``.

    ``predefined`` fixes the vehicle kind; None picks a car, truck or
    motorcycle at random.
    """
    if predefined is not None:
        kind = VehicleKind(predefined)
    else:
        kind = VehicleKind(ctx.rng.randrange(_RANDOM_KINDS))
    ctx.vehicle_types[index] = kind
    return ctx.scheduler.create(
        vehicle_task, index, ctx, VT_PERIOD, VT_DEADLINE, VT_PRIORITY, True
    )