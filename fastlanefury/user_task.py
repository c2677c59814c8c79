"""The periodic task that reads the keyboard and mouse and spawns vehicles."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from functools import partial
from typing import Any

import pygame

from .constants import AUTO, Z1_FACTOR, BufferId, GameMode, Selection, VehicleKind
from .display import close_display
from .user import set_selection
from .vehicle_task import create_vehicle_task

log = logging.getLogger(__name__)

_DEBOUNCE_TICKS = 15  # user-task periods during which further clicks are ignored
_SIM_SPEED_STEP = 0.1
_GRAPHICS_SLOT = 1

_SPAWN_KEYS = {
    pygame.K_1: VehicleKind.CAR,
    pygame.K_2: VehicleKind.TRUCK,
    pygame.K_3: VehicleKind.MOTORCYCLE,
    pygame.K_4: VehicleKind.SUPERCAR,
}


class UserInput:
    """Turns key presses, clicks and the auto-spawn timer into game actions."""

    def __init__(self, ctx: Any) -> None:
        self.ctx = ctx
        self.running = True
        self.game_state = GameMode.PLAY
        self._debounce = 0
        self._next_auto_spawn: float | None = None
        self._actions: dict[int, Callable[[], None]] = {
            pygame.K_ESCAPE: self._quit,
            pygame.K_SPACE: self._spawn_random,
            pygame.K_p: self._toggle_pause,
            pygame.K_z: self._zoom_in,
            pygame.K_x: self._zoom_out,
            pygame.K_a: self._toggle_auto_spawn,
            pygame.K_UP: self._speed_up,
            pygame.K_DOWN: self._slow_down,
        }
        for key, kind in _SPAWN_KEYS.items():
            self._actions[key] = partial(self._spawn_kind, kind)

    def handle_key(self, key: int) -> bool:
        """Act on one key press; return whether the game keeps running."""
        action = self._actions.get(key)
        if action is not None:
            action()
        return self.running

    def handle_click(self, x: int, y: int) -> Selection | None:
        """Select what lies under a click; None while a recent click is debounced."""
        if self._debounce:
            return None
        self._debounce = 1
        ctx = self.ctx
        selection = set_selection(x, y, ctx.shared_list, ctx.sprites, ctx.shared, ctx.state_lock)
        if selection is Selection.VEHICLE:
            log.info("Vehicle selected, %s", ctx.shared.selected_vehicle)
        elif selection is Selection.BUTTON:
            log.info("Button selected")
        elif selection is Selection.ROAD:
            log.info("Road selected")
        return selection

    def tick_auto_spawn(self, now: float) -> int | None:
        """Spawn a random vehicle when the auto-spawn timer expires.

        ``now`` is the current time in seconds. Returns the slot of the new
        vehicle, or None when nothing was spawned.
        """
        ctx = self.ctx
        config = ctx.config
        if config.auto_spawn != AUTO or ctx.sim_speed < 0:
            return None
        if self._next_auto_spawn is None:
            self._next_auto_spawn = now + config.auto_spawn_time
        if now < self._next_auto_spawn:
            return None
        self._next_auto_spawn = None

        index = ctx.scheduler.free_index()
        if index is None:
            log.error("Can not create a new vehicle: no free index")
            return None
        if self.game_state != GameMode.PLAY:
            return None
        return self._create(index, None)

    def _advance_debounce(self) -> None:
        if self._debounce:
            self._debounce += 1
            if self._debounce == _DEBOUNCE_TICKS:
                self._debounce = 0

    def _create(self, index: int, kind: VehicleKind | None) -> int | None:
        try:
            create_vehicle_task(self.ctx, index, kind)
        except RuntimeError as exc:
            log.error("error creating a new vehicle task: %s", exc)
            return None
        return index

    def _quit(self) -> None:
        self.running = False
        log.info("User task deactivated")

    def _spawn_random(self) -> None:
        index = self.ctx.scheduler.free_index()
        if index is None:
            log.error("Can not create a new vehicle: no free index")
        elif self.game_state != GameMode.PLAY:
            log.error("Can not create a new vehicle: game paused")
        else:
            self._create(index, None)

    def _spawn_kind(self, kind: VehicleKind) -> None:
        if self.game_state == GameMode.PLAY:
            index = self.ctx.scheduler.free_index()
            if index is None:
                log.error("Can not create a new vehicle: no free index")
            else:
                self._create(index, kind)
        log.info("%s selected", kind.name.capitalize())

    def _toggle_pause(self) -> None:
        with self.ctx.state_lock:
            if self.game_state == GameMode.PLAY:
                self.game_state = GameMode.PAUSE
                log.info("Game paused")
            else:
                self.game_state = GameMode.PLAY
                log.info("Game resumed")
            self.ctx.shared.game_state = self.game_state

    def _zoom_in(self) -> None:
        shared, config = self.ctx.shared, self.ctx.config
        with self.ctx.state_lock:
            selected = shared.selected_vehicle
            if selected is not None and shared.buffer_id == BufferId.MAIN_SCENE:
                shared.buffer_id = BufferId.ZOOM_VEHICLE
                config.zv_scale_factor = Z1_FACTOR
            elif shared.buffer_id == BufferId.ZOOM_VEHICLE:
                config.next_zoom()

            if (
                shared.buffer_id == BufferId.MAIN_SCENE
                and selected is None
                and shared.selection != Selection.NONE
            ):
                shared.buffer_id = BufferId.ZOOM_SCENE
            elif shared.buffer_id == BufferId.ZOOM_SCENE:
                config.next_zoom()

    def _zoom_out(self) -> None:
        shared = self.ctx.shared
        with self.ctx.state_lock:
            if shared.buffer_id in (BufferId.ZOOM_VEHICLE, BufferId.ZOOM_SCENE):
                shared.buffer_id = BufferId.MAIN_SCENE

    def _toggle_auto_spawn(self) -> None:
        config = self.ctx.config
        config.toggle_auto_spawn()
        if config.auto_spawn == AUTO:
            log.info("Auto spawn enabled")
        else:
            log.info("Auto spawn disabled")

    def _speed_up(self) -> None:
        if self.ctx.shared.game_state == GameMode.PLAY:
            self.ctx.sim_speed += _SIM_SPEED_STEP

    def _slow_down(self) -> None:
        if self.ctx.shared.game_state == GameMode.PLAY and self.ctx.sim_speed >= 0:
            self.ctx.sim_speed -= _SIM_SPEED_STEP


def _poll_input(controls: UserInput) -> None:
    if not pygame.display.get_init() or pygame.display.get_surface() is None:
        return
    for event in pygame.event.get():
        if event.type == pygame.KEYDOWN:
            controls.handle_key(event.key)
        elif event.type == pygame.QUIT:
            controls.running = False
    if pygame.mouse.get_pressed()[0]:
        x, y = pygame.mouse.get_pos()
        controls.handle_click(x, y)


def user_task(scheduler: Any, index: int, ctx: Any) -> None:
    """Handle user input every period; on exit stop every other task and close the window."""
    if not scheduler.wait_for_activation(index):
        return

    controls = UserInput(ctx)
    log.info("User task activated")
    scheduler.reset_deadline(index)

    while controls.running and not scheduler.cancelled(index):
        _poll_input(controls)
        controls._advance_debounce()
        controls.tick_auto_spawn(time.time())
        if scheduler.deadline_miss(index):
            log.error("user_task deadline missed")
        scheduler.wait_for_period(index)

    if scheduler.is_active(_GRAPHICS_SLOT):
        scheduler.deactivate(_GRAPHICS_SLOT)
    scheduler.shutdown()
    scheduler.wait_for_end(_GRAPHICS_SLOT)
    close_display()