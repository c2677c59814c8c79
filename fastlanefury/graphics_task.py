"""The periodic task that draws the scene and the interface."""

from __future__ import annotations

import logging
from typing import Any

import pygame

from .constants import SCENE_H, SCENE_W, SCREEN_H, SCREEN_W, BufferId, GameMode
from .info_panel import render_info, render_mouse, render_pause_symbol
from .instructions import render_instruction
from .scene_render import (
    clear_scene,
    prerender_background,
    render_background,
    render_spawn_lane,
    render_vehicle,
)
from .zoom_road import render_info_zoom_road, render_zoom_road
from .zoom_vehicle import render_info_zoom, render_zoom_vehicle

log = logging.getLogger(__name__)

_SCENE_RECT = pygame.Rect(0, 0, SCENE_W, SCENE_H)


def render_frame(
    ctx: Any,
    scene_buffer: pygame.Surface,
    screen_buffer: pygame.Surface,
    background: pygame.Surface,
    mouse_pos: tuple[int, int],
) -> BufferId:
    """Draw one frame into ``screen_buffer`` and publish the scene; return the view drawn."""
    clear_scene(scene_buffer)
    render_background(scene_buffer, background)
    for _, record in ctx.shared_list.items():
        render_vehicle(record.pos.x, record.pos.y, ctx.sprites.bitmap(record.vehicle), scene_buffer)
    render_spawn_lane(scene_buffer, ctx.last_lane)

    with ctx.scene_lock:
        ctx.scene.blit(scene_buffer, (0, 0), _SCENE_RECT)

    screen_buffer.fill((0, 0, 0))
    view = BufferId(ctx.shared.buffer_id)
    selected = ctx.shared.selected_vehicle

    if view is BufferId.MAIN_SCENE:
        screen_buffer.blit(scene_buffer, (0, 0), _SCENE_RECT)
        render_info(
            screen_buffer, ctx.shared_list, ctx.support_list, ctx.scheduler, ctx.sprites, selected
        )
        if ctx.shared.game_state == GameMode.PAUSE:
            render_pause_symbol(screen_buffer)
    elif view is BufferId.ZOOM_SCENE:
        with ctx.scene_lock:
            render_zoom_road(screen_buffer, ctx.scene, ctx.shared.mouse_pos, ctx.config)
        render_info_zoom_road(screen_buffer, ctx.shared_list, ctx.scheduler)
    elif selected is not None:
        try:
            with ctx.scene_lock:
                render_zoom_vehicle(
                    screen_buffer, ctx.scene, selected, ctx.shared_list, ctx.sprites, ctx.config
                )
            render_info_zoom(
                screen_buffer, ctx.shared_list, ctx.support_list, ctx.scheduler, selected
            )
        except KeyError:
            pass  # the vehicle left the road during this frame

    render_mouse(screen_buffer, mouse_pos)
    render_instruction(screen_buffer, ctx.shared, ctx.config)
    return view


def _mouse_position() -> tuple[int, int]:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return pygame.mouse.get_pos()
    return (0, 0)


def graphics_task(scheduler: Any, index: int, ctx: Any) -> None:
    """Redraw the screen every period until cancelled."""
    if not scheduler.wait_for_activation(index):
        return

    screen_buffer = pygame.Surface((SCREEN_W, SCREEN_H))
    scene_buffer = pygame.Surface((SCENE_W, SCENE_H))
    background = pygame.Surface((SCENE_W, SCENE_H))
    prerender_background(background)

    log.info("Graphics task activated")
    scheduler.reset_deadline(index)

    while not scheduler.cancelled(index):
        render_frame(ctx, scene_buffer, screen_buffer, background, _mouse_position())

        screen = pygame.display.get_surface() if pygame.display.get_init() else None
        if screen is not None:
            screen.blit(screen_buffer, (0, 0))
            pygame.display.flip()

        if scheduler.deadline_miss(index):
            log.error("graphics_task deadline missed")
        scheduler.wait_for_period(index)

    log.info("Graphics task terminated")