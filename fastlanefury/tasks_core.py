"""Creating the shared game context and the user and graphics tasks."""

from __future__ import annotations

import random
import threading
from typing import Any

from .constants import GT_DEADLINE, GT_PERIOD, GT_PRIORITY, UT_DEADLINE, UT_PERIOD, UT_PRIORITY
from .game_state import GameContext
from .graphics_task import graphics_task
from .user_task import user_task

USER_TASK_SLOT = 0
GRAPHICS_TASK_SLOT = 1


def create_context(
    scheduler: Any,
    sprites: Any,
    statistics: Any,
    rng: random.Random | None = None,
) -> GameContext:
    """Build the state shared by every task, with the game's starting settings."""
    return GameContext(
        scheduler=scheduler,
        sprites=sprites,
        statistics=statistics,
        rng=rng if rng is not None else random.Random(),
    )


def create_user_task(ctx: GameContext) -> threading.Thread:
    """Start the input-handling task in its reserved slot."""
    return ctx.scheduler.create(
        user_task, USER_TASK_SLOT, ctx, UT_PERIOD, UT_DEADLINE, UT_PRIORITY, True
    )


def create_graphic_task(ctx: GameContext) -> threading.Thread:
    """Start the drawing task in its reserved slot."""
    return ctx.scheduler.create(
        graphics_task, GRAPHICS_TASK_SLOT, ctx, GT_PERIOD, GT_DEADLINE, GT_PRIORITY, True
    )