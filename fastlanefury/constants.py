"""Game-wide constants: screen geometry, task timing, sensor ranges and state codes."""

from __future__ import annotations

from enum import IntEnum

# Task table
MAX_TASKS = 200

# Window
SCREEN_W = 1220
SCREEN_H = 600
SCREEN_FPS = 60

# Road layout
LANE_NUMBER = 4
LANE_HEIGHT = SCREEN_H // (LANE_NUMBER + 1)
SCENE_W = SCREEN_W
SCENE_H = LANE_HEIGHT * LANE_NUMBER
INFO_W = SCREEN_W
INFO_H = SCENE_H

# User task timing (milliseconds)
UT_PERIOD = 15
UT_DEADLINE = 15
UT_PRIORITY = 90

# Graphics task timing (milliseconds)
GT_PERIOD = round(1000 / SCREEN_FPS)
GT_DEADLINE = GT_PERIOD + 1
GT_PRIORITY = 80

# Vehicle task timing (milliseconds)
VT_PERIOD = 20
VT_DEADLINE = 20
VT_PRIORITY = 30

# Scaling
SCALE_FACTOR = 15  # pixels per metre
VEHICLE_SCALE_FACTOR = 0.6

# Proximity sensors (pixels)
SMAX = 200
SMIN = 0
SSTEP = 1
RANGE_FRONT = int(200 * VEHICLE_SCALE_FACTOR)
RANGE_BACK = int(50 * VEHICLE_SCALE_FACTOR)
RANGE_SIDE = int(150 * VEHICLE_SCALE_FACTOR)

# Colours as RGB triples
BG_COLOR = (188, 188, 188)
FOV_COLOR = (255, 0, 0)
CURSOR_COLOR = (255, 0, 0)
LINE_COLOR = (0, 0, 0)
LANE_COLOR = (255, 255, 255)
SENSOR_COLOR = (0, 255, 0)
CONFIG_MENU_COLOR = (50, 50, 50)
CONFIG_MENU_TEXT_COLOR = (255, 255, 255)
LABEL_FRAME_COLOR = (100, 100, 100)

# Sprite counts per vehicle kind
CAR_NUMBER = 89
TRUCK_NUMBER = 40
MOTORCYCLE_NUMBER = 8
SUPERCAR_NUMBER = 16
VEHICLE_NUMBER = 144
TOTAL_SPRITES = CAR_NUMBER + TRUCK_NUMBER + MOTORCYCLE_NUMBER + SUPERCAR_NUMBER

NONE = -1

# Spawn configuration
AUTO = 1
MANUAL = 0
AS_T1 = 2
AS_T2 = 3
AS_T3 = 4

# Zoom factors
Z1_FACTOR = 5
Z2_FACTOR = 3
Z3_FACTOR = 1

# Labels
LABEL_MARGIN = 20
LABEL_HEIGHT = 15


class GameMode(IntEnum):
    """Whether the simulation runs or is paused."""

    PLAY = 0
    PAUSE = 1


class DriveState(IntEnum):
    """States of the per-vehicle driving state machine."""

    IDLE = 0
    ACCELERATE = 1
    SLOWDOWN = 2
    OVERTAKE = 3
    CRASH = 4
    ABORT_OVERTAKE = 5
    PAUSE = 6


_SPRITE_COUNTS = {
    0: CAR_NUMBER,
    1: TRUCK_NUMBER,
    2: MOTORCYCLE_NUMBER,
    3: SUPERCAR_NUMBER,
}


class VehicleKind(IntEnum):
    """Vehicle families; the value matches the spawn key offset."""

    CAR = 0
    TRUCK = 1
    MOTORCYCLE = 2
    SUPERCAR = 3

    @property
    def sprite_count(self) -> int:
        """Number of sprites available for this kind."""
        return _SPRITE_COUNTS[self.value]

    @property
    def first_sprite(self) -> int:
        """Index of this kind's first sprite in the global sprite table."""
        return sum(count for value, count in _SPRITE_COUNTS.items() if value < self.value)


class Selection(IntEnum):
    """What a mouse click landed on."""

    NONE = -1
    VEHICLE = 0
    BUTTON = 1
    ROAD = 2


class BufferId(IntEnum):
    """Which view the graphics task draws."""

    MAIN_SCENE = 0
    ZOOM_SCENE = 1
    ZOOM_VEHICLE = 2


def lane_top(lane: int) -> int:
    """Pixel row at which the given lane starts."""
    return LANE_HEIGHT * lane


def lane_margin(sprite_height: int) -> int:
    """Vertical margin that centres a sprite of the given height in a lane."""
    return int((LANE_HEIGHT - sprite_height) / 2)