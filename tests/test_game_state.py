from fastlanefury.constants import (
    AS_T1,
    Z1_FACTOR,
    Z2_FACTOR,
    Z3_FACTOR,
    BufferId,
    GameMode,
    Selection,
)
from fastlanefury.game_state import Config, GameContext, ScreenPosition, SharedState
from fastlanefury.shared_list import VehicleRecord


def test_config_defaults_match_startup_settings():
    config = Config()
    assert config.auto_spawn is True
    assert config.auto_spawn_time == AS_T1
    assert config.zv_scale_factor == Z1_FACTOR


def test_next_zoom_cycles_through_factors():
    config = Config()
    seen = [config.next_zoom() for _ in range(4)]
    assert seen == [Z2_FACTOR, Z3_FACTOR, Z1_FACTOR, Z2_FACTOR]
    assert config.zv_scale_factor == Z2_FACTOR


def test_next_zoom_leaves_unknown_factor():
    config = Config(zv_scale_factor=7)
    assert config.next_zoom() == 7


def test_toggle_auto_spawn_flips_and_returns():
    config = Config()
    assert config.toggle_auto_spawn() is False
    assert config.auto_spawn is False
    assert config.toggle_auto_spawn() is True


def test_shared_state_defaults():
    state = SharedState()
    assert state.game_state is GameMode.PLAY
    assert state.selection is Selection.NONE
    assert state.selected_vehicle is None
    assert state.buffer_id is BufferId.MAIN_SCENE
    assert state.mouse_pos == ScreenPosition(0, 0)


def test_context_defaults():
    ctx = GameContext()
    assert ctx.sim_speed == 1.0
    assert ctx.last_lane is None
    assert len(ctx.shared_list) == 0
    assert ctx.vehicle_types.get(0) is None


def test_contexts_do_not_share_containers():
    first, second = GameContext(), GameContext()
    first.shared_list.add(2, VehicleRecord())
    first.shared.mouse_pos.x = 40
    first.vehicle_types[2] = None
    assert len(second.shared_list) == 0
    assert second.shared.mouse_pos.x == 0
    assert 2 not in second.vehicle_types