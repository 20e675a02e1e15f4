from types import SimpleNamespace

import pytest

from scenekit.keys import Key, SampleKeyHandler
from scenekit.mario import (
    MARIO_ACCEL_RUN_X,
    MARIO_ACCEL_WALK_X,
    MARIO_JUMP_SPEED_Y,
    Mario,
    MarioLevel,
    MarioState,
)


@pytest.fixture
def mario():
    player = Mario(50, 100, clock=lambda: 0)
    player.is_on_platform = True
    return player


@pytest.fixture
def handler(mario):
    return SampleKeyHandler(SimpleNamespace(player=mario))


def test_jump_key(handler, mario):
    handler.on_key_down(Key.S)
    assert mario.vy == -MARIO_JUMP_SPEED_Y


def test_release_jump_key(handler, mario):
    handler.on_key_down(Key.S)
    handler.on_key_up(Key.S)
    assert mario.vy == pytest.approx(-MARIO_JUMP_SPEED_Y / 2)


def test_sit_and_release(handler, mario):
    handler.on_key_down(Key.DOWN)
    assert mario.is_sitting is True
    assert mario.state == MarioState.IDLE
    handler.on_key_up(Key.DOWN)
    assert mario.is_sitting is False
    assert mario.y == 100.0


def test_level_keys(handler, mario):
    handler.on_key_down(Key.ONE)
    assert mario.level == MarioLevel.SMALL
    handler.on_key_down(Key.TWO)
    assert mario.level == MarioLevel.BIG


def test_die_key(handler, mario):
    handler.on_key_down(Key.ZERO)
    assert mario.state == MarioState.DIE


def test_reset_key_changes_nothing(handler, mario):
    handler.on_key_down(Key.R)
    assert mario.state == -1
    assert (mario.x, mario.y) == (50.0, 100.0)


def test_walking_right(handler, mario):
    handler.key_state({Key.RIGHT})
    assert mario.state == MarioState.WALKING_RIGHT
    assert mario.ax == MARIO_ACCEL_WALK_X
    assert mario.nx == 1


def test_running_right(handler, mario):
    handler.key_state({Key.RIGHT, Key.A})
    assert mario.state == MarioState.RUNNING_RIGHT
    assert mario.ax == MARIO_ACCEL_RUN_X


def test_walking_and_running_left(handler, mario):
    handler.key_state({Key.LEFT})
    assert mario.state == MarioState.WALKING_LEFT
    assert mario.nx == -1
    handler.key_state({Key.LEFT, Key.A})
    assert mario.state == MarioState.RUNNING_LEFT
    assert mario.ax == -MARIO_ACCEL_RUN_X


def test_right_wins_over_left(handler, mario):
    handler.key_state({Key.RIGHT, Key.LEFT})
    assert mario.state == MarioState.WALKING_RIGHT


def test_no_keys_means_idle(handler, mario):
    handler.key_state({Key.RIGHT})
    handler.key_state(set())
    assert mario.state == MarioState.IDLE
    assert mario.ax == 0.0
    assert mario.vx == 0.0