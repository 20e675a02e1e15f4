import pytest

from scenekit.collision import CollisionEvent
from scenekit.entities import Brick, Coin, Goomba, GoombaState, Platform, Portal
from scenekit.mario import (
    ID_ANI_MARIO_DIE,
    ID_ANI_MARIO_IDLE_RIGHT,
    ID_ANI_MARIO_JUMP_WALK_RIGHT,
    ID_ANI_MARIO_SMALL_IDLE_LEFT,
    ID_ANI_MARIO_WALKING_RIGHT,
    MARIO_ACCEL_WALK_X,
    MARIO_BIG_BBOX_HEIGHT,
    MARIO_BIG_BBOX_WIDTH,
    MARIO_BIG_SITTING_BBOX_HEIGHT,
    MARIO_JUMP_DEFLECT_SPEED,
    MARIO_JUMP_RUN_SPEED_Y,
    MARIO_JUMP_SPEED_Y,
    MARIO_RUNNING_SPEED,
    MARIO_SMALL_BBOX_HEIGHT,
    MARIO_SMALL_BBOX_WIDTH,
    MARIO_UNTOUCHABLE_TIME,
    MARIO_WALKING_SPEED,
    Mario,
    MarioLevel,
    MarioState,
)


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def make_mario(x=0, y=0, on_portal=None):
    clock = FakeClock()
    return Mario(x, y, clock, on_portal), clock


def test_big_bounding_box():
    mario, _ = make_mario(0, 50)
    left, top, right, bottom = mario.bounding_box()
    assert right - left == MARIO_BIG_BBOX_WIDTH
    assert bottom - top == MARIO_BIG_BBOX_HEIGHT


def test_small_bounding_box():
    mario, _ = make_mario(0, 50)
    mario.level = MarioLevel.SMALL
    left, top, right, bottom = mario.bounding_box()
    assert right - left == MARIO_SMALL_BBOX_WIDTH
    assert bottom - top == MARIO_SMALL_BBOX_HEIGHT


def test_growing_keeps_feet_in_place():
    mario, _ = make_mario(0, 50)
    mario.level = MarioLevel.SMALL
    bottom_small = mario.bounding_box()[3]
    mario.set_level(MarioLevel.BIG)
    assert mario.level == MarioLevel.BIG
    assert mario.bounding_box()[3] == bottom_small


def test_sitting_keeps_feet_in_place():
    mario, _ = make_mario(0, 50)
    mario.is_on_platform = True
    bottom = mario.bounding_box()[3]
    mario.set_state(MarioState.SIT)
    assert mario.is_sitting
    assert mario.state == MarioState.IDLE
    _, top, _, bottom_sit = mario.bounding_box()
    assert bottom_sit == bottom
    assert bottom_sit - top == MARIO_BIG_SITTING_BBOX_HEIGHT
    mario.set_state(MarioState.SIT_RELEASE)
    assert not mario.is_sitting
    assert mario.bounding_box()[3] == bottom


def test_small_mario_cannot_sit():
    mario, _ = make_mario()
    mario.level = MarioLevel.SMALL
    mario.is_on_platform = True
    mario.set_state(MarioState.SIT)
    assert not mario.is_sitting
    assert mario.state == MarioState.SIT


def test_sitting_blocks_walking():
    mario, _ = make_mario()
    mario.is_on_platform = True
    mario.set_state(MarioState.SIT)
    mario.set_state(MarioState.WALKING_RIGHT)
    assert mario.ax == 0.0


def test_walking_speed_is_capped():
    mario, _ = make_mario()
    mario.set_state(MarioState.WALKING_RIGHT)
    assert mario.ax == MARIO_ACCEL_WALK_X
    mario.update(1000, [])
    assert mario.vx == MARIO_WALKING_SPEED
    assert not mario.is_on_platform


def test_jump_only_from_platform():
    mario, _ = make_mario()
    mario.set_state(MarioState.JUMP)
    assert mario.vy == 0.0
    mario.is_on_platform = True
    mario.set_state(MarioState.JUMP)
    assert mario.vy == -MARIO_JUMP_SPEED_Y


def test_running_jump_is_higher():
    mario, _ = make_mario()
    mario.is_on_platform = True
    mario.vx = MARIO_RUNNING_SPEED
    mario.set_state(MarioState.JUMP)
    assert mario.vy == -MARIO_JUMP_RUN_SPEED_Y


def test_release_jump_halves_upward_speed():
    mario, _ = make_mario()
    mario.vy = -MARIO_JUMP_SPEED_Y
    mario.set_state(MarioState.RELEASE_JUMP)
    assert mario.vy == pytest.approx(-MARIO_JUMP_SPEED_Y / 2)


def test_die_is_final():
    mario, _ = make_mario()
    mario.set_state(MarioState.DIE)
    assert mario.vy == -MARIO_JUMP_DEFLECT_SPEED
    mario.set_state(MarioState.IDLE)
    assert mario.state == MarioState.DIE
    assert not mario.is_collidable()
    assert not mario.is_blocking()
    assert mario.animation_id() == ID_ANI_MARIO_DIE


def test_lands_on_brick():
    mario, _ = make_mario(0, 70)
    brick = Brick(0, 100)
    mario.vy = 1.0
    mario.update(16, [brick])
    assert mario.is_on_platform
    assert mario.vy == 0.0
    assert mario.bounding_box()[3] <= brick.bounding_box()[1]


def test_lands_on_platform_but_passes_through_sideways():
    platform = Platform(0, 100, 16, 16, 3, 1, 2, 3)
    mario, _ = make_mario(0, 70)
    mario.vy = 1.0
    mario.update(16, [platform])
    assert mario.is_on_platform
    assert mario.bounding_box()[3] <= platform.bounding_box()[1]

    side, _ = make_mario(-30, 100)
    side.ay = 0.0
    side.vx = 1.0
    side.max_vx = 1.0
    side.update(20, [platform])
    assert side.vx == 1.0
    assert side.x == pytest.approx(-10)


def test_stomping_goomba_kills_it():
    goomba = Goomba(0, 100, FakeClock())
    mario, _ = make_mario(0, 70)
    mario.vy = 1.0
    mario.update(16, [goomba])
    assert goomba.state == GoombaState.DIE
    assert mario.vy == -MARIO_JUMP_DEFLECT_SPEED


def test_hit_by_goomba_shrinks_then_kills():
    mario, clock = make_mario()
    goomba = Goomba(20, 0, FakeClock())
    clock.now = 5000
    mario.on_collision_with(CollisionEvent(0.5, -1.0, 0.0, obj=goomba))
    assert mario.level == MarioLevel.SMALL
    assert mario.untouchable == 1
    assert mario.untouchable_start == clock.now
    mario.on_collision_with(CollisionEvent(0.5, -1.0, 0.0, obj=goomba))
    assert mario.state != MarioState.DIE
    mario.untouchable = 0
    mario.on_collision_with(CollisionEvent(0.5, -1.0, 0.0, obj=goomba))
    assert mario.state == MarioState.DIE


def test_untouchable_wears_off():
    mario, clock = make_mario()
    mario.start_untouchable()
    assert not mario.is_blocking()
    clock.now = MARIO_UNTOUCHABLE_TIME
    mario.update(1, [])
    assert mario.untouchable == 1
    clock.now = MARIO_UNTOUCHABLE_TIME + 1
    mario.update(1, [])
    assert mario.untouchable == 0
    assert mario.is_blocking()


def test_collects_coin():
    mario, _ = make_mario()
    coin = Coin(10, 0)
    mario.on_collision_with(CollisionEvent(0.5, -1.0, 0.0, obj=coin))
    assert coin.is_deleted
    assert mario.coin == 1
    assert mario.vx == 0.0


def test_portal_triggers_callback():
    switched = []
    mario, _ = make_mario(on_portal=switched.append)
    portal = Portal(0, 0, 10, 10, 4)
    mario.on_collision_with(CollisionEvent(0.5, -1.0, 0.0, obj=portal))
    assert switched == [4]


def test_animation_ids():
    mario, _ = make_mario()
    assert mario.animation_id() == ID_ANI_MARIO_JUMP_WALK_RIGHT
    mario.is_on_platform = True
    assert mario.animation_id() == ID_ANI_MARIO_IDLE_RIGHT
    mario.set_state(MarioState.WALKING_RIGHT)
    mario.vx = MARIO_WALKING_SPEED
    assert mario.animation_id() == ID_ANI_MARIO_WALKING_RIGHT

    small, _ = make_mario()
    small.level = MarioLevel.SMALL
    small.is_on_platform = True
    small.nx = -1
    assert small.animation_id() == ID_ANI_MARIO_SMALL_IDLE_LEFT