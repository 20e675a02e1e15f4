"""The player character."""

from __future__ import annotations

import logging
import time
from enum import IntEnum

from .collision import process
from .entities import Coin, Goomba, GoombaState, Portal
from .gameobject import GameObject

__all__ = [
    "MARIO_WALKING_SPEED",
    "MARIO_RUNNING_SPEED",
    "MARIO_ACCEL_WALK_X",
    "MARIO_ACCEL_RUN_X",
    "MARIO_JUMP_SPEED_Y",
    "MARIO_JUMP_RUN_SPEED_Y",
    "MARIO_GRAVITY",
    "MARIO_JUMP_DEFLECT_SPEED",
    "MARIO_BIG_BBOX_WIDTH",
    "MARIO_BIG_BBOX_HEIGHT",
    "MARIO_BIG_SITTING_BBOX_WIDTH",
    "MARIO_BIG_SITTING_BBOX_HEIGHT",
    "MARIO_SIT_HEIGHT_ADJUST",
    "MARIO_SMALL_BBOX_WIDTH",
    "MARIO_SMALL_BBOX_HEIGHT",
    "MARIO_UNTOUCHABLE_TIME",
    "MarioState",
    "MarioLevel",
    "Mario",
]

log = logging.getLogger(__name__)

MARIO_WALKING_SPEED = 0.1
MARIO_RUNNING_SPEED = 0.2
MARIO_ACCEL_WALK_X = 0.0005
MARIO_ACCEL_RUN_X = 0.0007
MARIO_JUMP_SPEED_Y = 0.5
MARIO_JUMP_RUN_SPEED_Y = 0.6
MARIO_GRAVITY = 0.002
MARIO_JUMP_DEFLECT_SPEED = 0.4

MARIO_BIG_BBOX_WIDTH = 14
MARIO_BIG_BBOX_HEIGHT = 24
MARIO_BIG_SITTING_BBOX_WIDTH = 14
MARIO_BIG_SITTING_BBOX_HEIGHT = 16
MARIO_SIT_HEIGHT_ADJUST = (MARIO_BIG_BBOX_HEIGHT - MARIO_BIG_SITTING_BBOX_HEIGHT) // 2
MARIO_SMALL_BBOX_WIDTH = 13
MARIO_SMALL_BBOX_HEIGHT = 12

MARIO_UNTOUCHABLE_TIME = 2500

ID_ANI_MARIO_IDLE_RIGHT = 400
ID_ANI_MARIO_IDLE_LEFT = 401
ID_ANI_MARIO_WALKING_RIGHT = 500
ID_ANI_MARIO_WALKING_LEFT = 501
ID_ANI_MARIO_RUNNING_RIGHT = 600
ID_ANI_MARIO_RUNNING_LEFT = 601
ID_ANI_MARIO_JUMP_WALK_RIGHT = 700
ID_ANI_MARIO_JUMP_WALK_LEFT = 701
ID_ANI_MARIO_JUMP_RUN_RIGHT = 800
ID_ANI_MARIO_JUMP_RUN_LEFT = 801
ID_ANI_MARIO_SIT_RIGHT = 900
ID_ANI_MARIO_SIT_LEFT = 901
ID_ANI_MARIO_BRACE_RIGHT = 1000
ID_ANI_MARIO_BRACE_LEFT = 1001
ID_ANI_MARIO_DIE = 999

ID_ANI_MARIO_SMALL_IDLE_RIGHT = 1100
ID_ANI_MARIO_SMALL_IDLE_LEFT = 1102
ID_ANI_MARIO_SMALL_WALKING_RIGHT = 1200
ID_ANI_MARIO_SMALL_WALKING_LEFT = 1201
ID_ANI_MARIO_SMALL_RUNNING_RIGHT = 1300
ID_ANI_MARIO_SMALL_RUNNING_LEFT = 1301
ID_ANI_MARIO_SMALL_BRACE_RIGHT = 1400
ID_ANI_MARIO_SMALL_BRACE_LEFT = 1401
ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT = 1500
ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT = 1501
ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT = 1600
ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT = 1601


class MarioState(IntEnum):
    DIE = -10
    IDLE = 0
    WALKING_RIGHT = 100
    WALKING_LEFT = 200
    JUMP = 300
    RELEASE_JUMP = 301
    RUNNING_RIGHT = 400
    RUNNING_LEFT = 500
    SIT = 600
    SIT_RELEASE = 601


class MarioLevel(IntEnum):
    SMALL = 1
    BIG = 2


_BIG_ANIMATIONS = {
    "jump_run": (ID_ANI_MARIO_JUMP_RUN_RIGHT, ID_ANI_MARIO_JUMP_RUN_LEFT),
    "jump_walk": (ID_ANI_MARIO_JUMP_WALK_RIGHT, ID_ANI_MARIO_JUMP_WALK_LEFT),
    "sit": (ID_ANI_MARIO_SIT_RIGHT, ID_ANI_MARIO_SIT_LEFT),
    "idle": (ID_ANI_MARIO_IDLE_RIGHT, ID_ANI_MARIO_IDLE_LEFT),
    "brace": (ID_ANI_MARIO_BRACE_RIGHT, ID_ANI_MARIO_BRACE_LEFT),
    "running": (ID_ANI_MARIO_RUNNING_RIGHT, ID_ANI_MARIO_RUNNING_LEFT),
    "walking": (ID_ANI_MARIO_WALKING_RIGHT, ID_ANI_MARIO_WALKING_LEFT),
}

_SMALL_ANIMATIONS = {
    "jump_run": (ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT, ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT),
    "jump_walk": (ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT, ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT),
    # Small Mario reuses the big sitting animation.
    "sit": (ID_ANI_MARIO_SIT_RIGHT, ID_ANI_MARIO_SIT_LEFT),
    "idle": (ID_ANI_MARIO_SMALL_IDLE_RIGHT, ID_ANI_MARIO_SMALL_IDLE_LEFT),
    "brace": (ID_ANI_MARIO_SMALL_BRACE_RIGHT, ID_ANI_MARIO_SMALL_BRACE_LEFT),
    "running": (ID_ANI_MARIO_SMALL_RUNNING_RIGHT, ID_ANI_MARIO_SMALL_RUNNING_LEFT),
    "walking": (ID_ANI_MARIO_SMALL_WALKING_RIGHT, ID_ANI_MARIO_SMALL_WALKING_LEFT),
}


def _ticks() -> int:
    return int(time.monotonic() * 1000)


class Mario(GameObject):
    """The player: walks, runs, jumps, sits, stomps goombas and collects coins."""

    def __init__(self, x, y, clock=None, on_portal=None):
        super().__init__(x, y)
        self._clock = clock if clock is not None else _ticks
        self._on_portal = on_portal
        self.is_sitting = False
        self.max_vx = 0.0
        self.ax = 0.0
        self.ay = MARIO_GRAVITY
        self.level = MarioLevel.BIG
        self.untouchable = 0
        self.untouchable_start: int | None = None
        self.is_on_platform = False
        self.coin = 0

    def update(self, dt, co_objects=None):
        self.vy += self.ay * dt
        self.vx += self.ax * dt

        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx

        if (
            self.untouchable_start is None
            or self._clock() - self.untouchable_start > MARIO_UNTOUCHABLE_TIME
        ):
            self.untouchable_start = None
            self.untouchable = 0

        process(self, dt, co_objects)

    def on_no_collision(self, dt):
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.is_on_platform = False

    def on_collision_with(self, event):
        if event.ny != 0 and event.obj.is_blocking():
            self.vy = 0.0
            if event.ny < 0:
                self.is_on_platform = True
        elif event.nx != 0 and event.obj.is_blocking():
            self.vx = 0.0

        if isinstance(event.obj, Goomba):
            self._on_collision_with_goomba(event)
        elif isinstance(event.obj, Coin):
            self._on_collision_with_coin(event)
        elif isinstance(event.obj, Portal):
            self._on_collision_with_portal(event)

    def _on_collision_with_goomba(self, event):
        goomba = event.obj
        if event.ny < 0:
            if goomba.state != GoombaState.DIE:
                goomba.set_state(GoombaState.DIE)
                self.vy = -MARIO_JUMP_DEFLECT_SPEED
        elif self.untouchable == 0 and goomba.state != GoombaState.DIE:
            if self.level > MarioLevel.SMALL:
                self.level = MarioLevel.SMALL
                self.start_untouchable()
            else:
                log.debug(">>> Mario DIE >>>")
                self.set_state(MarioState.DIE)

    def _on_collision_with_coin(self, event):
        event.obj.delete()
        self.coin += 1

    def _on_collision_with_portal(self, event):
        if self._on_portal is not None:
            self._on_portal(event.obj.scene_id)

    def set_state(self, state):
        if self.state == MarioState.DIE:
            return

        if state == MarioState.RUNNING_RIGHT:
            if not self.is_sitting:
                self.max_vx = MARIO_RUNNING_SPEED
                self.ax = MARIO_ACCEL_RUN_X
                self.nx = 1
        elif state == MarioState.RUNNING_LEFT:
            if not self.is_sitting:
                self.max_vx = -MARIO_RUNNING_SPEED
                self.ax = -MARIO_ACCEL_RUN_X
                self.nx = -1
        elif state == MarioState.WALKING_RIGHT:
            if not self.is_sitting:
                self.max_vx = MARIO_WALKING_SPEED
                self.ax = MARIO_ACCEL_WALK_X
                self.nx = 1
        elif state == MarioState.WALKING_LEFT:
            if not self.is_sitting:
                self.max_vx = -MARIO_WALKING_SPEED
                self.ax = -MARIO_ACCEL_WALK_X
                self.nx = -1
        elif state == MarioState.JUMP:
            if not self.is_sitting and self.is_on_platform:
                if abs(self.vx) == MARIO_RUNNING_SPEED:
                    self.vy = -MARIO_JUMP_RUN_SPEED_Y
                else:
                    self.vy = -MARIO_JUMP_SPEED_Y
        elif state == MarioState.RELEASE_JUMP:
            if self.vy < 0:
                self.vy += MARIO_JUMP_SPEED_Y / 2
        elif state == MarioState.SIT:
            if self.is_on_platform and self.level != MarioLevel.SMALL:
                state = MarioState.IDLE
                self.is_sitting = True
                self.vx = 0.0
                self.vy = 0.0
                self.y += MARIO_SIT_HEIGHT_ADJUST
        elif state == MarioState.SIT_RELEASE:
            if self.is_sitting:
                self.is_sitting = False
                state = MarioState.IDLE
                self.y -= MARIO_SIT_HEIGHT_ADJUST
        elif state == MarioState.IDLE:
            self.ax = 0.0
            self.vx = 0.0
        elif state == MarioState.DIE:
            self.vy = -MARIO_JUMP_DEFLECT_SPEED
            self.vx = 0.0
            self.ax = 0.0

        super().set_state(state)

    def set_level(self, level):
        """Change size, lifting Mario so that growing does not sink him into the ground."""
        if self.level == MarioLevel.SMALL:
            self.y -= (MARIO_BIG_BBOX_HEIGHT - MARIO_SMALL_BBOX_HEIGHT) // 2
        self.level = level

    def start_untouchable(self):
        self.untouchable = 1
        self.untouchable_start = self._clock()

    def is_collidable(self):
        return self.state != MarioState.DIE

    def is_blocking(self):
        return self.state != MarioState.DIE and self.untouchable == 0

    def bounding_box(self):
        if self.level == MarioLevel.BIG:
            if self.is_sitting:
                width, height = MARIO_BIG_SITTING_BBOX_WIDTH, MARIO_BIG_SITTING_BBOX_HEIGHT
            else:
                width, height = MARIO_BIG_BBOX_WIDTH, MARIO_BIG_BBOX_HEIGHT
        else:
            width, height = MARIO_SMALL_BBOX_WIDTH, MARIO_SMALL_BBOX_HEIGHT
        left = self.x - width // 2
        top = self.y - height // 2
        return left, top, left + width, top + height

    def _animation_id_for(self, table):
        if not self.is_on_platform:
            key = "jump_run" if abs(self.ax) == MARIO_ACCEL_RUN_X else "jump_walk"
            right, left = table[key]
            return right if self.nx >= 0 else left
        if self.is_sitting:
            right, left = table["sit"]
            return right if self.nx > 0 else left
        if self.vx == 0:
            right, left = table["idle"]
            return right if self.nx > 0 else left
        if self.vx > 0:
            if self.ax < 0:
                return table["brace"][0]
            if self.ax == MARIO_ACCEL_RUN_X:
                return table["running"][0]
            if self.ax == MARIO_ACCEL_WALK_X:
                return table["walking"][0]
        else:
            if self.ax > 0:
                return table["brace"][1]
            if self.ax == -MARIO_ACCEL_RUN_X:
                return table["running"][1]
            if self.ax == -MARIO_ACCEL_WALK_X:
                return table["walking"][1]
        return table["idle"][0]

    def animation_id(self):
        """Id of the animation matching state, level and movement; -1 for an unknown level."""
        if self.state == MarioState.DIE:
            return ID_ANI_MARIO_DIE
        if self.level == MarioLevel.BIG:
            return self._animation_id_for(_BIG_ANIMATIONS)
        if self.level == MarioLevel.SMALL:
            return self._animation_id_for(_SMALL_ANIMATIONS)
        return -1