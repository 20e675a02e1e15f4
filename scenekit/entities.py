"""The simple objects of a scene: bricks, coins, goombas, platforms and portals."""

from __future__ import annotations

import time
from enum import IntEnum

from .collision import process
from .gameobject import GameObject

__all__ = [
    "ID_ANI_BRICK",
    "BRICK_BBOX_WIDTH",
    "BRICK_BBOX_HEIGHT",
    "ID_ANI_COIN",
    "COIN_BBOX_WIDTH",
    "COIN_BBOX_HEIGHT",
    "GOOMBA_GRAVITY",
    "GOOMBA_WALKING_SPEED",
    "GOOMBA_BBOX_WIDTH",
    "GOOMBA_BBOX_HEIGHT",
    "GOOMBA_BBOX_HEIGHT_DIE",
    "GOOMBA_DIE_TIMEOUT",
    "ID_ANI_GOOMBA_WALKING",
    "ID_ANI_GOOMBA_DIE",
    "GoombaState",
    "Brick",
    "Coin",
    "Goomba",
    "Platform",
    "Portal",
]

ID_ANI_BRICK = 10000
BRICK_BBOX_WIDTH = 16
BRICK_BBOX_HEIGHT = 16

ID_ANI_COIN = 11000
COIN_BBOX_WIDTH = 10
COIN_BBOX_HEIGHT = 16

GOOMBA_GRAVITY = 0.002
GOOMBA_WALKING_SPEED = 0.05
GOOMBA_BBOX_WIDTH = 16
GOOMBA_BBOX_HEIGHT = 14
GOOMBA_BBOX_HEIGHT_DIE = 7
GOOMBA_DIE_TIMEOUT = 500

ID_ANI_GOOMBA_WALKING = 5000
ID_ANI_GOOMBA_DIE = 5001


class GoombaState(IntEnum):
    WALKING = 100
    DIE = 200


def _ticks() -> int:
    return int(time.monotonic() * 1000)


def _centered_box(x, y, width, height):
    left = x - width // 2
    top = y - height // 2
    return left, top, left + width, top + height


class Brick(GameObject):
    """A solid square block."""

    ANIMATION_ID = ID_ANI_BRICK

    def bounding_box(self):
        return _centered_box(self.x, self.y, BRICK_BBOX_WIDTH, BRICK_BBOX_HEIGHT)


class Coin(GameObject):
    """A coin that can be collected but does not block."""

    ANIMATION_ID = ID_ANI_COIN

    def bounding_box(self):
        return _centered_box(self.x, self.y, COIN_BBOX_WIDTH, COIN_BBOX_HEIGHT)

    def is_blocking(self):
        return False


class Goomba(GameObject):
    """A walking enemy that turns around at walls and vanishes after dying."""

    def __init__(self, x, y, clock=None):
        super().__init__(x, y)
        self._clock = clock if clock is not None else _ticks
        self.ax = 0.0
        self.ay = GOOMBA_GRAVITY
        self.die_start: int | None = None
        self.set_state(GoombaState.WALKING)

    def bounding_box(self):
        height = GOOMBA_BBOX_HEIGHT_DIE if self.state == GoombaState.DIE else GOOMBA_BBOX_HEIGHT
        return _centered_box(self.x, self.y, GOOMBA_BBOX_WIDTH, height)

    def update(self, dt, co_objects=None):
        self.vy += self.ay * dt
        self.vx += self.ax * dt

        if self.state == GoombaState.DIE and self._clock() - self.die_start > GOOMBA_DIE_TIMEOUT:
            self.is_deleted = True
            return

        super().update(dt, co_objects)
        process(self, dt, co_objects)

    def set_state(self, state):
        super().set_state(state)
        if state == GoombaState.DIE:
            self.die_start = self._clock()
            self.y += (GOOMBA_BBOX_HEIGHT - GOOMBA_BBOX_HEIGHT_DIE) // 2
            self.vx = 0.0
            self.vy = 0.0
            self.ay = 0.0
        elif state == GoombaState.WALKING:
            self.vx = -GOOMBA_WALKING_SPEED

    def is_collidable(self):
        return True

    def is_blocking(self):
        return False

    def on_no_collision(self, dt):
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event):
        if not event.obj.is_blocking():
            return
        if isinstance(event.obj, Goomba):
            return
        if event.ny != 0:
            self.vy = 0.0
        elif event.nx != 0:
            self.vx = -self.vx

    def animation_id(self):
        """Id of the animation matching the current state."""
        return ID_ANI_GOOMBA_DIE if self.state == GoombaState.DIE else ID_ANI_GOOMBA_WALKING


class Platform(GameObject):
    """A row of cells that can only be landed on from above."""

    def __init__(
        self,
        x,
        y,
        cell_width,
        cell_height,
        length,
        sprite_id_begin,
        sprite_id_middle,
        sprite_id_end,
    ):
        super().__init__(x, y)
        self.cell_width = float(cell_width)
        self.cell_height = float(cell_height)
        self.length = int(length)
        self.sprite_id_begin = sprite_id_begin
        self.sprite_id_middle = sprite_id_middle
        self.sprite_id_end = sprite_id_end

    def bounding_box(self):
        left = self.x - self.cell_width / 2
        top = self.y - self.cell_height / 2
        return left, top, left + self.cell_width * self.length, top + self.cell_height

    def is_direction_collidable(self, nx, ny):
        return nx == 0 and ny == -1

    def cells(self):
        """Return ``(sprite_id, x, y)`` for each cell to draw, left to right."""
        if self.length <= 0:
            return []
        sprite_ids = [self.sprite_id_begin]
        sprite_ids += [self.sprite_id_middle] * max(self.length - 2, 0)
        if self.length > 1:
            sprite_ids.append(self.sprite_id_end)
        return [
            (sprite_id, self.x + i * self.cell_width, self.y)
            for i, sprite_id in enumerate(sprite_ids)
        ]


class Portal(GameObject):
    """An invisible area that switches to another scene when touched."""

    def __init__(self, left, top, right, bottom, scene_id):
        super().__init__(left, top)
        self.scene_id = scene_id
        self.width = float(right - left)
        self.height = float(bottom - top)

    def bounding_box(self):
        half_w = self.width / 2
        half_h = self.height / 2
        return self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h

    def is_blocking(self):
        return False