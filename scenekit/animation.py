"""Sprite and animation registries with frame timing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Sprite",
    "SpriteRegistry",
    "AnimationFrame",
    "Animation",
    "AnimationRegistry",
]

log = logging.getLogger(__name__)

DEFAULT_FRAME_TIME = 100


@dataclass(frozen=True)
class Sprite:
    """A rectangular region of a texture."""

    id: int
    left: int
    top: int
    right: int
    bottom: int
    texture: Any = None


class SpriteRegistry:
    """Sprites by id."""

    def __init__(self) -> None:
        self._sprites: dict[int, Sprite] = {}

    def add(self, sprite_id, left, top, right, bottom, texture):
        """Create a sprite and store it under ``sprite_id``, replacing any older one."""
        sprite = Sprite(sprite_id, left, top, right, bottom, texture)
        self._sprites[sprite_id] = sprite
        return sprite

    def get(self, sprite_id):
        """Return the sprite for ``sprite_id``, or None if there is none."""
        return self._sprites.get(sprite_id)

    def clear(self):
        """Forget every sprite."""
        self._sprites.clear()

    def __contains__(self, sprite_id) -> bool:
        return sprite_id in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)


@dataclass(frozen=True)
class AnimationFrame:
    """One sprite shown for ``time`` milliseconds."""

    sprite: Sprite | None
    time: int


class Animation:
    """A looping sequence of frames."""

    def __init__(self, default_time=DEFAULT_FRAME_TIME, sprites=None):
        self.default_time = default_time
        self._sprites = sprites if sprites is not None else SpriteRegistry()
        self._frames: list[AnimationFrame] = []
        self._current = -1
        self._last_frame_time: int | None = None

    @property
    def frames(self) -> tuple[AnimationFrame, ...]:
        return tuple(self._frames)

    @property
    def current_index(self) -> int:
        """Index of the frame shown last, -1 before the first advance."""
        return self._current

    def add(self, sprite_id, time=0):
        """Append a frame; a time of 0 means the default frame time."""
        frame_time = time if time != 0 else self.default_time
        sprite = self._sprites.get(sprite_id)
        if sprite is None:
            log.error("Sprite ID %d not found!", sprite_id)
        frame = AnimationFrame(sprite, frame_time)
        self._frames.append(frame)
        return frame

    def advance(self, now):
        """Return the frame to show at time ``now`` (milliseconds)."""
        if not self._frames:
            raise ValueError("animation has no frames")
        if self._current == -1:
            self._current = 0
            self._last_frame_time = now
        elif now - self._last_frame_time > self._frames[self._current].time:
            self._current = (self._current + 1) % len(self._frames)
            self._last_frame_time = now
        return self._frames[self._current]


class AnimationRegistry:
    """Animations by id."""

    def __init__(self) -> None:
        self._animations: dict[int, Animation] = {}

    def add(self, animation_id, animation):
        """Store ``animation``; an existing id is replaced with a warning."""
        if self._animations.get(animation_id) is not None:
            log.warning("Animation %d already exists", animation_id)
        self._animations[animation_id] = animation

    def get(self, animation_id):
        """Return the animation for ``animation_id``, or None with an error logged."""
        animation = self._animations.get(animation_id)
        if animation is None:
            log.error("Animation ID %d not found", animation_id)
        return animation

    def clear(self):
        """Forget every animation."""
        self._animations.clear()

    def __contains__(self, animation_id) -> bool:
        return animation_id in self._animations

    def __len__(self) -> int:
        return len(self._animations)