"""Keyboard control of the player of a play scene."""

from __future__ import annotations

from enum import IntEnum

from .mario import MarioLevel, MarioState

__all__ = ["Key", "SampleKeyHandler"]


class Key(IntEnum):
    """Keyboard scan codes."""

    ONE = 0x02
    TWO = 0x03
    ZERO = 0x0B
    R = 0x13
    S = 0x1F
    A = 0x1E
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class SampleKeyHandler:
    """Maps key presses to state changes of the scene's player."""

    def __init__(self, scene):
        self.scene = scene

    @property
    def _player(self):
        return self.scene.player

    def on_key_down(self, key):
        mario = self._player
        if mario is None:
            return
        if key == Key.DOWN:
            mario.set_state(MarioState.SIT)
        elif key == Key.S:
            mario.set_state(MarioState.JUMP)
        elif key == Key.ONE:
            mario.set_level(MarioLevel.SMALL)
        elif key == Key.TWO:
            mario.set_level(MarioLevel.BIG)
        elif key == Key.ZERO:
            mario.set_state(MarioState.DIE)

    def on_key_up(self, key):
        mario = self._player
        if mario is None:
            return
        if key == Key.S:
            mario.set_state(MarioState.RELEASE_JUMP)
        elif key == Key.DOWN:
            mario.set_state(MarioState.SIT_RELEASE)

    def key_state(self, pressed):
        """Apply the held keys; ``pressed`` is a collection of keys currently down."""
        mario = self._player
        if mario is None:
            return
        running = Key.A in pressed
        if Key.RIGHT in pressed:
            mario.set_state(MarioState.RUNNING_RIGHT if running else MarioState.WALKING_RIGHT)
        elif Key.LEFT in pressed:
            mario.set_state(MarioState.RUNNING_LEFT if running else MarioState.WALKING_LEFT)
        else:
            mario.set_state(MarioState.IDLE)