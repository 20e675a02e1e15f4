"""Base class for everything that lives in a scene."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["GameObject"]


class GameObject(ABC):
    """A positioned, moving object that takes part in collisions."""

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = -1
        self.is_deleted = False

    @abstractmethod
    def bounding_box(self):
        """Return ``(left, top, right, bottom)``."""

    def update(self, dt, co_objects=None):
        """Advance the object by ``dt`` milliseconds."""

    def set_state(self, state):
        self.state = state

    def delete(self):
        """Mark the object for removal from its scene."""
        self.is_deleted = True

    def is_collidable(self):
        """Whether this object looks for collisions while moving."""
        return False

    def is_blocking(self):
        """Whether other objects are pushed back by this one."""
        return True

    def is_direction_collidable(self, nx, ny):
        """Whether a hit with normal ``(nx, ny)`` counts."""
        return True

    def on_no_collision(self, dt):
        """Called when a move found nothing to hit."""

    def on_collision_with(self, event):
        """Called for each collision found while moving."""