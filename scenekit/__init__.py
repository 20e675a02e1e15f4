"""Scene files, sprite animations, swept-AABB collisions and the player and enemies of a side-scrolling platformer."""

__version__ = "0.1.0"