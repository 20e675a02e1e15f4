"""Swept AABB collision detection and response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "BLOCK_PUSH_FACTOR",
    "CollisionEvent",
    "swept_aabb",
    "sweep",
    "scan",
    "filter_events",
    "process",
]

BLOCK_PUSH_FACTOR = 0.01


@dataclass
class CollisionEvent:
    """A potential collision of ``src_obj`` moving into ``obj``.

    ``dx`` and ``dy`` are the movement of the source relative to ``obj``.
    """

    t: float
    nx: float
    ny: float
    dx: float = 0.0
    dy: float = 0.0
    obj: Any = None
    src_obj: Any = None
    is_deleted: bool = False

    def was_collided(self):
        """Whether the hit happens within this step and counts in its direction."""
        return 0.0 <= self.t <= 1.0 and bool(self.obj.is_direction_collidable(self.nx, self.ny))


def swept_aabb(ml, mt, mr, mb, dx, dy, sl, st, sr, sb):
    """Sweep box ``m`` by ``(dx, dy)`` against static box ``s``.

    Returns ``(t, nx, ny)``; ``t`` is -1.0 when there is no collision.
    """
    no_hit = (-1.0, 0.0, 0.0)

    bl = ml if dx > 0 else ml + dx
    bt = mt if dy > 0 else mt + dy
    br = mr + dx if dx > 0 else mr
    bb = mb + dy if dy > 0 else mb
    if br < sl or bl > sr or bb < st or bt > sb:
        return no_hit

    if dx == 0 and dy == 0:
        return no_hit

    if dx == 0:
        tx_entry, tx_exit = -9999999.0, 99999999.0
    else:
        if dx > 0:
            dx_entry, dx_exit = sl - mr, sr - ml
        else:
            dx_entry, dx_exit = sr - ml, sl - mr
        tx_entry, tx_exit = dx_entry / dx, dx_exit / dx

    if dy == 0:
        ty_entry, ty_exit = -99999999999.0, 99999999999.0
    else:
        if dy > 0:
            dy_entry, dy_exit = st - mb, sb - mt
        else:
            dy_entry, dy_exit = sb - mt, st - mb
        ty_entry, ty_exit = dy_entry / dy, dy_exit / dy

    if (tx_entry < 0.0 and ty_entry < 0.0) or tx_entry > 1.0 or ty_entry > 1.0:
        return no_hit

    t_entry = max(tx_entry, ty_entry)
    t_exit = min(tx_exit, ty_exit)
    if t_entry > t_exit:
        return no_hit

    if tx_entry > ty_entry:
        return t_entry, (-1.0 if dx > 0 else 1.0), 0.0
    return t_entry, 0.0, (-1.0 if dy > 0 else 1.0)


def sweep(src, dt, dest):
    """Build the collision event of ``src`` moving for ``dt`` against moving ``dest``."""
    dx = src.vx * dt - dest.vx * dt
    dy = src.vy * dt - dest.vy * dt
    ml, mt, mr, mb = src.bounding_box()
    sl, st, sr, sb = dest.bounding_box()
    t, nx, ny = swept_aabb(ml, mt, mr, mb, dx, dy, sl, st, sr, sb)
    return CollisionEvent(t, nx, ny, dx, dy, dest, src)


def scan(src, dt, dests):
    """Return the events of ``src`` that really collide with any of ``dests``."""
    events = (sweep(src, dt, dest) for dest in dests or ())
    return [event for event in events if event.was_collided()]


def filter_events(events, filter_block=True, filter_x=True, filter_y=True):
    """Pick the earliest event on each axis.

    Returns ``(col_x, col_y)``, either of which may be None. Deleted events,
    events with deleted objects and, when ``filter_block`` is set, events
    with non-blocking objects are ignored.
    """
    min_tx = min_ty = 1.0
    col_x = col_y = None
    for event in events:
        if event.is_deleted or event.obj.is_deleted:
            continue
        if filter_block and not event.obj.is_blocking():
            continue
        if filter_x and event.t < min_tx and event.nx != 0:
            min_tx, col_x = event.t, event
        if filter_y and event.t < min_ty and event.ny != 0:
            min_ty, col_y = event.t, event
    return col_x, col_y


def process(src, dt, co_objects):
    """Move ``src`` for ``dt`` milliseconds, resolving collisions with ``co_objects``."""
    events = scan(src, dt, co_objects) if src.is_collidable() else []

    if not events:
        src.on_no_collision(dt)
    else:
        col_x, col_y = filter_events(events)
        x, y = src.x, src.y
        dx = src.vx * dt
        dy = src.vy * dt

        if col_x is not None and col_y is not None:
            if col_y.t < col_x.t:
                y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
                src.x, src.y = x, y
                src.on_collision_with(col_y)

                col_x.is_deleted = True
                events.append(sweep(src, dt, col_x.obj))
                col_x_other, _ = filter_events(events, True, True, False)
                if col_x_other is not None:
                    x += col_x_other.t * dx + col_x_other.nx * BLOCK_PUSH_FACTOR
                    src.on_collision_with(col_x_other)
                else:
                    x += dx
            else:
                x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
                src.x, src.y = x, y
                src.on_collision_with(col_x)

                col_y.is_deleted = True
                events.append(sweep(src, dt, col_y.obj))
                _, col_y_other = filter_events(events, True, False, True)
                if col_y_other is not None:
                    y += col_y_other.t * dy + col_y_other.ny * BLOCK_PUSH_FACTOR
                    src.on_collision_with(col_y_other)
                else:
                    y += dy
        elif col_x is not None:
            x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
            y += dy
            src.on_collision_with(col_x)
        elif col_y is not None:
            x += dx
            y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
            src.on_collision_with(col_y)
        else:
            x += dx
            y += dy

        src.x, src.y = x, y

    for event in events:
        if event.is_deleted or event.obj.is_blocking():
            continue
        src.on_collision_with(event)