# scenekit

This is the game logic of a small side-scrolling platformer. It has no rendering
code. It reads scene files, keeps sprites and timed animations, moves objects
with swept-AABB collision, and runs the player, enemies and pickups. Your own
code draws each frame from that state.

## Modules

- `scenekit.utils`: `split(line, delimiter="\t")`, the tokenizer used for
  scene and asset files.
- `scenekit.animation`: `Sprite`, `SpriteRegistry`, `AnimationFrame`,
  `Animation` and `AnimationRegistry`.
  - `Animation.add(sprite_id, time)` appends a frame. A time of 0 uses the
    animation's default of 100 ms.
  - `Animation.advance(now)` returns the frame to show at `now` milliseconds.
    It loops over the frames and raises `ValueError` when the animation has no
    frames.
- `scenekit.gameobject`: `GameObject`, the abstract base class.
  - Attributes: position `x, y`, speed `vx, vy`, facing `nx`, `state` and
    `is_deleted`.
  - Hooks: `bounding_box()`, `update()`, `is_collidable()`, `is_blocking()`,
    `is_direction_collidable()`, `on_no_collision()` and `on_collision_with()`.
- `scenekit.collision`: swept-AABB collision.
  - `swept_aabb(...)` returns `(t, nx, ny)`, with `t == -1.0` when the boxes do
    not collide.
  - `sweep`, `scan` and `filter_events` build the collision events.
  - `process(src, dt, co_objects)` moves an object and stops it against
    blocking objects, pushing it back by `BLOCK_PUSH_FACTOR`. It also reports
    contacts with non-blocking objects to `on_collision_with`.
- `scenekit.entities`: `Brick`, `Coin`, `Goomba`, `Platform` and `Portal`.
  - A `Platform` collides only when landed on from above.
  - `Platform.cells()` returns the `(sprite_id, x, y)` of each cell to draw.
  - `Goomba.animation_id()` returns the animation to show for the goomba's
    state.
- `scenekit.mario`: `Mario`, the player, with `MarioState` and `MarioLevel`.
  - Mario walks, runs, jumps, sits, stomps goombas and collects coins
    (`coin` counts them).
  - When a big Mario is hit, he shrinks and becomes untouchable for a while.
  - A portal calls the `on_portal(scene_id)` callback.
  - `animation_id()` returns the animation to show for the current state and
    level.
- `scenekit.keys`: `Key` (scan codes) and `SampleKeyHandler`, which turns key
  presses into player state changes.
  - `on_key_down` and `on_key_up` handle single presses and releases.
  - `key_state(pressed)` handles the keys that are held down.
- `scenekit.scene`: `PlayScene`, `ObjectType` and `Camera`.

## File formats

Fields are separated by tabs. A line that starts with `#` is a comment. A
`[...]` header that the loader does not know makes it skip lines until the next
header it knows.

A scene file has two sections:

```
[ASSETS]
path/to/assets.txt
[OBJECTS]
# type  x  y  [extra fields]
0	120	10
1	200	150
5	90	136	16	15	16	51000	52000	53000
50	300	100	316	140	2
```

Each object line starts with the object type:

- Mario, Brick, Goomba and Coin need only a position.
- A Platform line adds cell width, cell height, length in cells, and the
  begin, middle and end sprite ids.
- A Portal line gives left, top, right and bottom, then the target scene id.
- An unknown type is logged and skipped.
- Only one Mario is created. A second Mario line is logged and ignored.

An asset file has two sections:

```
[SPRITES]
# id  left  top  right  bottom  texture_id
10001	246	154	259	181	0
[ANIMATIONS]
# id  sprite_id  frame_time  [sprite_id  frame_time ...]
400	10001	100
```

A sprite whose texture id is not in the scene's `textures` mapping is logged and
skipped. Asset paths are opened as given, so a relative path is resolved from
the current working directory.

## Example

```python
from scenekit.keys import Key
from scenekit.scene import PlayScene

scene = PlayScene(
    scene_id=1,
    file_path="world-1.txt",
    textures={0: "mario.png", 10: "enemies.png", 20: "misc.png"},
    screen_width=320,
    screen_height=240,
    clock=lambda: 0,
    on_portal=lambda scene_id: print("switch to", scene_id),
)
scene.load()

for _ in range(60):
    scene.key_handler.key_state({Key.RIGHT})
    scene.update(10)  # milliseconds since the last frame

print(scene.player.x, scene.player.coin, scene.camera.x)
```

What `PlayScene.update(dt)` does on each call:

- It updates every object.
- It checks each object's collisions against every object but the first, so
  list Mario first in the scene file.
- It centres the camera horizontally on the player, never moving it left of 0.
- It drops the objects that are marked as deleted.

`unload()` and `clear()` remove the scene's objects.

Objects that depend on time take a `clock` callable that returns the current
time in milliseconds. It defaults to a monotonic clock. In tests, pass a fixed
or stepped clock.

## What it does not do

scenekit does not:

- open a window;
- load image files;
- draw anything;
- read a keyboard;
- run a frame loop;
- switch between scenes.

The values in `textures` are stored on the sprites unchanged, for your renderer
to use. Touching a portal only calls your `on_portal` callback. Loading and
switching to the next scene is up to the caller.

## Installing

```
pip install .
```

Use `pip install .[test]` to also install pytest.