"""Play scenes loaded from scene and asset description files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path

from .animation import Animation, AnimationRegistry, SpriteRegistry
from .entities import Brick, Coin, Goomba, Platform, Portal
from .keys import SampleKeyHandler
from .mario import Mario
from .utils import split

__all__ = [
    "ID_TEX_MARIO",
    "ID_TEX_ENEMY",
    "ID_TEX_MISC",
    "ObjectType",
    "Camera",
    "PlayScene",
]

log = logging.getLogger(__name__)

ID_TEX_MARIO = 0
ID_TEX_ENEMY = 10
ID_TEX_MISC = 20

DEFAULT_SCREEN_WIDTH = 320
DEFAULT_SCREEN_HEIGHT = 240

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ObjectType(IntEnum):
    MARIO = 0
    BRICK = 1
    GOOMBA = 2
    KOOPAS = 3
    COIN = 4
    PLATFORM = 5
    PORTAL = 50


class _SceneSection(Enum):
    ASSETS = "[ASSETS]"
    OBJECTS = "[OBJECTS]"


class _AssetSection(Enum):
    SPRITES = "[SPRITES]"
    ANIMATIONS = "[ANIMATIONS]"


@dataclass
class Camera:
    """Top-left corner of the visible part of the world."""

    x: float = 0.0
    y: float = 0.0


def _to_int(text: str) -> int:
    """Leading integer of ``text``, 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    """Leading number of ``text``, 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _token(tokens: list[str], index: int) -> str:
    return tokens[index] if index < len(tokens) else ""


def _sectioned_lines(path, section_type):
    """Yield ``(section, line)`` for the data lines of a sectioned file."""
    headers = {member.value: member for member in section_type}
    section = None
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("#"):
                continue
            if line in headers:
                section = headers[line]
                continue
            if line.startswith("["):
                section = None
                continue
            if section is not None:
                yield section, line


class PlayScene:
    """A scene with a player, objects, sprites and animations read from files."""

    def __init__(
        self,
        scene_id,
        file_path,
        textures=None,
        screen_width=DEFAULT_SCREEN_WIDTH,
        screen_height=DEFAULT_SCREEN_HEIGHT,
        clock=None,
        on_portal=None,
    ):
        self.id = scene_id
        self.file_path = Path(file_path)
        self.textures = textures if textures is not None else {}
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._clock = clock
        self._on_portal = on_portal
        self.sprites = SpriteRegistry()
        self.animations = AnimationRegistry()
        self.player = None
        self.objects = []
        self.camera = Camera()
        self.key_handler = SampleKeyHandler(self)

    def _parse_sprite(self, line):
        tokens = split(line)
        if len(tokens) < 6:
            return
        sprite_id, left, top, right, bottom, texture_id = (_to_int(t) for t in tokens[:6])
        texture = self.textures.get(texture_id)
        if texture is None:
            log.error("Texture ID %d not found!", texture_id)
            return
        self.sprites.add(sprite_id, left, top, right, bottom, texture)

    def _parse_animation(self, line):
        tokens = split(line)
        if len(tokens) < 3:
            return
        animation = Animation(sprites=self.sprites)
        animation_id = _to_int(tokens[0])
        pairs = tokens[1:]
        for sprite_id, frame_time in zip(pairs[::2], pairs[1::2]):
            animation.add(_to_int(sprite_id), _to_int(frame_time))
        self.animations.add(animation_id, animation)

    def _parse_assets(self, line):
        tokens = split(line)
        if tokens[0]:
            self.load_assets(tokens[0])

    def _parse_object(self, line):
        tokens = split(line)
        if len(tokens) < 2:
            return

        raw_type = _to_int(tokens[0])
        x = _to_float(_token(tokens, 1))
        y = _to_float(_token(tokens, 2))

        try:
            object_type = ObjectType(raw_type)
        except ValueError:
            object_type = None

        if object_type == ObjectType.MARIO:
            if self.player is not None:
                log.error("MARIO object was created before!")
                return
            obj = Mario(x, y, clock=self._clock, on_portal=self._on_portal)
            self.player = obj
            log.info("Player object has been created!")
        elif object_type == ObjectType.GOOMBA:
            obj = Goomba(x, y, clock=self._clock)
        elif object_type == ObjectType.BRICK:
            obj = Brick(x, y)
        elif object_type == ObjectType.COIN:
            obj = Coin(x, y)
        elif object_type == ObjectType.PLATFORM:
            obj = Platform(
                x,
                y,
                _to_float(_token(tokens, 3)),
                _to_float(_token(tokens, 4)),
                _to_int(_token(tokens, 5)),
                _to_int(_token(tokens, 6)),
                _to_int(_token(tokens, 7)),
                _to_int(_token(tokens, 8)),
            )
        elif object_type == ObjectType.PORTAL:
            obj = Portal(
                x,
                y,
                _to_float(_token(tokens, 3)),
                _to_float(_token(tokens, 4)),
                _to_int(_token(tokens, 5)),
            )
        else:
            log.error("Invalid object type: %d", raw_type)
            return

        obj.x, obj.y = x, y
        self.objects.append(obj)

    def load_assets(self, asset_file):
        """Read sprites and animations from ``asset_file``."""
        log.info("Start loading assets from : %s", asset_file)
        for section, line in _sectioned_lines(asset_file, _AssetSection):
            if section is _AssetSection.SPRITES:
                self._parse_sprite(line)
            else:
                self._parse_animation(line)
        log.info("Done loading assets from %s", asset_file)

    def load(self):
        """Read the scene file: asset files to load and objects to create."""
        log.info("Start loading scene from : %s", self.file_path)
        for section, line in _sectioned_lines(self.file_path, _SceneSection):
            if section is _SceneSection.ASSETS:
                self._parse_assets(line)
            else:
                self._parse_object(line)
        log.info("Done loading scene %s", self.file_path)

    def update(self, dt):
        """Update every object, move the camera after the player and purge deleted objects."""
        # The player is the first object, so it is left out of the collision list.
        co_objects = self.objects[1:]
        for obj in list(self.objects):
            if not self.objects:
                break
            obj.update(dt, co_objects)

        if self.player is None:
            return

        cx = self.player.x - self.screen_width // 2
        self.camera.x = max(cx, 0.0)
        self.camera.y = 0.0

        self.purge_deleted_objects()

    def clear(self):
        """Remove every object."""
        self.objects.clear()

    def unload(self):
        """Remove every object and forget the player."""
        self.objects.clear()
        self.player = None
        log.info("Scene %d unloaded!", self.id)

    def purge_deleted_objects(self):
        """Drop the objects marked as deleted."""
        self.objects = [obj for obj in self.objects if not obj.is_deleted]
        if self.player is not None and self.player.is_deleted:
            self.player = None