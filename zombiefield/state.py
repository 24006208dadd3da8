"""The game scene: its objects, the camera and the per-frame rules."""

from __future__ import annotations

import logging
import weakref
from typing import Optional

from zombiefield.animator import Animation, Animator
from zombiefield.camera import Camera, main_camera
from zombiefield.game_object import GameObject
from zombiefield.input_manager import ESCAPE_KEY, SPACE_KEY, InputManager, get_input_manager
from zombiefield.rect import Rect
from zombiefield.resources import ResourceError
from zombiefield.sprite_renderer import SpriteRenderer
from zombiefield.tile_map import TileMap
from zombiefield.tile_set import TileSet
from zombiefield.zombie import Zombie

BACKGROUND_IMAGE = "resources/img/Background.png"
TILESET_IMAGE = "resources/img/Tileset.png"
MAP_FILE = "resources/map/mapf.txt"
TILE_SIZE = 64

_log = logging.getLogger(__name__)


class State:
    """Holds the scene's game objects and drives their updates and drawing."""

    def __init__(self, screen_width: int = 1200, screen_height: int = 900) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.input_manager: InputManager = get_input_manager()
        self.camera: Camera = main_camera
        self._objects: list[GameObject] = []
        self._quit_requested = False
        self.started = False
        self._build_scene()

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def _build_scene(self) -> None:
        background = GameObject()
        background.box = Rect(0, 0, self.screen_width, self.screen_height)
        renderer = SpriteRenderer(background)
        try:
            renderer.open(BACKGROUND_IMAGE)
        except ResourceError as exc:
            _log.warning("%s", exc)
        renderer.set_frame(0)
        renderer.camera_follower = True
        renderer.camera = self.camera
        background.add_component(renderer)

        tile_set: Optional[TileSet]
        try:
            tile_set = TileSet(TILE_SIZE, TILE_SIZE, TILESET_IMAGE)
        except (ResourceError, ValueError) as exc:
            _log.warning("%s", exc)
            tile_set = None

        map_object = GameObject()
        map_object.box = Rect(0, 0, 0, 0)
        tile_map: Optional[TileMap]
        try:
            tile_map = TileMap(map_object, MAP_FILE, tile_set)
        except (OSError, ValueError) as exc:
            _log.warning("cannot load map %s: %s", MAP_FILE, exc)
            tile_map = None
        if tile_map is not None:
            tile_map.camera = self.camera
            map_object.add_component(tile_map)

        self.add_object(background)
        if tile_map is not None:
            self.add_object(map_object)

    def load_assets(self) -> None:
        """Hook for loading assets before the game starts; the scene needs none."""

    def start(self) -> None:
        """Start every object in the scene."""
        for game_object in list(self._objects):
            game_object.start()
        self.started = True

    def _spawn_zombie(self, x: int, y: int) -> GameObject:
        zombie = GameObject()
        zombie.box = Rect(x, y, 0, 0)

        behaviour = Zombie(zombie)
        behaviour.input_manager = self.input_manager
        behaviour.camera = self.camera
        renderer = zombie.get_component("SpriteRenderer")
        if renderer is not None:
            renderer.camera = self.camera  # type: ignore[attr-defined]
        zombie.add_component(behaviour)

        animator = Animator(zombie)
        animator.add_animation("walking", Animation(0, 3, 0.1))
        animator.add_animation("dead", Animation(5, 5, 0.0))
        animator.add_animation("hit", Animation(4, 4, 0.0))
        animator.set_animation("walking")
        zombie.add_component(animator)

        self.add_object(zombie)
        return zombie

    def update(self, dt: float) -> None:
        """Advance the scene by ``dt`` seconds."""
        self.camera.update(dt, self.input_manager, self.screen_width, self.screen_height)

        if self.input_manager.quit_requested or self.input_manager.key_press(ESCAPE_KEY):
            self._quit_requested = True
            return

        if self.input_manager.key_press(SPACE_KEY):
            x = int(self.input_manager.mouse_x + self.camera.pos.x)
            y = int(self.input_manager.mouse_y + self.camera.pos.y)
            self._spawn_zombie(x, y)

        for game_object in list(self._objects):
            game_object.update(dt)

        self._objects = [obj for obj in self._objects if not obj.is_dead]

    def render(self) -> None:
        for game_object in list(self._objects):
            game_object.render()

    def add_object(self, game_object: GameObject) -> "weakref.ref[GameObject]":
        """Add ``game_object`` to the scene, starting it if the scene already started."""
        self._objects.append(game_object)
        if self.started:
            game_object.start()
        return weakref.ref(game_object)

    def find_object(self, game_object: GameObject) -> Optional["weakref.ref[GameObject]"]:
        """Weak reference to ``game_object`` if it is in the scene, else None."""
        for existing in self._objects:
            if existing is game_object:
                return weakref.ref(existing)
        return None