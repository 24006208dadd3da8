"""Layered tile maps loaded from text files."""

from __future__ import annotations

import re
from typing import Optional

from zombiefield.camera import Camera, main_camera
from zombiefield.game_object import Component, GameObject
from zombiefield.resources import PathLike
from zombiefield.tile_set import TileSet

_SEPARATORS = re.compile(r"[\s,]+")


class TileMap(Component):
    """A width by height by depth grid of tile indices; negative means empty."""

    def __init__(
        self,
        associated: Optional[GameObject],
        path: PathLike,
        tile_set: Optional[TileSet],
    ) -> None:
        super().__init__(associated)
        self.tile_set = tile_set
        self.camera: Camera = main_camera
        self.width = 0
        self.height = 0
        self.depth = 0
        self._tiles: list[int] = []
        self.load(path)

    def load(self, path: PathLike) -> None:
        """Read the map: width, height and depth, then every tile layer by layer."""
        with open(path, encoding="utf-8") as stream:
            tokens = [token for token in _SEPARATORS.split(stream.read()) if token]
        try:
            numbers = [int(token) for token in tokens]
        except ValueError as exc:
            raise ValueError(f"malformed map file {path}: {exc}") from exc
        if len(numbers) < 3:
            raise ValueError(f"map file {path} lacks its dimensions")
        width, height, depth = numbers[:3]
        if min(width, height, depth) < 0:
            raise ValueError(f"map file {path} has negative dimensions")
        count = width * height * depth
        tiles = numbers[3 : 3 + count]
        if len(tiles) < count:
            raise ValueError(f"map file {path} holds {len(tiles)} of {count} tiles")
        self.width, self.height, self.depth = width, height, depth
        self._tiles = tiles

    def _index(self, position: tuple[int, int, int]) -> int:
        x, y, z = position
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth):
            raise IndexError(f"tile {position} outside the map")
        return (z * self.height + y) * self.width + x

    def __getitem__(self, position: tuple[int, int, int]) -> int:
        return self._tiles[self._index(position)]

    def __setitem__(self, position: tuple[int, int, int], value: int) -> None:
        self._tiles[self._index(position)] = value

    def render_layer(self, layer: int) -> None:
        """Draw every non-empty tile of one layer relative to the camera."""
        if self.tile_set is None:
            return
        owner = self.associated
        if owner is None:
            return
        tile_w = self.tile_set.tile_width
        tile_h = self.tile_set.tile_height
        for y in range(self.height):
            for x in range(self.width):
                tile = self[x, y, layer]
                if tile < 0:
                    continue
                render_x = owner.box.x + x * tile_w - self.camera.pos.x
                render_y = owner.box.y + y * tile_h - self.camera.pos.y
                self.tile_set.render_tile(tile, render_x, render_y)

    def render(self) -> None:
        for layer in range(self.depth):
            self.render_layer(layer)

    def update(self, dt: float) -> None:
        """Tile maps do not change over time."""

    def is_type(self, type_name: str) -> bool:
        return type_name == "TileMap"