"""Tile sets: a sprite sheet cut into equally sized tiles."""

from __future__ import annotations

from typing import Optional

import pygame

from zombiefield.resources import PathLike
from zombiefield.sprite import Sprite


class TileSet:
    """Draws numbered tiles taken from a grid image."""

    def __init__(self, tile_width: int, tile_height: int, path: PathLike) -> None:
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("tile size must be positive")
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.sprite = Sprite(path)
        tiles_in_width = self.sprite.width // tile_width
        tiles_in_height = self.sprite.height // tile_height
        if tiles_in_width == 0 or tiles_in_height == 0:
            raise ValueError("image is smaller than one tile")
        self.tile_count = tiles_in_width * tiles_in_height
        self.sprite.set_frame_count(tiles_in_width, tiles_in_height)
        self.surface: Optional[pygame.Surface] = None

    def render_tile(self, index: int, x: float, y: float) -> None:
        """Draw tile ``index`` at (x, y); indices outside the set are ignored."""
        if not 0 <= index < self.tile_count:
            return
        self.sprite.set_frame(index)
        self.sprite.render(int(x), int(y), surface=self.surface)