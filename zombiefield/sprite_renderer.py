"""Component that draws a sprite over its object's bounding box."""

from __future__ import annotations

from typing import Optional

import pygame

from zombiefield.camera import Camera, main_camera
from zombiefield.game_object import Component, GameObject
from zombiefield.resources import PathLike
from zombiefield.sprite import Sprite


class SpriteRenderer(Component):
    """Draws a sprite at its object's box, offset by the camera unless told not to."""

    def __init__(
        self,
        associated: Optional[GameObject],
        path: Optional[PathLike] = None,
        frame_count_w: int = 1,
        frame_count_h: int = 1,
    ) -> None:
        super().__init__(associated)
        self.sprite = Sprite(frame_count_w=frame_count_w, frame_count_h=frame_count_h)
        self.camera_follower = False
        self.camera: Camera = main_camera
        self.surface: Optional[pygame.Surface] = None
        if path is not None:
            self.open(path)
            self.set_frame(0)

    def open(self, path: PathLike) -> None:
        """Load the image at ``path`` and size the object's box to one frame."""
        self.sprite.open(path)
        owner = self.associated
        if owner is not None:
            owner.box.w = self.sprite.width
            owner.box.h = self.sprite.height

    def set_frame_count(self, frame_count_w: int, frame_count_h: int) -> None:
        self.sprite.set_frame_count(frame_count_w, frame_count_h)

    def set_frame(self, frame: int) -> None:
        self.sprite.set_frame(frame)

    def update(self, dt: float) -> None:
        """Nothing to advance; animation is driven by an Animator."""

    def render(self) -> None:
        owner = self.associated
        if owner is None:
            return
        x = int(owner.box.x)
        y = int(owner.box.y)
        if not self.camera_follower:
            x -= int(self.camera.pos.x)
            y -= int(self.camera.pos.y)
        self.sprite.render(x, y, int(owner.box.w), int(owner.box.h), self.surface)

    def is_type(self, type_name: str) -> bool:
        return type_name == "SpriteRenderer"