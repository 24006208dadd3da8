"""Camera that either follows a game object or scrolls with the arrow keys."""

from __future__ import annotations

from typing import Optional

from zombiefield.game_object import GameObject
from zombiefield.input_manager import (
    DOWN_ARROW_KEY,
    LEFT_ARROW_KEY,
    RIGHT_ARROW_KEY,
    UP_ARROW_KEY,
    InputManager,
)
from zombiefield.vec2 import Vec2

CAMERA_SPEED = 200.0


class Camera:
    """World offset of the screen's top-left corner."""

    def __init__(self) -> None:
        self.pos = Vec2(0.0, 0.0)
        self.speed = Vec2(0.0, 0.0)
        self.focus: Optional[GameObject] = None

    def follow(self, focus: GameObject) -> None:
        """Keep ``focus`` centred on the screen."""
        self.focus = focus

    def unfollow(self) -> None:
        """Stop following and return to keyboard scrolling."""
        self.focus = None

    def update(
        self,
        dt: float,
        input_manager: InputManager,
        screen_width: int,
        screen_height: int,
    ) -> None:
        """Move the camera for a frame of ``dt`` seconds."""
        if self.focus is not None:
            center = self.focus.box.center()
            self.pos.x = center.x - screen_width // 2
            self.pos.y = center.y - screen_height // 2
            return

        self.speed = Vec2(0.0, 0.0)
        if input_manager.is_key_down(LEFT_ARROW_KEY):
            self.speed.x = -CAMERA_SPEED
        if input_manager.is_key_down(RIGHT_ARROW_KEY):
            self.speed.x = CAMERA_SPEED
        if input_manager.is_key_down(UP_ARROW_KEY):
            self.speed.y = -CAMERA_SPEED
        if input_manager.is_key_down(DOWN_ARROW_KEY):
            self.speed.y = CAMERA_SPEED

        self.pos += self.speed * dt


main_camera = Camera()