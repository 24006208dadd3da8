"""Frame animations played on an object's sprite renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zombiefield.game_object import Component, GameObject


@dataclass(frozen=True)
class Animation:
    """A run of sprite frames shown for ``frame_time`` seconds each."""

    frame_start: int = 0
    frame_end: int = 0
    frame_time: float = 0.0


class Animator(Component):
    """Steps through the frames of the current animation over time."""

    def __init__(self, associated: Optional[GameObject]) -> None:
        super().__init__(associated)
        self.animations: dict[str, Animation] = {}
        self.frame_start = 0
        self.frame_end = 0
        self.frame_time = 0.0
        self.current_frame = 0
        self.current_animation = ""
        self.time_elapsed = 0.0

    def add_animation(self, name: str, animation: Animation) -> None:
        """Register ``animation`` under ``name``, replacing any previous one."""
        self.animations[name] = animation

    def set_animation(self, name: str) -> None:
        """Switch to the animation called ``name``; unknown names are ignored."""
        animation = self.animations.get(name)
        if animation is None:
            return
        self.current_animation = name
        self.frame_start = animation.frame_start
        self.frame_end = animation.frame_end
        self.frame_time = animation.frame_time
        self.current_frame = self.frame_start
        self._show_current_frame()

    def update(self, dt: float) -> None:
        """Advance to the next frame once more than a frame's time has passed."""
        if self.frame_time <= 0:
            return
        self.time_elapsed += dt
        if self.time_elapsed > self.frame_time:
            self.time_elapsed -= self.frame_time
            self.current_frame += 1
            if self.current_frame > self.frame_end:
                self.current_frame = self.frame_start
            self._show_current_frame()

    def render(self) -> None:
        """Animators draw nothing themselves."""

    def is_type(self, type_name: str) -> bool:
        return type_name == "Animator"

    def _show_current_frame(self) -> None:
        owner = self.associated
        if owner is None:
            return
        renderer = owner.get_component("SpriteRenderer")
        if renderer is not None:
            renderer.set_frame(self.current_frame)  # type: ignore[attr-defined]