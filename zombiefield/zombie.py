"""Zombie enemy: takes damage from mouse clicks and dies after enough hits."""

from __future__ import annotations

import logging
from typing import Optional

from zombiefield.camera import Camera, main_camera
from zombiefield.game_object import Component, GameObject
from zombiefield.input_manager import LEFT_MOUSE_BUTTON, InputManager, get_input_manager
from zombiefield.resources import ResourceError
from zombiefield.sound import Sound
from zombiefield.sprite_renderer import SpriteRenderer
from zombiefield.timer import Timer
from zombiefield.vec2 import Vec2

ENEMY_IMAGE = "resources/img/Enemy.png"
DEATH_SOUND = "resources/audio/Dead.wav"
HIT_SOUND = "resources/audio/Hit0.wav"

INITIAL_HITPOINTS = 100
CLICK_DAMAGE = 10
HIT_DURATION = 0.5
DEATH_DURATION = 5.0

_log = logging.getLogger(__name__)


def _load_sound(path: str) -> Sound:
    sound = Sound()
    try:
        sound.open(path)
    except ResourceError as exc:
        _log.warning("%s", exc)
    return sound


class Zombie(Component):
    """Enemy that loses hitpoints when clicked and is removed some time after dying."""

    def __init__(self, associated: Optional[GameObject]) -> None:
        super().__init__(associated)
        self.hitpoints = INITIAL_HITPOINTS
        self.hit = False
        self.dead = False
        self.hit_timer = Timer()
        self.death_timer = Timer()
        self.input_manager: InputManager = get_input_manager()
        self.camera: Camera = main_camera

        owner = self.associated
        if owner is not None:
            renderer = SpriteRenderer(owner, frame_count_w=3, frame_count_h=2)
            try:
                renderer.open(ENEMY_IMAGE)
            except ResourceError as exc:
                _log.warning("%s", exc)
            renderer.set_frame(1)
            owner.add_component(renderer)

        self.death_sound = _load_sound(DEATH_SOUND)
        self.hit_sound = _load_sound(HIT_SOUND)

    def _set_animation(self, owner: GameObject, name: str) -> None:
        animator = owner.get_component("Animator")
        if animator is not None:
            animator.set_animation(name)  # type: ignore[attr-defined]

    def damage(self, amount: int) -> None:
        """Take ``amount`` damage, dying when hitpoints run out."""
        if self.dead:
            return
        self.hitpoints -= amount
        self.hit_sound.play(1)

        owner = self.associated
        if owner is None:
            return
        if self.hitpoints <= 0:
            self.dead = True
            self._set_animation(owner, "dead")
            self.death_sound.play(1)
            self.death_timer.restart()
        else:
            self.hit = True
            self.hit_timer.restart()
            self._set_animation(owner, "hit")

    def update(self, dt: float) -> None:
        if self.dead:
            self.death_timer.update(dt)
            if self.death_timer.get() > DEATH_DURATION:
                owner = self.associated
                if owner is not None:
                    owner.request_delete()
            return

        self.hit_timer.update(dt)
        if self.hit and self.hit_timer.get() > HIT_DURATION:
            owner = self.associated
            if owner is not None:
                self._set_animation(owner, "walking")
            self.hit = False

        if self.input_manager.mouse_press(LEFT_MOUSE_BUTTON):
            mouse_x = int(self.input_manager.mouse_x + self.camera.pos.x)
            mouse_y = int(self.input_manager.mouse_y + self.camera.pos.y)
            owner = self.associated
            if owner is not None and owner.box.contains(Vec2(mouse_x, mouse_y)):
                self.damage(CLICK_DAMAGE)

    def render(self) -> None:
        """The zombie is drawn by its sprite renderer."""

    def is_type(self, type_name: str) -> bool:
        return type_name == "Zombie"