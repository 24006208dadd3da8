import pygame

from zombiefield.camera import CAMERA_SPEED, Camera
from zombiefield.game_object import GameObject
from zombiefield.input_manager import InputManager
from zombiefield.rect import Rect
from zombiefield.vec2 import Vec2


def holding(*keys):
    manager = InputManager()
    manager.update([pygame.event.Event(pygame.KEYDOWN, key=key) for key in keys])
    return manager


def test_no_keys_keeps_position():
    camera = Camera()
    camera.update(0.5, InputManager(), 800, 600)
    assert camera.pos == Vec2(0.0, 0.0)
    assert camera.speed == Vec2(0.0, 0.0)


def test_left_key_scrolls_left():
    camera = Camera()
    camera.update(0.5, holding(pygame.K_LEFT), 800, 600)
    assert camera.speed.x == -CAMERA_SPEED
    assert camera.pos.x < 0
    assert camera.pos.y == 0


def test_down_and_right_scroll_positive():
    camera = Camera()
    camera.update(0.25, holding(pygame.K_DOWN, pygame.K_RIGHT), 800, 600)
    assert camera.pos.x > 0
    assert camera.pos.y > 0
    assert camera.pos.x == camera.pos.y


def test_speed_resets_when_key_released():
    camera = Camera()
    manager = holding(pygame.K_UP)
    camera.update(0.1, manager, 800, 600)
    moved = Vec2(camera.pos.x, camera.pos.y)
    manager.update([pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)])
    camera.update(0.1, manager, 800, 600)
    assert camera.speed == Vec2(0.0, 0.0)
    assert camera.pos == moved


def test_follow_centres_focus():
    camera = Camera()
    focus = GameObject()
    focus.box = Rect(100, 100, 50, 50)
    camera.follow(focus)
    camera.update(1.0, holding(pygame.K_LEFT), 200, 100)
    assert camera.pos + Vec2(100, 50) == focus.box.center()


def test_unfollow_returns_to_keyboard():
    camera = Camera()
    focus = GameObject()
    focus.box = Rect(400, 400, 10, 10)
    camera.follow(focus)
    camera.update(1.0, InputManager(), 200, 100)
    before = Vec2(camera.pos.x, camera.pos.y)
    camera.unfollow()
    focus.box = Rect(0, 0, 10, 10)
    camera.update(1.0, InputManager(), 200, 100)
    assert camera.focus is None
    assert camera.pos == before