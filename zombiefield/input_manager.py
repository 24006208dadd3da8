"""Per-frame keyboard and mouse state built from pygame events."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional

import pygame

LEFT_ARROW_KEY = pygame.K_LEFT
RIGHT_ARROW_KEY = pygame.K_RIGHT
UP_ARROW_KEY = pygame.K_UP
DOWN_ARROW_KEY = pygame.K_DOWN
ESCAPE_KEY = pygame.K_ESCAPE
SPACE_KEY = pygame.K_SPACE
LEFT_MOUSE_BUTTON = pygame.BUTTON_LEFT


class InputManager:
    """Tracks which keys and buttons are held and which changed this frame."""

    def __init__(self) -> None:
        self._key_state: dict[int, bool] = {}
        self._key_update: dict[int, int] = {}
        self._mouse_state: dict[int, bool] = {}
        self._mouse_update: dict[int, int] = {}
        self._update_counter = 0
        self._quit_requested = False
        self.mouse_x = 0
        self.mouse_y = 0

    @property
    def quit_requested(self) -> bool:
        """Whether a quit event arrived during the last update."""
        return self._quit_requested

    def update(self, events: Optional[Iterable[pygame.event.Event]] = None) -> None:
        """Process one frame of events; polls pygame when ``events`` is None."""
        self._update_counter += 1
        self._quit_requested = False

        if events is None:
            self.mouse_x, self.mouse_y = pygame.mouse.get_pos()
            events = pygame.event.get()

        for event in events:
            if event.type == pygame.QUIT:
                self._quit_requested = True
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self._mouse_state[event.button] = event.type == pygame.MOUSEBUTTONDOWN
                self._mouse_update[event.button] = self._update_counter
                self._track_position(event)
            elif event.type == pygame.MOUSEMOTION:
                self._track_position(event)
            elif event.type == pygame.KEYDOWN:
                if not getattr(event, "repeat", False):
                    self._key_state[event.key] = True
                    self._key_update[event.key] = self._update_counter
            elif event.type == pygame.KEYUP:
                self._key_state[event.key] = False
                self._key_update[event.key] = self._update_counter

    def _track_position(self, event: pygame.event.Event) -> None:
        pos = getattr(event, "pos", None)
        if pos is not None:
            self.mouse_x, self.mouse_y = pos

    def key_press(self, key: int) -> bool:
        """Whether ``key`` went down during the last update."""
        return self._key_update.get(key, 0) == self._update_counter and self._key_state.get(key, False)

    def key_release(self, key: int) -> bool:
        """Whether ``key`` went up during the last update."""
        return self._key_update.get(key, 0) == self._update_counter and not self._key_state.get(key, False)

    def is_key_down(self, key: int) -> bool:
        """Whether ``key`` is currently held."""
        return self._key_state.get(key, False)

    def mouse_press(self, button: int) -> bool:
        """Whether ``button`` went down during the last update."""
        return self._mouse_update.get(button, 0) == self._update_counter and self._mouse_state.get(button, False)

    def mouse_release(self, button: int) -> bool:
        """Whether ``button`` went up during the last update."""
        return self._mouse_update.get(button, 0) == self._update_counter and not self._mouse_state.get(
            button, False
        )

    def is_mouse_down(self, button: int) -> bool:
        """Whether ``button`` is currently held."""
        return self._mouse_state.get(button, False)


@lru_cache(maxsize=None)
def get_input_manager() -> InputManager:
    """The input manager shared by the whole game."""
    return InputManager()