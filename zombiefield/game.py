"""The game window and its main loop."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from zombiefield.input_manager import InputManager, get_input_manager
from zombiefield.resources import clear_images, clear_musics, clear_sounds
from zombiefield.state import State

DEFAULT_TITLE = "Jogo IDJ"
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 900
FRAME_DELAY_MS = 33
MIXER_CHANNELS = 32

_log = logging.getLogger(__name__)


class Game:
    """The one game instance: window, audio, input and the current scene."""

    _instance: Optional["Game"] = None

    def __init__(self, title: str, width: int, height: int) -> None:
        if Game._instance is not None:
            raise RuntimeError("the game has already been created")

        self.title = title
        self.width = width
        self.height = height
        self.delta_time = 0.0

        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"cannot open the game window: {exc}") from exc
        pygame.display.set_caption(title)

        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=1024)
            pygame.mixer.set_num_channels(MIXER_CHANNELS)
        except pygame.error as exc:
            _log.warning("audio unavailable: %s", exc)

        Game._instance = self
        self.input_manager: InputManager = get_input_manager()
        self.state = State(width, height)
        self.state.input_manager = self.input_manager
        self._frame_start = pygame.time.get_ticks()

    def _calculate_delta_time(self) -> None:
        now = pygame.time.get_ticks()
        self.delta_time = (now - self._frame_start) / 1000.0
        self._frame_start = now

    def run(self) -> None:
        """Run the main loop until the scene asks to quit."""
        self.state.load_assets()
        self.state.start()

        while not self.state.quit_requested:
            self._calculate_delta_time()
            self.input_manager.update()
            self.state.update(self.delta_time)
            self.state.render()
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)

        clear_images()
        clear_musics()
        clear_sounds()

    def close(self) -> None:
        """Shut down audio and video and release the game instance."""
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()
        if Game._instance is self:
            Game._instance = None

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def get_game() -> Game:
    """The running game, created with the default window on first use."""
    if Game._instance is None:
        Game(DEFAULT_TITLE, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert Game._instance is not None
    return Game._instance


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until the player quits."""
    parser = argparse.ArgumentParser(prog="zombiefield", description="Click the zombies.")
    parser.parse_args(argv)
    game = get_game()
    try:
        game.run()
    finally:
        game.close()
    return 0