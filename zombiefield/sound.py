"""Short sound effects played on a mixer channel."""

from __future__ import annotations

from typing import Optional

import pygame

from zombiefield.resources import PathLike, get_sound


class Sound:
    """A sound effect that remembers the channel it last played on."""

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self._sound: Optional[pygame.mixer.Sound] = None
        self._channel: Optional[pygame.mixer.Channel] = None
        if path is not None:
            self.open(path)

    @property
    def is_open(self) -> bool:
        return self._sound is not None

    def open(self, path: PathLike) -> None:
        """Load the effect at ``path``, stopping any effect loaded before."""
        self.stop()
        self._sound = get_sound(path)

    def play(self, times: int = 1) -> None:
        """Play the effect ``times`` times on a free channel."""
        if self._sound is not None:
            self._channel = self._sound.play(loops=times - 1)

    def stop(self) -> None:
        """Halt the channel this effect last played on."""
        if self._sound is not None and self._channel is not None:
            self._channel.stop()