"""Background music played through pygame's music stream."""

from __future__ import annotations

import io
import os
from typing import Optional

import pygame

from zombiefield.resources import PathLike, get_music


class Music:
    """A music track that can be played in a loop and faded out."""

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self._data: Optional[bytes] = None
        self._name_hint = ""
        if path is not None:
            self.open(path)

    @property
    def is_open(self) -> bool:
        return self._data is not None

    def open(self, path: PathLike) -> None:
        """Load the track at ``path``, replacing any loaded before."""
        key = os.fspath(path)
        self._data = get_music(key)
        self._name_hint = os.path.splitext(key)[1].lstrip(".")

    def play(self, times: int = -1) -> None:
        """Play the track ``times`` times; a negative count loops forever."""
        if self._data is None:
            return
        loops = -1 if times < 0 else max(times, 1) - 1
        pygame.mixer.music.load(io.BytesIO(self._data), self._name_hint)
        pygame.mixer.music.play(loops)

    def stop(self, ms_to_stop: int = 1500) -> None:
        """Fade the music out over ``ms_to_stop`` milliseconds."""
        if pygame.mixer.get_init():
            pygame.mixer.music.fadeout(ms_to_stop)

    def close(self) -> None:
        """Stop playback and drop the loaded track."""
        self.stop()
        self._data = None

    def __enter__(self) -> Music:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()