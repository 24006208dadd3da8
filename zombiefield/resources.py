"""Caches for images, music and sound effects, keyed by file path."""

from __future__ import annotations

import os
from typing import Union

import pygame

PathLike = Union[str, "os.PathLike[str]"]

_images: dict[str, pygame.Surface] = {}
_musics: dict[str, bytes] = {}
_sounds: dict[str, "pygame.mixer.Sound"] = {}


class ResourceError(Exception):
    """A resource file could not be loaded."""


def get_image(path: PathLike) -> pygame.Surface:
    """Image at ``path``, loaded on first use and cached afterwards."""
    key = os.fspath(path)
    cached = _images.get(key)
    if cached is not None:
        return cached
    try:
        image = pygame.image.load(key)
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"cannot load image {key}: {exc}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    _images[key] = image
    return image


def clear_images() -> None:
    """Forget every cached image."""
    _images.clear()


def get_music(path: PathLike) -> bytes:
    """Contents of the music file at ``path``, read once and cached."""
    key = os.fspath(path)
    cached = _musics.get(key)
    if cached is not None:
        return cached
    try:
        with open(key, "rb") as stream:
            data = stream.read()
    except OSError as exc:
        raise ResourceError(f"cannot load music {key}: {exc}") from exc
    _musics[key] = data
    return data


def clear_musics() -> None:
    """Forget every cached music file."""
    _musics.clear()


def get_sound(path: PathLike) -> "pygame.mixer.Sound":
    """Sound effect at ``path``, loaded on first use and cached afterwards."""
    key = os.fspath(path)
    cached = _sounds.get(key)
    if cached is not None:
        return cached
    try:
        sound = pygame.mixer.Sound(key)
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"cannot load sound {key}: {exc}") from exc
    _sounds[key] = sound
    return sound


def clear_sounds() -> None:
    """Forget every cached sound effect."""
    _sounds.clear()