"""Sprite sheets: an image split into a grid of equally sized frames."""

from __future__ import annotations

from typing import Optional

import pygame

from zombiefield.resources import PathLike, get_image


class Sprite:
    """An image drawn one frame (clip) at a time."""

    def __init__(
        self,
        path: Optional[PathLike] = None,
        frame_count_w: int = 1,
        frame_count_h: int = 1,
    ) -> None:
        self.texture: Optional[pygame.Surface] = None
        self._texture_width = 0
        self._texture_height = 0
        self.clip_rect = pygame.Rect(0, 0, 0, 0)
        self.frame_count_w = frame_count_w
        self.frame_count_h = frame_count_h
        self.current_frame = 0
        if path is not None:
            self.open(path)

    @property
    def is_open(self) -> bool:
        return self.texture is not None

    @property
    def width(self) -> int:
        """Width of one frame."""
        return self._texture_width // self.frame_count_w

    @property
    def height(self) -> int:
        """Height of one frame."""
        return self._texture_height // self.frame_count_h

    def open(self, path: PathLike) -> None:
        """Load the image at ``path`` and show its first frame."""
        self.texture = get_image(path)
        self._texture_width, self._texture_height = self.texture.get_size()
        self.set_frame_count(self.frame_count_w, self.frame_count_h)
        self.set_frame(0)

    def set_clip(self, x: int, y: int, w: int, h: int) -> None:
        """Select the part of the image to draw."""
        self.clip_rect = pygame.Rect(x, y, w, h)

    def set_frame(self, frame: int) -> None:
        """Show frame number ``frame``; frames outside the grid are ignored."""
        if frame < 0:
            return
        frame_y, frame_x = divmod(frame, self.frame_count_w)
        if frame_y >= self.frame_count_h:
            return
        frame_width = self.width
        frame_height = self.height
        self.set_clip(frame_x * frame_width, frame_y * frame_height, frame_width, frame_height)
        self.current_frame = frame

    def set_frame_count(self, frame_count_w: int, frame_count_h: int) -> None:
        """Split the image into a new grid and show its first frame."""
        self.frame_count_w = frame_count_w
        self.frame_count_h = frame_count_h
        self.set_frame(0)

    def render(
        self,
        x: int,
        y: int,
        w: Optional[int] = None,
        h: Optional[int] = None,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        """Draw the current clip at (x, y), scaled to w by h if given."""
        if self.texture is None:
            return
        if surface is None:
            surface = pygame.display.get_surface() if pygame.display.get_init() else None
            if surface is None:
                raise RuntimeError("no surface to render to")
        if w is None:
            w = self.clip_rect.w
        if h is None:
            h = self.clip_rect.h

        area = self.clip_rect.clip(self.texture.get_rect())
        if area.w <= 0 or area.h <= 0 or w <= 0 or h <= 0:
            return
        image = self.texture.subsurface(area)
        if (w, h) != image.get_size():
            image = pygame.transform.scale(image, (w, h))
        surface.blit(image, (x, y))