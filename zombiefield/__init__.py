"""A small top-down pygame scene with a scrolling tile map and zombies to click."""

__version__ = "0.1.0"