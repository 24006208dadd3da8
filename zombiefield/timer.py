"""Accumulating timer driven by frame deltas."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """Counts elapsed seconds as the game loop feeds it frame times."""

    elapsed: float = 0.0

    def update(self, dt: float) -> None:
        """Add ``dt`` seconds to the elapsed time."""
        self.elapsed += dt

    def restart(self) -> None:
        """Reset the elapsed time to zero."""
        self.elapsed = 0.0

    def get(self) -> float:
        """Seconds elapsed since creation or the last restart."""
        return self.elapsed