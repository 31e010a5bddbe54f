"""Game-wide settings shared by every part of the game."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

__all__ = ["Configuration", "get_configuration"]


@dataclass(frozen=True)
class Configuration:
    """Immutable game settings: frame rate, window size and brick layout."""

    fps: int = 400
    window_width: int = 1024
    window_height: int = 764
    brick_lines: int = 5
    brick_rows: int = 10
    brick_thickness: float = 20.0

    @property
    def brick_width(self) -> float:
        """Width of one brick: the window split into one slot more than there are rows."""
        return float(self.window_width // (self.brick_rows + 1))

    @property
    def spacing(self) -> float:
        """Gap left between neighbouring bricks."""
        return self.brick_width / (self.brick_rows + 1)


@lru_cache(maxsize=None)
def get_configuration() -> Configuration:
    """Return the single shared configuration."""
    return Configuration()