"""Short sound effects played on misses, bounces and hits."""

from __future__ import annotations

from typing import Any, Callable, Optional

__all__ = ["SoundPlayer", "MISS_SOUND", "BOUNCE_SOUND", "SUCCESS_SOUND"]

MISS_SOUND = "rate.ogg"
BOUNCE_SOUND = "rebond.ogg"
SUCCESS_SOUND = "reussi.ogg"

Loader = Callable[[str], Optional[Any]]


def _load_with_pygame(filename: str) -> Any | None:
    import pygame

    try:
        return pygame.mixer.Sound(filename)
    except (pygame.error, OSError):
        return None


class SoundPlayer:
    """Plays one effect at a time; a file that cannot be loaded is skipped silently."""

    def __init__(self, loader: Loader | None = None) -> None:
        self._loader: Loader = loader if loader is not None else _load_with_pygame
        self._sound: Any | None = None

    def beep(self, filename: str) -> bool:
        """Load and play a sound file; return whether anything was played."""
        sound = self._loader(filename)
        if sound is None:
            return False
        self._sound = sound
        sound.play()
        return True

    def play_miss(self) -> bool:
        return self.beep(MISS_SOUND)

    def play_bounce(self) -> bool:
        return self.beep(BOUNCE_SOUND)

    def play_success(self) -> bool:
        return self.beep(SUCCESS_SOUND)