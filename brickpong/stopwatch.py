"""Stopwatch that also paces the game loop to a fixed frame rate."""

from __future__ import annotations

import time
from typing import Callable

from brickpong.config import get_configuration

__all__ = ["Stopwatch"]


class Stopwatch:
    """Measures elapsed time and sleeps to keep frames at a steady rate."""

    def __init__(
        self,
        fps: int | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps is None:
            fps = get_configuration().fps
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self._clock = clock
        self._sleep = sleep
        self._start_time = 0.0
        self._end_time = 0.0
        self._running = False
        self._lapse = 0.0
        self.start()

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Restart timing from now."""
        self._start_time = self._clock()
        self._running = True
        self._lapse = self.elapsed_milliseconds()

    def stop(self) -> None:
        """Freeze the elapsed time at the current moment."""
        self._end_time = self._clock()
        self._running = False

    def elapsed_milliseconds(self) -> float:
        """Whole milliseconds since start, up to stop if stopped."""
        end = self._clock() if self._running else self._end_time
        return float(int((end - self._start_time) * 1000))

    def elapsed_seconds(self) -> float:
        return self.elapsed_milliseconds() / 1000.0

    def adjust_speed(self) -> None:
        """Sleep out whatever remains of the current frame."""
        frame = 1000.0 / self.fps
        interval = self.elapsed_milliseconds() - self._lapse
        if interval < frame:
            self._sleep((frame - interval) / 1000.0)
        self._lapse = self.elapsed_milliseconds()