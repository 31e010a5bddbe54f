"""On-screen text showing the remaining lives and the score."""

from __future__ import annotations

from typing import Any, Protocol

from brickpong.toys import WHITE, Color

__all__ = ["Scoreboard", "FONT_FILE", "FONT_SIZE"]

FONT_FILE = "DS-DIGIT.ttf"
FONT_SIZE = 75


class _Font(Protocol):
    def render(self, text: str, antialias: bool, color: Color) -> Any: ...


class Scoreboard:
    """A line of text drawn in the top-left corner of the window."""

    def __init__(
        self,
        message: str = "",
        *,
        size: int = FONT_SIZE,
        color: Color = WHITE,
        font_file: str = FONT_FILE,
    ) -> None:
        self.message = message
        self.size = size
        self.color = color
        self.font_file = font_file

    def set_message(self, message: str) -> None:
        self.message = message

    def render(self, font: _Font) -> Any:
        """Render the current message with the given font and return the surface."""
        return font.render(self.message, True, self.color)