"""Moving and static pieces of the game: ball, paddle and bricks."""

from __future__ import annotations

import random
from dataclasses import dataclass

__all__ = ["Rect", "Toy", "Ball", "Paddle", "Brick", "BRICK_COLORS", "WHITE"]

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BRICK_COLORS: tuple[Color, ...] = (
    (0, 255, 255),
    (0, 0, 255),
    (0, 255, 0),
    (255, 0, 0),
    (255, 255, 0),
)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def _bounds(self) -> tuple[float, float, float, float]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            min(self.top, bottom),
            max(self.left, right),
            max(self.top, bottom),
        )

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; right and bottom edges excluded."""
        min_x, min_y, max_x, max_y = self._bounds()
        return min_x <= x < max_x and min_y <= y < max_y

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        a_left, a_top, a_right, a_bottom = self._bounds()
        b_left, b_top, b_right, b_bottom = other._bounds()
        return max(a_left, b_left) < min(a_right, b_right) and max(a_top, b_top) < min(
            a_bottom, b_bottom
        )


class Toy:
    """A rectangular piece placed on the board."""

    def __init__(self, x: float, y: float, width: float, height: float, color: Color = WHITE):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.color = color

    def hit_box(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class Ball(Toy):
    """The ball; it bounces and returns to its start when it falls out."""

    SIZE = 10

    def __init__(self, x: float, y: float):
        super().__init__(x, y, self.SIZE, self.SIZE)
        self.start_x = float(x)
        self.start_y = float(y)
        self.vx = 1.2
        self.vy = 1.2

    def bounce_off_wall(self) -> None:
        self.vx = -self.vx

    def bounce_vertical(self) -> None:
        """Bounce off the paddle, the ceiling or a brick."""
        self.vy = -self.vy

    def hit_floor(self) -> None:
        self.x = self.start_x
        self.y = self.start_y

    def move(self) -> None:
        self.y += self.vy
        self.x += self.vx


class Paddle(Toy):
    """The player's paddle."""

    WIDTH = 50
    HEIGHT = 5

    def __init__(self, x: float, y: float):
        super().__init__(x, y, self.WIDTH, self.HEIGHT)
        self.speed = 1.3

    def move_left(self) -> None:
        self.x -= self.speed

    def move_right(self) -> None:
        self.x += self.speed

    def set_x(self, x: float) -> None:
        """Place the paddle at a whole-pixel horizontal position."""
        self.x = float(int(x))


class Brick(Toy):
    """A brick with a colour picked at random from the palette."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        thickness: float,
        rng: random.Random | None = None,
    ):
        chooser = rng if rng is not None else random
        super().__init__(x, y, width, thickness, chooser.choice(BRICK_COLORS))