"""Game rules and the interactive main loop."""

from __future__ import annotations

import argparse
import random
from typing import Iterator, Sequence

from brickpong.config import Configuration, get_configuration
from brickpong.display import Scoreboard
from brickpong.sound import SoundPlayer
from brickpong.stopwatch import Stopwatch
from brickpong.toys import Ball, Brick, Paddle, Toy

__all__ = ["Game", "main"]

STARTING_LIVES = 3
GAME_OVER_PAUSE_MS = 5000


class Game:
    """State of one game: paddle, ball, brick wall, lives and score."""

    def __init__(
        self,
        config: Configuration | None = None,
        sounds: SoundPlayer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else get_configuration()
        self.sounds = sounds if sounds is not None else SoundPlayer()
        cfg = self.config
        self.score = 0
        self.lives = STARTING_LIVES
        self.holding_paddle = False
        self.paddle = Paddle(cfg.window_width // 2, cfg.window_height - 20)
        self.ball = Ball(
            cfg.window_width // 2,
            cfg.brick_lines * (cfg.brick_thickness + cfg.spacing) + 100,
        )
        self._grid: list[list[Brick | None]] = [
            [
                Brick(
                    column * (cfg.brick_width + cfg.spacing) + cfg.spacing,
                    line * (cfg.brick_thickness + 10) + 90,
                    cfg.brick_width,
                    cfg.brick_thickness,
                    rng,
                )
                for line in range(cfg.brick_lines)
            ]
            for column in range(cfg.brick_rows)
        ]

    @property
    def bricks(self) -> list[Brick]:
        """Bricks still standing, column by column."""
        return list(self._standing())

    def _standing(self) -> Iterator[Brick]:
        for column in self._grid:
            yield from (brick for brick in column if brick is not None)

    def toys(self) -> Iterator[Toy]:
        """Everything to draw, in drawing order."""
        yield self.paddle
        yield self.ball
        yield from self._standing()

    def message(self) -> str:
        if self.is_over():
            return "Game Over"
        return f"Vies : {self.lives} Pointage : {self.score}"

    def is_over(self) -> bool:
        return self.lives == 0

    def step(
        self,
        left: bool,
        right: bool,
        mouse_down: bool,
        mouse_pos: tuple[float, float],
    ) -> None:
        """Advance the game by one frame given the current input state."""
        self._handle_input(left, right, mouse_down, mouse_pos)
        self._handle_collisions()
        self._handle_bricks()
        self.ball.move()

    def _handle_input(
        self, left: bool, right: bool, mouse_down: bool, mouse_pos: tuple[float, float]
    ) -> None:
        if left:
            self.paddle.move_left()
        elif right:
            self.paddle.move_right()

        if not mouse_down:
            self.holding_paddle = False
        elif self.holding_paddle:
            self.paddle.set_x(mouse_pos[0])
        elif self.paddle.hit_box().contains(*mouse_pos):
            self.holding_paddle = True

    def _handle_collisions(self) -> None:
        cfg = self.config
        ball = self.ball

        if ball.hit_box().top > cfg.window_height:
            self.sounds.play_miss()
            ball.hit_floor()
            self.lives -= 1

        if ball.hit_box().top < 0:
            self.sounds.play_bounce()
            ball.bounce_vertical()

        box = ball.hit_box()
        if box.left < 0 or box.left + Ball.SIZE > cfg.window_width:
            self.sounds.play_bounce()
            ball.bounce_off_wall()

        if ball.hit_box().intersects(self.paddle.hit_box()):
            self.sounds.play_success()
            ball.bounce_vertical()
            self.score += 1

    def _handle_bricks(self) -> None:
        for column in self._grid:
            for line, brick in enumerate(column):
                if brick is not None and brick.hit_box().intersects(self.ball.hit_box()):
                    self.sounds.play_success()
                    self.ball.bounce_vertical()
                    column[line] = None
                    self.score += 1


def _load_font(scoreboard: Scoreboard):
    import pygame

    try:
        return pygame.font.Font(scoreboard.font_file, scoreboard.size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, scoreboard.size)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and play until the window closes or the lives run out."""
    parser = argparse.ArgumentParser(prog="brickpong", description="Break bricks with a bouncing ball.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        game = Game()
        cfg = game.config
        screen = pygame.display.set_mode((cfg.window_width, cfg.window_height))
        pygame.display.set_caption("Pong")
        scoreboard = Scoreboard()
        font = _load_font(scoreboard)
        stopwatch = Stopwatch(cfg.fps)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            keys = pygame.key.get_pressed()
            game.step(
                bool(keys[pygame.K_LEFT]),
                bool(keys[pygame.K_RIGHT]),
                bool(pygame.mouse.get_pressed()[0]),
                pygame.mouse.get_pos(),
            )

            screen.fill((0, 0, 0))
            scoreboard.set_message(game.message())
            for toy in game.toys():
                box = toy.hit_box()
                pygame.draw.rect(
                    screen,
                    toy.color,
                    pygame.Rect(int(box.left), int(box.top), int(box.width), int(box.height)),
                )
            screen.blit(scoreboard.render(font), (0, 0))
            pygame.display.flip()

            if game.is_over():
                pygame.time.wait(GAME_OVER_PAUSE_MS)
                running = False

            stopwatch.adjust_speed()
    finally:
        pygame.quit()
    return 0