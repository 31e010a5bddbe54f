# brickpong

A small arcade game. Keep the ball in play with your paddle and knock out the
coloured bricks at the top of the screen.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, draws the game and plays the
sounds.

## Playing

```
brickpong
```

- The **Left / Right arrow keys** move the paddle.
- **Mouse**: press the left button on the paddle, then keep it held and drag
  to move the paddle sideways. Release the button to let go of the paddle.
- You score one point each time the ball hits the paddle or a brick. A brick
  that the ball hits disappears.
- If the ball falls past the bottom of the window, you lose a life and the
  ball goes back to where it started. You start with three lives.
- When no lives are left, "Game Over" stays on screen for five seconds. Then
  the window closes.

The game runs at a fixed pace of 400 frames per second in a 1024×764 window.
The wall is 10 columns by 5 lines of bricks, and each brick gets a random
colour.

The game looks for these files in the working directory. All of them are
optional:

- `DS-DIGIT.ttf`, the font for the score line
- `rate.ogg`, the sound for a missed ball
- `rebond.ogg`, the sound for a bounce off a wall or the ceiling
- `reussi.ogg`, the sound for a paddle or brick hit

If a file is missing, the game still runs. It uses pygame's default font in
place of the missing font, and it plays nothing in place of a missing sound.

## Using it as a library

You can run the game rules without opening a window:

```python
from brickpong.game import Game

game = Game()
game.step(left=False, right=True, mouse_down=False, mouse_pos=(0, 0))
print(game.message())   # "Vies : 3 Pointage : 0"
print(game.is_over())   # False
```

`Game` holds `paddle`, `ball`, `lives`, `score` and `bricks`, which is the
list of bricks still standing. `toys()` yields everything to draw, in drawing
order. You can pass `Game` a `Configuration`, a `SoundPlayer` and a
`random.Random` as its three arguments.

Other modules:

- `brickpong.config`: `get_configuration()` returns the shared, frozen
  `Configuration`. It holds the frame rate, the window size and the brick
  layout.
- `brickpong.toys`: `Ball`, `Paddle` and `Brick`, and the `Rect` they return
  from `hit_box()`. `Rect` provides `contains()` and `intersects()`.
- `brickpong.stopwatch`: `Stopwatch` measures elapsed time. Its
  `adjust_speed()` sleeps out the rest of each frame. You can pass it your own
  clock and sleep functions.
- `brickpong.sound`: `SoundPlayer` plays the effects. It takes an optional
  loader function. A sound that cannot be loaded is skipped, and `beep()`
  returns `False`.
- `brickpong.display`: `Scoreboard` holds the line of text and renders it with
  any font object that has a pygame-style `render()`.

## Running the tests

```
pip install .[test]
pytest
```