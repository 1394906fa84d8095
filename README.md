# breakout

A compact Breakout game built on pygame. You steer a paddle along the bottom of the playfield and keep a ball in play. The ball knocks out rows of coloured blocks. The game draws on a 320×320 canvas, which is scaled up to a 1000×1000 window. Its physics advance in fixed steps of 1/60 s.

## Installing

```
pip install .
```

This installs pygame and a `breakout` command.

## Playing

```
breakout
```

The game reads its images and sounds from a directory. By default that directory is `assets` in the current working directory. Use `--assets` to point it elsewhere:

```
breakout --assets path/to/assets
```

The directory must hold these files:

- `ball.png`
- `paddle.png`
- `hit_paddle.wav`
- `hit_block.wav`
- `game_over.wav`

If any of them is missing, the command stops with `FileNotFoundError` before it opens a window.

### Controls

| Key         | Action                                      |
|-------------|---------------------------------------------|
| Space       | Launch the ball, or restart after game over |
| Left arrow  | Move the paddle left                        |
| Right arrow | Move the paddle right                       |
| Escape      | Quit                                        |

Closing the window also quits.

### How a game goes

1. While it waits, the ball swings from side to side above the paddle.
2. Press Space to launch the ball. It heads toward the middle of the paddle.
3. The ball bounces off the side walls, the ceiling and the paddle.
4. A block that the ball hits disappears and adds its row's points to the score. There are eight rows of ten blocks. From the top row down they are worth 8, 7, 6, 5, 4, 3, 2 and 1 points.
5. The game is over when the ball falls below the bottom of the playfield. Your score is then shown. Press Space to start again with a full wall.

## Using the pieces

The simulation is kept apart from the window and the keyboard.

- `breakout.game.GameState` holds a `Ball`, a `Paddle` and `Blocks`, along with the score and the started and game-over flags.
  - `update(now, space_pressed=False, left_down=False, right_down=False)` advances the game, given a time in seconds and the key states.
  - `start()` launches the ball.
  - `restart()` resets everything to the waiting state.
  - `draw(surface, font)` renders the game onto any pygame surface.
- Sounds and textures are optional.
  - A `Ball` or `Paddle` without a texture is drawn as a plain white circle or rectangle.
  - Missing sounds are simply not played.
- `breakout.blocks.block_rect(x, y)` gives a block's bounds.
- `Blocks.remaining()` counts the blocks still standing.
- `Paddle.rect()` gives the paddle's bounds.
- `breakout.geometry.reflect(vector, normal)` returns the reflected vector, normalised, as a `pygame.math.Vector2`.
- `breakout.geometry.circle_rect_collision(center, radius, rect)` tests a circle against an `(x, y, width, height)` rectangle.
- `breakout.main.load_assets(asset_dir)` loads the textures and sounds. It needs pygame initialised, with its mixer.

## What it does not do

Clearing the whole wall does not end or advance the game. There are no levels and no lives. Scores are not kept between games.

## Running the tests

```
pip install .[test]
pytest
```