# glplayground

A handful of small 2D games and graphics toys drawn with pygame. The
game logic lives in plain Python classes that can be driven without a
window, so it is easy to test or reuse.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The programs

Every command accepts `--help`. All windows are resizable.

### Asteroids arena

```
glplayground-asteroids
glplayground-asteroids --no-scenery
```

A ship in the middle of a 600×600 window, over five parallax layers of
scrolling stars, firing pairs of bullets.

- `Left`/`A` and `Right`/`D` rotate the ship; `Up`/`W` or the right mouse
  button thrusts, with a blinking thruster trail.
- `Space` or the left mouse button fires a pair of bullets from the
  cannons, at most every 250 ms; each volley pushes the ship back a little.
  Bullets leaving the screen are removed.
- Moving the mouse points the ship from the window centre toward the cursor.

`--no-scenery` leaves out the stars and bullets, so only the ship flies.

### Snake

```
glplayground-snake
```

Steer the snake around a wrapping grid with the arrow keys or
`W` `A` `S` `D`; it moves one cell every 0.1 s and cannot turn straight
back on itself. Eating the red fruit adds a body piece and moves the fruit
to a random cell. Running into its own body shows "Game Over!" and a new
round starts five seconds later.

### Tic-tac-toe

```
glplayground-tictactoe
```

An 800×600 window with a 3×3 board. Clicking an empty cell places the mark
of the player whose turn it is, and turns alternate between `X` and `O`.
"Restart Game" empties the board. The board does not detect a winner; it
simply fills up until restarted.

### Sierpinski triangle

```
glplayground-sierpinski
```

The chaos game: from a random point, repeatedly jump halfway toward a
random corner of a triangle and plot the point, one per frame. A "Clear
window" button wipes the canvas.

### Colored triangles

```
glplayground-coloredtriangles
glplayground-coloredtriangles --v0 1 0 0 --v1 0 1 0 --v2 0 0 1
```

Draws a triangle at random positions every frame, filled with the average
of its three vertex colours. `--v0`, `--v1` and `--v2` set the RGB colour
(components in [0, 1]) of each vertex.

### Regular polygons

```
glplayground-regularpolygons --delay 100
```

Each time the delay passes (200 ms by default, 0–200 ms allowed), draws a
square with random centre and border colours at a random scale between 1%
and 25%; each new one sits 0.1 further left than the last, starting from
the right edge. `+`/`Up` and `-`/`Down` change the delay in steps of
10 ms, and a "Clear window" button wipes the canvas.

### Hello, world

```
glplayground-helloworld
```

A red, magenta and green triangle on a light background, with a text panel
of example settings: keys `1`–`4` choose a combo entry, `d` and `a` toggle
two flags ("Show demo window", "Show another window"), and `Left`/`Right`
move a slider between 0 and 1.

## Using the pieces

Each program is built from a window-free model:

- `glplayground.gamedata`: `GameData`, `Input`, `State` and `Stopwatch`,
  shared by the games.
- `glplayground.geometry`: `Vec2`, `wrap_angle`, `regular_polygon`,
  `PolygonModel` and `polygon_model`.
- `glplayground.ship` (`Ship`, `mouse_rotation`), `glplayground.bullets`
  (`Bullet`, `Bullets`) and `glplayground.starlayers` (`Star`, `StarLayer`,
  `StarLayers`), brought together by `AsteroidsGame` in
  `glplayground.asteroids_app`.
- `glplayground.snake`: `Snake`, `BodyPiece`, `SnakeBody` and `Fruit`,
  brought together by `SnakeGame` in `glplayground.snake_app`.
- `TicTacToe` (`glplayground.tictactoe`), `ChaosGame`
  (`glplayground.sierpinski`), `ColoredTriangles`
  (`glplayground.coloredtriangles`), `PolygonSpawner`
  (`glplayground.regularpolygons_app`) and `HelloWorld`
  (`glplayground.helloworld`) for the smaller programs.

The game classes take a random number generator and, where timing matters,
a clock function, so a seeded `random.Random` and a fake clock give
repeatable runs.

## What the package does not do

The asteroids arena has no asteroids: there is nothing for the bullets to
hit and no collisions, so a round never ends in "Game Over!" or
"*You Win!*" even though `AsteroidsGame.message` knows those texts. The
hello-world panel's "demo window" flag only changes its own line of text;
no demo window is shown.