# solong

A small top-down puzzle game played on a grid of tiles. Walk the player
around the map, pick up every collectible, stay clear of the enemies and
step onto the exit to win.

## Installing

```
pip install .
```

The game window uses `pygame`. To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, the map file. With any other
number of arguments it exits with status 1 and does nothing.

The tile images are read from an `assets` directory in the current working
directory. It must hold these files:

```
floor.xpm  wall.xpm  player_left.xpm  player_right.xpm
collectible_1.xpm  collectible_2.xpm  collectible_3.xpm
enemy.xpm  exit.xpm
```

Controls:

- `W` / `A` / `S` / `D` or the arrow keys move the player
- `Esc` or closing the window ends the game

Walking into a wall does nothing. Stepping onto a collectible picks it up.
Stepping onto an enemy loses the game; stepping onto the exit after all
collectibles have been picked up wins it. Before that, the exit can be
walked over like floor. Every move is counted and shown in the top-left
corner, and the collectibles still on the map cycle through their three
images.

When the game ends, a win or loss message (if any) is printed, followed by
a report of the move total (the number of moves made plus one) and one 🍺
for every collectible picked up, or `Sobriety :(` if none were.

If the map is invalid, its error message is printed to standard error and
the command exits with status 1. If a tile image cannot be loaded, it
prints `Memory error` and exits with status 1.

## Map files

Maps are plain text files with the `.ber` extension. Each line is one row
of the map, built from these characters:

| Char | Meaning     |
|------|-------------|
| `0`  | floor       |
| `1`  | wall        |
| `P`  | player      |
| `C`  | collectible |
| `E`  | exit        |
| `T`  | enemy       |

A map is only accepted when:

- it is rectangular and at most 30 columns by 15 rows;
- it contains only the characters above;
- it is fully enclosed by walls;
- it has exactly one player, exactly one exit and at least one collectible;
- the exit and every collectible can be reached from the player's start
  without passing through walls or enemies.

Example:

```
1111111111
1P0C00T0E1
1000110001
1C00000C01
1111111111
```

## Using it as a library

Map loading and validation can be used without opening a window:

```python
from solong.mapfile import load_map, MapError

try:
    game_map = load_map("level.ber")
except MapError as err:
    print(f"invalid map: {err}")
```

`solong.mapfile` also exposes the single checks (`check_filename_extension`,
`check_dimensions`, `check_allowed_tokens`, `check_walls`, `count_tokens`,
`check_reachability`) and `parse_rows`, which validates a list of row
strings and returns a `GameMap`. A `GameMap` gives its `width`, `height`,
`player`, `collectibles`, and `tile(pos)` / `set_tile(pos, token)` with
`Position` and `Token` values.

The game rules live in `solong.game`:

```python
from solong.game import Direction, Game

game = Game(game_map)
outcome = game.move(Direction.RIGHT)   # an Outcome: BLOCKED, MOVED, COLLECTED, WON or LOST
print(game.moves, game.collected)
print(game.score_report())
```

`key_action(name)` turns a key name such as `"w"`, `"left"` or `"escape"`
into a `Direction`, `Outcome.QUIT` or `None`, and `FrameAnimator` counts
frames and says which collectible image to show next.

`solong.display` holds the pygame side: `load_tiles`, `Tiles`, `Window`,
`run(map_path, assets_dir)` and the command's `main`.

A few general helpers come along with the package:

- `solong.linereader`: `LineReader` and `read_lines` read a text or binary
  stream line by line in fixed-size chunks;
- `solong.printf`: `format_printf` and `printf` handle the conversions
  `c s d i u p x X %`;
- `solong.numconv`: `atoi`, `atol`, `atoi_base`, `itoa`, `itoa_base`,
  `ltoa_base` and `ultoa_base` with C integer widths;
- `solong.strings`: ASCII character tests and C-style string routines such
  as `split`, `substr`, `strnstr`, `strcmp` and `strchr`.

## What it does not do

The package ships no tile images; the game only starts when an `assets`
directory with the files listed above is present in the current working
directory. The command has no option to point elsewhere, though
`solong.display.run` takes an `assets_dir` argument.