# cubed

A small first-person maze explorer. It reads a `.cub` scene file that names
the four wall textures, the floor and ceiling colours and a grid map, checks
the scene for errors, and lets you walk through it in a textured raycast
view (1400×900 window, drawn with pygame) with a minimap in the top-left
corner.

## Installing

```
pip install .
```

## Running

```
cubed path/to/scene.cub
```

Controls:

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe              |
| Left / Right | turn                |
| Escape       | quit                |

Closing the window quits as well. Movement stops short of walls.

When something is wrong the command prints `Error` and a reason to standard
error and exits with a non-zero status: 2 for an invalid scene file, 3 when a
texture cannot be loaded, 1 when the display cannot be opened.

## Scene files

A scene file must have a `.cub` extension. It holds six data lines, in any
order and with blank lines allowed between them, followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE`, `EA` give the path of the texture for each wall face.
  Any image format Pillow can read is accepted; relative paths are resolved
  from the current directory.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, each a decimal
  number from 0 to 255.
- The map begins at the first line whose first non-space character is `1`.
  It uses `1` for walls, `0` for open floor, a space for nothing, and exactly
  one of `N`, `S`, `E` or `W` for the starting position and facing.
- Every open cell and the starting cell must be surrounded by non-empty
  cells and may not lie on the map's border. Nothing but blank lines may
  follow the map.

A scene that breaks these rules is rejected with a reason such as
`Map is not enclosed by walls.` or `Duplicate data line.`.

## Using it as a library

```python
from cubed.scene import parse_file
from cubed.player import spawn_player
from cubed.raycast import cast_rays

scene = parse_file("maps/simple.cub")
player = spawn_player(scene.grid)   # the start cell becomes floor
rays = cast_rays(scene.grid, player)  # one Ray per screen column
```

- `cubed.scene.parse_file` (or `parse_lines` for text already in memory)
  returns a `Scene` and raises `cubed.errors.ParseError` when the scene is
  invalid; its `code` is a `ParseErrorCode` whose `message()` gives the reason.
- `cubed.grid.Grid` is indexed as `grid[x, y]` and holds `Tile` values;
  `Grid.dump()` renders it as digits.
- `cubed.player.Player` tracks position, angle and held keys; `update(grid)`
  advances it by one tick.
- `cubed.frame.Frame` is an in-memory picture of 32-bit `0xRRGGBB` pixels with
  `put_pixel`, `pixel`, `draw_line`, `draw_background` and `draw_minimap`.
- `cubed.texture.load_textures(scene)` loads the four wall textures, and
  `cubed.draw3d.draw_rays` draws the cast rays into a frame with them.
- `cubed.app.Game` ties these together; `render_frame()` draws one frame
  without needing a window, and `run()` opens one.

## Tests

```
pip install .[test]
pytest
```