# cubscene

Tools for the `.cub` scene files of a small first-person raycaster. The
package reads and validates a scene description and checks that the map is
closed by walls. It loads XPM textures into plain 32-bit pixel images and
writes those images out as BMP files.

It has no runtime dependencies.

## Installation

```
pip install .
```

## Scene files

A scene file lists eight elements, in any order, before the map:

```
R 640 480
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
S  ./textures/sprite.xpm
F 220,100,0
C 225,30,0

111111
100201
10N001
111111
```

- `R` is the resolution, width then height; neither may be zero.
- `NO`, `SO`, `WE` and `EA` are the wall textures and `S` is the sprite
  texture. Each texture file must exist when the scene is read.
- `F` is the floor colour and `C` the ceiling colour, as `r,g,b` with each
  value no more than 255.

The map starts at the first line whose first non-blank character is `0`,
`1` or `2`, and ends at the first empty line. Its cells are:

| Character | Meaning |
| --- | --- |
| `1` | wall |
| `0` | floor |
| `2` | sprite |
| `N`, `S`, `E`, `W` | player start, facing that way |
| space | empty |

Any other character is an error. There must be exactly one player, and
every floor or sprite cell reachable from the player must be closed in by
walls.

## Usage

### Scenes

```python
from cubscene.scene import load_scene, SceneError

try:
    scene = load_scene("maps/level1.cub")
except SceneError as err:
    print("Error:", err)
else:
    print(scene.resolution, scene.north, hex(scene.floor_color))
```

`load_scene` requires the `.cub` extension. `parse_scene(lines)` does the
same work on lines already in memory. A `Scene` has `resolution`, `north`,
`south`, `west`, `east`, `sprite`, `floor`, `ceiling` and `game_map`, plus
`floor_color` and `ceiling_color` packed as `0xRRGGBB`. The element readers
`parse_resolution(text)` and `parse_color(text, surface)` (with `surface`
`"F"` or `"C"`) can be used on their own.

### Maps

```python
from cubscene.gamemap import parse_map, check_closed, MapError

game_map = parse_map(["111", "1N1", "111"])
check_closed(game_map)
print(game_map.player)          # Player(x=1.5, y=1.5, dir_x=0, dir_y=-1, ...)
print(game_map.cell(0, 0))      # '1'
```

Rows are padded with spaces to the width of the longest one. The player's
cell reads `P`. Floor and sprite cells read `9` and `s` until
`check_closed` has visited them, after which they read `0` and `2` again.

### Textures and images

```python
from cubscene.xpm import load_xpm
from cubscene.bmp import write_bmp

image = load_xpm("textures/north.xpm")
write_bmp(image, "north.bmp")
```

- `cubscene.xpm` has `load_xpm(path)`, `parse_xpm_text(text)` for the
  contents of a file, and `parse_xpm_lines(lines)` for the bare XPM
  strings. Colours may be `#RRGGBB` or X11 names. Pixels whose colour is
  `none` are stored as `0xFF000000`.
- `cubscene.image.Image(width, height, endian=0)` holds 32-bit pixels, with
  `set_pixel`, `get_pixel`, `clear` and `row`.
- `cubscene.bmp` has `bmp_header(width, height, bpp)`, `encode_bmp(image)`
  and `write_bmp(image, path)`, whose path defaults to `screenshot.bmp`.
  Rows are written bottom-up.

### Helpers

- `cubscene.colors`: `lookup_color("dark orange")` gives `0xFF8C00`, ignoring
  case; `text_to_rgb(name, end)` resolves an XPM colour specification.
- `cubscene.pixelformat`: `rgb_shifts(red_mask, green_mask, blue_mask)` and
  `good_color(color, depth, shifts)` turn `0xRRGGBB` into a pixel value for
  displays shallower than 24 bits.
- `cubscene.textutil` and `cubscene.wordtab` hold the small text routines
  the readers are built on.

## Errors

Problems are raised as exceptions:

- `SceneError` for scene files.
- `MapError` for maps.
- `XpmError` for textures.

All three are subclasses of `ValueError`.

## What it does not do

The package has no command-line program, opens no window and does no
raycasting or rendering. It reads and checks scenes and textures and
writes images that have already been filled in.