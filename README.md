# classiclauncher

Building blocks for a game launcher front end: image sprites loaded in the
background, a sprite registry keyed by name, a fixed-resolution canvas that
is scaled into the window, timed on-screen messages, a frame animator and a
set of small path, string and math helpers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `classiclauncher.mathutils`: `clamp`, `random_between`, `get_angle`
  (degrees, y axis pointing down) and `get_angle_360` (the same, mapped into
  `[0, 360)`).
- `classiclauncher.textutils`: `normalize_path`, `replace_string`,
  `remove_duplicate_slashes`, `split_string` (splits on whitespace, keeping
  double-quoted sections whole), `ltrim`, `rtrim`, `trim`, `is_all_digits`.
- `classiclauncher.utils`: `set_size_with_proportion`, `image_resize` and
  `load_texture` (Pillow images), `set_index_array` (wraps an index that runs
  past either end of an array), `get_working_directory`, `get_home_dir`,
  `change_directory`, `count_chars`.
- `classiclauncher.animator`: `SpriteAnimator`, which steps through a list of
  sprite indices, one step every `time_animation` seconds of `update` time.
- `classiclauncher.render`: `Render`, which holds a canvas size and, from the
  window size and mouse position passed to `update`, computes the scale, the
  letterboxed `destination` rectangle and the mouse position in canvas
  coordinates.
- `classiclauncher.printer`: `Printer` and `Message` for timed, labelled
  on-screen text (active only in debug mode), plus `LogLevel`, `format_log`
  and `log` for coloured console logging.
- `classiclauncher.resources`: resource path constants and `icon_image()`,
  the built-in 16×16 RGBA icon.
- `classiclauncher.sprite`: `Sprite` and `Texture`; a file is loaded on a
  worker thread, an in-memory image at once, and the texture is made from the
  image on first request.
- `classiclauncher.sprite_manager`: `SpriteManager`, a collection of sprites
  by name; `init()` registers a 1×1 transparent sprite.

## Example

```python
from classiclauncher.sprite_manager import SpriteManager
from classiclauncher.textutils import split_string
from classiclauncher.utils import set_index_array

sprites = SpriteManager()
sprites.init()
sprites.load_sprite("cover", "covers/game.png", 228, 204)

texture = sprites.get_texture("cover")  # None until the image has loaded

split_string('emulator --fullscreen "My Game.rom"')
# ['emulator', '--fullscreen', '"My Game.rom"']

set_index_array(-1, 10)  # wraps to 9
```

## What it does not do

The package opens no window and draws nothing: `Render` and
`Printer.draw_messages` only compute positions and sizes, and `Texture`
holds pixel data in a Pillow image. There is no game or system list, no
audio, no keyboard handling, no user interface of cards and covers, and no
command to start a launcher.