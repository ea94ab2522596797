# kipisi

kipisi opens a pygame window for glyphs of sitelen pona, the logographic
script of toki pona, taken from a sprite sheet of 8×8 tiles.

Each frame is first drawn to a small logical canvas of 32 × 28 tiles
(256 × 224 pixels). That canvas is then scaled up four times into the
window, which is 1024 × 896 pixels.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
kipisi
```

The command prints `toki ma!`, loads the sprite sheet and opens the
window. By default the sheet is read from `res/sitelenpona.png` relative
to the current directory; another image can be given with `--sheet`:

```
kipisi --sheet path/to/sheet.png
```

If the sheet file does not exist, the command stops with a
`FileNotFoundError` before any window opens.

The window runs at 60 frames per second. Closing it or pressing Escape
ends the program.

## What it does not do

The package does not ship a sprite sheet image; you supply your own.

The window is a demonstration only. Each frame draws the `soweli` glyph
into the top-left tile of the canvas and then clears the whole canvas to
black, so the window shows a black screen. There is no input beyond
closing the window, and nothing else is drawn.

## The sprite sheet

The sheet is a grid of 8×8 glyphs, 16 to a row, in the order of the
`Sitelen` enumeration in `kipisi.sprites`. The first row is `a`, `akesi`,
`ala` and so on; the ninth and last row ends with `tonsi`, for 136 glyphs
in all.

## Using it as a library

```python
from kipisi.sprites import Sitelen, sprite_rect

Sitelen.SOWELI.rect()        # Rect(x=16, y=48, width=8, height=8)
sprite_rect("soweli")        # the same rectangle, looked up by word
sprite_rect("SITELEN_SOWELI")  # the prefixed name works too
```

`sprite_rect` ignores case and surrounding spaces, and raises `KeyError`
for a word that has no glyph on the sheet.

`kipisi.draw.destination(x, y)` turns tile coordinates into a pixel
`Rect`. `kipisi.draw.draw_sprite(target, sheet, sprite, x, y)` blits one
glyph, given as a `Sitelen` member or a `Rect` on the sheet, from a sheet
surface onto any pygame surface at tile `(x, y)`, and returns the
`pygame.Rect` of the area it changed.

`kipisi.app.Screen` holds the grid size and scale; its `logical_size()`
and `window_size()` give the canvas and window sizes in pixels.
`kipisi.app.render_frame(canvas, sheet)` draws one frame onto the logical
canvas, as described above. `kipisi.app.main(argv=None)` is the entry
point of the `kipisi` command.