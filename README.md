# cgifh

Helpers for drawing into indexed-colour (palette) bitmaps. Each pixel is one
byte. It holds an index into an RGB palette of up to 256 entries, which is the
layout a GIF encoder expects.

## Installation

```
pip install .
```

To install with the test dependencies as well:

```
pip install .[test]
```

## Usage

```python
from cgifh.image import Image, PaletteFullError, text_width, text_height

img = Image(64, 32)          # every pixel starts as palette index 0

black = img.palette_add(0, 0, 0)
white = img.palette_add(255, 255, 255)
grey = img.palette_add_blend(black, white, 128)

img.rect_fill(black, 0, 0, 64, 32)
img.line(white, 0, 0, 63, 31)
img.h_line(grey, 0, 63, 16)
img.v_line(grey, 0, 31, 32)
img.ellipse_fill(white, 20, 8, 16, 16)

advance = img.text(white, "Hi!", 2, 2, 2)
assert advance == text_width("Hi!", 2)
assert text_height(2) == 16

print(img.get_pixel(0, 0))
print(img.width, img.height, img.size)
print(img.palette)           # tuple of (r, g, b) tuples
raw = bytes(img.data)        # row-major pixel indices
```

### The `Image` class

- `Image(width, height)`: both sizes must be positive and fit in a signed
  32-bit integer. Otherwise `ValueError` is raised.
- `palette_add(r, g, b)` adds a colour and returns its index. Channel values
  must be in 0..255. When the palette already holds 256 colours, the method
  raises `PaletteFullError`.
- `palette_add_blend(idx0, idx1, pos)` adds a colour that lies between two
  existing entries. `pos` 0 gives `idx0` and 255 gives `idx1`. Using an index
  that is not yet defined raises `IndexError`.
- `get_pixel(x, y)` returns the stored index. Coordinates outside the image
  raise `IndexError`.
- `v_line`, `h_line`, `line`, `rect_fill` and `ellipse_fill` draw with a
  palette index (0..255). Both end points of a line are included. `line` uses
  Bresenham's algorithm. `rect_fill(colour, x, y, w, h)` and
  `ellipse_fill(colour, x, y, w, h)` take the top-left corner and the size.
- `char(colour, character, scale, x, y)` and
  `char_scaled(colour, character, scale_x, scale_y, x, y)` draw a single
  character and return its horizontal advance in pixels. `text(colour, text,
  scale, x, y)` draws a string and returns the total advance.

Anything drawn outside the image is clipped. A shape that lies wholly off the
image draws nothing. Characters outside 7-bit ASCII draw nothing and have zero
advance. So do ASCII characters that have no glyph.

### Measuring text

`text_width(text, scale)` returns the summed glyph advances multiplied by
`scale`. `text_height(scale)` returns `8 * scale`.

### Glyphs

`cgifh.font` holds the built-in 8-pixel-high font. It covers the digits, the
upper- and lower-case letters and some punctuation.

```python
from cgifh.font import GLYPH_HEIGHT, GLYPH_WIDTH, get_glyph

glyph = get_glyph("A")
print(glyph.advance)         # 6
grid = [["."] * GLYPH_WIDTH for _ in range(GLYPH_HEIGHT)]
for x, y in glyph.pixels():  # (x, y) offsets of the set pixels
    grid[y][x] = "#"
print("\n".join("".join(row) for row in grid))
```

`get_glyph` returns `None` for characters beyond 7-bit ASCII. It raises
`ValueError` when its argument is not a single character. `Glyph.from_pattern`
builds a glyph from text rows in which `#` marks a set pixel.

## What it does not do

The package keeps images in memory only. It does not encode or write GIF or
any other image file format. To save an image, pass `img.palette` and
`img.data` to an encoder of your choice.

## Running the tests

```
pytest
```