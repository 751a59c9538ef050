"""Palette-indexed raster image with simple drawing primitives."""

from __future__ import annotations

from collections.abc import Iterable

from cgifh.font import GLYPH_HEIGHT, get_glyph

PALETTE_MAX = 256
"""Maximum number of palette entries."""

CHANNEL_COUNT = 3
"""Number of colour channels in the palette."""

_INT_MAX = 2**31 - 1


class PaletteFullError(Exception):
    """Raised when a colour is added to a palette that already has 256 entries."""


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


def _blend_channel(c0: int, c1: int, pos: int) -> int:
    if c0 <= c1:
        return c0 + (c1 - c0) * pos // 255
    return c0 - (c0 - c1) * pos // 255


class Image:
    """An image whose pixels are indices into an RGB palette of up to 256 colours."""

    def __init__(self, width: int, height: int) -> None:
        if not 0 < width <= _INT_MAX or not 0 < height <= _INT_MAX:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.data = bytearray(width * height)
        self._palette: list[tuple[int, int, int]] = []

    @property
    def size(self) -> int:
        """Image data size in bytes."""
        return len(self.data)

    @property
    def palette(self) -> tuple[tuple[int, int, int], ...]:
        """The palette entries as (r, g, b) tuples."""
        return tuple(self._palette)

    def palette_add(self, r: int, g: int, b: int) -> int:
        """Append a colour to the palette and return its index."""
        if len(self._palette) >= PALETTE_MAX:
            raise PaletteFullError("palette already holds the maximum of 256 colours")
        colour = (_check_byte("r", r), _check_byte("g", g), _check_byte("b", b))
        self._palette.append(colour)
        return len(self._palette) - 1

    def palette_add_blend(self, idx0: int, idx1: int, pos: int) -> int:
        """Append a blend of two palette colours; pos 0 is idx0, 255 is idx1."""
        _check_byte("pos", pos)
        try:
            p0 = self._palette[_check_byte("idx0", idx0)]
            p1 = self._palette[_check_byte("idx1", idx1)]
        except IndexError:
            raise IndexError("palette index not yet defined") from None
        r, g, b = (_blend_channel(c0, c1, pos) for c0, c1 in zip(p0, p1))
        return self.palette_add(r, g, b)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the palette index stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.data[y * self.width + x]

    def _plot(self, colour: int, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.data[y * self.width + x] = colour

    def _plot_all(self, colour: int, points: Iterable[tuple[int, int]]) -> None:
        for x, y in points:
            self._plot(colour, x, y)

    def _outside(self, x0: int, y0: int, x1: int, y1: int) -> bool:
        """Whether the given rectangle lies entirely outside the image."""
        x0, x1 = sorted((x0, x1))
        y0, y1 = sorted((y0, y1))
        return x1 < 0 or x0 >= self.width or y1 < 0 or y0 >= self.height

    def v_line(self, colour: int, y0: int, y1: int, x: int) -> None:
        """Draw a vertical line from y0 to y1 inclusive at column x."""
        _check_byte("colour", colour)
        if self._outside(x, y0, x, y1):
            return
        lo, hi = sorted((y0, y1))
        self._plot_all(colour, ((x, row) for row in range(lo, hi + 1)))

    def h_line(self, colour: int, x0: int, x1: int, y: int) -> None:
        """Draw a horizontal line from x0 to x1 inclusive at row y."""
        _check_byte("colour", colour)
        if self._outside(x0, y, x1, y):
            return
        lo, hi = sorted((x0, x1))
        self._plot_all(colour, ((col, y) for col in range(lo, hi + 1)))

    def line(self, colour: int, x0: int, y0: int, x1: int, y1: int) -> None:
        """Draw a straight line between two points, both inclusive."""
        _check_byte("colour", colour)
        if self._outside(x0, y0, x1, y1):
            return
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        error = dx + dy
        while True:
            self._plot(colour, x0, y0)
            if x0 == x1 and y0 == y1:
                break
            error2 = 2 * error
            if error2 >= dy:
                error += dy
                x0 += sx
            if error2 <= dx:
                error += dx
                y0 += sy

    def rect_fill(self, colour: int, x: int, y: int, w: int, h: int) -> None:
        """Fill a w by h rectangle whose top-left corner is (x, y)."""
        _check_byte("colour", colour)
        if self._outside(x, y, x + w, y + h):
            return
        self._plot_all(
            colour,
            ((col, row) for row in range(y, y + h) for col in range(x, x + w)),
        )

    def ellipse_fill(self, colour: int, x: int, y: int, w: int, h: int) -> None:
        """Fill an ellipse inside the w by h box whose top-left corner is (x, y)."""
        _check_byte("colour", colour)
        if self._outside(x, y, x + w, y + h):
            return
        w2 = w * w
        h2 = h * h
        cx = x + int(w / 2)
        cy = y + int(h / 2)
        for i in range(0, h, 2):
            i2 = i * i
            for j in range(0, w, 2):
                if i2 * w2 + j * j * h2 <= w2 * h2:
                    dx, dy = j // 2, i // 2
                    self._plot_all(
                        colour,
                        (
                            (cx - dx, cy - dy),
                            (cx + dx, cy - dy),
                            (cx - dx, cy + dy),
                            (cx + dx, cy + dy),
                        ),
                    )

    def char_scaled(
        self,
        colour: int,
        character: str,
        scale_x: int,
        scale_y: int,
        x: int,
        y: int,
    ) -> int:
        """Draw one character with separate scales; return its x-advance."""
        _check_byte("colour", colour)
        glyph = get_glyph(character)
        if glyph is None or glyph.advance == 0:
            return 0
        advance = glyph.advance * scale_x
        if self._outside(x, y, x + advance, y + GLYPH_HEIGHT * scale_y):
            return advance
        for gx, gy in glyph.pixels():
            left = x + gx * scale_x
            top = y + gy * scale_y
            self._plot_all(
                colour,
                (
                    (left + j, top + i)
                    for i in range(scale_y)
                    for j in range(scale_x)
                ),
            )
        return advance

    def char(self, colour: int, character: str, scale: int, x: int, y: int) -> int:
        """Draw one character at a uniform scale; return its x-advance."""
        return self.char_scaled(colour, character, scale, scale, x, y)

    def text(self, colour: int, text: str, scale: int, x: int, y: int) -> int:
        """Draw a string left to right; return the total x-advance."""
        advance = 0
        for character in text:
            advance += self.char(colour, character, scale, x + advance, y)
        return advance


def text_width(text: str, scale: int) -> int:
    """Width in pixels of text drawn at the given scale."""
    total = 0
    for character in text:
        glyph = get_glyph(character)
        if glyph is not None:
            total += glyph.advance
    return total * scale


def text_height(scale: int) -> int:
    """Height in pixels of text drawn at the given scale."""
    return GLYPH_HEIGHT * scale