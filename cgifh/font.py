"""Built-in 8-pixel-high bitmap font covering printable ASCII."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

GLYPH_HEIGHT = 8
"""Glyph height in pixels."""

GLYPH_WIDTH = 8
"""Glyph width in pixels."""

GLYPH_COUNT = 1 << 7
"""Number of glyph slots; only 7-bit ASCII is supported."""


@dataclass(frozen=True)
class Glyph:
    """A single font glyph: horizontal advance and one bit row per scanline.

    Each row is a byte whose most significant bit is the leftmost pixel.
    """

    advance: int
    rows: tuple[int, ...] = (0,) * GLYPH_HEIGHT

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if len(rows) != GLYPH_HEIGHT:
            raise ValueError(f"a glyph needs {GLYPH_HEIGHT} rows, got {len(rows)}")
        if any(not 0 <= row <= 0xFF for row in rows):
            raise ValueError("glyph rows must be bytes (0..255)")
        if self.advance < 0:
            raise ValueError("glyph advance must not be negative")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_pattern(cls, advance: int, pattern: Sequence[str]) -> Glyph:
        """Build a glyph from text rows where '#' marks a set pixel.

        Rows may be shorter than the glyph width and trailing rows may be
        omitted; missing pixels are clear.
        """
        if len(pattern) > GLYPH_HEIGHT:
            raise ValueError(f"a glyph has at most {GLYPH_HEIGHT} rows")
        rows = []
        for line in pattern:
            if len(line) > GLYPH_WIDTH:
                raise ValueError(f"a glyph row has at most {GLYPH_WIDTH} pixels")
            rows.append(
                sum(0x80 >> col for col, mark in enumerate(line) if mark == "#")
            )
        rows.extend([0] * (GLYPH_HEIGHT - len(rows)))
        return cls(advance, tuple(rows))

    def pixels(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) offsets of every set pixel, row by row."""
        for y, row in enumerate(self.rows):
            if not row:
                continue
            for x in range(GLYPH_WIDTH):
                if row & (0x80 >> x):
                    yield x, y


_PATTERNS: dict[str, tuple[int, tuple[str, ...]]] = {
    " ": (3, ()),
    "!": (2, ("#", "#", "#", "#", "", "#")),
    '"': (4, ("#.#", "#.#")),
    "(": (3, (".#", "#", "#", "#", "#", "#", ".#")),
    ")": (3, ("#", ".#", ".#", ".#", ".#", ".#", "#")),
    "+": (4, ("", "", ".#", "###", ".#")),
    ",": (3, ("", "", "", "", ".#", "#")),
    "-": (4, ("", "", "", "###")),
    ".": (2, ("", "", "", "", "", "#")),
    "0": (6, (".###", "#...#", "#..##", "##..#", "#...#", ".###")),
    "1": (6, ("..#", ".##", "..#", "..#", "..#", ".###")),
    "2": (6, (".###", "#...#", "...#", ".##", "#", "#####")),
    "3": (6, (".###", "#...#", "..##", "....#", "#...#", ".###")),
    "4": (6, ("...#", "..##", ".#.#", "#..#", "#####", "...#")),
    "5": (6, ("#####", "#", "####", "....#", "#...#", ".###")),
    "6": (6, (".###", "#", "####", "#...#", "#...#", ".###")),
    "7": (6, ("#####", "...#", "..#", ".#", ".#", ".#")),
    "8": (6, (".###", "#...#", ".###", "#...#", "#...#", ".###")),
    "9": (6, (".###", "#...#", "#...#", ".####", "....#", ".###")),
    ":": (2, ("", "", "#", "", "", "#")),
    ";": (3, ("", "", ".#", "", "", ".#", "#")),
    "?": (6, (".###", "#...#", "...#", "..#", "", "..#")),
    "A": (6, ("..#", ".#.#", "#...#", "#####", "#...#", "#...#")),
    "B": (6, ("####", "#...#", "####", "#...#", "#...#", "####")),
    "C": (6, (".###", "#...#", "#", "#", "#...#", ".###")),
    "D": (6, ("####", "#...#", "#...#", "#...#", "#...#", "####")),
    "E": (6, ("#####", "#", "####", "#", "#", "#####")),
    "F": (6, ("#####", "#", "####", "#", "#", "#")),
    "G": (6, (".###", "#...#", "#", "#..##", "#...#", ".###")),
    "H": (6, ("#...#", "#...#", "#####", "#...#", "#...#", "#...#")),
    "I": (4, ("###", ".#", ".#", ".#", ".#", "###")),
    "J": (5, (".###", "...#", "...#", "...#", "#..#", ".##")),
    "K": (6, ("#..#", "#.#", "##", "#.#", "#..#", "#...#")),
    "L": (5, ("#", "#", "#", "#", "#", "####")),
    "M": (8, ("#.....#", "##...##", "#.#.#.#", "#..#..#", "#..#..#", "#.....#")),
    "N": (6, ("#...#", "##..#", "#.#.#", "#..##", "#...#", "#...#")),
    "O": (6, (".###", "#...#", "#...#", "#...#", "#...#", ".###")),
    "P": (6, ("####", "#...#", "####", "#", "#", "#")),
    "Q": (6, (".###", "#...#", "#...#", "#...#", ".#.#", "..###")),
    "R": (6, ("###", "#..#", "###", "#..#", "#...#", "#...#")),
    "S": (7, (".####", "#....#", ".##", "...##", "#....#", ".####")),
    "T": (6, ("#####", "..#", "..#", "..#", "..#", "..#")),
    "U": (6, ("#...#", "#...#", "#...#", "#...#", "#...#", ".###")),
    "V": (6, ("#...#", "#...#", "#...#", ".#.#", ".#.#", "..#")),
    "W": (8, ("#.....#", "#.....#", "#..#..#", "#.#.#.#", "##...##", "#.....#")),
    "X": (6, ("#...#", ".#.#", "..#", "..#", ".#.#", "#...#")),
    "Y": (6, ("#...#", "#...#", ".#.#", "..#", "..#", "..#")),
    "Z": (5, ("####", "...#", "..#", ".#", "#", "####")),
    "[": (3, ("##", "#", "#", "#", "#", "#", "##")),
    "]": (3, ("##", ".#", ".#", ".#", ".#", ".#", "##")),
    "_": (6, ("", "", "", "", "", "", "", "#####")),
    "a": (5, ("", "###", "...#", ".###", "#..#", ".###")),
    "b": (6, ("#", "####", "#...#", "#...#", "#...#", "####")),
    "c": (6, ("", ".###", "#...#", "#", "#...#", ".###")),
    "d": (6, ("....#", ".####", "#...#", "#...#", "#...#", ".####")),
    "e": (6, ("", ".###", "#...#", "####", "#", ".####")),
    "f": (4, (".##", "#", "###", "#", "#", "#")),
    "g": (5, ("", ".##", "#..#", "#..#", "#..#", ".###", "...#", "###")),
    "h": (5, ("#", "###", "#..#", "#..#", "#..#", "#..#")),
    "i": (2, ("#", "", "#", "#", "#", "#")),
    "j": (3, (".#", "", ".#", ".#", ".#", ".#", ".#", "#")),
    "k": (5, ("#", "#..#", "#.#", "##", "#.#", "#..#")),
    "l": (2, ("#", "#", "#", "#", "#", "#")),
    "m": (6, ("", "####", "#.#.#", "#.#.#", "#...#", "#...#")),
    "n": (5, ("", "###", "#..#", "#..#", "#..#", "#..#")),
    "o": (5, ("", ".##", "#..#", "#..#", "#..#", ".##")),
    "p": (5, ("", "###", "#..#", "#..#", "#..#", "###", "#", "#")),
    "q": (5, ("", ".##", "#..#", "#..#", "#..#", ".###", "...#", "...#")),
    "r": (5, ("", "###", "#..#", "#", "#", "#")),
    "s": (6, ("", ".####", "#", ".###", "....#", "####")),
    "t": (4, ("#", "###", "#", "#", "#", ".##")),
    "u": (5, ("", "#..#", "#..#", "#..#", "#..#", ".###")),
    "v": (6, ("", "#...#", "#...#", "#...#", ".#.#", "..#")),
    "w": (6, ("", "#...#", "#.#.#", "#.#.#", "#.#.#", ".###")),
    "x": (6, ("", "#...#", ".#.#", "..#", ".#.#", "#...#")),
    "y": (5, ("", "#..#", "#..#", "#..#", "#..#", ".###", "...#", "###")),
    "z": (5, ("", "####", "...#", ".##", "#", "####")),
    "{": (4, ("..#", ".#", ".#", "##", ".#", ".#", "..#")),
    "}": (4, ("#", ".#", ".#", ".##", ".#", ".#", "#")),
}

_EMPTY = Glyph(0)

_GLYPHS: tuple[Glyph, ...] = tuple(
    Glyph.from_pattern(*_PATTERNS[chr(code)]) if chr(code) in _PATTERNS else _EMPTY
    for code in range(GLYPH_COUNT)
)


def get_glyph(character: str) -> Glyph | None:
    """Return the glyph for a single character.

    ASCII characters without a drawn glyph give an empty glyph with zero
    advance; characters outside 7-bit ASCII give None.
    """
    if not isinstance(character, str) or len(character) != 1:
        raise ValueError("expected a single character")
    code = ord(character)
    if code >= GLYPH_COUNT:
        return None
    return _GLYPHS[code]