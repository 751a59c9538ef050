import pytest

from cgifh.font import GLYPH_COUNT, GLYPH_HEIGHT, GLYPH_WIDTH, Glyph, get_glyph


def test_letter_a_advance_matches_font():
    glyph = get_glyph("A")
    assert glyph is not None
    assert glyph.advance == 6


def test_lowercase_l_rows():
    glyph = get_glyph("l")
    assert glyph.rows == (0x80,) * 6 + (0x00, 0x00)


def test_full_stop_single_pixel():
    glyph = get_glyph(".")
    assert list(glyph.pixels()) == [(0, 5)]


def test_space_has_advance_but_no_pixels():
    glyph = get_glyph(" ")
    assert glyph.advance == 3
    assert list(glyph.pixels()) == []


def test_undrawn_ascii_character_is_empty():
    glyph = get_glyph("#")
    assert glyph.advance == 0
    assert glyph.rows == (0,) * GLYPH_HEIGHT


def test_non_ascii_character_has_no_glyph():
    assert get_glyph("\u00e9") is None


@pytest.mark.parametrize("bad", ["", "ab"])
def test_get_glyph_requires_single_character(bad):
    with pytest.raises(ValueError):
        get_glyph(bad)


def test_capital_b_last_row_is_blank():
    glyph = get_glyph("B")
    assert glyph.rows[-1] == 0
    assert glyph.rows[0] == 0xF0


def test_digits_share_advance():
    assert {get_glyph(d).advance for d in "0123456789"} == {6}


def test_wide_letters():
    assert get_glyph("M").advance == 8
    assert get_glyph("W").advance == 8


def test_underscore_on_bottom_row():
    glyph = get_glyph("_")
    assert {y for _, y in glyph.pixels()} == {GLYPH_HEIGHT - 1}


@pytest.mark.parametrize("code", range(GLYPH_COUNT))
def test_pixels_match_row_bits(code):
    glyph = get_glyph(chr(code))
    points = list(glyph.pixels())
    assert len(points) == sum(bin(row).count("1") for row in glyph.rows)
    assert all(0 <= x < GLYPH_WIDTH and 0 <= y < GLYPH_HEIGHT for x, y in points)


def test_from_pattern_round_trip():
    glyph = Glyph.from_pattern(4, ["#.#", ".#"])
    assert glyph.rows[:2] == (0xA0, 0x40)
    assert list(glyph.pixels()) == [(0, 0), (2, 0), (1, 1)]


def test_glyph_rejects_wrong_row_count():
    with pytest.raises(ValueError):
        Glyph(3, (0, 0, 0))


def test_glyph_rejects_non_byte_rows():
    with pytest.raises(ValueError):
        Glyph(3, (256,) + (0,) * (GLYPH_HEIGHT - 1))


def test_from_pattern_rejects_too_many_rows():
    with pytest.raises(ValueError):
        Glyph.from_pattern(2, ["#"] * (GLYPH_HEIGHT + 1))