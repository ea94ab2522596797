import pytest

from kipisi.sprites import SHEET_COLUMNS, SPRITE_SIZE, Rect, Sitelen, sprite_rect


def test_first_glyph_is_top_left_cell():
    assert Sitelen.A.rect() == Rect(0, 0, SPRITE_SIZE, SPRITE_SIZE)


def test_soweli_cell_matches_sheet_layout():
    assert Sitelen.SOWELI.rect() == Rect(
        2 * SPRITE_SIZE, 6 * SPRITE_SIZE, SPRITE_SIZE, SPRITE_SIZE
    )


def test_last_glyph_cell():
    assert Sitelen.TONSI.rect() == Rect(
        7 * SPRITE_SIZE, 8 * SPRITE_SIZE, SPRITE_SIZE, SPRITE_SIZE
    )


def test_first_glyph_of_second_row():
    assert Sitelen.JAKI.rect() == Rect(0, SPRITE_SIZE, SPRITE_SIZE, SPRITE_SIZE)


def test_every_cell_is_distinct():
    rects = [sprite_rect(glyph.name) for glyph in Sitelen]
    assert len(set(rects)) == len(rects)
    assert len(rects) == 136


def test_every_cell_lies_on_the_grid():
    for glyph in Sitelen:
        r = sprite_rect(glyph.name)
        assert (r.width, r.height) == (SPRITE_SIZE, SPRITE_SIZE)
        assert r.x % SPRITE_SIZE == 0
        assert r.y % SPRITE_SIZE == 0
        assert 0 <= r.x < SHEET_COLUMNS * SPRITE_SIZE


def test_cells_follow_row_major_order():
    rects = [sprite_rect(glyph.name) for glyph in Sitelen]
    keys = [(r.y, r.x) for r in rects]
    assert keys == sorted(keys)


@pytest.mark.parametrize("name", ["soweli", "SOWELI", "SITELEN_SOWELI", " Soweli "])
def test_sprite_rect_lookup(name):
    assert sprite_rect(name) == Sitelen.SOWELI.rect()


def test_sprite_rect_for_sitelen_word():
    assert sprite_rect("sitelen") == Sitelen.SITELEN.rect()


def test_sprite_rect_unknown_word():
    with pytest.raises(KeyError):
        sprite_rect("nonexistent")