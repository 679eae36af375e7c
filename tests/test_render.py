"""
pixelfont test suite
rendering tests
"""

import unittest

from PIL import Image

import pixelfont
from pixelfont import Coord, Rect, GlyphMap, ImageBlitter
from .base import BaseTester, assert_text_eq, INK


class TestRender(BaseTester):
    """Test renderer."""

    def test_render(self):
        text = pixelfont.render(self.font, 'AB').as_text()
        assert_text_eq(text, """\
.@.@@.
@.@@.@
@@@@@.
@.@@.@
@.@@@.
""")

    def test_render_descender(self):
        text = pixelfont.render(self.font, 'Ag').as_text()
        assert_text_eq(text, """\
.@....
@.@.@@
@@@@.@
@.@.@@
@.@..@
...@@.
""")

    def test_render_lines(self):
        text = pixelfont.render(self.font, 'A\nB').as_text()
        assert_text_eq(text, """\
.@.
@.@
@@@
@.@
@.@
@@.
@.@
@@.
@.@
@@.
""")

    def test_render_wrapped(self):
        glyph_map = pixelfont.render(self.font, 'AB AB', width=10)
        assert len(glyph_map) == 4
        assert glyph_map.get_bounds() == Rect(0, 0, 6, 10)
        unwrapped = pixelfont.render(self.font, 'AB AB')
        # second A adds kerning after itself, B starts at 14
        assert unwrapped.get_bounds() == Rect(0, 0, 17, 5)

    def test_render_empty(self):
        glyph_map = pixelfont.render(self.font, '')
        assert len(glyph_map) == 0
        assert glyph_map.as_text() == ''

    def test_text_margin_and_chars(self):
        text = pixelfont.render(self.font, 'A').as_text(
            ink='#', paper='.', margin=(1, 1)
        )
        assert_text_eq(text, """\
.....
..#..
.#.#.
.###.
.#.#.
.#.#.
.....
""")

    def test_as_image(self):
        image = pixelfont.render(self.font, 'AB').as_image(
            paper=(0, 0, 255), margin=Coord(2, 1)
        )
        assert image.size == (10, 7)
        assert image.mode == 'RGBA'
        # margin and paper pixels take the background colour
        assert image.getpixel((0, 0)) == (0, 0, 255, 255)
        assert image.getpixel((2, 1)) == (0, 0, 255, 255)
        assert image.getpixel((3, 1)) == INK


class TestBlit(BaseTester):
    """Test drawing through blitters."""

    def test_image_blitter(self):
        image = Image.new('RGBA', (10, 10), (0, 0, 255, 255))
        blitter = ImageBlitter(image)
        assert blitter.image is image
        pixelfont.blit(self.font, blitter, 'A', Coord(2, 3))
        assert image.getpixel((3, 3)) == INK
        # transparent glyph pixels leave the target unchanged
        assert image.getpixel((2, 3)) == (0, 0, 255, 255)
        assert image.getpixel((1, 4)) == (0, 0, 255, 255)
        assert image.getpixel((2, 4)) == INK

    def test_image_blitter_offset(self):
        image = Image.new('RGBA', (10, 10), (0, 0, 0, 0))
        blitter = ImageBlitter(image, offset=(1, 1))
        pixelfont.blit(self.font, blitter, 'A')
        assert image.getpixel((2, 1)) == INK
        assert image.getpixel((1, 1)) == (0, 0, 0, 0)

    def test_blit_origin(self):
        glyph_map = GlyphMap(self.font.atlas)
        pixelfont.blit(self.font, glyph_map, 'AB', Coord(10, 20))
        assert [(_e.x, _e.y) for _e in glyph_map] == [(10, 20), (13, 20)]
        assert [_e.bounds for _e in glyph_map] == [
            self.font.glyphs['A'].bounds, self.font.glyphs['B'].bounds
        ]

    def test_blit_wrapped(self):
        glyph_map = GlyphMap(self.font.atlas)
        pixelfont.blit_wrapped(self.font, glyph_map, 'AB AB', Rect(5, 7, 15, 50))
        assert [(_e.x, _e.y) for _e in glyph_map] == [
            (5, 7), (8, 7), (5, 12), (8, 12)
        ]

    def test_blitter_callable(self):
        calls = []
        pixelfont.blit(self.font, lambda *args: calls.append(args), 'Ag')
        assert calls == [
            (self.font.atlas, self.font.glyphs['A'].bounds, Coord(0, 0)),
            (self.font.atlas, self.font.glyphs['g'].bounds, Coord(3, 0)),
        ]

    def test_glyph_map_foreign_atlas(self):
        glyph_map = GlyphMap(self.font.atlas)
        other = Image.new('RGBA', (4, 4))
        with self.assertRaises(ValueError):
            glyph_map(other, Rect(0, 0, 1, 1), (0, 0))

    def test_glyph_map_bounds_include_origin(self):
        glyph_map = GlyphMap(self.font.atlas)
        glyph_map.append_glyph(self.font.glyphs['A'].bounds, 4, 2)
        assert glyph_map.get_bounds() == Rect(0, 0, 7, 7)


if __name__ == '__main__':
    unittest.main()
