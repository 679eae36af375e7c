"""
pixelfont.render.renderer - draw laid-out text through a blitter

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from pixelfont.base import Coord, Rect
from .layout import layout, layout_wrapped
from .glyphmap import GlyphMap


# A blitter is any callable `blitter(atlas, bounds, target)` that paints the
# `bounds` rectangle of the atlas image with its top-left corner at `target`.


def blit(font, blitter, text, origin=Coord(0, 0)):
    """Draw text with its top-left corner at origin; no wrapping."""
    origin = Coord.create(origin)
    for pos, glyph in layout(font, text):
        blitter(font.atlas, glyph.bounds, pos + origin)


def blit_wrapped(font, blitter, text, rect):
    """Draw text word-wrapped inside a rectangle."""
    rect = Rect.create(rect)
    for pos, glyph in layout_wrapped(font, text, rect):
        blitter(font.atlas, glyph.bounds, pos + rect.origin)


def render(font, text, *, width=None):
    """
    Render text to a glyph map.

    width: wrap lines to this number of pixels (default: no wrapping)
    """
    glyph_map = GlyphMap(font.atlas)
    if width is None:
        blit(font, glyph_map, text)
    else:
        blit_wrapped(font, glyph_map, text, Rect(0, 0, width, 0))
    return glyph_map
