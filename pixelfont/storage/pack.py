"""
pixelfont.storage.pack - pack glyph cells into an atlas image

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from PIL import Image

from pixelfont.base import Rect, RGBA
from pixelfont.constants import PADDING


def pack_glyphs(source, sentinel, rows, padding=PADDING):
    """
    Copy glyph cells from the source into a new atlas image.

    source: pixel source the glyphs were scanned from
    sentinel: colour to leave transparent
    rows: sequence of rows, each a sequence of (char, Glyph) in source coordinates
    padding: number of blank pixels between glyphs and between rows

    Returns the atlas, a dict of glyphs with atlas coordinates, and the line height.
    """
    rows = tuple(tuple(_row) for _row in rows if _row)
    width = max(
        (
            sum(_g.width for _, _g in _row) + padding * (len(_row)-1)
            for _row in rows
        ),
        default=0,
    )
    row_heights = tuple(max(_g.height for _, _g in _row) for _row in rows)
    height = sum(row_heights) + padding * (len(rows)-1)
    atlas = Image.new('RGBA', (max(width, 1), max(height, 1)), (0, 0, 0, 0))
    pixels = atlas.load()
    glyphs = {}
    y = 0
    for row, row_height in zip(rows, row_heights):
        x = 0
        for char, glyph in row:
            src = glyph.bounds
            for dy in range(src.height):
                for dx in range(src.width):
                    colour = source.colour_at(src.left + dx, src.top + dy)
                    if colour != sentinel:
                        pixels[x + dx, y + dy] = tuple(RGBA.create(colour))
            glyphs[char] = glyph.modify(
                bounds=Rect.from_size(x, y, src.width, src.height)
            )
            x += src.width + padding
        y += row_height + padding
    max_descender = max((_g.descender for _g in glyphs.values()), default=0)
    line_height = max(row_heights, default=0) - max_descender
    return atlas, glyphs, line_height
