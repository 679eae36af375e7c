"""
pixelfont.render.layout - lay out text as positioned glyphs

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from pixelfont.base import Coord, Rect


###############################################################################
# text layout

def layout(font, text):
    """
    Lay out text, left-justified, without wrapping.

    Yields (Coord, Glyph) pairs with positions relative to the top-left corner
    of the text. Line breaks advance by the font's line height; characters not
    in the font are rendered as spaces.
    """
    return _layout_span(font, text, 0, len(text))


def layout_wrapped(font, text, rect):
    """
    Lay out text, left-justified, word-wrapped to the width of a rectangle.

    Yields (Coord, Glyph) pairs with positions relative to the top-left corner
    of the rectangle. Words are never broken; a word that does not fit on a
    line of its own overflows the rectangle.
    """
    rect = Rect.create(rect)
    for top, start, end in _wrap_lines(font, text, rect.width):
        for pos, glyph in _layout_span(font, text, start, end):
            yield Coord(pos.x, pos.y + top), glyph


def measure(font, text, origin=Coord(0, 0)):
    """Rectangle covered by text laid out with `layout` at the given origin."""
    return _bounding_box(font, layout(font, text)).offset(origin)


def measure_wrapped(font, text, rect):
    """Rectangle covered by text laid out with `layout_wrapped`."""
    rect = Rect.create(rect)
    return _bounding_box(font, layout_wrapped(font, text, rect)).offset(rect.origin)


###############################################################################
# implementation

def _is_kerned(text, start, index):
    """
    Whether the glyph at index adds kerning with its predecessor.
    Only the first glyph of a span or of a line after a word wrap does not;
    a line following a line break is kerned as in unconstrained layout.
    """
    return index > start or (index > 0 and text[index-1] == '\n')


def _layout_span(font, text, start, end):
    """Lay out text[start:end] from a fresh cursor."""
    line_height = font.line_height
    x, y = 0, 0
    for index in range(start, end):
        char = text[index]
        if char == '\n':
            x, y = 0, y + line_height
            continue
        glyph = font.get_glyph(char)
        if glyph is None:
            x += font.space_width
            continue
        # align glyph bottoms on the baseline, descenders below
        yield Coord(x, y + line_height - glyph.height + glyph.descender), glyph
        x += glyph.width
        if _is_kerned(text, start, index):
            x += font.kerning(text[index-1], char)


def _advance(font, text, start, end):
    """Cursor x after laying out a line segment text[start:end]."""
    x = 0
    for index in range(start, end):
        char = text[index]
        glyph = font.get_glyph(char)
        if glyph is None:
            x += font.space_width
            continue
        x += glyph.width
        if _is_kerned(text, start, index):
            x += font.kerning(text[index-1], char)
    return x


def _wrap_lines(font, text, width):
    """Break text into lines; yield (line top, start index, end index)."""
    top = 0
    line_start = word_start = 0
    x = 0
    for index, char in enumerate(text):
        if char == '\n':
            yield top, line_start, index
            top += font.line_height
            line_start = word_start = index + 1
            x = 0
            continue
        glyph = font.get_glyph(char)
        if glyph is None:
            x += font.space_width
            word_start = index + 1
            continue
        advance = glyph.width
        if _is_kerned(text, line_start, index):
            advance += font.kerning(text[index-1], char)
        if x + advance > width and word_start > line_start:
            # move the current word to a new line
            yield top, line_start, word_start
            top += font.line_height
            line_start = word_start
            x = _advance(font, text, line_start, index+1)
        else:
            x += advance
    yield top, line_start, len(text)


def _bounding_box(font, placements):
    """Union of the logical cells of laid-out glyphs."""
    box = Rect(0, 0, 0, 0)
    for pos, glyph in placements:
        box = box.union(Rect.from_size(pos.x, pos.y, glyph.width, font.line_height))
    return box
