"""
pixelfont.storage.sheet - sprite-sheet font parser

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

import logging

from PIL import Image, UnidentifiedImageError

from pixelfont.base import Coord, Rect, FileFormatError, InvalidGlyphSheet
from pixelfont.constants import ROWS, row_chars
from pixelfont.core import Glyph, PixelFont
from .source import ImageSource, as_source
from .pack import pack_glyphs


# sheet layout
# ------------
#
# The colour of the top-left pixel is the sentinel colour. Each glyph is a
# solid rectangular cell of non-sentinel pixels (paper and ink) surrounded by
# sentinel pixels.
# Cells are laid out in four rows, each assigned to the character ranges in
# ROWS, left to right. The cells of a row share their top edge; the first cell
# of a row sets the baseline and cells that reach further down have
# descenders. The width of the sentinel gaps between cells gives the kerning.
#
#   ..........................
#   .-@-..@@@-..---...........
#   .@-@..@--@..-@@...........
#   .@@@..@@@-..@-@...........
#   .@-@..@--@..-@@...........
#   .@-@..@@@-..--@...........
#   ............@@-...........
#   ..........................
#   .---..@--..---............
#   ...
#
# Here `.` is the sentinel colour, `-` cell paper and `@` ink; the cells shown
# are A, B and g, where g has a descender of one pixel.


def load(infile):
    """
    Load font from a sprite-sheet image file.

    infile: file name or binary stream of any image format Pillow can decode
    """
    try:
        with Image.open(infile) as image:
            source = ImageSource(image)
    except UnidentifiedImageError as e:
        raise FileFormatError(f'Could not decode sprite sheet: {e}') from e
    return load_font(source)


def load_font(source):
    """
    Parse font from a sprite sheet.

    source: Pillow image, or pixel source with `width`, `height` and `colour_at(x, y)`

    Raises InvalidGlyphSheet if no glyph cell can be found.
    """
    source = as_source(source)
    sentinel, rows = scan_sheet(source)
    atlas, glyphs, line_height = pack_glyphs(source, sentinel, rows)
    logging.debug(
        'Parsed %d glyphs; line height %d.', len(glyphs), line_height
    )
    return PixelFont(glyphs, atlas=atlas, line_height=line_height)


def scan_sheet(source):
    """
    Find the glyph cells in a sprite sheet.

    Returns the sentinel colour and a list of rows, each a list of
    (char, Glyph) with bounds in sheet coordinates.
    """
    scanner = _SheetScanner(as_source(source))
    return scanner.sentinel, scanner.scan()


class _SheetScanner:
    """Discover glyph cells in a sprite sheet."""

    def __init__(self, source):
        self._source = source
        self._width = source.width
        self._height = source.height
        if not self._width or not self._height:
            raise InvalidGlyphSheet('Sprite sheet image is empty.')
        self.sentinel = source.colour_at(0, 0)

    def _is_ink(self, x, y):
        return self._source.colour_at(x, y) != self.sentinel

    def _is_gap(self, x, top, bottom):
        """Column holds only sentinel pixels between top and bottom, inclusive."""
        return not any(self._is_ink(x, _y) for _y in range(top, bottom+1))

    def _scan_down(self, x, y):
        """Follow non-sentinel pixels down from (x, y); return last such y."""
        while y + 1 < self._height and self._is_ink(x, y+1):
            y += 1
        return y

    def scan(self):
        """
        Scan all rows of the sheet.
        Returns a list of rows, each a list of (char, Glyph) in source coordinates.
        """
        corner = self._find_start()
        rows = []
        for row_index, runs in enumerate(ROWS):
            row_corner = corner
            row = self._scan_row(corner, row_chars(runs))
            logging.debug(
                'Found %d glyphs in row %d starting at %s.',
                len(row), row_index, row_corner
            )
            rows.append(row)
            if row_index == len(ROWS) - 1:
                break
            corner = self._find_next_row(row_corner)
            if corner is None:
                logging.info(
                    'No further rows in sprite sheet after row %d.', row_index
                )
                break
        return rows

    def _find_start(self):
        """Find bottom-left corner of the first cell."""
        for y in range(self._height):
            for x in range(self._width):
                if x == 0 and y == 0:
                    continue
                if self._is_ink(x, y):
                    return Coord(x, self._scan_down(x, y))
        raise InvalidGlyphSheet(
            'Unable to parse sprite sheet: no glyph cells found.'
        )

    def _scan_row(self, corner, chars):
        """Scan the cells of a row and assign them to characters."""
        row = []
        baseline = None
        for char in chars:
            glyph, next_corner = self._scan_cell(corner)
            if baseline is None:
                baseline = glyph.bounds.bottom
            else:
                glyph = glyph.modify(descender=glyph.bounds.bottom - baseline)
                if glyph.descender < 0:
                    logging.warning(
                        'Glyph %r ends %d pixels above the baseline.',
                        char, -glyph.descender
                    )
            row.append((char, glyph))
            if next_corner is None:
                if len(row) < len(chars):
                    logging.info(
                        'Row ended after %r; %d characters not defined.',
                        char, len(chars) - len(row)
                    )
                break
            corner = next_corner
        return row

    def _scan_cell(self, corner):
        """
        Measure the cell with the given bottom-left corner.
        Returns the glyph and the bottom-left corner of the next cell, or None.
        """
        left, bottom = corner
        top = bottom
        while top > 0 and self._is_ink(left, top-1):
            top -= 1
        # blank columns before the cell
        x = left - 1
        while x >= 0 and self._is_gap(x, top, bottom):
            x -= 1
        left_kern = left - 1 - x
        # cell extends up to the first blank column
        x = left + 1
        while x < self._width and not self._is_gap(x, top, bottom):
            x += 1
        right = x
        # blank columns after the cell
        while x < self._width and self._is_gap(x, top, bottom):
            x += 1
        right_kern = x - right
        # extend downward while any column of the cell continues
        while bottom + 1 < self._height and any(
                self._is_ink(_x, bottom+1) for _x in range(left, right)
            ):
            bottom += 1
        glyph = Glyph(
            Rect(left, top, right, bottom+1),
            left_kern=max(left_kern, 1),
            right_kern=max(right_kern, 1),
        )
        if x >= self._width:
            return glyph, None
        # next cell: first ink pixel in its column, followed down to the bottom
        y = top
        while not self._is_ink(x, y):
            y += 1
        return glyph, Coord(x, self._scan_down(x, y))

    def _find_next_row(self, row_corner):
        """Find bottom-left corner of the first cell of the next row, or None."""
        x = row_corner.x
        seen_gap = False
        for y in range(row_corner.y + 1, self._height):
            if not self._is_ink(x, y):
                seen_gap = True
            elif seen_gap:
                # move to the left edge of the cell along its top row
                while x > 0 and self._is_ink(x-1, y):
                    x -= 1
                return Coord(x, self._scan_down(x, y))
        return None
