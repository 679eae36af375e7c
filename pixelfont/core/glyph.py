"""
pixelfont.core.glyph - glyph cell metrics

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from pixelfont.base import NOT_SET, Rect


class Glyph:
    """
    Metrics of a single character cell.

    The bounds locate the glyph's pixels in an image: the sprite sheet while
    parsing, the packed atlas afterwards. Glyphs are immutable; use `modify`
    to obtain a changed copy.
    """

    def __init__(self, bounds=Rect(0, 0, 0, 0), *, left_kern=1, right_kern=1, descender=0):
        """
        Create glyph metrics.

        bounds: cell rectangle (left, top, right, bottom), exclusive at right and bottom
        left_kern: number of blank columns before the cell
        right_kern: number of blank columns after the cell
        descender: pixels the cell extends below the baseline of its row
        """
        self._bounds = Rect.create(bounds)
        self._left_kern = left_kern
        self._right_kern = right_kern
        self._descender = descender

    def __repr__(self):
        return (
            f'{type(self).__name__}({tuple(self._bounds)!r}, '
            f'left_kern={self._left_kern}, right_kern={self._right_kern}, '
            f'descender={self._descender})'
        )

    def __eq__(self, other):
        if not isinstance(other, Glyph):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self):
        return hash(self._as_tuple())

    def _as_tuple(self):
        return (self._bounds, self._left_kern, self._right_kern, self._descender)

    def modify(
            self, bounds=NOT_SET, *,
            left_kern=NOT_SET, right_kern=NOT_SET, descender=NOT_SET,
        ):
        """Return a copy of the glyph with changes."""
        if bounds is NOT_SET:
            bounds = self._bounds
        if left_kern is NOT_SET:
            left_kern = self._left_kern
        if right_kern is NOT_SET:
            right_kern = self._right_kern
        if descender is NOT_SET:
            descender = self._descender
        return type(self)(
            bounds,
            left_kern=left_kern, right_kern=right_kern, descender=descender,
        )

    @property
    def bounds(self):
        return self._bounds

    @property
    def left_kern(self):
        return self._left_kern

    @property
    def right_kern(self):
        return self._right_kern

    @property
    def descender(self):
        return self._descender

    @property
    def width(self):
        """Cell width in pixels."""
        return self._bounds.width

    @property
    def height(self):
        """Cell height in pixels."""
        return self._bounds.height
