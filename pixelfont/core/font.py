"""
pixelfont.core.font - glyph table with packed atlas

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from functools import cached_property
from types import MappingProxyType

from PIL import Image

from pixelfont.constants import DEFAULT_SPACE_WIDTH, ROWS, row_chars
from .glyph import Glyph


class PixelFont:
    """
    Bitmap font parsed from a sprite sheet.

    Holds the packed atlas image, the glyph metrics per character and the
    line height. Fonts are not modified after creation and can be shared
    between any number of layout calls.
    """

    def __init__(self, glyphs=(), *, atlas=None, line_height=None):
        """
        Create font from glyph metrics.

        glyphs: mapping or iterable of pairs of character and Glyph
        atlas: RGBA image holding the glyph pixels. Default: blank image covering all glyph bounds.
        line_height: distance between baselines. Default: tallest glyph less the deepest descender.
        """
        glyphs = dict(glyphs)
        for char, glyph in glyphs.items():
            if not isinstance(glyph, Glyph):
                raise TypeError(f'Expected Glyph for {char!r}, got {type(glyph).__name__}.')
        self._glyphs = MappingProxyType(glyphs)
        if atlas is None:
            atlas = Image.new(
                'RGBA',
                (
                    max((_g.bounds.right for _g in glyphs.values()), default=1),
                    max((_g.bounds.bottom for _g in glyphs.values()), default=1),
                ),
                (0, 0, 0, 0),
            )
        self._atlas = atlas
        if line_height is None:
            line_height = (
                max((_g.height for _g in glyphs.values()), default=0)
                - self.max_descender
            )
        self._line_height = line_height

    def __repr__(self):
        return (
            f'<{type(self).__name__} glyphs={len(self._glyphs)} '
            f'line_height={self._line_height} atlas={self._atlas.width}x{self._atlas.height}>'
        )

    def __str__(self):
        """List the glyphs present for each row of the sprite sheet."""
        return '\n'.join(
            ' '.join(
                f'{_c}:{self._glyphs[_c].bounds}'
                for _c in row_chars(_runs)
                if _c in self._glyphs
            )
            for _runs in ROWS
        )

    def __contains__(self, char):
        return char in self._glyphs

    def __len__(self):
        return len(self._glyphs)

    def __iter__(self):
        """Iterate over characters defined in the font."""
        return iter(self._glyphs)

    ##########################################################################
    # properties

    @property
    def glyphs(self):
        """Read-only mapping from character to Glyph."""
        return self._glyphs

    @property
    def atlas(self):
        """Packed image holding all glyph pixels. Do not modify."""
        return self._atlas

    @property
    def line_height(self):
        """Vertical advance from one baseline to the next."""
        return self._line_height

    @property
    def chars(self):
        """Characters defined in the font."""
        return tuple(self._glyphs)

    @property
    def max_descender(self):
        """Deepest descender in the font."""
        return max((_g.descender for _g in self._glyphs.values()), default=0)

    @cached_property
    def space_width(self):
        """Advance for a space or any character missing from the font."""
        try:
            return self._glyphs['m'].width // 2 + 1
        except KeyError:
            return DEFAULT_SPACE_WIDTH

    ##########################################################################
    # glyph access

    def get_glyph(self, char, default=None):
        """Get glyph for a character; default if not present."""
        return self._glyphs.get(char, default)

    def get_image(self, glyph):
        """Crop a glyph's pixels from the atlas. Accepts a character or a Glyph."""
        if not isinstance(glyph, Glyph):
            glyph = self._glyphs[glyph]
        return self._atlas.crop(tuple(glyph.bounds))

    def kerning(self, left, right):
        """
        Spacing between two adjacent characters.

        Where both glyphs are present the wider of the two measured gaps is
        used. Never less than 1; if neither character is in the font, the
        space width.
        """
        lglyph = self._glyphs.get(left)
        rglyph = self._glyphs.get(right)
        if lglyph is None and rglyph is None:
            return self.space_width
        if lglyph is None:
            return max(rglyph.left_kern, 1)
        if rglyph is None:
            return max(lglyph.right_kern, 1)
        return max(lglyph.right_kern, rglyph.left_kern, 1)
