"""
pixelfont.base - supporting classes

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import NOT_SET, Coord, Rect, RGBA


class FileFormatError(Exception):
    """Incorrect file format."""


class InvalidGlyphSheet(FileFormatError):
    """No glyph cell could be located in the sprite sheet."""
