"""
pixelfont - bitmap fonts from sprite-sheet images

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .base import Coord, Rect, FileFormatError, InvalidGlyphSheet
from .core import PixelFont, Glyph
from .storage import ImageSource, load, load_font
from .render import (
    layout, layout_wrapped, measure, measure_wrapped,
    blit, blit_wrapped, render, GlyphMap, ImageBlitter,
)
