"""
pixelfont.core - glyph and font classes

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from .glyph import Glyph
from .font import PixelFont
