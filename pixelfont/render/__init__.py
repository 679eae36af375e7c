"""
pixelfont.render - lay out and render text

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from .layout import layout, layout_wrapped, measure, measure_wrapped
from .renderer import blit, blit_wrapped, render
from .glyphmap import GlyphMap, ImageBlitter
