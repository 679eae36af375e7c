"""
pixelfont.storage - load fonts from sprite sheets

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from .source import ImageSource
from .sheet import load, load_font, scan_sheet
from .pack import pack_glyphs
