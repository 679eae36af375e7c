"""
pixelfont.plumbing - command-line support

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from .args import wrap_main, gather_text, unescape, EXIT_BAD_FONT
