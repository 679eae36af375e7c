"""
pixelfont.constants - package-wide constants

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'

# width of a space or any missing character, if the font has no `m`
DEFAULT_SPACE_WIDTH = 5

# padding between packed glyphs in the atlas, horizontally and between rows
PADDING = 1

# character ranges (inclusive) assigned to the cells of each sheet row
ROWS = (
    # A-Z
    ((0x41, 0x5a),),
    # a-z
    ((0x61, 0x7a),),
    # 0-9 :;<=>?@
    ((0x30, 0x40),),
    # !"#$%&'()*+,-./ [\]^_` {|}~
    ((0x21, 0x2f), (0x5b, 0x60), (0x7b, 0x7e)),
)


def row_chars(runs):
    """Characters in a sheet row, in cell order."""
    return tuple(
        chr(_cp)
        for _first, _last in runs
        for _cp in range(_first, _last+1)
    )
