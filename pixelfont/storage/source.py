"""
pixelfont.storage.source - pixel sources for sprite sheets

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from PIL import Image


# A pixel source is any object with `width` and `height` attributes and a
# `colour_at(x, y)` method returning a comparable colour value.
# The sheet parser reads nothing else.


class ImageSource:
    """Pixel source backed by a Pillow image."""

    def __init__(self, image):
        """Wrap a Pillow image; the pixels are copied as RGBA."""
        self._image = image.convert('RGBA')
        self._pixels = self._image.load()

    def __repr__(self):
        return f'{type(self).__name__}({self.width}x{self.height})'

    @property
    def width(self):
        return self._image.width

    @property
    def height(self):
        return self._image.height

    def colour_at(self, x, y):
        """RGBA tuple at the given pixel."""
        return self._pixels[x, y]


def as_source(source):
    """Wrap Pillow images; pass through other pixel sources."""
    if isinstance(source, Image.Image):
        return ImageSource(source)
    return source
