"""
pixelfont.render.glyphmap - glyph maps

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from types import SimpleNamespace

from PIL import Image

from pixelfont.base import Coord, Rect, RGBA


class ImageBlitter:
    """Glyph blitter that paints onto a Pillow image."""

    def __init__(self, image, offset=Coord(0, 0)):
        """
        image: target image
        offset: shift applied to all target positions
        """
        self._image = image
        self._offset = Coord.create(offset)

    @property
    def image(self):
        return self._image

    def __call__(self, atlas, bounds, target):
        """Paint the bounds rectangle of the atlas at the target position."""
        crop = atlas.crop(tuple(bounds))
        # transparent atlas pixels leave the target untouched
        self._image.paste(
            crop,
            (target[0] + self._offset.x, target[1] + self._offset.y),
            crop,
        )


class GlyphMap:
    """
    Record of glyph placements from a font atlas.
    Can be used as a blitter and rendered to an image or to text.
    """

    def __init__(self, atlas, map=()):
        self._atlas = atlas
        self._map = list(map)

    def __iter__(self):
        return iter(self._map)

    def __len__(self):
        return len(self._map)

    def __call__(self, atlas, bounds, target):
        """Record a glyph placement; blitter interface."""
        if atlas is not self._atlas:
            raise ValueError('Glyph map can only record glyphs from its own atlas.')
        self.append_glyph(bounds, *target)

    def append_glyph(self, bounds, x, y):
        """Insert glyph in glyph map."""
        self._map.append(SimpleNamespace(bounds=Rect.create(bounds), x=x, y=y))

    def get_bounds(self):
        """Rectangle covering the origin and all placed glyphs."""
        box = Rect(0, 0, 0, 0)
        for entry in self._map:
            box = box.union(
                Rect.from_size(entry.x, entry.y, entry.bounds.width, entry.bounds.height)
            )
        return Rect(
            min(0, box.left), min(0, box.top),
            max(0, box.right), max(0, box.bottom),
        )

    def as_image(self, *, paper=(0, 0, 0, 0), margin=Coord(0, 0), image_mode='RGBA'):
        """
        Draw glyph map onto a new image.

        paper: background colour
        margin: number of pixels in X,Y direction around the glyphs
        image_mode: Pillow mode of the image to create
        """
        margin = Coord.create(margin)
        bounds = self.get_bounds()
        image = Image.new(
            image_mode,
            (bounds.width + 2*margin.x, bounds.height + 2*margin.y),
            tuple(RGBA.create(paper)),
        )
        blitter = ImageBlitter(
            image, offset=(margin.x - bounds.left, margin.y - bounds.top)
        )
        for entry in self._map:
            blitter(self._atlas, entry.bounds, (entry.x, entry.y))
        return image

    def as_text(self, *, ink='@', paper='.', margin=Coord(0, 0), start='', end='\n'):
        """
        Convert glyph map to text; any visible atlas pixel counts as ink.

        ink: character for inked pixels
        paper: character for background pixels
        margin: number of characters in X,Y direction around the glyphs
        """
        image = self.as_image(margin=margin)
        if not image.width or not image.height:
            return ''
        alpha = tuple(image.getchannel('A').getdata())
        rows = (
            alpha[_y*image.width : (_y+1)*image.width]
            for _y in range(image.height)
        )
        contents = '\n'.join(
            ''.join(ink if _a else paper for _a in _row)
            for _row in rows
        )
        return ''.join((start, contents, end))
