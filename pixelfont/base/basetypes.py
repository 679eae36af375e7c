"""
pixelfont.base.basetypes - base data types and converters

(c) 2026 pixelfont contributors
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple
from numbers import Real


class _NotSet:
    """Placeholder for unset keyword arguments."""

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NOT_SET'

NOT_SET = _NotSet()


def to_int(value):
    """Convert number or string to int; strings may use a 0x, 0o or 0b prefix."""
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        # leading zeros without a prefix are decimal
        if value[1:2].isdigit():
            return int(value, 10)
        return int(value, 0)
    return int(value)


class _VectorMixin:
    """Element-wise addition on tuple."""

    def __add__(self, other):
        return type(self)(*(_l + _r for _l, _r in zip(self, other)))


class Coord(_VectorMixin, namedtuple('Coord', 'x y')):
    """Coordinate tuple."""

    def __str__(self):
        return 'x'.join(str(_x) for _x in self)

    @classmethod
    def create(cls, coord=0):
        coord = to_tuple(coord, length=2)
        return cls(*coord)


class Rect(namedtuple('Rect', 'left top right bottom')):
    """
    Axis-aligned rectangle in image coordinates.
    The y axis runs downward; right and bottom are exclusive.
    """

    @classmethod
    def create(cls, coord=0):
        coord = to_tuple(coord, length=4)
        return cls(*coord)

    @classmethod
    def from_size(cls, x, y, width, height):
        """Create rectangle from top-left corner and size."""
        return cls(x, y, x + width, y + height)

    def __str__(self):
        return f'({self.left},{self.top})-({self.right},{self.bottom})'

    def __bool__(self):
        """Rectangle is not empty."""
        return self.right > self.left and self.bottom > self.top

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    @property
    def origin(self):
        """Top-left corner."""
        return Coord(self.left, self.top)

    def offset(self, shift):
        """Move rectangle by the given Coord."""
        return type(self)(
            self.left + shift[0], self.top + shift[1],
            self.right + shift[0], self.bottom + shift[1],
        )

    def union(self, other):
        """Smallest rectangle containing both rectangles; empty ones are ignored."""
        if not self:
            return other
        if not other:
            return self
        return type(self)(
            min(self.left, other.left), min(self.top, other.top),
            max(self.right, other.right), max(self.bottom, other.bottom),
        )


class RGBA(_VectorMixin, namedtuple('RGBA', 'r g b a')):
    """Colour tuple with alpha channel."""

    @classmethod
    def create(cls, colour=0):
        """Convert grey level, RGB or RGBA value to RGBA."""
        if isinstance(colour, Real):
            return cls(colour, colour, colour, 255)
        colour = to_tuple(colour, length=4)
        if len(colour) == 1:
            return cls(colour[0], colour[0], colour[0], 255)
        if len(colour) == 2:
            # grey level with alpha ('LA' mode)
            return cls(colour[0], colour[0], colour[0], colour[1])
        if len(colour) == 3:
            return cls(*colour, 255)
        return cls(*colour[:4])


def _str_to_tuple(value):
    """Split strings like '1,2' or '255 0 0' into ints."""
    return tuple(to_int(_s) for _s in value.replace(',', ' ').split())


def to_tuple(value=0, *, length=2):
    """
    Convert to a tuple of ints.
    A single number, or a string holding one number, is repeated `length` times.
    """
    if isinstance(value, tuple):
        return tuple(to_int(_i) for _i in value)
    if isinstance(value, Real):
        return (to_int(value),) * length
    if isinstance(value, str):
        value = _str_to_tuple(value)
        if len(value) == 1:
            value *= length
        return value
    if value is None:
        return (0,) * length
    return tuple(to_int(_i) for _i in value)
