from enum import Enum, unique, auto
from itertools import product
from types import MappingProxyType


@unique
class HorizontalAlignment(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_str(cls, s: str):
        return cls[s.upper()]


@unique
class VerticalAlignment(Enum):
    TOP = auto()
    CENTER = auto()
    BOTTOM = auto()

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_str(cls, s: str):
        return cls[s.upper()]


class GlyphTable:
    """Border-drawing characters for one table style.

    Corners are indexed by the (vertical, horizontal) position of the cell
    edge they close, e.g. ``(VerticalAlignment.TOP, HorizontalAlignment.CENTER)``
    is the join between two cells of the top rule.
    """

    def __init__(self, corners: dict, horizontal: str, vertical: str):
        missing = [k for k in product(VerticalAlignment, HorizontalAlignment) if k not in corners]
        if missing:
            raise ValueError('Missing corner glyphs for {}'.format(
                ', '.join('{}-{}'.format(y, x) for y, x in missing)))
        self._corners = MappingProxyType({k: corners[k] for k in product(VerticalAlignment, HorizontalAlignment)})
        self._horizontal = horizontal
        self._vertical = vertical

    @property
    def corners(self):
        return self._corners

    @property
    def horizontal(self):
        return self._horizontal

    @property
    def vertical(self):
        return self._vertical

    def corner(self, y: VerticalAlignment, x: HorizontalAlignment):
        return self._corners[(y, x)]

    def __repr__(self):
        return 'GlyphTable({})'.format(''.join(self._corners.values()) + self._horizontal + self._vertical)


def _table(rows: [str], horizontal: str, vertical: str):
    corners = {}
    for y, row in zip(VerticalAlignment, rows):
        for x, glyph in zip(HorizontalAlignment, row):
            corners[(y, x)] = glyph
    return GlyphTable(corners, horizontal, vertical)


BOX_GLYPHS = _table([
    '┌┬┐',
    '├┼┤',
    '└┴┘',
], '─', '│')


ASCII_GLYPHS = _table([
    '.-.',
    '|+|',
    "'-'",
], '-', '|')


STYLES = {
    'box': BOX_GLYPHS,
    'ascii': ASCII_GLYPHS,
}


def glyphs_for_style(name: str):
    try:
        return STYLES[name]
    except KeyError:
        raise ValueError('Unknown table style "{}". Allowed values are {}'.format(
            name, ' '.join('"{}"'.format(s) for s in STYLES))) from None
