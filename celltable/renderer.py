from typing import NamedTuple

from celltable.ansi import StyledText
from celltable.glyphs import GlyphTable, HorizontalAlignment, VerticalAlignment, BOX_GLYPHS


class SeparatorGeometry(NamedTuple):
    width: int
    padding_left: int
    padding_right: int
    x_position: HorizontalAlignment
    y_position: VerticalAlignment
    single_column: bool


class ContentGeometry(NamedTuple):
    width: int
    content: StyledText
    padding_left: int
    padding_right: int
    x_position: HorizontalAlignment
    text_align: HorizontalAlignment


def split_slack(slack: int, text_align: HorizontalAlignment):
    """Returns the (left, right) whitespace counts around aligned content."""
    if text_align == HorizontalAlignment.LEFT:
        return 0, slack
    elif text_align == HorizontalAlignment.RIGHT:
        return slack, 0
    elif text_align == HorizontalAlignment.CENTER:
        left = slack // 2
        return left, slack - left
    raise ValueError('Unknown text alignment {!r}'.format(text_align))


class SeparatorRenderer:
    def __init__(self, geometry: SeparatorGeometry, glyphs: GlyphTable = BOX_GLYPHS):
        self.geometry = geometry
        self.glyphs = glyphs

    def render(self):
        g = self.geometry
        line = self.glyphs.horizontal * (g.width + g.padding_left + g.padding_right)
        return self._left_corner() + line + self._right_corner()

    def _left_corner(self):
        g = self.geometry
        if g.x_position == HorizontalAlignment.LEFT:
            return self.glyphs.corner(g.y_position, g.x_position)
        return ''

    def _right_corner(self):
        g = self.geometry
        if g.x_position == HorizontalAlignment.RIGHT or g.single_column:
            return self.glyphs.corner(g.y_position, HorizontalAlignment.RIGHT)
        return self.glyphs.corner(g.y_position, HorizontalAlignment.CENTER)


class ContentRenderer:
    def __init__(self, geometry: ContentGeometry, with_style: bool = True, glyphs: GlyphTable = BOX_GLYPHS):
        self.geometry = geometry
        self.with_style = with_style
        self.glyphs = glyphs

    def render(self):
        g = self.geometry
        # slack may be negative if the width shrank after the content was set
        slack = g.width - g.content.text_length()
        left, right = split_slack(slack, g.text_align)
        text = g.content.build() if self.with_style else g.content.plain_text
        inner = ' ' * g.padding_left + ' ' * left + text + ' ' * right + ' ' * g.padding_right
        return self._left_border() + inner + self.glyphs.vertical

    def _left_border(self):
        if self.geometry.x_position == HorizontalAlignment.LEFT:
            return self.glyphs.vertical
        return ''
