from celltable import validator
from celltable.errors import AbstractInstantiation
from celltable.glyphs import GlyphTable, HorizontalAlignment, VerticalAlignment, BOX_GLYPHS
from celltable.renderer import ContentGeometry, ContentRenderer, SeparatorGeometry, SeparatorRenderer
from celltable.styler import is_numeric, style_content


PADDING_DEFAULT = 1


class Cell:
    def __new__(cls, *args, **kwargs):
        if cls is Cell:
            raise AbstractInstantiation('Cannot instantiate object of abstract class "{}"'.format(cls.__name__))
        return super().__new__(cls)

    def __init__(self, width: int = 0, padding_left: int = PADDING_DEFAULT, padding_right: int = PADDING_DEFAULT,
                 x_position: HorizontalAlignment = HorizontalAlignment.CENTER, single_column: bool = False):
        self.width = width
        self.padding_left = padding_left
        self.padding_right = padding_right
        self.x_position = x_position
        self.single_column = single_column

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, width: int):
        validator.validate_width(width)
        self._width = int(width)

    @property
    def padding_left(self):
        return self._padding_left

    @padding_left.setter
    def padding_left(self, padding_left: int):
        validator.validate_padding_left(padding_left)
        self._padding_left = int(padding_left)

    @property
    def padding_right(self):
        return self._padding_right

    @padding_right.setter
    def padding_right(self, padding_right: int):
        validator.validate_padding_right(padding_right)
        self._padding_right = int(padding_right)

    @property
    def x_position(self):
        return self._x_position

    @x_position.setter
    def x_position(self, x_position: HorizontalAlignment):
        validator.validate_x_position(x_position)
        self._x_position = x_position

    @property
    def single_column(self):
        return self._single_column

    @single_column.setter
    def single_column(self, single_column: bool):
        validator.validate_single_column(single_column)
        self._single_column = single_column

    def clone(self):
        return {
            'width': self.width,
            'padding_left': self.padding_left,
            'padding_right': self.padding_right,
            'x_position': self.x_position,
        }

    def render(self, *args, **kwargs):
        raise NotImplementedError()

    def __str__(self):
        return self.render()


class SeparatorCell(Cell):
    def __init__(self, y_position: VerticalAlignment = VerticalAlignment.CENTER, **options):
        super().__init__(**options)
        self.y_position = y_position

    @property
    def y_position(self):
        return self._y_position

    @y_position.setter
    def y_position(self, y_position: VerticalAlignment):
        validator.validate_y_position(y_position)
        self._y_position = y_position

    def geometry(self):
        return SeparatorGeometry(self.width, self.padding_left, self.padding_right,
                                 self.x_position, self.y_position, self.single_column)

    def render(self, glyphs: GlyphTable = BOX_GLYPHS):
        return SeparatorRenderer(self.geometry(), glyphs).render()

    def clone(self):
        snapshot = super().clone()
        snapshot['y_position'] = self.y_position
        return snapshot

    def __repr__(self):
        return 'SeparatorCell({})'.format(', '.join('{}={!r}'.format(k, v) for k, v in self.clone().items()))


class ContentCell(Cell):
    """A cell holding one line of text; ``is_header`` is fixed at construction."""

    def __init__(self, content='', text_align: HorizontalAlignment = HorizontalAlignment.LEFT,
                 is_header: bool = False, **options):
        super().__init__(**options)
        self._is_header = bool(is_header)
        self.content = content
        self.text_align = text_align

    @property
    def is_header(self):
        return self._is_header

    @property
    def raw_content(self):
        return self._raw_content

    @property
    def content(self):
        return self._content

    @content.setter
    def content(self, content):
        if content is None:
            content = ''
        validator.validate_content(content, self.width)
        self._content = style_content(content, self._is_header)
        self._raw_content = content

    @property
    def text_align(self):
        return self._text_align

    @text_align.setter
    def text_align(self, text_align: HorizontalAlignment):
        validator.validate_text_align(text_align)
        self._text_align = text_align

    def geometry(self):
        return ContentGeometry(self.width, self.content, self.padding_left, self.padding_right,
                               self.x_position, self.text_align)

    def render(self, with_style: bool = True, glyphs: GlyphTable = BOX_GLYPHS):
        return ContentRenderer(self.geometry(), with_style, glyphs).render()

    def clone(self):
        snapshot = super().clone()
        raw = self.raw_content
        snapshot['content'] = raw if isinstance(raw, str) or is_numeric(raw) else str(raw)
        snapshot['text_align'] = self.text_align
        snapshot['is_header'] = self.is_header
        return snapshot

    def __repr__(self):
        return 'ContentCell({})'.format(', '.join('{}={!r}'.format(k, v) for k, v in self.clone().items()))


def separator_cell(**options):
    return SeparatorCell(**options)


def content_cell(**options):
    return ContentCell(**options)
