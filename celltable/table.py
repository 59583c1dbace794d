from celltable import validator
from celltable.cell import ContentCell, SeparatorCell, PADDING_DEFAULT
from celltable.errors import OutOfRange
from celltable.glyphs import GlyphTable, HorizontalAlignment, VerticalAlignment, BOX_GLYPHS


def cell_x_position(index: int, count: int):
    if index == 0:
        return HorizontalAlignment.LEFT
    if index == count - 1:
        return HorizontalAlignment.RIGHT
    return HorizontalAlignment.CENTER


class Column:
    def __init__(self, align: HorizontalAlignment = HorizontalAlignment.LEFT, min_width: int = 0):
        self.align = align
        self.min_width = min_width

    def __repr__(self):
        return 'Column({}, {})'.format(self.align, self.min_width)


Column.LEFT = Column(HorizontalAlignment.LEFT)
Column.CENTER = Column(HorizontalAlignment.CENTER)
Column.RIGHT = Column(HorizontalAlignment.RIGHT)


class Row:
    def render(self, table: 'Table', widths: [int], with_style: bool):
        raise NotImplementedError()

    def widths(self):
        raise NotImplementedError()


class DataRow(Row):
    def __init__(self, values: list, is_header: bool = False):
        self.values = ['' if v is None else v for v in values]
        self.is_header = is_header

    def render(self, table: 'Table', widths: [int], with_style: bool):
        count = len(widths)
        cells = []
        for i, (value, width, column) in enumerate(zip(self.values, widths, table.columns)):
            cells.append(ContentCell(
                width=width,
                padding_left=table.padding_left,
                padding_right=table.padding_right,
                x_position=cell_x_position(i, count),
                single_column=count == 1,
                content=value,
                text_align=column.align,
                is_header=self.is_header,
            ))
        return ''.join(c.render(with_style, table.glyphs) for c in cells)

    def widths(self):
        return [len(str(v)) for v in self.values]


class RuleRow(Row):
    def __init__(self, y_position: VerticalAlignment = VerticalAlignment.CENTER):
        self.y_position = y_position

    def render(self, table: 'Table', widths: [int], with_style: bool):
        count = len(widths)
        return ''.join(SeparatorCell(
            width=width,
            padding_left=table.padding_left,
            padding_right=table.padding_right,
            x_position=cell_x_position(i, count),
            y_position=self.y_position,
            single_column=count == 1,
        ).render(table.glyphs) for i, width in enumerate(widths))

    def widths(self):
        return []


class Table:
    def __init__(self, columns: [Column], padding_left: int = PADDING_DEFAULT,
                 padding_right: int = PADDING_DEFAULT, glyphs: GlyphTable = BOX_GLYPHS):
        if not columns:
            raise OutOfRange('A table needs at least one column')
        validator.validate_padding_left(padding_left)
        validator.validate_padding_right(padding_right)
        self.columns = list(columns)
        self.padding_left = padding_left
        self.padding_right = padding_right
        self.glyphs = glyphs
        self.rows = []

    def _check(self, values: list):
        if len(values) != len(self.columns):
            raise OutOfRange('Expected {} values per row, got {}'.format(len(self.columns), len(values)))

    def header(self, values: list):
        self._check(values)
        self.rows.append(DataRow(values, is_header=True))

    def row(self, values: list):
        self._check(values)
        self.rows.append(DataRow(values))

    def rule(self):
        self.rows.append(RuleRow())

    def widths(self):
        widths = [c.min_width for c in self.columns]
        for row in self.rows:
            for i, w in enumerate(row.widths()):
                widths[i] = max(widths[i], w)
        return widths

    def lines(self, with_style: bool = True):
        widths = self.widths()
        rows = [RuleRow(VerticalAlignment.TOP)] + self.rows + [RuleRow(VerticalAlignment.BOTTOM)]
        return [row.render(self, widths, with_style) for row in rows]

    def render(self, with_style: bool = True):
        return '\n'.join(self.lines(with_style))

    def print(self, file=None, with_style: bool = True):
        for line in self.lines(with_style):
            print(line, file=file)
