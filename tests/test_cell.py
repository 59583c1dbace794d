import pytest

from celltable.ansi import BOLD, FOREGROUND, RESET
from celltable.cell import Cell, ContentCell, SeparatorCell, content_cell, separator_cell
from celltable.errors import AbstractInstantiation, OutOfRange, TypeMismatch
from celltable.glyphs import ASCII_GLYPHS, HorizontalAlignment, VerticalAlignment


H = HorizontalAlignment
V = VerticalAlignment


def test_base_cell_is_abstract():
    with pytest.raises(AbstractInstantiation, match='"Cell"'):
        Cell()
    with pytest.raises(AbstractInstantiation):
        Cell(width=3)


def test_variants_are_constructible():
    assert isinstance(SeparatorCell(), Cell)
    assert isinstance(ContentCell(), Cell)
    assert isinstance(separator_cell(width=2), SeparatorCell)
    assert isinstance(content_cell(width=2, content='ab'), ContentCell)


def test_base_render_is_abstract():
    class Bare(Cell):
        pass

    with pytest.raises(NotImplementedError):
        Bare().render()


def test_separator_defaults():
    cell = SeparatorCell()
    assert cell.width == 0
    assert cell.padding_left == 1
    assert cell.padding_right == 1
    assert cell.x_position is H.CENTER
    assert cell.y_position is V.CENTER
    assert cell.single_column is False


def test_content_defaults():
    cell = ContentCell()
    assert cell.content.plain_text == ''
    assert cell.raw_content == ''
    assert cell.text_align is H.LEFT
    assert cell.is_header is False


@pytest.mark.parametrize('field, value, error', [
    ('width', -1, OutOfRange),
    ('width', 2.5, TypeMismatch),
    ('padding_left', -2, OutOfRange),
    ('padding_right', 'one', TypeMismatch),
    ('x_position', V.TOP, TypeMismatch),
    ('single_column', 1, TypeMismatch),
])
def test_invalid_options_fail_construction(field, value, error):
    with pytest.raises(error):
        SeparatorCell(**{field: value})
    with pytest.raises(error):
        ContentCell(**{field: value})


@pytest.mark.parametrize('field, value, error', [
    ('width', -1, OutOfRange),
    ('padding_left', None, TypeMismatch),
    ('x_position', 'LEFT', TypeMismatch),
    ('y_position', H.LEFT, TypeMismatch),
    ('single_column', 'yes', TypeMismatch),
])
def test_failed_separator_write_keeps_old_value(field, value, error):
    cell = SeparatorCell(width=4)
    before = getattr(cell, field)
    with pytest.raises(error):
        setattr(cell, field, value)
    assert getattr(cell, field) == before


def test_text_align_is_validated():
    cell = ContentCell()
    with pytest.raises(TypeMismatch):
        cell.text_align = V.BOTTOM
    assert cell.text_align is H.LEFT


def test_is_header_is_read_only():
    cell = ContentCell(is_header=True)
    with pytest.raises(AttributeError):
        cell.is_header = False
    assert cell.is_header is True


def test_separator_example():
    cell = SeparatorCell(width=5, padding_left=1, padding_right=1, x_position=H.LEFT, y_position=V.BOTTOM,
                         single_column=True)
    assert str(cell) == '└' + '─' * 7 + '┘'


@pytest.mark.parametrize('x', list(H))
@pytest.mark.parametrize('width, padding_left, padding_right', [(0, 0, 0), (5, 1, 1), (2, 3, 0)])
def test_separator_length(x, width, padding_left, padding_right):
    cell = SeparatorCell(width=width, padding_left=padding_left, padding_right=padding_right, x_position=x)
    assert len(str(cell)) == width + padding_left + padding_right + (1 if x is H.LEFT else 0) + 1


def test_separator_follows_mutation():
    cell = SeparatorCell(width=1, x_position=H.LEFT, y_position=V.TOP)
    assert str(cell) == '┌───┬'
    cell.x_position = H.RIGHT
    cell.y_position = V.BOTTOM
    cell.width = 3
    assert str(cell) == '─────┘'


def test_separator_ascii():
    cell = SeparatorCell(width=1, x_position=H.LEFT)
    assert cell.render(ASCII_GLYPHS) == '|---+'


def test_content_example():
    cell = ContentCell(width=10, content='hi', x_position=H.CENTER, text_align=H.LEFT)
    assert cell.render(with_style=False) == ' hi' + ' ' * 9 + '│'


def test_content_styled_render():
    cell = ContentCell(width=3, content='hi', x_position=H.LEFT)
    assert str(cell) == '│ ' + FOREGROUND['white'] + 'hi' + RESET + '  │'


@pytest.mark.parametrize('align', list(H))
@pytest.mark.parametrize('x', list(H))
def test_content_wider_than_width_fails(align, x):
    with pytest.raises(OutOfRange):
        ContentCell(width=2, content='abc', text_align=align, x_position=x)
    cell = ContentCell(width=2, text_align=align, x_position=x)
    with pytest.raises(OutOfRange):
        cell.content = 'abc'


def test_content_checked_against_current_width():
    cell = ContentCell(width=5, content='abc')
    cell.width = 2
    with pytest.raises(OutOfRange):
        cell.content = 'abc'
    assert cell.raw_content == 'abc'


def test_shrinking_width_keeps_existing_content():
    cell = ContentCell(width=5, content='abcde', padding_left=0, padding_right=0, x_position=H.LEFT)
    cell.width = 2
    assert cell.raw_content == 'abcde'
    assert cell.render(with_style=False) == '│abcde│'


def test_content_write_replaces_styled_text():
    cell = ContentCell(width=5, content='abc')
    first = cell.content
    cell.content = 'de'
    assert cell.content is not first
    assert first.plain_text == 'abc'
    assert cell.content.plain_text == 'de'


def test_none_content_is_empty():
    cell = ContentCell(width=3, content=None)
    assert cell.raw_content == ''
    assert cell.render(with_style=False) == ' ' * 5 + '│'


def test_numeric_content_style():
    cell = ContentCell(width=2, content=7)
    assert cell.content.build() == FOREGROUND['magenta'] + '7' + RESET


def test_header_content_style():
    cell = ContentCell(width=2, content=7, is_header=True)
    assert cell.content.build() == FOREGROUND['green'] + BOLD + '7' + RESET


@pytest.mark.parametrize('slack', [1, 3, 5])
def test_center_odd_slack(slack):
    cell = ContentCell(width=2 + slack, content='ab', text_align=H.CENTER, padding_left=0, padding_right=0)
    line = cell.render(with_style=False)
    left = (slack - 1) // 2
    assert line == ' ' * left + 'ab' + ' ' * (left + 1) + '│'


def test_separator_clone():
    cell = SeparatorCell(width=4, padding_left=2, padding_right=0, x_position=H.RIGHT, y_position=V.TOP)
    snapshot = cell.clone()
    assert snapshot == {
        'width': 4,
        'padding_left': 2,
        'padding_right': 0,
        'x_position': H.RIGHT,
        'y_position': V.TOP,
    }
    copy = SeparatorCell(**snapshot)
    assert copy is not cell
    assert str(copy) == str(cell)
    copy.width = 1
    assert cell.width == 4


def test_content_clone():
    cell = ContentCell(width=6, content='abc', text_align=H.RIGHT, is_header=True, x_position=H.LEFT)
    snapshot = cell.clone()
    assert snapshot['content'] == 'abc'
    assert snapshot['text_align'] is H.RIGHT
    assert snapshot['is_header'] is True

    copy = ContentCell(**snapshot)
    assert copy.render() == cell.render()
    assert copy.content is not cell.content
    copy.content = 'x'
    assert cell.content.plain_text == 'abc'


def test_clone_is_a_new_dict():
    cell = SeparatorCell()
    assert cell.clone() is not cell.clone()


def test_repr():
    assert repr(SeparatorCell(width=2)).startswith('SeparatorCell(width=2,')
    assert "content='a'" in repr(ContentCell(width=2, content='a'))


def test_whole_float_sizes_are_stored_as_ints():
    cell = SeparatorCell(width=3.0, padding_left=0.0, padding_right=2.0, x_position=H.LEFT)
    assert cell.width == 3 and type(cell.width) is int
    assert type(cell.padding_left) is int
    assert type(cell.padding_right) is int
    assert str(cell) == '├─────┼'


def test_clone_does_not_share_mutable_content():
    raw = ['a']
    cell = ContentCell(width=10, content=raw)
    snapshot = cell.clone()
    assert snapshot['content'] is not raw
    assert snapshot['content'] == "['a']"
    copy = ContentCell(**snapshot)
    assert copy.render() == cell.render()


def test_clone_keeps_numbers_numeric():
    cell = ContentCell(width=3, content=7)
    assert cell.clone()['content'] == 7
    assert ContentCell(**cell.clone()).content.build() == cell.content.build()
