from numbers import Real

from celltable.errors import TypeMismatch, OutOfRange
from celltable.glyphs import HorizontalAlignment, VerticalAlignment


def is_whole_number(value):
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return isinstance(value, int) or float(value).is_integer()


def _validate_size(value, name: str):
    if not is_whole_number(value):
        raise TypeMismatch('Cell {} must be a whole number, got {!r}'.format(name, value))
    if value < 0:
        raise OutOfRange('Cell {} cannot be negative, got {}'.format(name, value))


def validate_width(width):
    _validate_size(width, 'width')


def validate_padding_left(padding_left):
    _validate_size(padding_left, 'left padding')


def validate_padding_right(padding_right):
    _validate_size(padding_right, 'right padding')


def validate_x_position(x_position):
    if not isinstance(x_position, HorizontalAlignment):
        raise TypeMismatch('Cell x position must be a HorizontalAlignment, got {!r}'.format(x_position))


def validate_y_position(y_position):
    if not isinstance(y_position, VerticalAlignment):
        raise TypeMismatch('Cell y position must be a VerticalAlignment, got {!r}'.format(y_position))


def validate_text_align(text_align):
    if not isinstance(text_align, HorizontalAlignment):
        raise TypeMismatch('Cell text align must be a HorizontalAlignment, got {!r}'.format(text_align))


def validate_single_column(single_column):
    if not isinstance(single_column, bool):
        raise TypeMismatch('Cell single column flag must be a bool, got {!r}'.format(single_column))


def validate_content(content, width):
    validate_width(width)
    length = len(str(content))
    if length > width:
        raise OutOfRange('Cell content is {} characters wide but the cell width is {}'.format(length, width))
