from numbers import Number

from celltable.ansi import StyledText


def is_numeric(value):
    return isinstance(value, Number) and not isinstance(value, bool)


class ContentStyler:
    """Header cells are bold green, numbers magenta, anything else white."""

    def __init__(self, content, is_header: bool = False):
        self.content = content
        self.is_header = is_header

    def build(self):
        builder = StyledText.create()
        self._set_style(builder)
        return builder.text(str(self.content))

    def _set_style(self, builder: StyledText):
        if self.is_header:
            builder.green().bold()
        elif is_numeric(self.content):
            builder.magenta()
        else:
            builder.white()


def style_content(content, is_header: bool = False):
    return ContentStyler(content, is_header).build()
