__version__ = '0.1.0'

from celltable.errors import CellError, TypeMismatch, OutOfRange, AbstractInstantiation
from celltable.glyphs import HorizontalAlignment, VerticalAlignment, GlyphTable, BOX_GLYPHS, ASCII_GLYPHS
from celltable.ansi import StyledText
from celltable.cell import Cell, SeparatorCell, ContentCell, separator_cell, content_cell
from celltable.table import Table, Column
