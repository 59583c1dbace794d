import argparse
import csv
import re
import sys

from celltable import config
from celltable.errors import CellError, OutOfRange
from celltable.glyphs import HorizontalAlignment, STYLES, glyphs_for_style
from celltable.table import Table, Column


NUMBER_RE = re.compile(r'^-?\d+(\.\d+)?$')

ALIGN_CHARS = {
    'l': HorizontalAlignment.LEFT,
    'c': HorizontalAlignment.CENTER,
    'r': HorizontalAlignment.RIGHT,
}


def parse_value(field: str):
    match = NUMBER_RE.match(field)
    if not match:
        return field
    value = int(field) if match.group(1) is None else float(field)
    # only fields that print back unchanged become numbers
    if str(value) != field:
        return field
    return value


class ArgumentParser(argparse.ArgumentParser):
    def __init__(self):
        super().__init__(description='Print delimited text as a bordered table')
        self.add_argument('file', metavar='file', type=str, nargs='?', default='-',
                          help='input file name (defaults to stdin)')
        self.add_argument('-c', '--config', metavar='config', type=str, default=config.DEFAULT_CONFIG_FILE)
        self.add_argument('-d', '--delimiter', type=str, default=',', help='field delimiter (default ",")')
        self.add_argument('-s', '--style', type=str, choices=list(STYLES), default=None,
                          help='border style, overrides the config file')
        self.add_argument('-a', '--align', type=self._parse_align, default=[],
                          help='column alignments, one of "l", "c" or "r" per column')
        self.add_argument('--no-header', default=False, action='store_true',
                          help='Treat the first row as data')
        self.add_argument('--no-color', default=False, action='store_true',
                          help='Print without ANSI styles')

    def _parse_align(self, align: str):
        try:
            return [ALIGN_CHARS[c] for c in align.lower()]
        except KeyError:
            self.error('Invalid alignment "{}". Use one of {} per column'.format(
                align, ' '.join('"{}"'.format(c) for c in ALIGN_CHARS)))


def with_file(file_name: str, func):
    if file_name == '-':
        return func(sys.stdin)
    else:
        with open(file_name, newline='') as file:
            return func(file)


def read_rows(file, delimiter: str):
    return [[parse_value(f) for f in row] for row in csv.reader(file, delimiter=delimiter) if row]


def build_table(rows: [list], aligns: [HorizontalAlignment], header: bool, glyphs, padding_left: int,
                padding_right: int):
    count = len(rows[0])
    if len(aligns) > count:
        raise OutOfRange('Got {} alignments for {} columns'.format(len(aligns), count))
    aligns = aligns + [HorizontalAlignment.LEFT] * (count - len(aligns))

    table = Table([Column(a) for a in aligns], padding_left, padding_right, glyphs)
    if header:
        table.header(rows[0])
        table.rule()
        rows = rows[1:]
    for row in rows:
        table.row(row)
    return table


def main(argv=None):
    args = ArgumentParser().parse_args(argv)
    try:
        cfg = config.load(args.config)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1
    table_cfg = cfg['table']

    try:
        glyphs = glyphs_for_style(args.style or table_cfg['style'])
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        rows = with_file(args.file, lambda f: read_rows(f, args.delimiter))
    except FileNotFoundError:
        print('No such file "{}"'.format(args.file), file=sys.stderr)
        return 1

    if not rows:
        print('Nothing to print', file=sys.stderr)
        return 1

    try:
        table = build_table(rows, args.align, not args.no_header, glyphs,
                            table_cfg['padding-left'], table_cfg['padding-right'])
        table.print(with_style=table_cfg['color'] and not args.no_color)
    except CellError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
