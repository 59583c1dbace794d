RESET = '\033[0m'
BOLD = '\033[1m'
DIM = '\033[2m'
ITALIC = '\033[3m'
UNDERLINE = '\033[4m'

FOREGROUND = {
    'black': '\033[30m',
    'red': '\033[31m',
    'green': '\033[32m',
    'yellow': '\033[33m',
    'blue': '\033[34m',
    'magenta': '\033[35m',
    'cyan': '\033[36m',
    'white': '\033[37m',
    'bright_black': '\033[90m',
    'bright_red': '\033[91m',
    'bright_green': '\033[92m',
    'bright_yellow': '\033[93m',
    'bright_blue': '\033[94m',
    'bright_magenta': '\033[95m',
    'bright_cyan': '\033[96m',
    'bright_white': '\033[97m',
}


class StyledText:
    """Chainable builder for terminal text with embedded ANSI style codes.

    The builder keeps two views of what was written: the full buffer
    including escape codes, returned by :meth:`build`, and the plain text
    without them, used for measuring the visible width.

        StyledText.create().bold().green().text('Name').build()
    """

    def __init__(self):
        self._buffer = []
        self._plain_text = ''
        self._auto_reset = True

    @classmethod
    def create(cls):
        return cls()

    @property
    def plain_text(self):
        return self._plain_text

    def text(self, text: str):
        self._buffer.append(text)
        self._plain_text += text
        return self

    def spaces(self, count: int = 1):
        return self.text(' ' * count)

    def ansi(self, code: str):
        self._buffer.append(code)
        return self

    def bold(self):
        return self.ansi(BOLD)

    def dim(self):
        return self.ansi(DIM)

    def italic(self):
        return self.ansi(ITALIC)

    def underline(self):
        return self.ansi(UNDERLINE)

    def reset(self):
        return self.ansi(RESET)

    def color(self, name: str):
        try:
            return self.ansi(FOREGROUND[name])
        except KeyError:
            raise ValueError('Unknown color "{}"'.format(name)) from None

    def black(self):
        return self.color('black')

    def red(self):
        return self.color('red')

    def green(self):
        return self.color('green')

    def yellow(self):
        return self.color('yellow')

    def blue(self):
        return self.color('blue')

    def magenta(self):
        return self.color('magenta')

    def cyan(self):
        return self.color('cyan')

    def white(self):
        return self.color('white')

    def gray(self):
        return self.color('bright_black')

    def auto_reset(self, enabled: bool = True):
        self._auto_reset = enabled
        return self

    def clear(self):
        self._buffer = []
        self._plain_text = ''
        return self

    def text_length(self):
        return len(self._plain_text)

    def is_empty(self):
        return not self._buffer

    def build(self):
        result = ''.join(self._buffer)
        if self._auto_reset and result:
            result += RESET
        return result

    def __len__(self):
        return self.text_length()

    def __str__(self):
        return self._plain_text

    def __repr__(self):
        return 'StyledText({})'.format(repr(self.build()))
