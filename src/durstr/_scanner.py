"""Splits a duration string into number and unit tokens."""


from dataclasses import dataclass
import string
from durstr.errors import NumberOverflowError
from durstr.errors import UnexpectedCharError


MAX_NUMBER = 2**32 - 1

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_SEPARATORS = frozenset(' \t\n\r\f,')


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Unit:
    text: str


class Scanner:
    """Converts a source string into a list of Number and Unit tokens.

    Whitespace and commas between tokens are ignored. A Scanner is meant
    to be used once: create it, call scan_tokens, and discard it.
    """
    def __init__(self, source):
        self.source = source
        self.pos = 0

    def _peek(self):
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def _take_run(self, chars):
        start = self.pos
        while self._peek() in chars:
            self.pos += 1
        return self.source[start:self.pos]

    def scan_tokens(self):
        """Returns the list of tokens for the whole source.

        Raises UnexpectedCharError on the first character that is not a
        digit, ASCII letter, whitespace or comma, and NumberOverflowError
        if a number exceeds MAX_NUMBER.
        """
        tokens = []
        while self.pos < len(self.source):
            c = self.source[self.pos]
            if c in _SEPARATORS:
                self.pos += 1
            elif c in _DIGITS:
                tokens.append(self._scan_number())
            elif c in _LETTERS:
                tokens.append(Unit(self._take_run(_LETTERS)))
            else:
                raise UnexpectedCharError(c)
        return tokens

    def _scan_number(self):
        digits = self._take_run(_DIGITS)
        significant = digits.lstrip('0') or '0'
        # int() refuses literals longer than sys.get_int_max_str_digits()
        if (len(significant) > len(str(MAX_NUMBER))
                or int(significant) > MAX_NUMBER):
            raise NumberOverflowError(digits)
        return Number(int(significant))


def scan(source):
    """Returns the tokens of the given string. See Scanner.scan_tokens."""
    return Scanner(source).scan_tokens()
