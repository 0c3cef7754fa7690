"""A small library for parsing human-readable duration strings.

    >>> from durstr import parse
    >>> parse('1hr 2min 3sec')
    datetime.timedelta(seconds=3723)

parse uses the default, case-sensitive options. Use parse_with, or a
Parser built from ParserOptions, to change that.
"""


from durstr._units import UNITS
from durstr.errors import ConfigError
from durstr.errors import DurationError
from durstr.errors import DurationOverflowError
from durstr.errors import ExpectedNumberError
from durstr.errors import ExpectedUnitError
from durstr.errors import NumberOverflowError
from durstr.errors import UnexpectedCharError
from durstr.errors import UnexpectedUnitError
from durstr.parser import Parser
from durstr.parser import ParserOptions
from durstr.parser import parse
from durstr.parser import parse_with


__all__ = [
    'UNITS',
    'ConfigError',
    'DurationError',
    'DurationOverflowError',
    'ExpectedNumberError',
    'ExpectedUnitError',
    'NumberOverflowError',
    'Parser',
    'ParserOptions',
    'UnexpectedCharError',
    'UnexpectedUnitError',
    'parse',
    'parse_with',
]
