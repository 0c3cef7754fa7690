"""Turns duration strings into timedelta values.

Parsing happens in two stages. The scanner splits the whole string into
Number and Unit tokens, then Parser.parse_tokens walks them in
(number, unit) pairs and adds up the result. The first error from either
stage is raised; nothing is returned for partially valid input.
"""


from dataclasses import dataclass
from dataclasses import fields
from datetime import timedelta
import logging
from durstr import _scanner
from durstr._scanner import Number
from durstr._scanner import Unit
from durstr._units import UNITS
from durstr.errors import ConfigError
from durstr.errors import DurationError
from durstr.errors import DurationOverflowError
from durstr.errors import ExpectedNumberError
from durstr.errors import ExpectedUnitError
from durstr.errors import UnexpectedUnitError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserOptions:
    """Settings that change how a Parser resolves units.

    Attributes:
    - ignore_case - if True, unit names are lower-cased before lookup,
      so "Min" and "MIN" are accepted as "min"
    """
    ignore_case: bool = False

    @classmethod
    def from_mapping(cls, mapping):
        """Builds options from a dict such as a table of a config file.

        Raises ConfigError for unknown keys or values of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(f'unknown parser options: {", ".join(unknown)}')
        ignore_case = mapping.get('ignore_case', False)
        if not isinstance(ignore_case, bool):
            raise ConfigError(
                f'ignore_case must be true or false, not {ignore_case!r}')
        return cls(ignore_case=ignore_case)


class Parser:
    """Parses duration strings according to a ParserOptions.

    options may be a ParserOptions, a dict like {'ignore_case': True}
    (validated as a config table), or None for the defaults. Instances
    hold no state besides their options, so one can be shared freely,
    including between threads.
    """
    def __init__(self, options=None):
        if options is None:
            options = ParserOptions()
        elif not isinstance(options, ParserOptions):
            options = ParserOptions.from_mapping(options)
        self.options = options

    def parse(self, text):
        """Returns the timedelta described by text.

        Raises a DurationError subclass if the text can't be parsed.
        """
        if not isinstance(text, str):
            raise TypeError(
                f'expected a str to parse, got {type(text).__name__}')
        try:
            result = self.parse_tokens(_scanner.scan(text))
        except DurationError as e:
            logger.debug('rejected duration %r: %s', text, e)
            raise
        logger.debug('parsed duration %r as %s', text, result)
        return result

    def parse_tokens(self, tokens):
        """Adds up a sequence of Number and Unit tokens.

        Tokens must alternate number, unit, number, unit... An empty
        sequence gives a zero timedelta.
        """
        tokens = iter(tokens)
        total = timedelta(0)
        for token in tokens:
            if not isinstance(token, Number):
                raise ExpectedNumberError()
            unit = next(tokens, None)
            if not isinstance(unit, Unit):
                raise ExpectedUnitError()
            per_unit = self._unit_duration(unit.text)
            try:
                total += token.value * per_unit
            except OverflowError as e:
                raise DurationOverflowError() from e
        return total

    def _unit_duration(self, unit):
        if self.options.ignore_case:
            unit = unit.lower()
        try:
            return UNITS[unit]
        except KeyError:
            raise UnexpectedUnitError(unit) from None


def parse(text):
    """Parses a duration string with the default options.

    Whitespace and commas between parts are ignored, and unit names are
    case-sensitive. Supported units:
    - ms, msec/msecs, millisecond/milliseconds
    - s, sec/secs, second/seconds
    - m, min/mins, minute/minutes
    - h, hr/hrs, hour/hours

    Example: parse("2 minutes, 12 seconds") == timedelta(seconds=132)
    """
    return Parser().parse(text)


def parse_with(text, options):
    """Parses a duration string with the given options.

    options may be a ParserOptions or a dict like {'ignore_case': True}.
    """
    return Parser(options).parse(text)
