"""Exceptions raised while parsing duration strings.

Every parse failure is a DurationError, which is also a ValueError, so
callers that already guard conversions with `except ValueError` need no
changes. The exception args hold only the payload (if any); the message
is built by __str__. Two errors compare equal when they have the same
class and the same payload.
"""


class DurationError(ValueError):
    """Base class for errors raised when a duration string is rejected."""

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class UnexpectedCharError(DurationError):
    """Indicates a character that is not a digit, letter or separator.

    Attributes:
    - char - the offending character
    """
    def __init__(self, char):
        super().__init__(char)
        self.char = char

    def __str__(self):
        return f'unexpected character: {self.char}'


class UnexpectedUnitError(DurationError):
    """Indicates a unit name that is not in the unit table.

    Attributes:
    - unit - the unit text as it was looked up
    """
    def __init__(self, unit):
        super().__init__(unit)
        self.unit = unit

    def __str__(self):
        return f'unexpected unit: {self.unit}'


class ExpectedUnitError(DurationError):
    """Indicates a number that was not followed by a unit."""
    def __str__(self):
        return 'expected a unit'


class ExpectedNumberError(DurationError):
    """Indicates a unit that was not preceded by a number."""
    def __str__(self):
        return 'expected a number'


class NumberOverflowError(DurationError):
    """Indicates a run of digits too large to be a quantity.

    Attributes:
    - digits - the digits as written in the input
    """
    def __init__(self, digits):
        super().__init__(digits)
        self.digits = digits

    def __str__(self):
        return f'number too large: {self.digits}'


class DurationOverflowError(DurationError):
    """Indicates a total too large to be represented as a timedelta."""
    def __str__(self):
        return 'duration too large'


class ConfigError(ValueError):
    """Indicates invalid duration parser settings in a config table."""
    pass
