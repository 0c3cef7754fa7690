from datetime import timedelta
from types import MappingProxyType

_MILLISECOND = timedelta(milliseconds=1)
_SECOND = timedelta(seconds=1)
_MINUTE = timedelta(minutes=1)
_HOUR = timedelta(hours=1)

UNITS = MappingProxyType({
    'ms': _MILLISECOND,
    'msec': _MILLISECOND,
    'msecs': _MILLISECOND,
    'millisecond': _MILLISECOND,
    'milliseconds': _MILLISECOND,
    's': _SECOND,
    'sec': _SECOND,
    'secs': _SECOND,
    'second': _SECOND,
    'seconds': _SECOND,
    'm': _MINUTE,
    'min': _MINUTE,
    'mins': _MINUTE,
    'minute': _MINUTE,
    'minutes': _MINUTE,
    'h': _HOUR,
    'hr': _HOUR,
    'hrs': _HOUR,
    'hour': _HOUR,
    'hours': _HOUR,
})
