import copy
import pickle
from durstr.errors import ConfigError
from durstr.errors import DurationError
from durstr.errors import DurationOverflowError
from durstr.errors import ExpectedNumberError
from durstr.errors import ExpectedUnitError
from durstr.errors import NumberOverflowError
from durstr.errors import UnexpectedCharError
from durstr.errors import UnexpectedUnitError


def test_messages():
    assert str(UnexpectedCharError('*')) == 'unexpected character: *'
    assert str(UnexpectedUnitError('r')) == 'unexpected unit: r'
    assert str(ExpectedUnitError()) == 'expected a unit'
    assert str(ExpectedNumberError()) == 'expected a number'
    assert str(NumberOverflowError('99999999999')) == \
        'number too large: 99999999999'
    assert str(DurationOverflowError()) == 'duration too large'


def test_hierarchy():
    for e in [UnexpectedCharError('*'), UnexpectedUnitError('r'),
              ExpectedUnitError(), ExpectedNumberError(),
              NumberOverflowError('1'), DurationOverflowError()]:
        assert isinstance(e, DurationError)
        assert isinstance(e, ValueError)
    assert issubclass(ConfigError, ValueError)
    assert not issubclass(ConfigError, DurationError)


def test_equality():
    assert UnexpectedCharError('*') == UnexpectedCharError('*')
    assert UnexpectedCharError('*') != UnexpectedCharError('.')
    assert UnexpectedUnitError('r') != UnexpectedCharError('r')
    assert ExpectedUnitError() == ExpectedUnitError()
    assert ExpectedUnitError() != ExpectedNumberError()


def test_hashable():
    assert len({ExpectedUnitError(), ExpectedUnitError(),
                UnexpectedUnitError('r')}) == 2


def test_pickle_round_trip():
    for e in [UnexpectedCharError('*'), UnexpectedUnitError('r'),
              ExpectedUnitError(), ExpectedNumberError(),
              NumberOverflowError('99999999999'), DurationOverflowError()]:
        restored = pickle.loads(pickle.dumps(e))
        assert restored == e
        assert str(restored) == str(e)


def test_pickle_keeps_payload():
    restored = pickle.loads(pickle.dumps(UnexpectedUnitError('Min')))
    assert restored.unit == 'Min'
    assert str(restored) == 'unexpected unit: Min'


def test_copy():
    e = NumberOverflowError('4294967296')
    assert copy.copy(e) == e
    assert copy.deepcopy(e).digits == '4294967296'
