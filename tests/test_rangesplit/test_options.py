import pytest

from thds.rangesplit import InvalidEndiannessError, InvalidPartitionCountError, Span
from thds.rangesplit.options import (
    DEFAULT_COUNT,
    DEFAULT_ENDIANNESS,
    SplitOptions,
    validate_count,
    validate_endianness,
)


def test_defaults():
    assert validate_count(None, Span(1, 10)) == 2
    assert validate_endianness(None) == "big"


def test_explicit_values_pass_through():
    assert validate_count(7, Span(1, 10)) == 7
    assert validate_endianness("little") == "little"


def test_configured_defaults_are_validated_too():
    with DEFAULT_COUNT.set_local(0):
        with pytest.raises(InvalidPartitionCountError):
            validate_count(None, Span(1, 10))
    with DEFAULT_ENDIANNESS.set_local("sideways"):
        with pytest.raises(InvalidEndiannessError):
            validate_endianness(None)


def test_decrement_keeps_endianness():
    options = SplitOptions(3, "little")
    assert options.is_divisible
    assert options.decrement() == SplitOptions(2, "little")
    assert not options.decrement().decrement().is_divisible
    assert options == SplitOptions(3, "little")
