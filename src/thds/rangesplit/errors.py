import typing as ty

from .span import Span


class RangeSplitError(Exception):
    """Base class for everything this library raises on bad input."""


class InvalidPartitionCountError(RangeSplitError, ValueError):
    def __init__(self, count: ty.Any, span: Span):
        super().__init__(f"Cannot split {span} into {count!r} ranges.")
        self.count = count
        self.span = span


class InvalidEndiannessError(RangeSplitError, ValueError):
    def __init__(self, endianness: ty.Any):
        super().__init__(f"The endianness parameter must be either 'big' or 'little', not {endianness!r}")
        self.endianness = endianness


class UnsupportedDomainError(RangeSplitError, TypeError):
    """Only integers and single characters have a contiguous ordinal we can split on."""

    def __init__(self, domain: type):
        super().__init__(f"Can't split through {domain.__name__}")
        self.domain = domain


class DescendingSpanError(RangeSplitError, ValueError):
    def __init__(self, span: Span):
        super().__init__(f"Cannot split the descending span {span}; min must not exceed max.")
        self.span = span
