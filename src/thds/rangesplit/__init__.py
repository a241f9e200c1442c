"""Split a range of integers or characters into nearly-equal contiguous pieces."""

from thds.core import meta

from .errors import (  # noqa: F401
    DescendingSpanError,
    InvalidEndiannessError,
    InvalidPartitionCountError,
    RangeSplitError,
    UnsupportedDomainError,
)
from .options import BIG, LITTLE, Endianness, SplitOptions  # noqa: F401
from .span import Span  # noqa: F401
from .splitter import split, split_span  # noqa: F401

__version__ = meta.get_version(__name__)
