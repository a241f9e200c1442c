"""Splits a Span into contiguous sub-spans whose sizes are as equal as possible.

    >>> split(Span(1, 10))
    [Span(min=1, max=5), Span(min=6, max=10)]
    >>> split(Span(1, 10), 3)
    [Span(min=1, max=4), Span(min=5, max=7), Span(min=8, max=10)]
    >>> split(Span("a", "m"), 3, "little")
    [Span(min='a', max='d'), Span(min='e', max='h'), Span(min='i', max='m')]

Asking for more parts than the span has elements gives one part per element.
"""

import typing as ty

from thds.core import log

from .errors import DescendingSpanError
from .options import SplitOptions, validate_count, validate_endianness
from .ordinals import OrdinalMapper, mapper_for
from .partition import build_partition
from .span import Span

T = ty.TypeVar("T")

logger = log.getLogger(__name__)


def _peel(span: Span[T], options: SplitOptions, mapper: OrdinalMapper[T]) -> ty.List[Span[T]]:
    parts: ty.List[Span[T]] = []
    remaining = span
    while options.is_divisible:
        partition = build_partition(
            mapper.to_ordinal(remaining.min),
            mapper.to_ordinal(remaining.max),
            options.count,
            options.endianness,
        )
        if partition.at_end:
            break

        assert partition.at is not None
        at = mapper.from_ordinal(partition.at)
        parts.append(Span(remaining.min, at))
        remaining = Span(mapper.successor(at), remaining.max)
        options = options.decrement()

    parts.append(remaining)
    return parts


def split_span(span: Span[T], options: SplitOptions) -> ty.List[Span[T]]:
    """Splits with options that have already been validated.

    The span's domain is still checked here, since that depends on the span and not the options.
    """
    if not options.is_divisible:
        return [span]

    mapper = mapper_for(span)
    if mapper.to_ordinal(span.min) > mapper.to_ordinal(span.max):
        raise DescendingSpanError(span)

    parts = _peel(span, options, mapper)
    if len(parts) < options.count:
        logger.debug(
            "Span has fewer elements than requested parts", requested=options.count, produced=len(parts)
        )
    return parts


def split(
    span: Span[T], count: ty.Optional[int] = None, endianness: ty.Optional[str] = None
) -> ty.List[Span[T]]:
    """Split the span into `count` (default 2) contiguous, ascending sub-spans.

    With 'big' endianness (the default) any remainder goes to the earliest sub-spans;
    with 'little' the larger sub-spans come last. The result never contains an empty
    span, so it may be shorter than `count`.
    """
    count_ = validate_count(count, span)
    if count_ == 1:
        return [span]

    options = SplitOptions(count_, validate_endianness(endianness))
    logger.debug("Splitting", span=str(span), count=options.count, endianness=options.endianness)
    return split_span(span, options)
