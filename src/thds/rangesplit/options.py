import typing as ty

from thds.core import config

from .errors import InvalidEndiannessError, InvalidPartitionCountError
from .span import Span

Endianness = ty.Literal["big", "little"]
BIG: Endianness = "big"
LITTLE: Endianness = "little"
ENDIANNESSES: ty.Tuple[Endianness, ...] = ty.get_args(Endianness)

DEFAULT_COUNT = config.item("thds.rangesplit.default_count", 2, parse=int)
DEFAULT_ENDIANNESS = config.item("thds.rangesplit.default_endianness", BIG)
# the defaults apply only when the caller passes None, and are validated like anything else.


class SplitOptions(ty.NamedTuple):
    count: int
    endianness: Endianness

    @property
    def is_divisible(self) -> bool:
        return self.count > 1

    def decrement(self) -> "SplitOptions":
        return self._replace(count=self.count - 1)


def _is_positive_integer(count: ty.Any) -> bool:
    return isinstance(count, int) and not isinstance(count, bool) and count > 0


def validate_count(count: ty.Any, span: Span) -> int:
    count = DEFAULT_COUNT() if count is None else count
    if not _is_positive_integer(count):
        raise InvalidPartitionCountError(count, span)
    return count


def validate_endianness(endianness: ty.Any) -> Endianness:
    endianness = DEFAULT_ENDIANNESS() if endianness is None else endianness
    if endianness not in ENDIANNESSES:
        raise InvalidEndiannessError(endianness)
    return endianness

