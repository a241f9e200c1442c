import typing as ty
from dataclasses import dataclass

from .options import LITTLE, Endianness


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


@dataclass(frozen=True)
class Partition:
    """Where the head of a remaining range ends, in ordinals.

    `at` is the last ordinal of the head; `None` means the remainder cannot be
    subdivided and must be emitted whole.
    """

    min: int
    max: int
    count: int
    parts: int
    at: ty.Optional[int]

    @property
    def at_end(self) -> bool:
        return self.at is None


def build_partition(min_: int, max_: int, parts: int, endianness: Endianness) -> Partition:
    """
    Every head is ceil(count / parts) long, which pushes the remainder of an uneven
    division towards the front. Little endianness moves one element of each head into
    the tail, so that the larger pieces pile up at the back instead.

    example (1..10):

        parts | big                | little
        2     | 1..5, 6..10        | 1..4, 5..10
        3     | 1..4, 5..7, 8..10  | 1..3, 4..6, 7..10

    Heads of size 1 are left alone under little endianness; moving their only element
    would leave them empty.
    """
    assert parts > 1, f"A single part never needs a partition, got parts={parts}"
    count = max_ - min_ + 1
    size = _ceil_div(count, parts)
    at = min_ + size - 1
    if at == max_:
        return Partition(min_, max_, count, parts, None)

    if endianness == LITTLE and size > 1:
        at -= 1
    return Partition(min_, max_, count, parts, at)
