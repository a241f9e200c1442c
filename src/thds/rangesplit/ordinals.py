"""Maps the values of a supported domain onto contiguous integer ordinals and back.

The partition arithmetic only ever sees ordinals; the mapper chosen for a Span
is the one place that knows whether those ordinals are integers or code points.
"""

import typing as ty

from typing_extensions import Protocol

from .errors import UnsupportedDomainError
from .span import Span

T = ty.TypeVar("T")


class OrdinalMapper(Protocol[T]):
    def to_ordinal(self, value: T) -> int:
        ...  # pragma: no cover

    def from_ordinal(self, ordinal: int) -> T:
        ...  # pragma: no cover

    def successor(self, value: T) -> T:
        ...  # pragma: no cover


class IntegerOrdinals:
    def to_ordinal(self, value: int) -> int:
        return value

    def from_ordinal(self, ordinal: int) -> int:
        return ordinal

    def successor(self, value: int) -> int:
        return value + 1


class CharacterOrdinals:
    """Code points, across the whole of Unicode."""

    def to_ordinal(self, value: str) -> int:
        return ord(value)

    def from_ordinal(self, ordinal: int) -> str:
        return chr(ordinal)

    def successor(self, value: str) -> str:
        return chr(ord(value) + 1)


INTEGERS = IntegerOrdinals()
CHARACTERS = CharacterOrdinals()


def _is_integer(value: ty.Any) -> bool:
    # bool is an int subclass, but True..False is not a range anyone means.
    return isinstance(value, int) and not isinstance(value, bool)


def _is_character(value: ty.Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def mapper_for(span: Span) -> OrdinalMapper:
    """Chooses the mapper once per split, raising if the endpoints are not a splittable domain."""
    if _is_integer(span.min) and _is_integer(span.max):
        return INTEGERS
    if _is_character(span.min) and _is_character(span.max):
        return CHARACTERS

    offender = span.max if _is_integer(span.min) or _is_character(span.min) else span.min
    raise UnsupportedDomainError(type(offender))
