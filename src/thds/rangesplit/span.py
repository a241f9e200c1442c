import typing as ty
from dataclasses import dataclass

T = ty.TypeVar("T")


def _render(value: ty.Any) -> str:
    return repr(value) if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Span(ty.Generic[T]):
    """An inclusive, ascending interval [min, max] over integers or single characters.

    Spans are values - splitting one never changes it, it only produces new Spans.
    """

    min: T
    max: T

    def __str__(self) -> str:
        return f"{_render(self.min)}..{_render(self.max)}"

    @staticmethod
    def of(r: range) -> "Span[int]":
        """Build an integer Span from a non-empty builtin range with a step of 1."""
        if r.step != 1:
            raise ValueError(f"Only ranges with a step of 1 are contiguous; got step {r.step}")
        if not r:
            raise ValueError(f"Cannot make a Span out of the empty {r}")
        return Span(r.start, r.stop - 1)

    def to_range(self) -> range:
        if not isinstance(self.min, int) or not isinstance(self.max, int):
            raise ValueError(f"Only integer spans can become a builtin range, not {self}")
        return range(self.min, self.max + 1)

    def split(
        self, count: ty.Optional[int] = None, endianness: ty.Optional[str] = None
    ) -> ty.List["Span[T]"]:
        from .splitter import split  # splitter imports us

        return split(self, count, endianness)
