from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    def is_just(self) -> bool: raise NotImplementedError
    def is_nothing(self) -> bool: return not self.is_just()

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        if self.is_just():
            return Just(f(self.value))  # type: ignore[attr-defined]
        return NOTHING

    def apply(self, mf: "Maybe[Callable[[T], U]]") -> "Maybe[U]":
        # Absent function wins over a present value
        if mf.is_just():
            return self.map(mf.value)  # type: ignore[attr-defined]
        return NOTHING

    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        if self.is_just():
            return f(self.value)  # type: ignore[attr-defined]
        return NOTHING

    def __rshift__(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return self.flat_map(f)

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_just() else default  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Just(Maybe[T]):
    value: T
    def is_just(self) -> bool: return True


class _Nothing(Maybe[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "Nothing"
    def __reduce__(self) -> str: return "NOTHING"
    def is_just(self) -> bool: return False


NOTHING: Maybe[None] = _Nothing()


def just(v: T) -> Maybe[T]:
    return Just(v)


def from_nullable(v: Optional[T]) -> Maybe[T]:
    return Just(v) if v is not None else NOTHING  # type: ignore[return-value]
