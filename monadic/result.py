from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Try(Generic[T]):
    @staticmethod
    def of(thunk: Callable[[], T]) -> "Try[T]":
        # Only construction captures; map/flat_map let errors from f escape
        try:
            return Success(thunk())
        except Exception as ex:
            return Failure(ex)

    def is_success(self) -> bool: raise NotImplementedError
    def is_failure(self) -> bool: return not self.is_success()

    def map(self, f: Callable[[T], U]) -> "Try[U]":
        if self.is_success():
            return Success(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], "Try[U]"]) -> "Try[U]":
        if self.is_success():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def __rshift__(self, f: Callable[[T], "Try[U]"]) -> "Try[U]":
        return self.flat_map(f)

    def get_or_else(self, default: T) -> T:
        return self.value if self.is_success() else default  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Success(Try[T]):
    value: T
    def is_success(self) -> bool: return True


@dataclass(frozen=True)
class Failure(Try[T]):
    error: Exception
    def is_success(self) -> bool: return False


def attempt(thunk: Callable[[], T]) -> Try[T]:
    return Try.of(thunk)
