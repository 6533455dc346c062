from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Chunk(Generic[T]):
    _items: Tuple[T, ...]

    @staticmethod
    def of(*items: T) -> "Chunk[T]":
        return Chunk(tuple(items))

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "Chunk[T]":
        return Chunk(tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[T]:
        return list(self._items)

    def map(self, f: Callable[[T], U]) -> "Chunk[U]":
        return Chunk(tuple(f(x) for x in self._items))

    def apply(self, fs: Iterable[Callable[[T], U]]) -> "Chunk[U]":
        # function-major: every output of fs[0] before any output of fs[1]
        out: List[U] = []
        for f in fs:
            out.extend(self.map(f)._items)
        return Chunk(tuple(out))

    def flat_map(self, f: Callable[[T], "Chunk[U]"]) -> "Chunk[U]":
        out: List[U] = []
        for x in self._items:
            out.extend(f(x)._items)
        return Chunk(tuple(out))
