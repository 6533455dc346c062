from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

E = TypeVar("E"); A = TypeVar("A"); B = TypeVar("B")


class Reader(Generic[E, A]):
    """A computation that needs an environment before it can produce a result.

    The wrapped function is only invoked by :meth:`apply`. ``map`` and
    ``flat_map`` build new readers around their parent without running it,
    and every reader in a chain receives the very same environment.

    Example:
        ```python
        def half(i: float) -> Reader[float, float]:
            return Reader(lambda _: i / 2)

        r = ask() >> half >> half >> half
        r.apply(20.0)  # 2.5
        ```
    """
    def __init__(self, run: Callable[[E], A]): self._run = run

    def apply(self, env: E) -> A:
        """Run the wrapped function against ``env`` and return its result."""
        return self._run(env)

    def __call__(self, env: E) -> A: return self.apply(env)

    def map(self, f: Callable[[A], B]) -> "Reader[E, B]":
        def run(env: E) -> B: return f(self.apply(env))
        return Reader(run)

    def flat_map(self, f: Callable[[A], "Reader[E, B]"]) -> "Reader[E, B]":
        def run(env: E) -> B: a = self.apply(env); return f(a).apply(env)
        return Reader(run)

    def __rshift__(self, f: Callable[[A], "Reader[E, B]"]) -> "Reader[E, B]":
        return self.flat_map(f)


def ask() -> Reader[Any, Any]:
    def run(env: E) -> E: return env
    return Reader(run)


def pure(a: A) -> Reader[Any, A]:
    def run(_: Any) -> A: return a
    return Reader(run)
