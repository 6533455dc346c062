"""
Functors, applicatives and monads for Maybe, Reader and Try.

Each section prints the containers it builds; ``main`` runs them in order.
Run: python -m monadic
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace

from .chunk import Chunk
from .environment import Environment, PRODUCTION, TEST
from .logger import ConsoleLogger
from .maybe import Just, Maybe, NOTHING
from .reader import Reader, ask
from .result import Failure, Try

DB_PATH = "path_to_db"


def half_maybe(a: int) -> Maybe[int]:
    return Just(a // 2) if a % 2 == 0 else NOTHING  # type: ignore[return-value]


def half_reader(i: float) -> Reader[float, float]:
    return Reader(lambda _: i / 2)


@dataclass(frozen=True)
class User:
    name: str
    age: int


@dataclass
class Database:
    """In-memory stand-in for a user store."""
    path: str
    logger: ConsoleLogger = field(default_factory=ConsoleLogger)

    def __post_init__(self) -> None:
        self.logger = self.logger.bind(db=self.path)

    def find_user(self, user_name: str) -> User:
        self.logger.debug("select user", user=user_name)
        return User(name=user_name, age=29)

    def update_user(self, user: User) -> None:
        self.logger.debug("update user", user=user.name)
        print(user.name + " in: " + self.path)


def update(user_name: str, new_name: str, path: str = DB_PATH) -> None:
    db = Database(path)
    user = db.find_user(user_name)
    db.update_user(replace(user, name=new_name))


def update_with(user_name: str, new_name: str) -> Reader[Environment, None]:
    def run(env: Environment) -> None:
        db = Database(env.path, env.logger)
        user = db.find_user(user_name)
        db.update_user(replace(user, name=new_name))
    return Reader(run)


class DoomsdayComing(Exception): ...
class Boom(DoomsdayComing): ...
class Bang(DoomsdayComing): ...


def end_of_the_world() -> Try[int]:
    def bang() -> int:
        raise Bang()
    return Try.of(bang)


def functors() -> None:
    print("--Functors--")
    print(Just(3).map(lambda i: i + 2))
    print(NOTHING.map(lambda i: i + 3))


def applicatives() -> None:
    print("\n--Applicatives--")
    print(Just(2).apply(Just(lambda i: i + 3)))
    print(Chunk.of(1, 2, 3).apply([lambda i: i + 3, lambda i: i * 2]).to_list())


def monads() -> None:
    print("\n--Monads--")
    print(Just(3) >> half_maybe)
    print(Just(4) >> half_maybe)
    print(NOTHING >> half_maybe)
    print(Just(20) >> half_maybe >> half_maybe >> half_maybe)


def reader_monad() -> None:
    print("\n--Reader Monad--")
    f = ask() >> half_reader >> half_reader >> half_reader
    print(f.apply(20.0))


def dependency_injection() -> None:
    print("\n--Dependency Injection--")
    update("dummy_id", "Thor")
    update_with("dummy_id", "Thor").apply(TEST)
    update_with("dummy_id", "Thor").apply(PRODUCTION)


def try_monad() -> None:
    print("\n--Try Monad--")
    result = Try.of(lambda: 4 // 2).flat_map(lambda _: end_of_the_world())
    print(result)
    if isinstance(result, Failure):
        print("failed with", type(result.error).__name__)


def main() -> None:
    functors()
    applicatives()
    monads()
    reader_monad()
    dependency_injection()
    try_monad()


if __name__ == "__main__":
    main()
