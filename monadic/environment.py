from __future__ import annotations
from dataclasses import dataclass, field, replace

from .logger import ConsoleLogger


@dataclass(frozen=True)
class Environment:
    """Configuration threaded through a ``Reader`` chain.

    Environments are immutable: ``with_path`` and ``with_logger`` return a new
    environment and leave the original untouched, so every reader in a chain
    observes the same values.

    Args:
        path: Location of the user database
        logger: Logger handed to collaborators built from this environment

    Example:
        ```python
        staging = TEST.with_path("path_to_staging")
        update_with("dummy_id", "Thor").apply(staging)
        ```
    """
    path: str
    logger: ConsoleLogger = field(default_factory=ConsoleLogger, compare=False, repr=False)

    def with_path(self, path: str) -> "Environment":
        return replace(self, path=path)

    def with_logger(self, logger: ConsoleLogger) -> "Environment":
        return replace(self, logger=logger)


TEST = Environment("path_to_sqlite")
PRODUCTION = Environment("path_to_realm")
