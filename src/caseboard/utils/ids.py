"""Identifier generation for columns and cases."""

import itertools
import uuid
from collections.abc import Callable, Iterator

IdFactory = Callable[[], str]


def uuid_ids() -> IdFactory:
    """Return a factory producing random UUID4 strings."""
    return lambda: str(uuid.uuid4())


class SequentialIds:
    """
    Produce predictable ids: "case-1", "case-2", ...

    Only unique per instance. Callers that mix seeded ids with generated
    ones must skip collisions themselves (BoardService does).
    """

    def __init__(self, prefix: str = "", start: int = 1) -> None:
        self.prefix = prefix
        self._counter: Iterator[int] = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


def make_id_factory(strategy: str) -> IdFactory:
    """Build an id factory from a settings strategy name."""
    if strategy == "sequential":
        return SequentialIds()
    if strategy == "uuid":
        return uuid_ids()
    raise ValueError(f"Unknown id strategy: {strategy}")
