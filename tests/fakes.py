# tests/fakes.py

from __future__ import annotations

from itertools import count

from models.task import Task


class MemoryTaskStorage:
    """
    In-memory stand-in for TaskStorage.

    Keeps the last saved snapshot as plain dicts so tests see exactly what
    would have been written, and counts writes.
    """

    def __init__(self, records: list[dict] | None = None) -> None:
        self.records: list[dict] = list(records or [])
        self.saves = 0

    def load(self) -> list[Task]:
        return [Task.from_dict(r) for r in self.records]

    def save(self, tasks: list[Task]) -> bool:
        self.records = [t.to_dict() for t in tasks]
        self.saves += 1
        return True


class FrozenClock:
    """Id factory that returns the same millisecond until advanced."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


def sequential_ids(start: int = 1):
    it = count(start)
    return lambda: next(it)
