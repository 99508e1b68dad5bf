# tests/conftest.py

from __future__ import annotations

import os

import pytest

# Widgets need a platform plugin; tests never open a real display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from models.task_manager import TaskStore  # noqa: E402

from .fakes import FrozenClock, MemoryTaskStorage  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture()
def storage() -> MemoryTaskStorage:
    return MemoryTaskStorage()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def store(storage: MemoryTaskStorage, clock: FrozenClock) -> TaskStore:
    """TaskStore backed by the in-memory fake, with a controllable id clock."""
    s = TaskStore(storage, id_factory=clock)
    s.load()
    return s
