# tests/test_task_store.py

from __future__ import annotations

from datetime import date

import pytest

from models.prioritizer import upcoming_tasks
from models.task import TaskValidationError
from models.task_manager import TaskStore

from .fakes import MemoryTaskStorage, sequential_ids


def test_add_appends_and_persists(store: TaskStore, storage: MemoryTaskStorage) -> None:
    task = store.add("Essay", "2024-03-01", 120)

    assert len(store) == 1
    assert store.all() == (task,)
    assert task.completed is False
    assert task.due_date == date(2024, 3, 1)
    assert storage.saves == 1
    assert storage.records == [task.to_dict()]


def test_ids_unique_and_increasing_within_same_millisecond(store: TaskStore, clock) -> None:
    first = store.add("A", "2024-01-01", 10)
    second = store.add("B", "2024-01-01", 10)
    clock.advance(1000)
    third = store.add("C", "2024-01-01", 10)

    assert first.id == clock.now - 1000
    assert second.id == first.id + 1
    assert third.id == clock.now
    assert len({t.id for t in store.all()}) == 3


@pytest.mark.parametrize(
    ("name", "due", "minutes"),
    [
        ("", "2024-03-01", 10),
        ("Essay", "", 10),
        ("Essay", None, 10),
        ("Essay", "2024-03-01", 0),
        ("Essay", "2024-03-01", -1),
        ("Essay", "2024-03-01", "ten"),
    ],
)
def test_invalid_add_leaves_collection_unchanged(
    store: TaskStore, storage: MemoryTaskStorage, name, due, minutes
) -> None:
    existing = store.add("Keep", "2024-01-01", 5)
    saves = storage.saves

    with pytest.raises(TaskValidationError):
        store.add(name, due, minutes)

    assert store.all() == (existing,)
    assert storage.saves == saves


def test_toggle_twice_restores_state(store: TaskStore, storage: MemoryTaskStorage) -> None:
    task = store.add("Essay", "2024-03-01", 120)

    assert store.toggle_completed(task.id) is True
    assert store.get_task(task.id).completed is True
    assert storage.records[0]["completed"] is True

    assert store.toggle_completed(task.id) is True
    assert store.get_task(task.id).completed is False
    assert storage.records[0]["completed"] is False


def test_toggle_unknown_id_is_silent_noop(store: TaskStore, storage: MemoryTaskStorage) -> None:
    store.add("Essay", "2024-03-01", 120)
    saves = storage.saves

    assert store.toggle_completed(123) is False
    assert storage.saves == saves


def test_completion_does_not_reorder_storage(store: TaskStore, clock) -> None:
    a = store.add("A", "2024-02-01", 10)
    clock.advance()
    b = store.add("B", "2024-01-01", 10)
    store.toggle_completed(a.id)
    assert [t.id for t in store.all()] == [a.id, b.id]


def test_remove_is_idempotent(store: TaskStore, storage: MemoryTaskStorage) -> None:
    keep = store.add("Keep", "2024-01-01", 5)
    gone = store.add("Gone", "2024-01-02", 5)

    assert store.remove(gone.id) is True
    saves = storage.saves
    assert store.remove(gone.id) is False

    assert store.all() == (keep,)
    assert storage.saves == saves
    assert [r["id"] for r in storage.records] == [keep.id]


def test_all_is_read_only_snapshot(store: TaskStore) -> None:
    store.add("Essay", "2024-03-01", 120)
    view = store.all()
    assert isinstance(view, tuple)
    store.add("Quiz", "2024-03-02", 20)
    assert len(view) == 1


def test_load_restores_persisted_collection() -> None:
    records = [
        {"id": 1, "name": "A", "dueDate": "2024-01-01", "timeEstimate": 10, "completed": False},
        {"id": 2, "name": "B", "dueDate": "2024-01-02", "timeEstimate": 20, "completed": True},
    ]
    store = TaskStore(MemoryTaskStorage(records), id_factory=sequential_ids())
    store.load()

    assert [t.to_dict() for t in store.all()] == records
    # new ids continue past the loaded ones
    assert store.add("C", "2024-01-03", 5).id == 3


def test_signals_emitted_on_mutations(store: TaskStore) -> None:
    events: list[tuple[str, object]] = []
    store.task_added.connect(lambda t: events.append(("added", t.id)))
    store.task_updated.connect(lambda t: events.append(("updated", t.completed)))
    store.task_deleted.connect(lambda task_id: events.append(("deleted", task_id)))
    store.tasks_changed.connect(lambda: events.append(("changed", None)))

    task = store.add("Essay", "2024-03-01", 120)
    store.toggle_completed(task.id)
    store.remove(task.id)
    store.remove(task.id)
    store.toggle_completed(task.id)

    assert events == [
        ("added", task.id),
        ("changed", None),
        ("updated", True),
        ("changed", None),
        ("deleted", task.id),
        ("changed", None),
    ]


def test_rejected_add_emits_nothing(store: TaskStore) -> None:
    events: list[str] = []
    store.tasks_changed.connect(lambda: events.append("changed"))
    with pytest.raises(TaskValidationError):
        store.add("", "", "")
    assert events == []


def test_essay_scenario(store: TaskStore) -> None:
    task = store.add("Essay", "2024-03-01", 120)
    assert len(store.all()) == 1
    assert store.all()[0].completed is False

    store.toggle_completed(task.id)

    assert store.get_task(task.id).completed is True
    assert upcoming_tasks(store.all()) == []
