"""Task store with Qt change signals for the views"""
import logging
import time
from typing import Callable, List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from models.task import Task, validate_task_input

logger = logging.getLogger(__name__)


def _millis() -> int:
    return int(time.time() * 1000)


class TaskStore(QObject):
    """Owns the task collection and mirrors it to the injected storage.

    `storage` is anything with `load() -> List[Task]` and
    `save(List[Task])`. Every mutation saves the full collection before
    returning, then emits the matching signal plus `tasks_changed`.
    """

    # Task ids are millisecond timestamps, too wide for a C int signal argument
    task_added = pyqtSignal(Task)
    task_updated = pyqtSignal(Task)
    task_deleted = pyqtSignal(object)  # task_id
    tasks_changed = pyqtSignal()

    def __init__(self, storage, id_factory: Optional[Callable[[], int]] = None, parent=None):
        super().__init__(parent)
        self.storage = storage
        self.id_factory = id_factory or _millis
        self._tasks: List[Task] = []

    def load(self):
        """Replace the collection with what storage holds"""
        self._tasks = list(self.storage.load())
        logger.info("Loaded %d tasks", len(self._tasks))
        self.tasks_changed.emit()

    def add(self, name, due_date, time_estimate) -> Task:
        """Validate, append and persist a new task.

        Raises TaskValidationError without touching the collection when a
        field is invalid.
        """
        clean_name, parsed_date, minutes = validate_task_input(name, due_date, time_estimate)
        task = Task(
            id=self._next_id(),
            name=clean_name,
            due_date=parsed_date,
            time_estimate=minutes
        )
        self._tasks.append(task)
        self._persist()
        logger.info("Added task id=%s name=%r due=%s", task.id, task.name, task.due_date)
        self.task_added.emit(task)
        self.tasks_changed.emit()
        return task

    def toggle_completed(self, task_id: int) -> bool:
        """Flip completion; unknown ids are ignored"""
        task = self.get_task(task_id)
        if task is None:
            logger.debug("toggle_completed: no task id=%s", task_id)
            return False
        task.completed = not task.completed
        self._persist()
        logger.info("Task id=%s completed=%s", task_id, task.completed)
        self.task_updated.emit(task)
        self.tasks_changed.emit()
        return True

    def remove(self, task_id: int) -> bool:
        """Delete task by ID; unknown ids are ignored"""
        task = self.get_task(task_id)
        if task is None:
            logger.debug("remove: no task id=%s", task_id)
            return False
        self._tasks.remove(task)
        self._persist()
        logger.info("Removed task id=%s", task_id)
        self.task_deleted.emit(task_id)
        self.tasks_changed.emit()
        return True

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def all(self) -> Tuple[Task, ...]:
        """Tasks in insertion order"""
        return tuple(self._tasks)

    def __len__(self):
        return len(self._tasks)

    def _next_id(self) -> int:
        candidate = self.id_factory()
        if self._tasks:
            last = max(t.id for t in self._tasks)
            if candidate <= last:
                candidate = last + 1
        return candidate

    def _persist(self):
        self.storage.save(list(self._tasks))
