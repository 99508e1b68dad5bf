"""Ordering rules for the upcoming and completed views"""
from typing import Iterable, List, Optional

from models.task import Task


def rank(tasks: Iterable[Task]) -> List[Task]:
    """Earliest due date first, then shortest time estimate.

    sorted() is stable, so equal keys keep their insertion order and
    re-renders do not shuffle rows.
    """
    return sorted(tasks, key=lambda t: (t.due_date, t.time_estimate))


def upcoming_tasks(tasks: Iterable[Task]) -> List[Task]:
    return rank(t for t in tasks if not t.completed)


def completed_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Completed tasks, most recently added first"""
    return [t for t in tasks if t.completed][::-1]


def top_priority(tasks: Iterable[Task]) -> Optional[Task]:
    ranked = upcoming_tasks(tasks)
    return ranked[0] if ranked else None
