"""Init file for models package"""
from models.task import Task, TaskValidationError, validate_task_input
from models.task_manager import TaskStore
from models.page import Page
from models.prioritizer import rank, upcoming_tasks, completed_tasks, top_priority

__all__ = [
    'Task', 'TaskValidationError', 'validate_task_input', 'TaskStore', 'Page',
    'rank', 'upcoming_tasks', 'completed_tasks', 'top_priority'
]
