from storage.task_storage import LocalStorage, TaskStorage

__all__ = ['LocalStorage', 'TaskStorage']
