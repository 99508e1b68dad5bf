"""Local storage for tasks"""
import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from constants import STORAGE_KEY
from models.task import Task

logger = logging.getLogger(__name__)


class LocalStorage:
    """String key/value store kept in one JSON file"""

    def __init__(self, storage_file: Path):
        self.storage_file = Path(storage_file)

        # Create directory if it doesn't exist
        self.storage_file.parent.mkdir(parents=True, exist_ok=True)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str):
        data = self._read()
        data[key] = value
        self._write(data)

    def _read(self) -> Dict[str, str]:
        if not self.storage_file.exists():
            return {}

        try:
            with open(self.storage_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Unreadable storage file %s, treating as empty", self.storage_file, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object, treating as empty", self.storage_file)
            return {}
        return data

    def _write(self, data: Dict[str, str]):
        tmp_file = self.storage_file.with_suffix(self.storage_file.suffix + ".tmp")
        try:
            with open(tmp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_file, self.storage_file)
        except Exception:
            tmp_file.unlink(missing_ok=True)
            raise


class TaskStorage:
    """Handles task persistence as one serialized blob under a fixed key"""

    def __init__(self, local_storage: LocalStorage, key: str = STORAGE_KEY):
        self.local_storage = local_storage
        self.key = key

    def save(self, tasks: List[Task]) -> bool:
        """Overwrite the stored collection"""
        try:
            blob = json.dumps([task.to_dict() for task in tasks], ensure_ascii=False)
            self.local_storage.set_item(self.key, blob)
            return True
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save %d tasks", len(tasks))
            return False

    def load(self) -> List[Task]:
        """Stored collection; missing or corrupt data reads as empty"""
        blob = self.local_storage.get_item(self.key)
        if blob is None:
            return []

        try:
            data = json.loads(blob)
            return [Task.from_dict(task_dict) for task_dict in data]
        except (AttributeError, TypeError, ValueError, KeyError):
            logger.warning("Failed to load tasks under %r, starting empty", self.key, exc_info=True)
            return []
