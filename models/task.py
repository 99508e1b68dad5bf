"""Task data model and input validation"""
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Tuple, Union

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class TaskValidationError(ValueError):
    """Raised when task input fails validation at the form boundary"""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("invalid task fields: " + ", ".join(errors))


@dataclass
class Task:
    """Single study task; only `completed` changes after creation"""
    id: int
    name: str
    due_date: date
    time_estimate: int
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON record"""
        return {
            'id': self.id,
            'name': self.name,
            'dueDate': self.due_date.isoformat(),
            'timeEstimate': self.time_estimate,
            'completed': self.completed
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Deserialize from a persisted record"""
        return cls(
            id=int(data['id']),
            name=str(data['name']),
            due_date=parse_due_date(data['dueDate']),
            time_estimate=int(data['timeEstimate']),
            completed=bool(data.get('completed', False))
        )


def parse_due_date(value: Union[str, date]) -> date:
    """Reduce a date, datetime or ISO string to a calendar date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # "2024-03-01T00:00:00.000Z" style values keep only the date part
    return date.fromisoformat(text[:10])


def validate_task_input(name, due_date, time_estimate) -> Tuple[str, date, int]:
    """Check raw form values and return (name, due date, minutes)"""
    errors = []

    clean_name = name.strip() if isinstance(name, str) else ""
    if not clean_name:
        errors.append("name")

    parsed_date = None
    if isinstance(due_date, date):
        parsed_date = parse_due_date(due_date)
    elif isinstance(due_date, str) and ISO_DATE_RE.fullmatch(due_date.strip()):
        try:
            parsed_date = date.fromisoformat(due_date.strip())
        except ValueError:
            parsed_date = None
    if parsed_date is None:
        errors.append("due_date")

    minutes = None
    if isinstance(time_estimate, bool):
        minutes = None
    elif isinstance(time_estimate, int):
        minutes = time_estimate
    elif isinstance(time_estimate, str):
        text = time_estimate.strip()
        if text.isascii() and text.isdigit():
            minutes = int(text)
    if minutes is None or minutes <= 0:
        errors.append("time_estimate")

    if errors:
        raise TaskValidationError(errors)
    return clean_name, parsed_date, minutes
