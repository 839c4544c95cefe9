# File: vasa/models/tasks.py

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from .enums import Priority, TaskStatus
from .common import coerce_enum, parse_iso_date


@dataclass
class BoardTask:
    """A card on the project board."""
    title: str
    client: str
    description: str = ""
    due_date: Optional[date] = None
    priority: Priority = Priority.LOW
    status: TaskStatus = TaskStatus.TODO
    subtasks: List[str] = field(default_factory=list)
    id: str = ""

    def __post_init__(self):
        """Auto-convert string fields to their typed form."""
        self.priority = coerce_enum(Priority, self.priority, Priority.LOW)
        self.status = coerce_enum(TaskStatus, self.status, TaskStatus.TODO)

        # Only convert due date if it's a string
        if isinstance(self.due_date, str):
            self.due_date = parse_iso_date(self.due_date)

        self.subtasks = list(self.subtasks or [])

    @property
    def due_date_str(self) -> str:
        """Get formatted due date string."""
        if self.due_date:
            return self.due_date.isoformat()
        return "N/A"

    def is_open(self) -> bool:
        return self.status != TaskStatus.DONE

    def is_due_on(self, day: date) -> bool:
        return self.due_date == day

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'priority': self.priority.value,
            'status': self.status.value,
            'client': self.client,
            'subtasks': list(self.subtasks),
        }


@dataclass
class InboxEntry:
    """A quick capture waiting to be turned into a todo or a note."""
    content: str
    id: str = ""


@dataclass
class TodoItem:
    """A checklist item produced from the inbox."""
    title: str
    done: bool = False
    id: str = ""


@dataclass
class Note:
    """A sticky note produced from the inbox."""
    content: str
    id: str = ""


def board_task_from_dict(data: dict) -> BoardTask:
    """Create BoardTask from dictionary with type safety."""
    return BoardTask(
        id=str(data.get('id', '')),
        title=str(data.get('title', '')).strip(),
        client=str(data.get('client', '')).strip(),
        description=str(data.get('description', '')),
        due_date=parse_iso_date(data.get('due_date') or data.get('dueDate')),
        priority=data.get('priority', Priority.LOW.value),
        status=data.get('status', TaskStatus.TODO.value),
        # Blank subtask rows are dropped
        subtasks=[s for s in data.get('subtasks', []) if str(s).strip()],
    )
