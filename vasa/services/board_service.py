# File: vasa/services/board_service.py

from typing import Dict, List, Optional

from vasa.core.exceptions import ValidationFailed
from vasa.core.store import RecordStore
from vasa.models import BoardTask, TaskStatus, board_task_from_dict, coerce_enum
from vasa.processors.board_processor import group_by_status
from vasa.services.forms import FormData, as_form, require_fields
from vasa.utils.logger import LoggerMixin

REQUIRED_FIELDS = ('title', 'client')


class BoardService(LoggerMixin):
    """Project board with To Do / In Progress / Done / On Hold columns."""

    def __init__(self):
        self.store: RecordStore[BoardTask] = RecordStore("task")

    def add(self, form: FormData) -> BoardTask:
        data = as_form(form)
        require_fields(data, REQUIRED_FIELDS, "task")
        task = self.store.create(board_task_from_dict(data))
        self.logger.info(f"Added task '{task.title}' to {task.status.value}")
        return task

    def edit(self, task_id: str, changes: FormData) -> BoardTask:
        """Merge changes into the task, keeping anything not mentioned."""
        data = self.store.require(task_id).to_dict()
        data.update(as_form(changes))
        require_fields(data, REQUIRED_FIELDS, "task")
        task = self.store.replace(task_id, board_task_from_dict(data))
        self.logger.info(f"Updated task '{task.title}' ({task_id})")
        return task

    def remove(self, task_id: str) -> bool:
        return self.store.delete(task_id)

    def get(self, task_id: str) -> Optional[BoardTask]:
        return self.store.get(task_id)

    def list(self) -> List[BoardTask]:
        return self.store.list()

    def column(self, status) -> List[BoardTask]:
        status = coerce_enum(TaskStatus, status)
        return self.store.filter(lambda t: t.status == status)

    def columns(self) -> Dict[TaskStatus, List[BoardTask]]:
        return group_by_status(self.store.list())

    def move(self, task_id: str, status) -> Optional[BoardTask]:
        """
        Drop a card onto a column.
        
        A drop outside any column (status None) leaves the board unchanged
        and returns None.
        """
        if status is None:
            return None
        status = coerce_enum(TaskStatus, status)
        task = self.store.update(task_id, status=status)
        self.logger.info(f"Moved task '{task.title}' to {status.value}")
        return task

    def add_subtask(self, task_id: str, text: str) -> BoardTask:
        if not text or not text.strip():
            raise ValidationFailed(['subtask'], "task")
        task = self.store.require(task_id)
        return self.store.update(task_id, subtasks=task.subtasks + [text.strip()])

    def by_client(self, client: str) -> List[BoardTask]:
        return self.store.filter(lambda t: t.client == client)
