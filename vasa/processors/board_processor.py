# File: vasa/processors/board_processor.py

from collections import OrderedDict
from typing import Dict, Iterable, List

from vasa.models import BoardTask, TaskStatus


def group_by_status(tasks: Iterable[BoardTask]) -> Dict[TaskStatus, List[BoardTask]]:
    """Lay tasks out in board columns. Every column is present, in board order."""
    columns: Dict[TaskStatus, List[BoardTask]] = OrderedDict((s, []) for s in TaskStatus)
    for task in tasks:
        columns[task.status].append(task)
    return columns
