# File: vasa/models/enums.py

from enum import Enum


class ClientStatus(Enum):
    """Relationship stage of a client."""
    ACTIVE = "active"
    PAUSED = "paused"
    PROSPECT = "prospect"
    EX_CLIENT = "ex-client"


class TaskStatus(Enum):
    """Project board columns, in board order."""
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"
    ON_HOLD = "On Hold"


class Priority(Enum):
    """Board task priority."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class InvoiceStatus(Enum):
    """Derived invoice state. Never stored, always computed from due date and paid flag."""
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class BlockCategory(Enum):
    """Planner time block categories."""
    TASK = "task"
    MEETING = "meeting"
    FOCUS = "focus"


class RejectionReason(Enum):
    """Why the planner refused a time block."""
    INVALID_DURATION = "InvalidDuration"
    OVERLAP = "Overlap"
