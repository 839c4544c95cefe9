from .enums import ClientStatus, TaskStatus, Priority, InvoiceStatus, BlockCategory, RejectionReason
from .common import new_id, parse_iso_date, coerce_enum, to_minute_of_day, format_clock, MINUTES_PER_DAY
from .clients import Client, client_from_dict
from .tasks import BoardTask, InboxEntry, TodoItem, Note, board_task_from_dict
from .invoices import Invoice, invoice_from_dict
from .documents import Document, DocumentRef, document_from_dict
from .planner import TimeBlock, DaySchedule, time_block_from_dict
from .results import Accepted, Rejected, BlockDecision

__all__ = [
    "ClientStatus",
    "TaskStatus",
    "Priority",
    "InvoiceStatus",
    "BlockCategory",
    "RejectionReason",
    "new_id",
    "parse_iso_date",
    "coerce_enum",
    "to_minute_of_day",
    "format_clock",
    "MINUTES_PER_DAY",
    "Client",
    "client_from_dict",
    "BoardTask",
    "InboxEntry",
    "TodoItem",
    "Note",
    "board_task_from_dict",
    "Invoice",
    "invoice_from_dict",
    "Document",
    "DocumentRef",
    "document_from_dict",
    "TimeBlock",
    "DaySchedule",
    "time_block_from_dict",
    "Accepted",
    "Rejected",
    "BlockDecision",
]
