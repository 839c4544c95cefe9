# File: vasa/core/exceptions.py
"""
Error types raised by VAsA services.
"""

from typing import Iterable, List

from vasa.models import RejectionReason


class VasaError(Exception):
    """Base class for all workspace errors."""


class ValidationFailed(VasaError):
    """A form was submitted with required fields missing or invalid."""

    def __init__(self, fields: Iterable[str], record_type: str = "record"):
        self.fields: List[str] = list(fields)
        self.record_type = record_type
        super().__init__(
            f"Cannot save {record_type}: missing or invalid {', '.join(self.fields)}"
        )


class SchedulingConflict(VasaError):
    """A planner block was refused (bad duration or overlap)."""

    def __init__(self, reason: RejectionReason, message: str, conflicting_id: str = ""):
        self.reason = reason
        self.conflicting_id = conflicting_id
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0]


class RecordNotFound(VasaError, KeyError):
    """No record carries the requested identifier."""

    def __init__(self, record_id: str, record_type: str = "record"):
        self.record_id = record_id
        self.record_type = record_type
        super().__init__(f"{record_type} not found: {record_id}")

    def __str__(self) -> str:
        return self.args[0]
