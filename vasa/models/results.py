# File: vasa/models/results.py
"""
Decision types returned by the planner block validator.
"""

from dataclasses import dataclass, field
from typing import List, Union
from .enums import RejectionReason
from .planner import TimeBlock


@dataclass
class Accepted:
    """The candidate fits; blocks is the day's updated set."""
    block: TimeBlock
    blocks: List[TimeBlock] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return True


@dataclass
class Rejected:
    """The candidate was refused."""
    reason: RejectionReason
    message: str
    conflicting_id: str = ""

    @property
    def accepted(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.reason.value}: {self.message}"


BlockDecision = Union[Accepted, Rejected]
