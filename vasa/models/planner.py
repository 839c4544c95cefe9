# File: vasa/models/planner.py

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from .enums import BlockCategory
from .common import MINUTES_PER_DAY, coerce_enum, format_clock, parse_iso_date, to_minute_of_day


@dataclass
class TimeBlock:
    """A labelled interval on the daily planner.

    start and end are minutes since midnight; the interval is half-open,
    [start, end), so a block ending at 8:00 does not collide with one starting
    at 8:00. Duration is not validated here: the block validator owns that
    decision so it can report it as a scheduling conflict.
    """
    start: int
    end: int
    label: str
    category: BlockCategory = BlockCategory.TASK
    id: str = ""

    def __post_init__(self):
        """Validate minute ranges and convert category."""
        self.category = coerce_enum(BlockCategory, self.category, BlockCategory.TASK)

        for name in ('start', 'end'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Block {name} must be a minute-of-day integer: {self.label}")
            if value < 0 or value > MINUTES_PER_DAY:
                raise ValueError(f"Block {name} outside of the day: {self.label}")

    @classmethod
    def from_clock(cls, start_hour: int, start_minute: int, end_hour: int, end_minute: int,
                   label: str, category=BlockCategory.TASK, id: str = "") -> 'TimeBlock':
        """Build a block from the planner's hour/minute pickers."""
        return cls(
            start=to_minute_of_day(start_hour, start_minute),
            end=to_minute_of_day(end_hour, end_minute),
            label=label,
            category=category,
            id=id,
        )

    @property
    def start_hour(self) -> int:
        return self.start // 60

    def duration_minutes(self) -> int:
        """Calculate block duration in minutes."""
        return self.end - self.start

    def overlaps_with(self, other: 'TimeBlock') -> bool:
        """Check if this block overlaps with another (touching ends do not count)."""
        return self.start < other.end and self.end > other.start

    def format_range(self) -> str:
        return f"{format_clock(self.start)} - {format_clock(self.end)}"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'start': self.start,
            'end': self.end,
            'label': self.label,
            'category': self.category.value,
        }


@dataclass
class DaySchedule:
    """All blocks planned for one calendar date."""
    day: date
    blocks: List[TimeBlock] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.day, str):
            self.day = parse_iso_date(self.day)

    @property
    def key(self) -> str:
        return self.day.isoformat()

    def find(self, block_id: str) -> Optional[TimeBlock]:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def sorted_blocks(self) -> List[TimeBlock]:
        return sorted(self.blocks, key=lambda b: (b.start, b.end))


def time_block_from_dict(data: dict) -> TimeBlock:
    """Create TimeBlock from either minute-of-day or hour/minute picker fields."""
    if 'start' in data and 'end' in data:
        start, end = int(data['start']), int(data['end'])
    else:
        start = to_minute_of_day(int(data.get('start_hour', 0)), int(data.get('start_minute', 0)))
        end = to_minute_of_day(int(data.get('end_hour', 0)), int(data.get('end_minute', 0)))
    return TimeBlock(
        id=str(data.get('id', '')),
        start=start,
        end=end,
        label=str(data.get('label', data.get('title', ''))).strip(),
        category=data.get('category', data.get('type', BlockCategory.TASK.value)),
    )
