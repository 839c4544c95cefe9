# File: vasa/services/planner_service.py
"""
Daily planner: a date-indexed store of DaySchedules guarded by the block validator.
"""

import datetime
from typing import Callable, Dict, List, Optional, Union

from vasa.core.config_manager import Config
from vasa.core.exceptions import RecordNotFound, SchedulingConflict
from vasa.models import DaySchedule, Rejected, TimeBlock, parse_iso_date
from vasa.processors import block_validator
from vasa.utils.logger import LoggerMixin

DayKey = Union[str, datetime.date]


class PlannerService(LoggerMixin):
    """Keeps one DaySchedule per date; schedules are created on first save."""

    def __init__(self, clock: Callable[[], datetime.datetime] = Config.now):
        self.clock = clock
        self._schedules: Dict[str, DaySchedule] = {}

    @staticmethod
    def _key(day: DayKey) -> str:
        parsed = parse_iso_date(day)
        if parsed is None:
            raise ValueError(f"Invalid planner date: {day!r}")
        return parsed.isoformat()

    def week(self, start: Optional[DayKey] = None, days: int = Config.PLANNER_DAYS) -> List[str]:
        """Selectable dates, starting today unless a start date is given."""
        first = parse_iso_date(start) if start else self.clock().date()
        return [(first + datetime.timedelta(days=i)).isoformat() for i in range(days)]

    def schedule_for(self, day: DayKey) -> Optional[DaySchedule]:
        return self._schedules.get(self._key(day))

    def scheduled_days(self) -> List[str]:
        return sorted(key for key, s in self._schedules.items() if s.blocks)

    def blocks_for(self, day: DayKey) -> List[TimeBlock]:
        """Blocks of a day ordered by start time; empty for untouched days."""
        schedule = self.schedule_for(day)
        return schedule.sorted_blocks() if schedule else []

    def blocks_starting_in_hour(self, day: DayKey, hour: int) -> List[TimeBlock]:
        return [b for b in self.blocks_for(day) if b.start_hour == hour]

    def hour_rows(self, day: DayKey) -> Dict[int, List[TimeBlock]]:
        """The day laid out as planner rows, one per configured hour."""
        return {hour: self.blocks_starting_in_hour(day, hour) for hour in Config.planner_hours()}

    def check(self, day: DayKey, block: TimeBlock, editing: bool = False):
        """Run the validator without storing anything."""
        schedule = self.schedule_for(day)
        existing = schedule.blocks if schedule else []
        return block_validator.validate(existing, block, block.id if editing else None)

    def save_block(self, day: DayKey, block: TimeBlock, editing: bool = False) -> TimeBlock:
        """
        Add a block to a day, or replace an edited one.
        
        Args:
            day: Date the block belongs to
            block: Candidate block; when editing its id names the block to replace
            editing: Whether this is an edit of an existing block
        
        Returns:
            The stored block (with its assigned id)
        
        Raises:
            SchedulingConflict: If the duration is invalid or the block overlaps
            RecordNotFound: If an edited block does not exist on that day
        """
        key = self._key(day)
        schedule = self._schedules.get(key)

        if editing and (schedule is None or schedule.find(block.id) is None):
            raise RecordNotFound(block.id, "time block")

        decision = self.check(key, block, editing)
        if isinstance(decision, Rejected):
            self.logger.warning(
                f"Refused block '{block.label}' on {key} "
                f"({block.format_range()}): {decision.message}"
            )
            raise SchedulingConflict(decision.reason, decision.message, decision.conflicting_id)

        if schedule is None:
            schedule = self._schedules[key] = DaySchedule(day=key)
        schedule.blocks = decision.blocks

        verb = "Updated" if editing else "Scheduled"
        self.logger.info(f"{verb} '{decision.block.label}' on {key} at {decision.block.format_range()}")
        return decision.block

    def delete_block(self, day: DayKey, block_id: str) -> bool:
        schedule = self.schedule_for(day)
        if schedule is None or schedule.find(block_id) is None:
            return False
        schedule.blocks = [b for b in schedule.blocks if b.id != block_id]
        self.logger.info(f"Removed block {block_id} from {schedule.key}")
        return True
