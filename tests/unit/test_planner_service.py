# File: tests/unit/test_planner_service.py
"""
Unit tests for the day-indexed planner service.
"""

import pytest
from datetime import date

from vasa.core.exceptions import RecordNotFound, SchedulingConflict
from vasa.models import RejectionReason, TimeBlock
from vasa.services.planner_service import PlannerService

DAY = "2025-06-05"


@pytest.fixture
def planner(clock):
    return PlannerService(clock=clock)


class TestPlannerService:

    def test_week_starts_today(self, planner):
        """Test the week starts on the clock's date."""
        days = planner.week()

        assert len(days) == 7
        assert days[0] == "2025-06-05"
        assert days[-1] == "2025-06-11"

    def test_week_from_explicit_start(self, planner):
        """Test a week from a given start date."""
        assert planner.week("2025-12-30", days=3) == ["2025-12-30", "2025-12-31", "2026-01-01"]

    def test_schedule_created_lazily(self, planner):
        """Test a day appears on its first save."""
        assert planner.blocks_for(DAY) == []
        assert planner.schedule_for(DAY) is None

        planner.save_block(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        assert planner.schedule_for(date(2025, 6, 5)) is not None
        assert planner.scheduled_days() == [DAY]

    def test_conflict_raises_and_keeps_state(self, planner):
        """Test a refused save changes nothing."""
        planner.save_block(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        with pytest.raises(SchedulingConflict) as exc_info:
            planner.save_block(DAY, TimeBlock.from_clock(9, 30, 10, 30, "Review"))

        assert exc_info.value.reason == RejectionReason.OVERLAP
        assert exc_info.value.message == "This time overlaps with an existing block."
        assert [b.label for b in planner.blocks_for(DAY)] == ["Standup"]

    def test_invalid_duration_raises(self, planner):
        """Test an invalid duration raises a conflict."""
        with pytest.raises(SchedulingConflict) as exc_info:
            planner.save_block(DAY, TimeBlock.from_clock(10, 0, 9, 0, "Backwards"))

        assert exc_info.value.reason == RejectionReason.INVALID_DURATION
        assert planner.schedule_for(DAY) is None

    def test_days_are_independent(self, planner):
        """Test blocks on different days never clash."""
        planner.save_block(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        other = planner.save_block("2025-06-06", TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        assert other.id
        assert len(planner.blocks_for("2025-06-06")) == 1

    def test_edit_in_place(self, planner):
        """Test editing a stored block."""
        block = planner.save_block(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Standup"))
        planner.save_block(DAY, TimeBlock.from_clock(10, 0, 11, 0, "Focus", "focus"))

        edited = planner.save_block(
            DAY,
            TimeBlock(start=block.start, end=block.end, label="Daily sync", id=block.id),
            editing=True,
        )

        assert edited.id == block.id
        labels = [b.label for b in planner.blocks_for(DAY)]
        assert labels == ["Daily sync", "Focus"]

    def test_edit_unknown_block(self, planner):
        """Test editing a block that is not there."""
        with pytest.raises(RecordNotFound):
            planner.save_block(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Ghost", id="nope"),
                               editing=True)

    def test_delete_block(self, planner):
        """Test block removal."""
        block = planner.save_block(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        assert planner.delete_block(DAY, block.id) is True
        assert planner.blocks_for(DAY) == []
        assert planner.delete_block(DAY, block.id) is False
        assert planner.delete_block("2025-01-01", "anything") is False

    def test_blocks_sorted_and_by_hour(self, planner):
        """Test ordering and hour lookup."""
        planner.save_block(DAY, TimeBlock.from_clock(14, 0, 15, 0, "Calls", "meeting"))
        planner.save_block(DAY, TimeBlock.from_clock(9, 0, 9, 30, "Plan"))
        planner.save_block(DAY, TimeBlock.from_clock(9, 30, 10, 0, "Inbox zero"))

        assert [b.label for b in planner.blocks_for(DAY)] == ["Plan", "Inbox zero", "Calls"]
        assert [b.label for b in planner.blocks_starting_in_hour(DAY, 9)] == ["Plan", "Inbox zero"]
        assert planner.blocks_starting_in_hour(DAY, 7) == []

    def test_hour_rows_cover_working_day(self, planner):
        """Test one row per planner hour."""
        planner.save_block(DAY, TimeBlock.from_clock(20, 0, 21, 30, "Review"))

        rows = planner.hour_rows(DAY)

        assert list(rows) == list(range(7, 22))
        assert [b.label for b in rows[20]] == ["Review"]
        assert rows[7] == []

    def test_check_does_not_store(self, planner):
        """Test a dry-run check stores nothing."""
        decision = planner.check(DAY, TimeBlock.from_clock(9, 0, 10, 0, "Dry run"))

        assert decision.accepted is True
        assert planner.blocks_for(DAY) == []

    def test_invalid_day(self, planner):
        """Test an unparseable day is refused."""
        with pytest.raises(ValueError, match="Invalid planner date"):
            planner.blocks_for("someday")
