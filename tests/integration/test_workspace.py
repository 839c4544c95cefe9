# File: tests/integration/test_workspace.py
"""
Integration tests for the Workspace.
Tests full page flows sharing one workspace, plus the export script.
"""

import sys
import pytest
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

from vasa.core.exceptions import SchedulingConflict
from vasa.core.workspace import Workspace, WorkspaceFactory
from vasa.models import ClientStatus, InvoiceStatus, TaskStatus, TimeBlock

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


class TestSeededWorkspace:
    """The demo data loads the way the pages show it."""

    def test_seed_contents(self, seeded_workspace):
        """Test the seeded records."""
        clients = seeded_workspace.clients.list()
        assert [c.name for c in clients] == ["Acme Corp", "Beta LLC"]
        assert clients[0].status == ClientStatus.ACTIVE

        columns = seeded_workspace.board.columns()
        assert [t.title for t in columns[TaskStatus.TODO]] == ["Design Landing Page"]
        assert [t.title for t in columns[TaskStatus.IN_PROGRESS]] == ["Setup Analytics"]

        statuses = {i.client: i.status(datetime(2025, 6, 5, 12)) for i in seeded_workspace.invoices.list()}
        assert statuses == {"Alpha Co.": InvoiceStatus.SENT, "Beta Ltd.": InvoiceStatus.PAID}

    def test_dashboard(self, seeded_workspace):
        """Test dashboard counts across pages."""
        seeded_workspace.inbox.capture("Call Acme about CRM")
        todo_source = seeded_workspace.inbox.capture("Renew domain")
        seeded_workspace.inbox.convert(todo_source.id, "task")
        seeded_workspace.board.add({'title': 'Ship', 'client': 'Acme Corp', 'due_date': '2025-06-05'})
        seeded_workspace.planner.save_block("2025-06-05", TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        dashboard = seeded_workspace.dashboard(now=datetime(2025, 6, 11, 9, 0))

        assert dashboard.pending_todos == 1
        assert dashboard.tasks_due_today == 0
        assert dashboard.inbox_items == 1
        assert dashboard.overdue_invoices == 1
        assert dashboard.overdue_amount == 2500.0
        assert dashboard.active_clients == 1
        assert dashboard.blocks_today == 0

    def test_dashboard_today(self, seeded_workspace):
        """Test the dashboard uses the workspace clock."""
        seeded_workspace.board.add({'title': 'Ship', 'client': 'Acme Corp', 'due_date': '2025-06-05'})
        seeded_workspace.planner.save_block("2025-06-05", TimeBlock.from_clock(9, 0, 10, 0, "Standup"))

        dashboard = seeded_workspace.dashboard()
        widgets = dict(dashboard.widgets())

        assert dashboard.tasks_due_today == 1
        assert dashboard.blocks_today == 1
        assert widgets["Today's Tasks"] == "1 pending"
        assert widgets["Overdue Invoices"] == "0 unpaid ($0.00)"


class TestPlannerFlow:
    """Planner scheduling and export through the workspace."""

    def test_standup_review_focus_export(self, workspace, tmp_path):
        """Test planning a day and exporting it."""
        day = "2025-06-05"
        standup = workspace.planner.save_block(day, TimeBlock.from_clock(9, 0, 10, 0, "Standup", "meeting"))

        with pytest.raises(SchedulingConflict):
            workspace.planner.save_block(day, TimeBlock.from_clock(9, 30, 10, 30, "Review", "meeting"))

        focus = workspace.planner.save_block(day, TimeBlock.from_clock(10, 0, 11, 0, "Focus", "focus"))

        assert {b.id for b in workspace.planner.blocks_for(day)} == {standup.id, focus.id}

        path = workspace.export_planner_day(day, tmp_path)
        text = path.read_text(encoding="utf-8")
        assert path.name == "planner-2025-06-05.ics"
        assert text.count("BEGIN:VEVENT") == 2
        assert "SUMMARY:Review" not in text
        assert text.index("SUMMARY:Standup") < text.index("SUMMARY:Focus")


class TestInvoiceFlow:

    def test_toggle_and_export(self, seeded_workspace, tmp_path):
        """Test paying an invoice and exporting it."""
        alpha = next(i for i in seeded_workspace.invoices.list() if i.client == "Alpha Co.")
        seeded_workspace.invoices.toggle_paid(alpha.id)

        path = seeded_workspace.export_invoice(alpha.id, tmp_path)

        assert path.name == "invoice-Alpha Co..pdf"
        assert path.read_bytes().startswith(b"%PDF")
        assert seeded_workspace.invoices.status_of(alpha.id) == InvoiceStatus.PAID


class TestWorkspaceFactory:

    def test_create_empty(self, clock):
        """Test creating an empty workspace."""
        workspace = WorkspaceFactory.create(clock=clock)

        assert isinstance(workspace, Workspace)
        assert workspace.clients.list() == []

    def test_create_seeded(self, clock):
        """Test creating a seeded workspace."""
        workspace = WorkspaceFactory.create(seed_data=True, clock=clock)

        assert len(workspace.clients.list()) == 2

    @patch('vasa.core.config_manager.Config.validate', return_value=False)
    def test_invalid_config(self, mock_validate):
        """Test creation fails on bad configuration."""
        with pytest.raises(ValueError, match="Configuration validation failed"):
            WorkspaceFactory.create()


class TestExportScript:
    """End-to-end run of scripts/export.py."""

    def test_main_exports_files(self, tmp_path):
        """Test a full script run with exports."""
        import export

        exit_code = export.main([
            "--date", "2025-06-05",
            "--block", "09:00-10:00|Standup|meeting",
            "--block", "09:30-10:30|Review",
            "--block", "10:00-11:00|Focus|focus",
            "--invoices",
            "--output", str(tmp_path),
        ])

        assert exit_code == 0
        ics = (tmp_path / "planner-2025-06-05.ics").read_text(encoding="utf-8")
        assert "SUMMARY:Standup" in ics
        assert "SUMMARY:Focus" in ics
        assert "SUMMARY:Review" not in ics
        assert (tmp_path / "invoice-Alpha Co..pdf").exists()
        assert (tmp_path / "invoice-Beta Ltd..pdf").exists()

    def test_date_alone_exports_day(self, tmp_path):
        """Test --date without any --block still writes the planner file."""
        import export

        exit_code = export.main(["--date", "2025-06-05", "--no-seed", "--output", str(tmp_path)])

        assert exit_code == 0
        ics = (tmp_path / "planner-2025-06-05.ics").read_text(encoding="utf-8")
        assert ics.startswith("BEGIN:VCALENDAR")
        assert "VEVENT" not in ics

    def test_parse_block_rejects_garbage(self):
        """Test malformed block arguments."""
        import argparse
        import export

        with pytest.raises(argparse.ArgumentTypeError):
            export.parse_block("nine to ten")
        with pytest.raises(argparse.ArgumentTypeError):
            export.parse_block("25:00-26:00|Too late")
