# File: vasa/core/workspace.py
"""
The workspace owns every page service and is the single source of truth
for clients, tasks, inbox items, invoices, documents and planner blocks.
"""

import datetime
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from vasa.core import seed
from vasa.core.config_manager import Config
from vasa.processors.invoice_processor import InvoiceProcessor
from vasa.services.board_service import BoardService
from vasa.services.calendar_export import CalendarExporter
from vasa.services.client_service import ClientService
from vasa.services.document_service import DocumentService
from vasa.services.inbox_service import InboxService
from vasa.services.invoice_export import InvoicePdfExporter
from vasa.services.invoice_service import InvoiceService
from vasa.services.planner_service import PlannerService
from vasa.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class Dashboard:
    """Home page widget values."""
    pending_todos: int
    tasks_due_today: int
    inbox_items: int
    overdue_invoices: int
    overdue_amount: float
    active_clients: int
    blocks_today: int

    def widgets(self, currency_symbol: str = "$") -> List[Tuple[str, str]]:
        return [
            ("Today's Tasks", f"{self.pending_todos + self.tasks_due_today} pending"),
            ("Inbox", f"{self.inbox_items} new"),
            ("Overdue Invoices", f"{self.overdue_invoices} unpaid ({currency_symbol}{self.overdue_amount:.2f})"),
            ("Active Clients", str(self.active_clients)),
            ("Planned Blocks", f"{self.blocks_today} today"),
        ]


class Workspace:
    """All page services bound to one clock."""

    def __init__(self, clock: Callable[[], datetime.datetime] = Config.now):
        """
        Args:
            clock: Returns the current time (timezone aware by default)
        """
        self.clock = clock
        self.clients = ClientService()
        self.board = BoardService()
        self.inbox = InboxService()
        self.invoices = InvoiceService(clock=clock)
        self.documents = DocumentService()
        self.planner = PlannerService(clock=clock)
        self.calendar_exporter = CalendarExporter()
        self.invoice_exporter = InvoicePdfExporter()

    def load_seed(self) -> None:
        """Populate the demo clients, board tasks and invoices."""
        for client in seed.SEED_CLIENTS:
            self.clients.add(client)
        for task in seed.SEED_TASKS:
            self.board.add(task)
        for invoice in seed.SEED_INVOICES:
            self.invoices.add(invoice)
        logger.info(
            f"Seeded workspace: {len(self.clients.list())} clients, "
            f"{len(self.board.list())} tasks, {len(self.invoices.list())} invoices"
        )

    def dashboard(self, now: Optional[datetime.datetime] = None) -> Dashboard:
        now = now or self.clock()
        today = now.date()
        processor = InvoiceProcessor(now=now)
        invoices = self.invoices.list()
        return Dashboard(
            pending_todos=len(self.inbox.pending_todos()),
            tasks_due_today=len(
                [t for t in self.board.list() if t.is_open() and t.is_due_on(today)]
            ),
            inbox_items=len(self.inbox.entries),
            overdue_invoices=len(processor.overdue(invoices)),
            overdue_amount=processor.overdue_total(invoices),
            active_clients=len([c for c in self.clients.list() if c.is_active()]),
            blocks_today=len(self.planner.blocks_for(today)),
        )

    def export_planner_day(self, day, directory=None):
        """Write the planner day as planner-<date>.ics."""
        return self.calendar_exporter.write_day(day, self.planner.blocks_for(day), directory)

    def export_invoice(self, invoice_id: str, directory=None):
        """Write one invoice as invoice-<client>.pdf (numbered when the client already has one)."""
        invoice = self.invoices.store.require(invoice_id)
        return self.invoice_exporter.write(invoice, directory, now=self.clock())


class WorkspaceFactory:
    """Factory for creating Workspace instances."""
    
    @staticmethod
    def create(seed_data: bool = False,
               clock: Optional[Callable[[], datetime.datetime]] = None) -> Workspace:
        """
        Create a workspace.
        
        Args:
            seed_data: Load the demo records
            clock: Override the current-time source (tests)
        
        Raises:
            ValueError: If configuration is invalid
        """
        if not Config.validate():
            raise ValueError("Configuration validation failed. Check your .env settings.")
        
        workspace = Workspace(clock=clock or Config.now)
        if seed_data:
            workspace.load_seed()
        return workspace
