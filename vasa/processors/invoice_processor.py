# File: vasa/processors/invoice_processor.py
"""
Invoice status derivation and totals.
"""

import datetime
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from vasa.models import Invoice, InvoiceStatus


class InvoiceProcessor:
    """Derives invoice statuses relative to a point in time."""

    def __init__(self, now: Optional[datetime.datetime] = None):
        """
        Args:
            now: Reference time; defaults to the current time at each call
        """
        self._now = now

    @property
    def now(self) -> datetime.datetime:
        return self._now or datetime.datetime.now()

    def status_of(self, invoice: Invoice) -> InvoiceStatus:
        return invoice.status(self.now)

    def group_by_status(self, invoices: Iterable[Invoice]) -> Dict[InvoiceStatus, List[Invoice]]:
        """Bucket invoices by derived status, every status present."""
        groups: Dict[InvoiceStatus, List[Invoice]] = OrderedDict(
            (status, []) for status in InvoiceStatus
        )
        for invoice in invoices:
            groups[self.status_of(invoice)].append(invoice)
        return groups

    def overdue(self, invoices: Iterable[Invoice]) -> List[Invoice]:
        return [i for i in invoices if self.status_of(i) == InvoiceStatus.OVERDUE]

    def outstanding_total(self, invoices: Iterable[Invoice]) -> float:
        """Sum of everything not yet paid (sent and overdue)."""
        return round(sum(i.amount for i in invoices if not i.is_paid), 2)

    def overdue_total(self, invoices: Iterable[Invoice]) -> float:
        return round(sum(i.amount for i in self.overdue(invoices)), 2)
