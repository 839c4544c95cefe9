# File: vasa/models/invoices.py

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional
from .enums import InvoiceStatus
from .common import parse_iso_date


@dataclass
class Invoice:
    """An invoice issued to a client."""
    client: str
    amount: float
    due_date: date
    is_paid: bool = False
    id: str = ""

    def __post_init__(self):
        """Validate invoice data and auto-convert types."""
        if isinstance(self.due_date, str):
            parsed = parse_iso_date(self.due_date)
            if parsed is None:
                raise ValueError(f"Invalid due date for invoice: {self.client}")
            self.due_date = parsed
        if not isinstance(self.due_date, date):
            raise ValueError(f"Invoice requires a due date: {self.client}")

        self.amount = float(self.amount)
        if not math.isfinite(self.amount):
            raise ValueError(f"Invoice amount must be a finite number: {self.client}")
        if self.amount < 0:
            raise ValueError(f"Invoice amount cannot be negative: {self.client}")

    def status(self, now: Optional[datetime] = None) -> InvoiceStatus:
        """Derive the invoice status.

        An unpaid invoice is overdue once the start of its due day has passed,
        so it reads as overdue for the whole of the due day itself.
        """
        if self.is_paid:
            return InvoiceStatus.PAID
        now = now or datetime.now()
        due_start = datetime.combine(self.due_date, time.min)
        if now.tzinfo is not None:
            # Compare in the caller's wall-clock time
            now = now.replace(tzinfo=None)
        return InvoiceStatus.OVERDUE if due_start < now else InvoiceStatus.SENT

    def formatted_amount(self, symbol: str = "$") -> str:
        return f"{symbol}{self.amount:.2f}"

    def to_dict(self, now: Optional[datetime] = None) -> dict:
        return {
            'id': self.id,
            'client': self.client,
            'amount': self.amount,
            'due_date': self.due_date.isoformat(),
            'is_paid': self.is_paid,
            'status': self.status(now).value,
        }


def invoice_from_dict(data: dict) -> Invoice:
    """Create Invoice from a form payload; the amount may arrive as text."""
    return Invoice(
        id=str(data.get('id', '')),
        client=str(data.get('client', '')).strip(),
        amount=float(data.get('amount') or 0),
        due_date=data.get('due_date') or data.get('dueDate'),
        is_paid=bool(data.get('is_paid', data.get('isPaid', False))),
    )
