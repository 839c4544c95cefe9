# File: vasa/services/invoice_service.py

import datetime
import math
from typing import Callable, List, Optional

from vasa.core.config_manager import Config
from vasa.core.exceptions import ValidationFailed
from vasa.core.store import RecordStore
from vasa.models import Invoice, InvoiceStatus, coerce_enum, invoice_from_dict, parse_iso_date
from vasa.processors.invoice_processor import InvoiceProcessor
from vasa.services.forms import FormData, as_form, require_fields
from vasa.utils.logger import LoggerMixin

REQUIRED_FIELDS = ('client', 'amount', 'due_date')


class InvoiceService(LoggerMixin):
    """Invoice tracker with paid toggling and derived sent/paid/overdue status."""

    def __init__(self, clock: Callable[[], datetime.datetime] = Config.now):
        """
        Args:
            clock: Returns the current time; statuses are derived against it
        """
        self.clock = clock
        self.store: RecordStore[Invoice] = RecordStore("invoice")

    @property
    def processor(self) -> InvoiceProcessor:
        return InvoiceProcessor(now=self.clock())

    def _build(self, data: dict) -> Invoice:
        """Validate a form payload and build the invoice from it."""
        require_fields(data, REQUIRED_FIELDS, "invoice")

        invalid = []
        try:
            amount = float(data['amount'])
            if not math.isfinite(amount) or amount < 0:
                invalid.append('amount')
        except (TypeError, ValueError):
            invalid.append('amount')
        if parse_iso_date(data['due_date']) is None:
            invalid.append('due_date')
        if invalid:
            raise ValidationFailed(invalid, "invoice")

        return invoice_from_dict(data)

    def add(self, form: FormData) -> Invoice:
        data = as_form(form)
        data.setdefault('is_paid', False)
        invoice = self.store.create(self._build(data))
        self.logger.info(
            f"Added invoice for '{invoice.client}' "
            f"({invoice.formatted_amount(Config.CURRENCY_SYMBOL)}, due {invoice.due_date})"
        )
        return invoice

    def edit(self, invoice_id: str, changes: FormData) -> Invoice:
        data = self.store.require(invoice_id).to_dict(self.clock())
        data.update(as_form(changes))
        invoice = self.store.replace(invoice_id, self._build(data))
        self.logger.info(f"Updated invoice {invoice_id}")
        return invoice

    def remove(self, invoice_id: str) -> bool:
        return self.store.delete(invoice_id)

    def get(self, invoice_id: str) -> Optional[Invoice]:
        return self.store.get(invoice_id)

    def list(self) -> List[Invoice]:
        return self.store.list()

    def toggle_paid(self, invoice_id: str) -> Invoice:
        invoice = self.store.require(invoice_id)
        updated = self.store.update(invoice_id, is_paid=not invoice.is_paid)
        self.logger.info(
            f"Invoice {invoice_id} marked as {'paid' if updated.is_paid else 'unpaid'}"
        )
        return updated

    def status_of(self, invoice_id: str) -> InvoiceStatus:
        return self.processor.status_of(self.store.require(invoice_id))

    def by_status(self, status) -> List[Invoice]:
        status = coerce_enum(InvoiceStatus, status)
        return self.processor.group_by_status(self.store.list())[status]

    def overdue(self) -> List[Invoice]:
        return self.processor.overdue(self.store.list())

    def outstanding_total(self) -> float:
        return self.processor.outstanding_total(self.store.list())
