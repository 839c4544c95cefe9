# File: vasa/services/invoice_export.py
"""
Single-page PDF rendering of an invoice.
"""

import datetime
import io
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from vasa.core.config_manager import Config
from vasa.models import Invoice
from vasa.utils.logger import setup_logger

logger = setup_logger(__name__)

LEFT_MARGIN = 20 * mm
TITLE_FONT = ("Helvetica", 18)
BODY_FONT = ("Helvetica", 12)


class InvoicePdfExporter:
    """Draws invoices as fixed-layout text on an A4 page."""

    def __init__(self, currency_symbol: str = Config.CURRENCY_SYMBOL):
        self.currency_symbol = currency_symbol
        # Paths written by this exporter and the invoice each one holds
        self._written: Dict[Path, str] = {}

    def lines(self, invoice: Invoice, now: datetime.datetime) -> List[Tuple[float, str]]:
        """Body lines with their distance from the top of the page."""
        return [
            (40 * mm, f"Client: {invoice.client}"),
            (50 * mm, f"Amount: {invoice.formatted_amount(self.currency_symbol)}"),
            (60 * mm, f"Due Date: {invoice.due_date.isoformat()}"),
            (70 * mm, f"Status: {invoice.status(now).value.upper()}"),
            (80 * mm, f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}"),
        ]

    def render(self, invoice: Invoice, now: Optional[datetime.datetime] = None) -> bytes:
        """
        Render an invoice to PDF bytes.
        
        Args:
            invoice: Invoice to render
            now: Generation time, also used to derive the status
        
        Returns:
            The PDF document
        """
        now = now or Config.now()
        buffer = io.BytesIO()
        _, page_height = A4
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle(f"Invoice - {invoice.client}")

        pdf.setFont(*TITLE_FONT)
        pdf.drawString(LEFT_MARGIN, page_height - 20 * mm, "Invoice")

        pdf.setFont(*BODY_FONT)
        for offset, text in self.lines(invoice, now):
            pdf.drawString(LEFT_MARGIN, page_height - offset, text)

        pdf.showPage()
        pdf.save()
        logger.info(f"Rendered invoice PDF for '{invoice.client}'")
        return buffer.getvalue()

    @staticmethod
    def file_name(invoice: Invoice) -> str:
        # Path separators would escape the output directory
        safe_client = re.sub(r'[\\/:*?"<>|]+', '_', invoice.client).strip() or "client"
        return f"invoice-{safe_client}.pdf"

    def _free_path(self, directory: Path, invoice: Invoice) -> Path:
        """invoice-<client>.pdf, numbered -2, -3... when another invoice of the same client took it."""
        owner = invoice.id or str(id(invoice))
        base = directory / self.file_name(invoice)
        path, counter = base, 1
        while self._written.get(path, owner) != owner:
            counter += 1
            path = base.with_name(f"{base.stem}-{counter}{base.suffix}")
        self._written[path] = owner
        return path

    def write(self, invoice: Invoice, directory: Optional[Path] = None,
              now: Optional[datetime.datetime] = None) -> Path:
        directory = Path(directory or Config.OUTPUT_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        path = self._free_path(directory, invoice)
        path.write_bytes(self.render(invoice, now))
        logger.info(f"Invoice saved to {path}")
        return path
