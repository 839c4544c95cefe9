# File: vasa/services/document_preview.py
"""
Document preview rendering.
Word files are converted to HTML with mammoth, PDFs are passed through for
embedding, and anything else falls back to the document's text content.
"""

import io
from dataclasses import dataclass
from typing import Optional

import mammoth

from vasa.models import Document
from vasa.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class Preview:
    """What a viewer needs to display a document."""
    kind: str  # "html", "pdf" or "text"
    body: str = ""
    data: Optional[bytes] = None
    media_type: str = "text/plain"
    file_name: Optional[str] = None


class DocumentPreviewer:
    """Renders previews for documents in the document centre."""

    def render(self, document: Document, data: Optional[bytes] = None) -> Preview:
        """
        Build a preview for a document.
        
        Args:
            document: The document being previewed
            data: Raw bytes of the attached file, if any
        
        Returns:
            Preview describing how to display the document
        """
        ref = document.file
        if ref is not None and data is not None:
            if ref.is_docx():
                return Preview(
                    kind="html",
                    body=self.docx_to_html(data, ref.file_name),
                    media_type="text/html",
                    file_name=ref.file_name,
                )
            if ref.is_pdf():
                return Preview(kind="pdf", data=data, media_type="application/pdf",
                               file_name=ref.file_name)

        return Preview(
            kind="text",
            body=document.content,
            file_name=ref.file_name if ref else None,
        )

    def docx_to_html(self, data: bytes, file_name: str = "document.docx") -> str:
        """Convert .docx bytes to an HTML fragment."""
        result = mammoth.convert_to_html(io.BytesIO(data))
        for message in result.messages:
            logger.warning(f"{file_name}: {message.message}")
        logger.debug(f"Converted {file_name} to {len(result.value)} characters of HTML")
        return result.value
