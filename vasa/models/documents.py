# File: vasa/models/documents.py

import hashlib
import mimetypes
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional


@dataclass(frozen=True)
class DocumentRef:
    """Opaque, content-addressed handle to an uploaded file.

    Two uploads with identical bytes share a digest; the file name and media
    type travel with the reference so previews know how to render it.
    """
    digest: str
    file_name: str
    media_type: str
    size: int

    @property
    def extension(self) -> str:
        return PurePath(self.file_name).suffix.lower()

    def is_docx(self) -> bool:
        return self.extension == ".docx"

    def is_pdf(self) -> bool:
        return self.media_type == "application/pdf" or self.extension == ".pdf"

    @classmethod
    def for_bytes(cls, file_name: str, data: bytes, media_type: Optional[str] = None) -> 'DocumentRef':
        """Build a reference for raw file bytes."""
        if media_type is None:
            media_type = mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        return cls(
            digest=hashlib.sha256(data).hexdigest(),
            file_name=PurePath(file_name).name,
            media_type=media_type,
            size=len(data),
        )


@dataclass
class Document:
    """An entry in the document centre."""
    title: str
    category: str = ""
    file: Optional[DocumentRef] = None
    content: str = ""
    id: str = ""

    def has_body(self) -> bool:
        """A document needs either an attached file or some text."""
        return self.file is not None or bool(self.content.strip())

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'category': self.category,
            'file': self.file,
            'content': self.content,
        }


def document_from_dict(data: dict) -> Document:
    return Document(
        id=str(data.get('id', '')),
        title=str(data.get('title', '')).strip(),
        category=str(data.get('category', '')).strip(),
        file=data.get('file'),
        content=str(data.get('content', '') or ''),
    )
